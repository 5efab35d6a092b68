"""Custom exception classes for the Excel schema code generator."""

from __future__ import annotations


class CodeGenerationError(Exception):
    """Base exception for code generation errors.

    All custom exceptions in the Excel schema code generator inherit from this class.
    """

    pass


class ConfigurationError(CodeGenerationError):
    """Error in application configuration.

    Raised when required configuration values are missing or invalid, such as
    a malformed column index or an unconfigured column that the extractor needs.

    Args:
        variable_name: The name of the configuration variable that caused the error
        reason: Optional description of what is wrong with the value
    """

    def __init__(self, variable_name: str, reason: str | None = None) -> None:
        self.variable_name = variable_name
        self.reason = reason
        if reason is None:
            message = f"Required configuration variable '{variable_name}' is not set"
        else:
            message = f"Invalid configuration variable '{variable_name}': {reason}"
        super().__init__(message)


class SchemaExtractionError(CodeGenerationError):
    """Error while extracting an entity from a worksheet.

    Extraction errors are fatal for the sheet being processed only; the driver
    decides whether the remaining sheets are still generated.
    """

    def __init__(self, message: str, sheet_name: str | None = None) -> None:
        self.sheet_name = sheet_name
        if sheet_name:
            message = f"[{sheet_name}] {message}"
        super().__init__(message)


class SchemaLocationError(SchemaExtractionError):
    """Raised when no row with index 1 exists below the header row."""

    def __init__(self, index_column: int, sheet_name: str | None = None) -> None:
        self.index_column = index_column
        super().__init__(
            f"first row not found: no row has 1 in index column {index_column}",
            sheet_name,
        )


class CellTypeError(SchemaExtractionError):
    """Error when a cell holds an unsupported kind of value.

    Args:
        row: 1-based row of the offending cell
        column: 1-based column of the offending cell
        detail: What was expected and what was found
    """

    def __init__(
        self, row: int, column: int, detail: str, sheet_name: str | None = None
    ) -> None:
        self.row = row
        self.column = column
        self.detail = detail
        super().__init__(f"cell ({row}, {column}): {detail}", sheet_name)


class TemplateRenderError(CodeGenerationError):
    """Error during template rendering.

    Args:
        template: The template identifier that failed to render
        cause: The underlying exception raised by the template engine
    """

    def __init__(self, template: str, cause: Exception) -> None:
        self.template = template
        self.cause = cause
        super().__init__(f"Failed to render template '{template}': {cause}")
