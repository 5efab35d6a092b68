"""Enum-block scanning.

An enum block looks like this in the enum columns of a sheet::

    row r      number="Order/Status"   value=<blank>      <- header
    row r+1    (reserved sub-header)
    row r+2    (reserved sub-header)
    row r+3    number=1   value=1   description="Active"
    row r+4    number=2   value=2   description=<blank>   <- skipped
    row r+5    number=3   value=3   description="Closed"
    row r+6    number=<blank>                              <- end of block

The scanner is a two-state machine: it seeks the next header row, then reads
the value run until the enum-number cell goes blank, then seeks again.
"""

from __future__ import annotations

from enum import Enum

from excel_schema_codegen.core.config import SourceColumnsConfig
from excel_schema_codegen.core.constants import ENUM_VALUES_OFFSET
from excel_schema_codegen.core.exceptions import CellTypeError
from excel_schema_codegen.core.naming import enum_identifier, enum_value_identifier
from excel_schema_codegen.core.schemas import EntityEnum, EnumValue
from excel_schema_codegen.extraction.cells import CellKind, SheetCells
from excel_schema_codegen.logger import logger


class ScanState(Enum):
    SEEKING_HEADER = "seeking_header"
    READING_VALUES = "reading_values"


class EnumBlockScanner:
    """Collects the enums declared in one sheet, in top-to-bottom order."""

    def __init__(
        self,
        cells: SheetCells,
        columns: SourceColumnsConfig,
        entity_name: str,
        start_row: int = 2,
    ) -> None:
        self.cells = cells
        self.columns = columns
        self.entity_name = entity_name
        self.start_row = start_row

    def is_header_row(self, row: int) -> bool:
        """A header row has text in the enum-number cell and a blank enum-value cell."""
        return self.cells.kind(
            row, self.columns.enum_number, "enum_number"
        ) is CellKind.TEXT and self.cells.is_blank(
            row, self.columns.enum_value, "enum_value"
        )

    def find_header(self, from_row: int) -> int | None:
        """Return the first header row at or below from_row, None when exhausted."""
        for row in range(from_row, self.cells.last_row + 1):
            if self.is_header_row(row):
                return row
        return None

    def read_value(self, row: int) -> EnumValue | None:
        """Read one value row; rows with a blank description yield None."""
        description = self.cells.optional_text(
            row, self.columns.enum_description, "enum_description"
        )
        if description is None or not description.strip():
            return None
        number = self.cells.whole_number(row, self.columns.enum_value, "enum_value")
        return EnumValue(name=enum_value_identifier(description), value=number)

    def scan(self) -> list[EntityEnum]:
        enums: list[EntityEnum] = []
        state = ScanState.SEEKING_HEADER
        row = self.start_row
        name = ""
        values: list[EnumValue] = []

        while True:
            if state is ScanState.SEEKING_HEADER:
                header_row = self.find_header(row)
                if header_row is None:
                    break
                name = enum_identifier(
                    self.cells.text(header_row, self.columns.enum_number, "enum_number")
                )
                if not name:
                    raise CellTypeError(
                        header_row,
                        self.columns.enum_number,
                        "enum name must not be blank",
                        self.cells.title,
                    )
                values = []
                row = header_row + ENUM_VALUES_OFFSET
                state = ScanState.READING_VALUES
                continue

            if self.cells.is_blank(row, self.columns.enum_number, "enum_number"):
                if not values:
                    logger.warning(
                        "Enum '%s' in sheet '%s' has no values",
                        name,
                        self.cells.title,
                    )
                enums.append(
                    EntityEnum(
                        name=name,
                        display_name=self.entity_name + name,
                        values=tuple(values),
                    )
                )
                # The blank row can never be a header, resume below it
                row += 1
                state = ScanState.SEEKING_HEADER
                continue

            value = self.read_value(row)
            if value is not None:
                values.append(value)
            row += 1

        logger.debug(
            "Found %d enum(s) in sheet '%s'", len(enums), self.cells.title
        )
        return enums


def scan_enums(
    cells: SheetCells,
    columns: SourceColumnsConfig,
    entity_name: str,
    start_row: int = 2,
) -> list[EntityEnum]:
    """Scan a sheet for enum blocks."""
    return EnumBlockScanner(cells, columns, entity_name, start_row).scan()
