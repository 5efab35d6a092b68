"""Builds an Entity from one worksheet."""

from __future__ import annotations

from openpyxl.worksheet.worksheet import Worksheet

from excel_schema_codegen.core.config import Config, config
from excel_schema_codegen.core.exceptions import CellTypeError, ConfigurationError
from excel_schema_codegen.core.naming import entity_origin_name
from excel_schema_codegen.core.schemas import Entity
from excel_schema_codegen.extraction.cells import SheetCells
from excel_schema_codegen.extraction.enum_scanner import scan_enums
from excel_schema_codegen.extraction.field_scanner import scan_fields
from excel_schema_codegen.logger import logger


class SchemaExtractor:
    """Locates and parses the entity described by a worksheet.

    The extractor holds no state besides its configuration, so one instance
    can process any number of sheets.
    """

    def __init__(self, settings: Config = config) -> None:
        """Initialize the extractor.

        Args:
            settings: Configuration providing the column map and name suffix
        """
        self.settings = settings
        self.columns = settings.source.columns

    def extract(self, sheet: Worksheet | SheetCells) -> Entity:
        """Extract the entity of a sheet.

        Args:
            sheet: An openpyxl worksheet or an existing cell snapshot

        Returns:
            The extracted Entity

        Raises:
            SchemaLocationError: If the attribute block cannot be located
            CellTypeError: If a cell holds an unsupported value
            ConfigurationError: If a required column is not configured
        """
        cells = sheet if isinstance(sheet, SheetCells) else SheetCells.from_worksheet(sheet)

        origin_name = self.read_origin_name(cells)
        name = origin_name + self.settings.generated.name_suffix

        enums = scan_enums(
            cells, self.columns, name, start_row=self.settings.source.enum_start_row
        )
        fields = scan_fields(cells, self.columns, enums)

        logger.info(
            "Extracted entity '%s' from sheet '%s': %d field(s), %d enum(s)",
            name,
            cells.title,
            len(fields),
            len(enums),
        )
        return Entity(
            name=name,
            origin_name=origin_name,
            fields=tuple(fields),
            enums=tuple(enums),
        )

    def read_origin_name(self, cells: SheetCells) -> str:
        position = self.settings.source.entity_name
        for axis, coordinate in (("row", position.row), ("column", position.column)):
            if coordinate < 1:
                raise ConfigurationError(
                    variable_name=f"SOURCE__ENTITY_NAME__{axis.upper()}",
                    reason=f"{axis} {coordinate} is not a valid 1-based index",
                )
        origin_name = entity_origin_name(
            cells.text(position.row, position.column, "entity_name")
        )
        if not origin_name:
            raise CellTypeError(
                position.row,
                position.column,
                "entity_name must not be blank",
                cells.title,
            )
        return origin_name
