"""Field-block scanning."""

from __future__ import annotations

from collections.abc import Sequence

from excel_schema_codegen.core.config import SourceColumnsConfig
from excel_schema_codegen.core.exceptions import CellTypeError, SchemaLocationError
from excel_schema_codegen.core.naming import field_identifier
from excel_schema_codegen.core.schemas import (
    DefaultValue,
    DefaultValueKind,
    EntityEnum,
    EntityField,
    FieldType,
)
from excel_schema_codegen.extraction.cells import CellKind, SheetCells
from excel_schema_codegen.logger import logger


def find_first_row(cells: SheetCells, columns: SourceColumnsConfig) -> int:
    """Return the row below the header row whose index cell is the number 1.

    Raises:
        SchemaLocationError: If no such row exists
    """
    for row in range(cells.first_row + 1, cells.last_row + 1):
        value = cells.value(row, columns.index, "index")
        if cells.kind(row, columns.index, "index") is CellKind.NUMBER and value == 1:
            return row
    raise SchemaLocationError(columns.index, cells.title)


def read_default_value(cells: SheetCells, row: int, column: int) -> DefaultValue:
    """Type the default value by the kind of its cell.

    Raises:
        CellTypeError: If the cell is neither blank, boolean, number nor text
    """
    value = cells.value(row, column, "default_value")
    kind = cells.kind(row, column, "default_value")
    if kind is CellKind.BLANK:
        return DefaultValue()
    if kind is CellKind.BOOLEAN:
        return DefaultValue(kind=DefaultValueKind.BOOL, value=value)
    if kind is CellKind.NUMBER:
        return DefaultValue(kind=DefaultValueKind.NUMBER, value=value)
    if kind is CellKind.TEXT:
        return DefaultValue(kind=DefaultValueKind.TEXT, value=value)
    raise CellTypeError(
        row, column, f"unsupported default value kind: {kind.value}", cells.title
    )


def find_enum(raw_name: str, name: str, enums: Sequence[EntityEnum]) -> EntityEnum | None:
    candidates = {raw_name.strip().lower(), name.lower()}
    for entity_enum in enums:
        if entity_enum.name.lower() in candidates:
            return entity_enum
    return None


def read_field(
    cells: SheetCells,
    row: int,
    columns: SourceColumnsConfig,
    enums: Sequence[EntityEnum],
) -> EntityField:
    """Read one attribute row into an EntityField."""
    index = cells.whole_number(row, columns.index, "index")
    raw_name = cells.text(row, columns.name, "name")
    name = field_identifier(raw_name)
    if not name:
        raise CellTypeError(row, columns.name, "name must not be blank", cells.title)

    entity_enum = find_enum(raw_name, name, enums)
    if entity_enum is not None:
        field_type = FieldType.ENUM
    else:
        type_literal = cells.text(row, columns.type, "type")
        try:
            field_type = FieldType.parse(type_literal)
        except ValueError as e:
            raise CellTypeError(row, columns.type, str(e), cells.title) from e

    length = None
    if cells.kind(row, columns.length, "length") is CellKind.NUMBER:
        length = cells.whole_number(row, columns.length, "length")

    return EntityField(
        index=index,
        name=name,
        raw_name=raw_name,
        description=cells.optional_text(row, columns.description, "description"),
        is_primary_key=not cells.is_blank(row, columns.primary_key, "primary_key"),
        is_lookup=not cells.is_blank(row, columns.lookup, "lookup"),
        # A mark in the nullable column means NOT NULL
        is_nullable=cells.is_blank(row, columns.nullable, "nullable"),
        default_value=read_default_value(cells, row, columns.default_value),
        type=field_type,
        length=length,
        enum_ref=entity_enum,
    )


def scan_fields(
    cells: SheetCells,
    columns: SourceColumnsConfig,
    enums: Sequence[EntityEnum] = (),
) -> list[EntityField]:
    """Read the attribute block, which ends at the first blank index cell.

    Raises:
        SchemaLocationError: If the block start cannot be found
        CellTypeError: If a row holds an unsupported value
    """
    row = find_first_row(cells, columns)
    fields: list[EntityField] = []
    while not cells.is_blank(row, columns.index, "index"):
        fields.append(read_field(cells, row, columns, enums))
        row += 1

    logger.debug("Read %d field(s) from sheet '%s'", len(fields), cells.title)
    return fields
