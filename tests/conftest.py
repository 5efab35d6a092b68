"""Shared fixtures: an in-memory entity sheet and matching settings."""

import datetime
from pathlib import Path

import pytest
from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from excel_schema_codegen.core.config import (
    CellPosition,
    Config,
    GeneratedConfig,
    SourceColumnsConfig,
    SourceConfig,
)
from excel_schema_codegen.core.schemas import (
    DefaultValue,
    DefaultValueKind,
    Entity,
    EntityEnum,
    EntityField,
    EnumValue,
    FieldType,
)
from excel_schema_codegen.extraction.cells import SheetCells

COLUMNS = SourceColumnsConfig(
    index=1,
    name=2,
    description=3,
    primary_key=4,
    lookup=5,
    nullable=6,
    default_value=7,
    type=8,
    length=9,
    enum_number=11,
    enum_value=12,
    enum_description=13,
)

# index, name, description, pk, lookup, not-null mark, default, type, length
ORDER_FIELDS = [
    (1, "Id", "Identifier", "x", None, "x", None, "Number", None),
    (2, "Code", "Order code", None, "x", "x", None, "Varchar", 50),
    (3, "Contact/Email", None, None, None, None, None, "Varchar", 100),
    (4, "Status", "Order status", None, None, "x", 1, "Varchar", None),
    (5, "CreatedAt", "Creation time", None, None, None, None, "Timestamp", None),
]

FIELD_HEADER = (
    "No", "Name", "Description", "PK", "Lookup", "Not null", "Default", "Type", "Length"
)


def make_settings(**generated) -> Config:
    return Config(
        source=SourceConfig(
            columns=COLUMNS,
            entity_name=CellPosition(row=2, column=2),
        ),
        generated=GeneratedConfig(**generated),
    )


def write_row(ws: Worksheet, row: int, values, start_column: int = 1) -> None:
    for offset, value in enumerate(values):
        if value is not None:
            ws.cell(row=row, column=start_column + offset, value=value)


def fill_entity_sheet(
    ws: Worksheet,
    entity_name: str = "Purchase Order",
    fields=ORDER_FIELDS,
    field_start_row: int = 5,
) -> None:
    """Lay out a marker, an entity name, a field block and one enum block."""
    ws.cell(row=1, column=1, value="HOME")
    ws.cell(row=2, column=2, value=entity_name)
    write_row(ws, field_start_row - 1, FIELD_HEADER)
    for offset, values in enumerate(fields):
        write_row(ws, field_start_row + offset, values)

    # Enum block: header at row 5, reserved rows 6-7, values at rows 8-10
    ws.cell(row=5, column=11, value="Status")
    write_row(ws, 6, ("No", "Value", "Description"), start_column=11)
    write_row(ws, 7, ("#", "#", "#"), start_column=11)
    write_row(ws, 8, (1, 1, "Active"), start_column=11)
    write_row(ws, 9, (2, 2, None), start_column=11)
    write_row(ws, 10, (3, 3, "Closed"), start_column=11)


@pytest.fixture
def settings() -> Config:
    """Settings matching the fixture sheet layout."""
    return make_settings()


@pytest.fixture
def columns() -> SourceColumnsConfig:
    return COLUMNS


@pytest.fixture
def order_sheet() -> Worksheet:
    """A worksheet describing the 'Purchase Order' entity."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Order"
    fill_entity_sheet(ws)
    return ws


@pytest.fixture
def order_cells(order_sheet) -> SheetCells:
    return SheetCells.from_worksheet(order_sheet)


@pytest.fixture
def blank_sheet() -> Worksheet:
    wb = Workbook()
    ws = wb.active
    ws.title = "Blank"
    ws.cell(row=1, column=1, value="HOME")
    return ws


@pytest.fixture
def workbook_file(tmp_path) -> Path:
    """A workbook with two entity sheets, one broken sheet and one unrelated sheet."""
    wb = Workbook()
    order = wb.active
    order.title = "Order"
    fill_entity_sheet(order)

    customer = wb.create_sheet("Customer")
    fill_entity_sheet(
        customer,
        entity_name="Customer",
        fields=[
            (1, "Id", None, "x", None, "x", None, "Int", None),
            (2, "Name", "Full name", None, None, "x", "n/a", "Varchar", 80),
            (3, "Active", None, None, None, None, True, "Boolean", None),
        ],
    )

    broken = wb.create_sheet("Broken")
    broken.cell(row=1, column=1, value="HOME")
    broken.cell(row=2, column=2, value="Broken")
    write_row(broken, 4, FIELD_HEADER)
    write_row(broken, 5, (2, "Id", None, None, None, None, None, "Int", None))

    notes = wb.create_sheet("Notes")
    notes.cell(row=1, column=1, value="Release notes")

    path = tmp_path / "database.xlsx"
    wb.save(path)
    return path


@pytest.fixture
def status_enum() -> EntityEnum:
    return EntityEnum(
        name="Status",
        display_name="PurchaseorderStatus",
        values=(EnumValue(name="active", value=1), EnumValue(name="closed", value=3)),
    )


@pytest.fixture
def order_entity(status_enum) -> Entity:
    """The entity the fixture sheet is expected to produce."""
    return Entity(
        name="Purchaseorder",
        origin_name="Purchaseorder",
        fields=(
            EntityField(
                index=1,
                name="Id",
                raw_name="Id",
                description="Identifier",
                is_primary_key=True,
                is_nullable=False,
                type=FieldType.NUMBER,
            ),
            EntityField(
                index=2,
                name="Code",
                raw_name="Code",
                description="Order code",
                is_lookup=True,
                is_nullable=False,
                type=FieldType.VARCHAR,
                length=50,
            ),
            EntityField(
                index=3,
                name="ContactEmail",
                raw_name="Contact/Email",
                type=FieldType.VARCHAR,
                length=100,
            ),
            EntityField(
                index=4,
                name="Status",
                raw_name="Status",
                description="Order status",
                is_nullable=False,
                default_value=DefaultValue(kind=DefaultValueKind.NUMBER, value=1),
                type=FieldType.ENUM,
                enum_ref=status_enum,
            ),
            EntityField(
                index=5,
                name="CreatedAt",
                raw_name="CreatedAt",
                description="Creation time",
                type=FieldType.TIMESTAMP,
            ),
        ),
        enums=(status_enum,),
    )


@pytest.fixture
def a_datetime() -> datetime.datetime:
    return datetime.datetime(2024, 1, 31, 12, 0)
