"""Tests for the SchemaExtractor."""

import pytest
from openpyxl import Workbook

from excel_schema_codegen.core.config import CellPosition
from excel_schema_codegen.core.exceptions import (
    CellTypeError,
    ConfigurationError,
    SchemaLocationError,
)
from excel_schema_codegen.extraction.cells import SheetCells
from excel_schema_codegen.extraction.extractor import SchemaExtractor
from tests.conftest import fill_entity_sheet, make_settings


def test_extract_builds_expected_entity(settings, order_sheet, order_entity):
    entity = SchemaExtractor(settings).extract(order_sheet)

    assert entity == order_entity


def test_extract_accepts_cell_snapshot(settings, order_cells, order_entity):
    assert SchemaExtractor(settings).extract(order_cells) == order_entity


def test_name_suffix_applies_to_name_and_enum_display_names(order_sheet):
    settings = make_settings(name_suffix="Entity")

    entity = SchemaExtractor(settings).extract(order_sheet)

    assert entity.name == "PurchaseorderEntity"
    assert entity.origin_name == "Purchaseorder"
    assert entity.enums[0].display_name == "PurchaseorderEntityStatus"


def test_entity_name_words_are_joined():
    wb = Workbook()
    ws = wb.active
    fill_entity_sheet(ws, entity_name="Sales  Order Line")

    entity = SchemaExtractor(make_settings()).extract(ws)

    assert entity.origin_name == "Salesorderline"


def test_missing_first_row_produces_no_entity(settings):
    wb = Workbook()
    ws = wb.active
    ws.title = "NoRows"
    ws.cell(row=1, column=1, value="HOME")
    ws.cell(row=2, column=2, value="Empty")

    with pytest.raises(SchemaLocationError) as exc_info:
        SchemaExtractor(settings).extract(ws)

    assert exc_info.value.sheet_name == "NoRows"


def test_entity_name_must_be_text(settings):
    wb = Workbook()
    ws = wb.active
    fill_entity_sheet(ws)
    ws.cell(row=2, column=2, value=42)

    with pytest.raises(CellTypeError, match="entity_name must be text"):
        SchemaExtractor(settings).extract(ws)


def test_unconfigured_entity_name_cell_is_a_configuration_error(order_sheet):
    settings = make_settings()
    settings = settings.model_copy(
        update={
            "source": settings.source.model_copy(
                update={"entity_name": CellPosition(row=2)}
            )
        }
    )

    with pytest.raises(ConfigurationError, match="SOURCE__ENTITY_NAME__COLUMN"):
        SchemaExtractor(settings).extract(order_sheet)


def test_extraction_does_not_grow_the_worksheet(settings, order_sheet):
    max_row, max_column = order_sheet.max_row, order_sheet.max_column

    SchemaExtractor(settings).extract(order_sheet)

    assert (order_sheet.max_row, order_sheet.max_column) == (max_row, max_column)


def test_snapshot_reads_outside_used_range_as_blank(order_cells):
    assert order_cells.value(500, 3) is None
    assert order_cells.value(1, 200) is None
    assert order_cells.is_blank(order_cells.last_row + 1, 1)
    assert isinstance(order_cells, SheetCells)


def test_whitespace_entity_name_raises_cell_type_error(settings):
    wb = Workbook()
    ws = wb.active
    fill_entity_sheet(ws, entity_name="   ")

    with pytest.raises(CellTypeError, match="entity_name must not be blank") as exc_info:
        SchemaExtractor(settings).extract(ws)

    assert (exc_info.value.row, exc_info.value.column) == (2, 2)
