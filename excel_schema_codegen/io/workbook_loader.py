"""Opening the source workbook and choosing the sheets to generate."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from openpyxl import Workbook, load_workbook
from openpyxl.worksheet.worksheet import Worksheet

from excel_schema_codegen.extraction.cells import CellKind, cell_kind


def open_workbook(path: Path) -> Workbook:
    """Load a workbook with cached formula results instead of formulas.

    Raises:
        FileNotFoundError: If the workbook does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Workbook not found: {path}")
    return load_workbook(path, data_only=True)


def is_parsable(ws: Worksheet, header_marker: str, include_keywords: Iterable[str]) -> bool:
    """Check the A1 marker and the sheet-name allow-list."""
    keywords = [k.lower() for k in include_keywords]
    if keywords and not any(k in ws.title.lower() for k in keywords):
        return False
    marker = ws.cell(row=1, column=1).value
    return cell_kind(marker) is CellKind.TEXT and marker == header_marker


def parsable_sheet_names(
    wb: Workbook, header_marker: str, include_keywords: Iterable[str] = ()
) -> list[str]:
    """Return the sorted names of the sheets that describe an entity."""
    keywords = list(include_keywords)
    return sorted(
        ws.title for ws in wb.worksheets if is_parsable(ws, header_marker, keywords)
    )
