"""Read-only cell access over an openpyxl worksheet."""

from __future__ import annotations

import datetime
from enum import Enum
from typing import Any

from openpyxl.worksheet.worksheet import Worksheet

from excel_schema_codegen.core.config import UNCONFIGURED
from excel_schema_codegen.core.exceptions import CellTypeError, ConfigurationError


class CellKind(str, Enum):
    BLANK = "blank"
    BOOLEAN = "boolean"
    NUMBER = "number"
    TEXT = "text"
    DATETIME = "datetime"
    OTHER = "other"


def cell_kind(value: Any) -> CellKind:
    """Classify a raw openpyxl cell value."""
    if value is None or value == "":
        return CellKind.BLANK
    # bool is a subclass of int, so it has to be checked first
    if isinstance(value, bool):
        return CellKind.BOOLEAN
    if isinstance(value, (int, float)):
        return CellKind.NUMBER
    if isinstance(value, str):
        return CellKind.TEXT
    if isinstance(value, (datetime.date, datetime.time, datetime.timedelta)):
        return CellKind.DATETIME
    return CellKind.OTHER


class SheetCells:
    """Snapshot of a worksheet's values addressed by 1-based (row, column).

    The snapshot is taken once so that probing rows past the used range never
    grows the underlying worksheet.
    """

    def __init__(
        self,
        rows: list[tuple[Any, ...]],
        title: str = "",
        first_row: int = 1,
    ) -> None:
        self.rows = rows
        self.title = title
        self.first_row = first_row

    @classmethod
    def from_worksheet(cls, ws: Worksheet) -> SheetCells:
        rows = [tuple(row) for row in ws.iter_rows(values_only=True)]
        return cls(rows, title=ws.title, first_row=ws.min_row)

    @property
    def last_row(self) -> int:
        return len(self.rows)

    def value(self, row: int, column: int, label: str = "column") -> Any:
        """Return the raw value at (row, column), None outside the used range.

        Raises:
            ConfigurationError: If the column was left unconfigured
        """
        if column == UNCONFIGURED or column < 1:
            raise ConfigurationError(
                variable_name=f"SOURCE__COLUMNS__{label.upper()}",
                reason=f"column {column} is not a valid 1-based column index",
            )
        if row < 1 or row > len(self.rows):
            return None
        values = self.rows[row - 1]
        if column > len(values):
            return None
        return values[column - 1]

    def kind(self, row: int, column: int, label: str = "column") -> CellKind:
        return cell_kind(self.value(row, column, label))

    def is_blank(self, row: int, column: int, label: str = "column") -> bool:
        return self.kind(row, column, label) is CellKind.BLANK

    def text(self, row: int, column: int, label: str = "column") -> str:
        """Return a text cell's value.

        Raises:
            CellTypeError: If the cell does not hold text
        """
        value = self.value(row, column, label)
        kind = cell_kind(value)
        if kind is not CellKind.TEXT:
            raise CellTypeError(
                row, column, f"{label} must be text, found {kind.value}", self.title
            )
        return value

    def optional_text(self, row: int, column: int, label: str = "column") -> str | None:
        value = self.value(row, column, label)
        kind = cell_kind(value)
        if kind is CellKind.BLANK:
            return None
        if kind is CellKind.NUMBER and float(value).is_integer():
            return str(int(value))
        return str(value)

    def number(self, row: int, column: int, label: str = "column") -> int | float:
        """Return a numeric cell's value.

        Raises:
            CellTypeError: If the cell does not hold a number
        """
        value = self.value(row, column, label)
        kind = cell_kind(value)
        if kind is not CellKind.NUMBER:
            raise CellTypeError(
                row, column, f"{label} must be a number, found {kind.value}", self.title
            )
        return value

    def whole_number(self, row: int, column: int, label: str = "column") -> int:
        """Return a numeric cell's value as an int.

        Raises:
            CellTypeError: If the cell does not hold a number or the number has
                a fractional part
        """
        value = self.number(row, column, label)
        if not float(value).is_integer():
            raise CellTypeError(
                row, column, f"{label} must be a whole number, found {value}", self.title
            )
        return int(value)
