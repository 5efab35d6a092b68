"""Worksheet scanning components."""

from excel_schema_codegen.extraction.cells import CellKind, SheetCells
from excel_schema_codegen.extraction.enum_scanner import EnumBlockScanner, scan_enums
from excel_schema_codegen.extraction.extractor import SchemaExtractor
from excel_schema_codegen.extraction.field_scanner import scan_fields

__all__ = [
    "CellKind",
    "EnumBlockScanner",
    "SchemaExtractor",
    "SheetCells",
    "scan_enums",
    "scan_fields",
]
