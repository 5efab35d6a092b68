"""
Excel Schema Code Generator

A Python package that reads entity definitions laid out in spreadsheet sheets
and renders source files (entities, DTOs, queries, validators, controllers,
tests) for each entity from code templates.
"""

from excel_schema_codegen.cli.generator import CodeGenerator

__all__ = ["CodeGenerator"]
