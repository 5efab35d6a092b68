"""Template view construction."""

from excel_schema_codegen.view.view_model import ViewModelBuilder

__all__ = ["ViewModelBuilder"]
