"""Core data models and shared types."""

from excel_schema_codegen.core.config import config
from excel_schema_codegen.core.exceptions import (
    CellTypeError,
    CodeGenerationError,
    ConfigurationError,
    SchemaExtractionError,
    SchemaLocationError,
    TemplateRenderError,
)
from excel_schema_codegen.core.schemas import (
    DefaultValue,
    DefaultValueKind,
    Entity,
    EntityEnum,
    EntityField,
    EnumValue,
    FieldType,
    SheetResult,
)

__all__ = [
    "CellTypeError",
    "CodeGenerationError",
    "ConfigurationError",
    "DefaultValue",
    "DefaultValueKind",
    "Entity",
    "EntityEnum",
    "EntityField",
    "EnumValue",
    "FieldType",
    "SchemaExtractionError",
    "SchemaLocationError",
    "SheetResult",
    "TemplateRenderError",
    "config",
]
