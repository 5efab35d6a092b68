"""Pydantic models for the entities extracted from a workbook."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, model_validator


class FieldType(str, Enum):
    """Closed set of attribute types understood by the generator."""

    NUMBER = "Number"
    INT = "Int"
    DECIMAL = "Decimal"
    VARCHAR = "Varchar"
    TIMESTAMP = "Timestamp"
    DATETIME = "DateTime"
    ENUM = "Enum"
    BOOLEAN = "Boolean"

    @classmethod
    def parse(cls, literal: str) -> FieldType:
        """Parse a type cell case-insensitively.

        Raises:
            ValueError: If the literal names no known type
        """
        wanted = literal.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        raise ValueError(f"unknown field type '{literal}'")

    @property
    def is_temporal(self) -> bool:
        return self in (FieldType.TIMESTAMP, FieldType.DATETIME)


class DefaultValueKind(str, Enum):
    EMPTY = "empty"
    BOOL = "bool"
    NUMBER = "number"
    TEXT = "text"


class DefaultValue(BaseModel):
    """Tagged default value of a field, typed by the kind of its source cell."""

    model_config = {"frozen": True}

    kind: DefaultValueKind = DefaultValueKind.EMPTY
    value: bool | int | float | str | None = None

    @model_validator(mode="after")
    def check_kind_matches_value(self) -> DefaultValue:
        expected = {
            DefaultValueKind.EMPTY: type(None),
            DefaultValueKind.BOOL: bool,
            DefaultValueKind.TEXT: str,
        }
        if self.kind is DefaultValueKind.NUMBER:
            ok = isinstance(self.value, (int, float)) and not isinstance(
                self.value, bool
            )
        else:
            ok = type(self.value) is expected[self.kind]
        if not ok:
            raise ValueError(f"{self.kind.value} default cannot hold {self.value!r}")
        return self

    def render(self) -> str:
        """Render the default as a C# literal."""
        if self.kind is DefaultValueKind.EMPTY:
            return "string.Empty"
        if self.kind is DefaultValueKind.BOOL:
            return "true" if self.value else "false"
        if self.kind is DefaultValueKind.NUMBER:
            return format_number(self.value)
        escaped = str(self.value).replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'


def format_number(value: int | float) -> str:
    """Render integral numbers without a fractional part."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class EnumValue(BaseModel):
    model_config = {"frozen": True}

    name: str
    value: int


class EntityEnum(BaseModel):
    """A closed value set declared inside one entity's sheet."""

    model_config = {"frozen": True}

    name: str = Field(..., min_length=1)
    display_name: str = Field(..., description="Entity name + enum name")
    values: tuple[EnumValue, ...] = ()


class EntityField(BaseModel):
    """One row of an entity's attribute block."""

    model_config = {"frozen": True}

    index: int
    name: str = Field(..., min_length=1)
    raw_name: str
    description: str | None = None
    is_primary_key: bool = False
    is_lookup: bool = False
    is_nullable: bool = True
    default_value: DefaultValue = Field(default_factory=DefaultValue)
    type: FieldType
    length: int | float | None = None
    enum_ref: EntityEnum | None = None

    @model_validator(mode="after")
    def check_enum_binding(self) -> EntityField:
        if (self.enum_ref is not None) != (self.type is FieldType.ENUM):
            raise ValueError("enum_ref must be set exactly when type is Enum")
        return self


class Entity(BaseModel):
    """The unit of generation built from one worksheet."""

    model_config = {"frozen": True}

    name: str = Field(..., min_length=1)
    origin_name: str = Field(..., min_length=1)
    fields: tuple[EntityField, ...] = ()
    enums: tuple[EntityEnum, ...] = ()


class SheetResult(BaseModel):
    """Outcome of generating the artifacts of one sheet."""

    sheet_name: str
    entity_name: str | None = None
    written: list[Path] = Field(default_factory=list)
    skipped: list[Path] = Field(default_factory=list)
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def add_error(self, message: str) -> None:
        self.error = message
