"""C# snippets derived from single fields."""

from __future__ import annotations

from excel_schema_codegen.core.constants import (
    CHAINED_CALL_INDENT,
    MEMBER_INDENT,
    TYPE_NAMES,
)
from excel_schema_codegen.core.naming import to_variable_case
from excel_schema_codegen.core.schemas import EntityField, FieldType, format_number

# Types whose mock value is assigned to an inferred-type local
LOCAL_MOCK_TYPES = frozenset({FieldType.TIMESTAMP, FieldType.DATETIME, FieldType.ENUM})


def type_name(field: EntityField) -> str:
    if field.type is FieldType.ENUM:
        return field.enum_ref.display_name
    return TYPE_NAMES[field.type.value]


def has_max_length(field: EntityField) -> bool:
    return field.type is FieldType.VARCHAR and (field.length or 0) > 0


def max_length(field: EntityField) -> str | None:
    if field.length is None:
        return None
    return format_number(field.length)


def validation_rules(field: EntityField) -> list[str]:
    """Return the FluentValidation calls that apply to a field, in order."""
    rules: list[str] = []
    if not field.is_nullable:
        rules.append("NotEmpty()")
    if field.type is FieldType.VARCHAR:
        if has_max_length(field):
            rules.append(f"MaximumLength({max_length(field)})")
        if "email" in field.name.lower():
            rules.append("EmailAddress()")
    return rules


def validation_snippet(field: EntityField) -> str | None:
    """Render the validation statement of a field, None when no rule applies."""
    rules = validation_rules(field)
    if not rules:
        return None
    chained = "".join(f"\n{CHAINED_CALL_INDENT}.{rule}" for rule in rules)
    return f"{MEMBER_INDENT}validator.RuleFor(x => x.{field.name}){chained};"


def mock_value_snippet(field: EntityField) -> str:
    """Render an arbitrary value of the field's type for generated tests.

    Temporal and enum values are declared as a ``var`` local; everything
    else is a plain expression.
    """
    expression = f"fixture.Create<{type_name(field)}>()"
    if field.type in LOCAL_MOCK_TYPES:
        return f"var {to_variable_case(field.name)} = {expression};"
    return expression


def argument(field: EntityField, force_nullable: bool = False) -> str:
    nullable = "?" if force_nullable or field.is_nullable else ""
    return f"{type_name(field)}{nullable} {to_variable_case(field.name)}"


def assignment(field: EntityField) -> str:
    return f"{MEMBER_INDENT}{field.name} = {to_variable_case(field.name)};"


def initializer(field: EntityField) -> str:
    return f"{CHAINED_CALL_INDENT}{field.name} = request.{field.name},"


def query_filter(field: EntityField) -> str:
    """Render the optional filter a condition query applies for a field."""
    var_name = to_variable_case(field.name)
    alias = var_name[0]
    if field.type is FieldType.VARCHAR:
        condition = f"!string.IsNullOrEmpty({var_name})"
        predicate = f"{alias}.{field.name}.Contains({var_name})"
    else:
        condition = f"{var_name} != null"
        predicate = f"{alias}.{field.name} == {var_name}"
    return (
        f"{MEMBER_INDENT}if ({condition})\n"
        f"{MEMBER_INDENT}{{\n"
        f"{CHAINED_CALL_INDENT}Query.Where({alias} => {predicate});\n"
        f"{MEMBER_INDENT}}}"
    )
