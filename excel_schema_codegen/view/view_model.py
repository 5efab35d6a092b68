"""Projection of an Entity into the mapping consumed by the templates."""

from __future__ import annotations

from typing import Any

from excel_schema_codegen.core.config import Config, config
from excel_schema_codegen.core.naming import pluralize, to_variable_case
from excel_schema_codegen.core.schemas import Entity, EntityEnum, EntityField, FieldType
from excel_schema_codegen.view import snippets


class ViewModelBuilder:
    """Builds template views from entities.

    The builder only reads its configuration; ``build`` is a pure function of
    the entity passed in.
    """

    def __init__(self, settings: Config = config) -> None:
        """Initialize the builder.

        Args:
            settings: Configuration providing the skip sets, the DTO rename map
                and the DTO polarity switch
        """
        self.entity_settings = settings.generated.entity
        self.dto_settings = settings.generated.dto

    def build(self, entity: Entity) -> dict[str, Any]:
        """Project an entity into an order-preserving template view.

        Args:
            entity: Entity extracted from a sheet

        Returns:
            Mapping of view keys to values and derived strings
        """
        entity_fields = [
            f for f in entity.fields if f.name not in self.entity_settings.skipped_fields
        ]
        dto_fields = [
            f for f in entity.fields if f.name not in self.dto_settings.skipped_fields
        ]

        return {
            "name": entity.name,
            "origin_name": entity.origin_name,
            "var_name": to_variable_case(entity.name),
            "name_plural": pluralize(entity.name),
            "origin_name_plural": pluralize(entity.origin_name),
            "entity_fields": [self.entity_field_view(f) for f in entity_fields],
            "dto_fields": [self.dto_field_view(f) for f in dto_fields],
            "enums": [self.enum_view(e) for e in entity.enums],
            "has_enums": bool(entity.enums),
            "primary_keys": [f.name for f in entity_fields if f.is_primary_key],
            "arguments": ", ".join(snippets.argument(f) for f in entity_fields),
            "nullable_arguments": ", ".join(
                snippets.argument(f, force_nullable=True) for f in entity_fields
            ),
            "params": ", ".join(f"request.{f.name}" for f in entity_fields),
            "assignments": "\n".join(snippets.assignment(f) for f in entity_fields),
            "initializers": "\n".join(snippets.initializer(f) for f in entity_fields),
            "param_validation": "\n".join(
                snippets.query_filter(f) for f in entity_fields
            ),
            "validations": "\n".join(
                snippet
                for snippet in (snippets.validation_snippet(f) for f in entity_fields)
                if snippet is not None
            ),
        }

    def base_field_view(self, field: EntityField) -> dict[str, Any]:
        return {
            "index": field.index,
            "name": field.name,
            "var_name": to_variable_case(field.name),
            "description": field.description,
            "primary_key": field.is_primary_key,
            "lookup": field.is_lookup,
            "nullable": field.is_nullable,
            "default_value": field.default_value.render(),
            "type": snippets.type_name(field),
            "field_type": field.type.value,
            "is_enum": field.type is FieldType.ENUM,
            "max_length": snippets.max_length(field),
            "has_max_length": snippets.has_max_length(field),
        }

    def entity_field_view(self, field: EntityField) -> dict[str, Any]:
        view = self.base_field_view(field)
        view.update(required_flags(field, inverse=False))
        validation = snippets.validation_snippet(field)
        if validation is not None:
            view["validation"] = validation
        view["mock_value"] = snippets.mock_value_snippet(field)
        view["mock_as_local"] = field.type in snippets.LOCAL_MOCK_TYPES
        return view

    def dto_field_view(self, field: EntityField) -> dict[str, Any]:
        view = self.base_field_view(field)
        view["name"] = self.dto_settings.mapping.get(field.name, field.name)
        view["var_name"] = to_variable_case(view["name"])
        view.update(
            required_flags(field, inverse=self.dto_settings.inverse_required_polarity)
        )
        return view

    def enum_view(self, entity_enum: EntityEnum) -> dict[str, Any]:
        return {
            "name": entity_enum.name,
            "display_name": entity_enum.display_name,
            "values": [{"name": v.name, "value": v.value} for v in entity_enum.values],
        }


def required_flags(field: EntityField, inverse: bool) -> dict[str, bool]:
    """Derive is_required and has_default_value.

    With ``inverse`` set the polarity of the nullable marker is flipped, as the
    earlier DTO projection did.
    """
    required = not field.is_nullable
    if inverse:
        required = not required
    return {
        "is_required": required,
        "has_default_value": field.type is FieldType.VARCHAR and required,
    }
