"""Configuration for the Excel schema code generator."""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
)

from .constants import DEFAULT_HEADER_MARKER, DEFAULT_TARGETS
from .exceptions import ConfigurationError

UNCONFIGURED = -1


class SourceColumnsConfig(BaseModel):
    """1-based column indices of the attribute and enum blocks."""

    model_config = {"frozen": True}

    index: int = UNCONFIGURED
    name: int = UNCONFIGURED
    description: int = UNCONFIGURED
    primary_key: int = UNCONFIGURED
    lookup: int = UNCONFIGURED
    nullable: int = UNCONFIGURED
    default_value: int = UNCONFIGURED
    type: int = UNCONFIGURED
    length: int = UNCONFIGURED
    enum_number: int = UNCONFIGURED
    enum_value: int = UNCONFIGURED
    enum_description: int = UNCONFIGURED


class CellPosition(BaseModel):
    """A (row, column) cell coordinate."""

    model_config = {"frozen": True}

    row: int = UNCONFIGURED
    column: int = UNCONFIGURED


class SourceConfig(BaseModel):
    """Configuration of the source workbook layout."""

    model_config = {"frozen": True}

    path_to_excel_file: Path = Field(
        default=Path("database.xlsx"), description="Workbook to read entities from"
    )
    header_marker: str = Field(
        default=DEFAULT_HEADER_MARKER,
        description="Literal token cell A1 must hold for a sheet to be parsed",
    )
    include_keywords: tuple[str, ...] = Field(
        default=(), description="Sheet-name substrings allowed (case-insensitive)"
    )
    columns: SourceColumnsConfig = Field(default_factory=SourceColumnsConfig)
    entity_name: CellPosition = Field(default_factory=CellPosition)
    enum_start_row: int = Field(
        default=2, description="Row where the downward enum header search starts"
    )


class GenerationTarget(BaseModel):
    """One template rendered per entity, and where its output goes."""

    model_config = {"frozen": True}

    template: str
    output: str = Field(
        ..., description="Output path pattern over name, name_plural, origin_name"
    )


class EntityOutputConfig(BaseModel):
    model_config = {"frozen": True}

    namespace: str = "Domain.Entities"
    id_type: str = "Guid"
    skipped_fields: frozenset[str] = frozenset()


class DtoOutputConfig(BaseModel):
    model_config = {"frozen": True}

    namespace: str = "Application.Dtos"
    skipped_fields: frozenset[str] = frozenset()
    mapping: dict[str, str] = Field(default_factory=dict)
    # False: DTO fields use the entity polarity (is_required = not nullable).
    inverse_required_polarity: bool = False


class GeneratedConfig(BaseModel):
    """Configuration of the generated output tree."""

    model_config = {"frozen": True}

    path: Path = Field(default=Path("generated"), description="Output root")
    templates_dir: Path | None = Field(
        default=None, description="Directory overriding the packaged templates"
    )
    name_suffix: str = ""
    entity: EntityOutputConfig = Field(default_factory=EntityOutputConfig)
    dto: DtoOutputConfig = Field(default_factory=DtoOutputConfig)
    cqrs_namespace: str = "Application.Cqrs"
    validation_namespace: str = "Application.Validation"
    controller_namespace: str = "Api.Controllers"
    test_namespace: str = "Application.Tests"
    targets: tuple[GenerationTarget, ...] = Field(
        default=tuple(
            GenerationTarget(template=template, output=output)
            for template, output in DEFAULT_TARGETS
        )
    )


class ExitCodesConfig(BaseModel):
    """Configuration for exit codes."""

    model_config = {"frozen": True}

    success: int = 0
    error_file_not_found: int = 1
    error_invalid_schema: int = 2
    error_configuration: int = 3
    error_file_system: int = 5


class Config(BaseSettings):
    """Main configuration class for the Excel schema code generator."""

    source: SourceConfig = Field(default_factory=SourceConfig)
    generated: GeneratedConfig = Field(default_factory=GeneratedConfig)
    exit_codes: ExitCodesConfig = Field(default_factory=ExitCodesConfig)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",
        "json_file": "appsettings.json",
        "json_file_encoding": "utf-8",
        "case_sensitive": False,
        "frozen": True,
        "extra": "ignore",
    }

    def __init__(self, **data):
        """Initialize config, reporting invalid values as ConfigurationError."""
        try:
            super().__init__(**data)
        except ValidationError as e:
            error = e.errors()[0]
            # Convert the field location to the environment variable spelling
            env_var_name = "__".join(str(part) for part in error["loc"]).upper()
            if error["type"] == "missing":
                raise ConfigurationError(variable_name=env_var_name) from e
            raise ConfigurationError(
                variable_name=env_var_name, reason=error["msg"]
            ) from e

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            JsonConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


# At application import time, populate os.environ from .env (if present).
load_dotenv()
config = Config()
