"""Fixed tables shared by the extractor, the view builder and the driver."""

# Token expected in cell A1 of every sheet describing an entity
DEFAULT_HEADER_MARKER = "HOME"

# Value rows of an enum block start this many rows below its header row
ENUM_VALUES_OFFSET = 3

# C# type names by field type; Enum fields use their enum's display name
TYPE_NAMES = {
    "Varchar": "string",
    "Number": "int",
    "Int": "int",
    "Decimal": "double",
    "Timestamp": "DateTimeOffset",
    "DateTime": "DateTime",
    "Boolean": "bool",
}

# Indentation used inside generated C# members
MEMBER_INDENT = " " * 8
CHAINED_CALL_INDENT = " " * 12

# Template name, output path pattern
DEFAULT_TARGETS = (
    ("entity.cs.j2", "Entities/{name}.cs"),
    ("dto.cs.j2", "Dtos/{name}Dto.cs"),
    ("get_by_id_query.cs.j2", "Cqrs/{name}/Queries/Get{name}ByIdQuery.cs"),
    (
        "get_by_condition_query.cs.j2",
        "Cqrs/{name}/Queries/Get{name}ByConditionQuery.cs",
    ),
    ("base_command.cs.j2", "Cqrs/{name}/I{name}Command.cs"),
    ("validation_rules.cs.j2", "Cqrs/{name}/{name}ValidationRules.cs"),
    ("controller.cs.j2", "Controllers/{name_plural}Controller.cs"),
    ("command_tests.cs.j2", "Tests/{name}/{name}CommandTests.cs"),
)
