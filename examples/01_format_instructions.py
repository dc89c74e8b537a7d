from __future__ import annotations

from axon_parser import AxonOutputParser, FieldDefinition, Schema, TypeTag

simple = Schema(
    "Simple",
    (
        FieldDefinition("name", TypeTag.STRING),
        FieldDefinition("age", TypeTag.INTEGER, nullable=True),
    ),
)

parser = AxonOutputParser(schemas=[simple])
print(parser.get_format_instructions())
