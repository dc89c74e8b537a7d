from .config import ParserConfig, DEFAULT_PARSER_CONFIG
from .errors import (
    AxonParserError,
    HeaderFormatError,
    SchemaNotFoundError,
    ValueFormatError,
    UnterminatedBlockError,
)
from .models import (
    TypeTag,
    UnknownType,
    FieldDefinition,
    Schema,
    DataBlock,
    ParseResult,
)
from .parser import AxonParser, parse, parse_file
from .binding import schema_to_model, bind_rows
from .prompting import build_format_instructions
from .output_parser import AxonOutputParser

__all__ = [
    "ParserConfig",
    "DEFAULT_PARSER_CONFIG",
    "AxonParserError",
    "HeaderFormatError",
    "SchemaNotFoundError",
    "ValueFormatError",
    "UnterminatedBlockError",
    "TypeTag",
    "UnknownType",
    "FieldDefinition",
    "Schema",
    "DataBlock",
    "ParseResult",
    "AxonParser",
    "parse",
    "parse_file",
    "schema_to_model",
    "bind_rows",
    "build_format_instructions",
    "AxonOutputParser",
]
