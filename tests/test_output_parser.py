from __future__ import annotations

import pytest
from langchain_core.exceptions import OutputParserException

from axon_parser import AxonOutputParser, FieldDefinition, ParserConfig, Schema, TypeTag
from axon_parser.config import DEFAULT_PARSER_CONFIG

ROUTE = Schema(
    "Route",
    (
        FieldDefinition("route", TypeTag.STRING),
        FieldDefinition("confidence", TypeTag.FLOAT),
        FieldDefinition("reason", TypeTag.STRING, nullable=True),
    ),
)


def test_parse_plain_text():
    parser = AxonOutputParser(schemas=[ROUTE])
    out = parser.parse("@schema Route\nroute:S\nconfidence:F\nreason:S?\n@end\n@data Route[1]\nsearch|0.9|_\n@end\n")
    assert out.data_blocks[0].rows[0] == {"route": "search", "confidence": 0.9, "reason": None}


def test_extract_from_code_fence():
    parser = AxonOutputParser()
    text = "Sure:\n```axon\n@schema Route\nroute:S\n@end\n@data Route[1]\nfaq\n@end\n```\nDone."
    out = parser.parse(text)
    assert out.data_blocks[0].rows[0]["route"] == "faq"


def test_errors_become_output_parser_exception():
    parser = AxonOutputParser()
    with pytest.raises(OutputParserException) as ei:
        parser.parse("@data Route[1]\nsearch\n@end")
    assert "Route" in str(ei.value)


def test_format_instructions_list_schemas():
    text = AxonOutputParser(schemas=[ROUTE]).get_format_instructions()
    assert "@schema Route" in text
    assert "confidence:F" in text
    assert "reason:S?" in text
    assert "```axon" in text


def test_type_name():
    assert AxonOutputParser()._type == "axon"


def test_reply_with_data_only_uses_known_schemas():
    parser = AxonOutputParser(schemas=[ROUTE])
    out = parser.parse("```axon\n@data Route[1]\nsearch|0.9|_\n@end\n```")
    assert out.schemas == (ROUTE,)
    assert out.data_blocks[0].rows[0] == {"route": "search", "confidence": 0.9, "reason": None}


def test_cfg_is_a_parser_config():
    assert AxonOutputParser().cfg is DEFAULT_PARSER_CONFIG
    strict = ParserConfig(strict_blocks=True)
    parser = AxonOutputParser(schemas=[ROUTE], cfg=strict)
    assert parser.cfg is strict
    with pytest.raises(OutputParserException):
        parser.parse("@data Route[1]\nsearch|0.9|_\n")
