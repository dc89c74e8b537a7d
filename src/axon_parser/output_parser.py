# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
import re
from typing import Optional, Sequence, Tuple

from langchain_core.exceptions import OutputParserException
from langchain_core.output_parsers import BaseOutputParser
from pydantic import Field

from .config import DEFAULT_PARSER_CONFIG, ParserConfig
from .errors import AxonParserError
from .models import ParseResult, Schema
from .parser import AxonParser
from .prompting import build_format_instructions
from .security import safe_raw_preview

logger = logging.getLogger(__name__)

_CODE_FENCE_RE = re.compile(r"```(?:axon)?\s*(.*?)\s*```", flags=re.DOTALL)


def extract_document(text: str) -> str:
    """Return the body of the first code fence, or the whole text."""
    s = (text or "").strip()
    m = _CODE_FENCE_RE.search(s)
    if m:
        s = m.group(1)
    return s


class AxonOutputParser(BaseOutputParser[ParseResult]):
    """LangChain output parser for Axon documents.

    ``schemas`` are both described in the format instructions and preloaded
    into every parse, so a reply may hold only @data blocks.
    """

    schemas: Tuple[Schema, ...] = Field(default=())
    cfg: ParserConfig = Field(default_factory=lambda: DEFAULT_PARSER_CONFIG)

    def __init__(self, schemas: Optional[Sequence[Schema]] = None, cfg: Optional[ParserConfig] = None, **kwargs):
        super().__init__(**kwargs)
        object.__setattr__(self, 'schemas', tuple(schemas or ()))
        object.__setattr__(self, 'cfg', cfg or DEFAULT_PARSER_CONFIG)

    def get_format_instructions(self) -> str:
        return build_format_instructions(self.schemas)

    def parse(self, text: str) -> ParseResult:
        try:
            return AxonParser(self.cfg).parse(extract_document(text), known_schemas=self.schemas)
        except AxonParserError as e:
            logger.debug("Rejected Axon output: %s", safe_raw_preview(text or ""))
            raise OutputParserException(str(e), llm_output=text) from e

    @property
    def _type(self) -> str:
        return "axon"
