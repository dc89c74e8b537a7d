# -*- coding: utf-8 -*-
"""
Axon document parser.

A document is scanned once, top to bottom. ``@schema`` blocks declare named,
ordered field lists; ``@data Name[count]`` blocks hold pipe-delimited rows bound
to a schema declared earlier in the same document. Lines outside blocks are
ignored.

Each block parser takes ``(lines, start, ...)`` and returns ``(value, next_index)``;
the scanner threads the cursor and accumulated results explicitly.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from .coercion import INT64_MAX, assemble_row
from .config import DEFAULT_PARSER_CONFIG, ParserConfig
from .errors import HeaderFormatError, SchemaNotFoundError, UnterminatedBlockError
from .models import DataBlock, FieldDefinition, ParseResult, Row, Schema, find_schema, resolve_type
from .security import safe_raw_preview
from .tokenizer import split_row

logger = logging.getLogger(__name__)

SCHEMA_DIRECTIVE = "@schema"
DATA_DIRECTIVE = "@data"
END_DIRECTIVE = "@end"

_DATA_HEADER_RE = re.compile(r"@data\s+(\w+)\[(\d+)\]", flags=re.ASCII)


# ---------------- Lines ----------------
def split_lines(text: str) -> List[str]:
    """Split on ``\\n`` and strip each line. Blank lines stay as ``""``."""
    return [ln.strip() for ln in text.split("\n")]


def _check_terminated(terminated: bool, kind: str, lines: Sequence[str], start: int, cfg: ParserConfig) -> None:
    if terminated:
        return
    if cfg.strict_blocks:
        raise UnterminatedBlockError(
            f"{kind} block has no {END_DIRECTIVE} before end of input",
            line=start + 1,
            text=lines[start],
        )
    logger.debug("%s block at line %d runs to end of input", kind, start + 1)


# ---------------- Schema ----------------
def _parse_field(line: str) -> Optional[FieldDefinition]:
    parts = line.split(":")
    if len(parts) != 2:
        return None
    name = parts[0].strip()
    type_str = parts[1].strip()
    nullable = type_str.endswith("?")
    if nullable:
        type_str = type_str[:-1]
    return FieldDefinition(name=name, type=resolve_type(type_str), nullable=nullable)


def parse_schema(
    lines: Sequence[str],
    start: int,
    cfg: ParserConfig = DEFAULT_PARSER_CONFIG,
) -> Tuple[Schema, int]:
    """Parse a ``@schema <name>`` block starting at ``lines[start]``.

    Lines that are not a single ``name:type`` pair are skipped. Type tags are
    not validated here; unknown tags surface as ``UnknownType``.
    """
    name = lines[start].replace(SCHEMA_DIRECTIVE, "", 1).strip()
    fields: List[FieldDefinition] = []
    terminated = False
    i = start + 1
    while i < len(lines):
        line = lines[i]
        i += 1
        if line == END_DIRECTIVE:
            terminated = True
            break
        if not line:
            continue
        fd = _parse_field(line)
        if fd is not None:
            fields.append(fd)

    _check_terminated(terminated, "schema", lines, start, cfg)
    logger.debug("Parsed schema %r with %d fields (line %d)", name, len(fields), start + 1)
    return Schema(name=name, fields=tuple(fields)), i


# ---------------- Data ----------------
def _parse_count(digits: str) -> int:
    n = int(digits)
    return n if n <= INT64_MAX else 0


def parse_data_block(
    lines: Sequence[str],
    start: int,
    schemas: Sequence[Schema],
    cfg: ParserConfig = DEFAULT_PARSER_CONFIG,
) -> Tuple[DataBlock, int]:
    """Parse a ``@data <name>[<count>]`` block against ``schemas``.

    ``schemas`` must hold only what was declared before this block. The first
    schema with a matching name wins. The declared count is kept as-is and is
    not compared with the number of rows.

    Raises:
        HeaderFormatError: header is not ``@data Name[count]``.
        SchemaNotFoundError: no earlier schema has that name.
        ValueFormatError: a row token does not coerce to its field type.
    """
    header = lines[start]
    m = _DATA_HEADER_RE.search(header)
    if not m:
        raise HeaderFormatError(f"Invalid {DATA_DIRECTIVE} header: {header}", line=start + 1, text=header)
    schema_name = m.group(1)
    count = _parse_count(m.group(2))

    schema = find_schema(schemas, schema_name)
    if schema is None:
        raise SchemaNotFoundError(schema_name, line=start + 1, text=header)

    rows: List[Row] = []
    terminated = False
    i = start + 1
    while i < len(lines):
        line = lines[i]
        i += 1
        if line == END_DIRECTIVE:
            terminated = True
            break
        if not line:
            continue
        rows.append(assemble_row(split_row(line), schema, cfg, line=i))

    _check_terminated(terminated, "data", lines, start, cfg)
    if len(rows) != count:
        logger.debug("Data block %r declares %d rows, parsed %d", schema_name, count, len(rows))
    logger.debug("Parsed data block %r with %d rows (line %d)", schema_name, len(rows), start + 1)
    return DataBlock(schema_name=schema_name, declared_count=count, rows=tuple(rows)), i


# ---------------- Document ----------------
class AxonParser:
    def __init__(self, cfg: ParserConfig = DEFAULT_PARSER_CONFIG):
        self.cfg = cfg

    def parse(self, text: str, known_schemas: Sequence[Schema] = ()) -> ParseResult:
        """Parse a whole document. Any error aborts the parse; there is no partial result.

        ``known_schemas`` are treated as declared before the first line: data blocks
        can reference them and they lead ``ParseResult.schemas``.
        """
        lines = split_lines(text)
        schemas: List[Schema] = list(known_schemas)
        blocks: List[DataBlock] = []

        i = 0
        while i < len(lines):
            line = lines[i]
            if line.startswith(SCHEMA_DIRECTIVE):
                schema, i = parse_schema(lines, i, self.cfg)
                schemas.append(schema)
            elif line.startswith(DATA_DIRECTIVE):
                block, i = parse_data_block(lines, i, schemas, self.cfg)
                blocks.append(block)
            else:
                i += 1

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Parsed document: %d schemas, %d data blocks; raw=%s",
                len(schemas), len(blocks), safe_raw_preview(text),
            )
        return ParseResult(schemas=tuple(schemas), data_blocks=tuple(blocks))

    def parse_file(self, path: Union[str, Path], encoding: str = "utf-8") -> ParseResult:
        return self.parse(Path(path).read_text(encoding=encoding))


def parse(text: str, cfg: Optional[ParserConfig] = None) -> ParseResult:
    return AxonParser(cfg or DEFAULT_PARSER_CONFIG).parse(text)


def parse_file(path: Union[str, Path], cfg: Optional[ParserConfig] = None, encoding: str = "utf-8") -> ParseResult:
    return AxonParser(cfg or DEFAULT_PARSER_CONFIG).parse_file(path, encoding=encoding)
