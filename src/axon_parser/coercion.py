# -*- coding: utf-8 -*-
from __future__ import annotations

import math
import re
from datetime import datetime
from typing import Optional, Sequence

from .config import DEFAULT_PARSER_CONFIG, ParserConfig
from .errors import ValueFormatError
from .models import FieldType, Row, Schema, TypeTag, Value
from .tokenizer import unescape

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_SPECIALS = {"inf", "+inf", "-inf", "infinity", "+infinity", "-infinity", "nan", "+nan", "-nan"}
_HEX_FLOAT_RE = re.compile(r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+")
_RFC3339_RE = re.compile(
    r"(?P<date>[0-9]{4}-[0-9]{2}-[0-9]{2})[Tt]"
    r"(?P<time>[0-9]{2}:[0-9]{2}:[0-9]{2})(?:\.(?P<frac>[0-9]+))?"
    r"(?P<offset>[Zz]|[+-][0-9]{2}:[0-9]{2})"
)


def _parse_int(token: str) -> int:
    if not _INT_RE.fullmatch(token):
        raise ValueError("not a base-10 integer")
    n = int(token)
    if n < INT64_MIN or n > INT64_MAX:
        raise ValueError("out of 64-bit range")
    return n


def _parse_float(token: str) -> float:
    # float() would also accept whitespace, digit underscores and non-ASCII digits
    if not token.isascii() or token != token.strip() or "_" in token:
        raise ValueError("not a floating-point number")
    if _HEX_FLOAT_RE.fullmatch(token):
        try:
            return float.fromhex(token)
        except OverflowError as e:
            raise ValueError("out of 64-bit range") from e
    x = float(token)
    if math.isinf(x) and token.lower() not in _FLOAT_SPECIALS:
        raise ValueError("out of 64-bit range")
    return x


def _parse_timestamp(token: str) -> datetime:
    m = _RFC3339_RE.fullmatch(token)
    if not m:
        raise ValueError("not an RFC 3339 date-time")
    offset = m.group("offset").upper()
    if offset == "Z":
        offset = "+00:00"
    frac = m.group("frac")
    # datetime keeps microseconds only
    frac = f".{frac[:6].ljust(6, '0')}" if frac else ""
    return datetime.fromisoformat(f"{m.group('date')}T{m.group('time')}{frac}{offset}")


def _parse_bool(token: str, strict: bool) -> bool:
    if strict and token not in ("0", "1"):
        raise ValueError("expected 0 or 1")
    return token == "1"


def coerce_value(
    token: str,
    field_type: FieldType,
    cfg: ParserConfig = DEFAULT_PARSER_CONFIG,
    field_name: Optional[str] = None,
    line: Optional[int] = None,
) -> Value:
    """Convert one raw token to the Python value for ``field_type``.

    The null sentinel is not handled here; see :func:`assemble_row`.
    Unknown type tags return the token unchanged.
    """
    if not isinstance(field_type, TypeTag):
        return token
    if field_type is TypeTag.STRING:
        return unescape(token)
    try:
        if field_type is TypeTag.INTEGER:
            return _parse_int(token)
        if field_type is TypeTag.FLOAT:
            return _parse_float(token)
        if field_type is TypeTag.BOOLEAN:
            return _parse_bool(token, cfg.strict_booleans)
        return _parse_timestamp(token)
    except ValueError as e:
        raise ValueFormatError(
            token, field_type.value, field_name=field_name, line=line, reason=str(e)
        ) from e


def assemble_row(
    tokens: Sequence[str],
    schema: Schema,
    cfg: ParserConfig = DEFAULT_PARSER_CONFIG,
    line: Optional[int] = None,
) -> Row:
    """Bind tokens to schema fields by position.

    Missing trailing tokens leave their fields out of the row; extra tokens
    are ignored. The null token yields ``None`` whatever the declared type.
    """
    row: Row = {}
    for fd, token in zip(schema.fields, tokens):
        if token == cfg.null_token:
            row[fd.name] = None
            continue
        row[fd.name] = coerce_value(token, fd.type, cfg, field_name=fd.name, line=line)
    return row
