# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import List

DELIMITER = "|"
QUOTE = '"'
ESCAPE = "\\"

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}


def decode_escape(c: str) -> str:
    """Decode the character following a backslash."""
    return _ESCAPES.get(c, c)


def split_row(line: str) -> List[str]:
    """Split one row line into raw tokens.

    Quotes toggle a literal region and are dropped; ``|`` only splits outside
    it. Backslash escapes are decoded here, so ``\\|`` and ``\\"`` are literal.
    A trailing delimiter yields one extra empty token, while an empty buffer
    without one yields nothing.
    """
    tokens: List[str] = []
    buf: List[str] = []
    in_quote = False
    escape_pending = False

    for c in line:
        if escape_pending:
            buf.append(decode_escape(c))
            escape_pending = False
            continue
        if c == ESCAPE:
            escape_pending = True
            continue
        if c == QUOTE:
            in_quote = not in_quote
            continue
        if c == DELIMITER and not in_quote:
            tokens.append("".join(buf))
            buf = []
            continue
        buf.append(c)

    if buf or line.endswith(DELIMITER):
        tokens.append("".join(buf))
    return tokens


def unescape(value: str) -> str:
    """Decode backslash sequences in a standalone string; quotes are kept."""
    if ESCAPE not in value:
        return value
    out: List[str] = []
    escaped = False
    for c in value:
        if escaped:
            out.append(decode_escape(c))
            escaped = False
        elif c == ESCAPE:
            escaped = True
        else:
            out.append(c)
    return "".join(out)
