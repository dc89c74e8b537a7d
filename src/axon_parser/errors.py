# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Optional


# ============================================================
# Errors
# ============================================================
class AxonParserError(ValueError):
    """Base error for every Axon parse failure.

    ``line`` is 1-based when known, ``text`` is the offending raw text.
    """

    def __init__(self, message: str, line: Optional[int] = None, text: Optional[str] = None):
        self.message = message
        self.line = line
        self.text = text
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)


class HeaderFormatError(AxonParserError):
    """A ``@data`` header does not match ``@data Name[count]``."""


class SchemaNotFoundError(AxonParserError):
    def __init__(self, schema_name: str, line: Optional[int] = None, text: Optional[str] = None):
        self.schema_name = schema_name
        super().__init__(f"Schema not found: {schema_name}", line=line, text=text)


class ValueFormatError(AxonParserError):
    """A row token cannot be coerced to its field's declared type."""

    def __init__(
        self,
        token: str,
        type_tag: str,
        field_name: Optional[str] = None,
        line: Optional[int] = None,
        reason: Optional[str] = None,
    ):
        self.token = token
        self.type_tag = type_tag
        self.field_name = field_name
        self.reason = reason
        target = f"field '{field_name}'" if field_name else "value"
        message = f"Invalid {type_tag} token {token!r} for {target}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, line=line, text=token)


class UnterminatedBlockError(AxonParserError):
    """A block reached end of input without ``@end`` (strict mode only)."""
