# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import List, Sequence

from .models import Schema, TypeTag

_TYPE_NAMES = {
    TypeTag.STRING: "string",
    TypeTag.INTEGER: "64-bit integer",
    TypeTag.FLOAT: "float",
    TypeTag.BOOLEAN: "boolean (1/0)",
    TypeTag.TIMESTAMP: "RFC 3339 timestamp",
}

_FORMAT_RULES = """Answer in the Axon format inside a single ```axon code fence.

Each data block starts with `@data <SchemaName>[<row count>]` and ends with `@end`.
Write one row per line. Separate values with `|` in the schema's field order.
- `_` is null.
- Booleans are `1` (true) or `0` (false).
- Timestamps use RFC 3339, e.g. 2024-11-23T10:30:00Z.
- Wrap a value containing `|` in double quotes, or escape it as `\\|`.
- Escape newlines as `\\n`, tabs as `\\t`, quotes as `\\"` and backslashes as `\\\\`."""


def _describe_schema(schema: Schema) -> List[str]:
    out = [f"@schema {schema.name}"]
    for fd in schema.fields:
        suffix = "?" if fd.nullable else ""
        out.append(f"{fd.name}:{fd.raw_type}{suffix}")
    out.append("@end")
    return out


def build_format_instructions(schemas: Sequence[Schema] = ()) -> str:
    """Prompt text describing Axon rows for the given schemas."""
    parts = [_FORMAT_RULES]
    if schemas:
        parts.append("Use these schemas (a trailing `?` marks a field that may be `_`):")
        block: List[str] = []
        for schema in schemas:
            block.extend(_describe_schema(schema))
            block.append("")
        parts.append("```axon\n" + "\n".join(block).rstrip() + "\n```")
        legend = ", ".join(f"{t.value}={name}" for t, name in _TYPE_NAMES.items())
        parts.append(f"Type codes: {legend}.")
        parts.append("Repeat the @schema blocks above before your @data blocks.")
    return "\n\n".join(parts)
