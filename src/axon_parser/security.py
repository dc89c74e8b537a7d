# -*- coding: utf-8 -*-
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

from .tokenizer import DELIMITER, split_row

MASK = "***"


@dataclass(frozen=True)
class RawLogPolicy:
    """Policy for writing raw Axon text to logs.

    Off by default. When enabled, directive and schema lines are logged as-is
    but data row values are masked unless ``show_rows`` is set as well.
    """
    enabled: bool
    preview_chars: int = 200
    show_rows: bool = False

    @staticmethod
    def from_env() -> "RawLogPolicy":
        enabled = os.getenv("AXON_PARSER_LOG_RAW", "false").lower() == "true"
        show_rows = os.getenv("AXON_PARSER_LOG_ROWS", "false").lower() == "true"
        try:
            preview_chars = int(os.getenv("AXON_PARSER_LOG_PREVIEW_CHARS", "200"))
        except ValueError:
            preview_chars = 200
        return RawLogPolicy(enabled=enabled, preview_chars=max(0, preview_chars), show_rows=show_rows)


def _mask_row(line: str, null_token: str) -> str:
    # keep the column count and nulls visible, hide everything else
    return DELIMITER.join(t if t == null_token else MASK for t in split_row(line))


def mask_row_values(text: str, null_token: str = "_") -> str:
    """Mask the values of every data row, keeping directives and schema lines.

    Row lines are recognised the same way the parser does: any non-blank line
    between an ``@data`` header and ``@end``.
    """
    out: List[str] = []
    block: Optional[str] = None
    for raw in text.split("\n"):
        line = raw.strip()
        if block is None:
            if line.startswith("@schema"):
                block = "schema"
            elif line.startswith("@data"):
                block = "data"
        elif line == "@end":
            block = None
        elif block == "data" and line:
            out.append(_mask_row(line, null_token))
            continue
        out.append(raw)
    return "\n".join(out)


def safe_raw_preview(text: str, policy: Optional[RawLogPolicy] = None) -> str:
    if policy is None:
        policy = RawLogPolicy.from_env()
    if not policy.enabled:
        return "REDACTED"
    if not policy.show_rows:
        text = mask_row_values(text)
    return text[: policy.preview_chars]
