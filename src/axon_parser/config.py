# -*- coding: utf-8 -*-
from __future__ import annotations

from dataclasses import dataclass


# ============================================================
# Config
# ============================================================
@dataclass(frozen=True)
class ParserConfig:
    # Defaults keep the lenient behavior consumers already depend on.
    strict_blocks: bool = False  # missing @end before end of input -> UnterminatedBlockError
    strict_booleans: bool = False  # only "0"/"1" accepted for B fields
    null_token: str = "_"


DEFAULT_PARSER_CONFIG = ParserConfig()
