# -*- coding: utf-8 -*-
"""
Optional pydantic binding for parsed data blocks.

The parser records ``nullable`` but never enforces it. Callers who want rows
checked against their schema can build a model from it here and validate.

Axon field names are arbitrary text, so each model field gets a safe Python
name and keeps the Axon name as its alias. Use ``model_dump(by_alias=True)``
to get the original names back.
"""

from __future__ import annotations

import keyword
import re
from datetime import datetime
from typing import Any, Dict, List, Optional, Set, Type

from pydantic import BaseModel, ConfigDict, Field, create_model

from .models import DataBlock, FieldDefinition, Schema, TypeTag

_PY_TYPES: Dict[TypeTag, type] = {
    TypeTag.STRING: str,
    TypeTag.INTEGER: int,
    TypeTag.FLOAT: float,
    TypeTag.BOOLEAN: bool,
    TypeTag.TIMESTAMP: datetime,
}

_NON_IDENT_RE = re.compile(r"\W", flags=re.ASCII)
_RESERVED = set(dir(BaseModel))


def _python_name(name: str, index: int, taken: Set[str], aliases: Set[str]) -> str:
    base = _NON_IDENT_RE.sub("_", name).lstrip("_")
    if (
        not base
        or base[0].isdigit()
        or keyword.iskeyword(base)
        or base in _RESERVED
        or base.startswith("model_")
    ):
        base = f"field_{index}"
    candidate = base
    n = 2
    # another field's alias must not double as this field's name
    while candidate in taken or (candidate != name and candidate in aliases):
        candidate = f"{base}_{n}"
        n += 1
    taken.add(candidate)
    return candidate


def _field_spec(fd: FieldDefinition) -> Any:
    # unknown tags come through as raw strings
    py_type = _PY_TYPES.get(fd.type, str)
    if fd.nullable:
        return (Optional[py_type], Field(None, alias=fd.name))
    return (py_type, Field(..., alias=fd.name))


def schema_to_model(schema: Schema, model_name: Optional[str] = None) -> Type[BaseModel]:
    """Build a pydantic model class mirroring ``schema``.

    Nullable fields become ``Optional[...] = None``; all others are required.
    """
    taken: Set[str] = set()
    aliases = {fd.name for fd in schema.fields}
    fields = {
        _python_name(fd.name, i, taken, aliases): _field_spec(fd)
        for i, fd in enumerate(schema.fields)
    }
    return create_model(
        model_name or schema.name,
        __config__=ConfigDict(populate_by_name=True),
        **fields,
    )


def bind_rows(block: DataBlock, model: Type[BaseModel]) -> List[BaseModel]:
    """Validate every row of ``block`` into ``model``.

    Raises pydantic's ``ValidationError`` on the first row that does not fit.
    """
    return [model.model_validate(row) for row in block.rows]
