# -*- coding: utf-8 -*-
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

Value = Union[str, int, float, bool, datetime, None]
Row = Dict[str, Value]


class TypeTag(str, Enum):
    STRING = "S"
    INTEGER = "I"
    FLOAT = "F"
    BOOLEAN = "B"
    TIMESTAMP = "T"


@dataclass(frozen=True)
class UnknownType:
    """A type tag outside the five known ones; values pass through as raw text."""
    tag: str

    @property
    def value(self) -> str:
        return self.tag


FieldType = Union[TypeTag, UnknownType]


def resolve_type(raw: str) -> FieldType:
    try:
        return TypeTag(raw)
    except ValueError:
        return UnknownType(raw)


@dataclass(frozen=True)
class FieldDefinition:
    name: str
    type: FieldType
    nullable: bool = False

    @property
    def raw_type(self) -> str:
        return self.type.value


@dataclass(frozen=True)
class Schema:
    name: str
    fields: Tuple[FieldDefinition, ...] = ()

    @property
    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]

    def get_field(self, name: str) -> Optional[FieldDefinition]:
        for f in self.fields:
            if f.name == name:
                return f
        return None


@dataclass(frozen=True)
class DataBlock:
    """Rows bound to a schema.

    ``declared_count`` is the number from the header. It is descriptive only and
    is never checked against ``len(rows)``.
    """
    schema_name: str
    declared_count: int
    rows: Tuple[Row, ...] = ()


@dataclass(frozen=True)
class ParseResult:
    """Schemas in declaration order and data blocks in document order.

    Equality is structural, so a document holding a ``nan`` float never equals
    its own re-parse: ``nan != nan``.
    """

    schemas: Tuple[Schema, ...] = field(default_factory=tuple)
    data_blocks: Tuple[DataBlock, ...] = field(default_factory=tuple)

    def get_schema(self, name: str) -> Optional[Schema]:
        """Earliest-declared schema called ``name``."""
        return find_schema(self.schemas, name)

    def blocks_for(self, name: str) -> List[DataBlock]:
        return [b for b in self.data_blocks if b.schema_name == name]


def find_schema(schemas, name: str) -> Optional[Schema]:
    for s in schemas:
        if s.name == name:
            return s
    return None
