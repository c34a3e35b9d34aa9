"""
Column type inference for Oracle.

Resolution order for a field:

1. the ``TYPE`` tag, normalised to Oracle spellings;
2. a ``db_data_type(dialect)`` hook on the value type, which replaces the tag;
3. for self-decoding (``scan``) dataclass wrappers, the first member's kind;
4. the reflected kind of the value.

Modifiers from the ``DEFAULT``, ``NOT NULL``, ``UNIQUE`` and ``COMMENT`` tags
are appended in that order. Oracle rejects ``CREATE TABLE`` when ``DEFAULT``
follows the constraints.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..core.fields import (
    FieldDescription,
    FieldKind,
    declares_data_type,
    first_member,
    is_byte_sequence,
    is_scanner,
    is_struct,
)
from .base import UnresolvableColumnTypeError

# VARCHAR2 holds at most 4000 bytes when MAX_STRING_SIZE = STANDARD
MAX_VARCHAR2_SIZE = 4000
DEFAULT_VARCHAR2_SIZE = 255

_EXPLICIT_TYPE_ALIASES = {
    "bigint": "NUMBER(19)",
    "integer": "NUMBER(10)",
    "datetime": "TIMESTAMP",
    "tinyint": "NUMBER(3)",
}

_NVARCHAR_RE = re.compile("nvarchar", re.IGNORECASE)
_BINARY_RE = re.compile("binary", re.IGNORECASE)

_NUMBER_10_KINDS = frozenset(
    {
        FieldKind.INT,
        FieldKind.INT8,
        FieldKind.INT16,
        FieldKind.INT32,
        FieldKind.UINT,
        FieldKind.UINT8,
        FieldKind.UINT16,
        FieldKind.UINT32,
        FieldKind.UINTPTR,
    }
)
_NUMBER_19_KINDS = frozenset({FieldKind.INT64, FieldKind.UINT64})
_FLOAT_KINDS = frozenset({FieldKind.FLOAT32, FieldKind.FLOAT64})


@dataclass(frozen=True)
class ParsedField:
    """
    Intermediate result of parsing a field for Oracle.

    ``sql_type`` is empty when neither the tag nor a hook fixed the type and
    the kind has to be inferred.
    """

    kind: FieldKind
    value_type: Optional[type]
    sql_type: str
    size: int
    additional_type: str


def _preserve_case(replacement: str):
    def substitute(match: re.Match) -> str:
        return replacement.upper() if match.group(0).isupper() else replacement

    return substitute


def normalize_explicit_type(data_type: str) -> str:
    """
    Map generic ``TYPE`` tag spellings onto Oracle types.

    ``nvarchar`` and ``binary`` are plain substring replacements of their
    first occurrence, so ``varbinary(16)`` becomes ``varraw(16)``.
    """
    alias = _EXPLICIT_TYPE_ALIASES.get(data_type.lower())
    if alias is not None:
        return alias
    if _NVARCHAR_RE.search(data_type):
        return _NVARCHAR_RE.sub(_preserve_case("nvarchar2"), data_type, count=1)
    if _BINARY_RE.search(data_type):
        return _BINARY_RE.sub(_preserve_case("raw"), data_type, count=1)
    return data_type


def _unwrap_scanner(field: FieldDescription) -> FieldDescription:
    current = field
    while is_scanner(current.value_type) and is_struct(current.value_type):
        inner = first_member(current.value_type)
        if inner is None:
            break
        current = inner
    return current


def _modifier_tail(field: FieldDescription) -> str:
    parts: list[str] = []
    if field.default_value:
        parts.append(f"DEFAULT {field.default_value}")
    if field.not_null:
        parts.append(field.not_null)
    if field.unique:
        parts.append(field.unique)
    if field.comment:
        parts.append(f"COMMENT {field.comment}")
    # literal values keep their inner whitespace
    return " ".join(parts).strip()


def parse_field(field: FieldDescription, dialect: Any = None) -> ParsedField:
    data_type = normalize_explicit_type(field.explicit_type)

    if declares_data_type(field.value_type):
        data_type = field.value_type.db_data_type(dialect) or ""

    resolved = field
    if not data_type:
        resolved = _unwrap_scanner(field)

    return ParsedField(
        kind=resolved.reflected_kind,
        value_type=resolved.value_type,
        sql_type=data_type,
        size=field.size,
        additional_type=_modifier_tail(field),
    )


def infer_sql_type(kind: FieldKind, value_type: Optional[type], size: int) -> str:
    if kind is FieldKind.BOOLEAN:
        return "CHAR(1)"
    if kind in _NUMBER_10_KINDS:
        return "NUMBER(10)"
    if kind in _NUMBER_19_KINDS:
        return "NUMBER(19)"
    if kind in _FLOAT_KINDS:
        return "FLOAT"
    if kind is FieldKind.TEXT:
        if 0 < size < MAX_VARCHAR2_SIZE:
            return f"VARCHAR2({size})"
        return f"VARCHAR2({DEFAULT_VARCHAR2_SIZE})"
    if kind is FieldKind.TIMESTAMP:
        return "TIMESTAMP"
    if kind is FieldKind.STRUCT:
        if isinstance(value_type, type) and issubclass(value_type, datetime):
            return "TIMESTAMP"
        return ""
    if kind is FieldKind.BINARY or is_byte_sequence(value_type):
        return "BLOB"
    return ""


def resolve_column_type(field: FieldDescription, dialect: Any = None) -> str:
    """
    Full Oracle column type for ``field``, modifiers included.

    Raises :class:`UnresolvableColumnTypeError` when the kind has no Oracle
    mapping.
    """
    parsed = parse_field(field, dialect)
    sql_type = parsed.sql_type.strip()
    if not sql_type:
        sql_type = infer_sql_type(parsed.kind, parsed.value_type, parsed.size)
    if not sql_type:
        type_name = parsed.value_type.__name__ if parsed.value_type is not None else field.name
        raise UnresolvableColumnTypeError(
            f"invalid sql type {type_name} ({parsed.kind.value}) for oracle"
        )
    if not parsed.additional_type:
        return sql_type
    return f"{sql_type} {parsed.additional_type}"
