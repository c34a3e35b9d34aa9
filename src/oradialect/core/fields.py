"""
Field descriptions consumed by dialects.

A :class:`FieldDescription` is what the mapping layer hands to a dialect for
each column: the reflected kind of the value, the Python type backing it (for
capability checks) and the already-parsed tag settings.
"""

from __future__ import annotations

import dataclasses
import enum
import types
import typing
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Iterator, Optional, Union

from ..utils import camel_to_snake


class FieldError(Exception):
    """Raised when a field description cannot be built."""


class FieldKind(str, enum.Enum):
    BOOLEAN = "boolean"
    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    UINTPTR = "uintptr"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    TEXT = "text"
    TIMESTAMP = "timestamp"
    BINARY = "binary"
    STRUCT = "struct"
    CUSTOM = "custom"


BYTE_SEQUENCE_TYPES: tuple[type, ...] = (bytes, bytearray, memoryview)


class TagSettings(Mapping):
    """
    Read-only, case-insensitive view over parsed tag settings.

    ``"SIZE" in tags`` answers presence; ``tags.get("SIZE")`` the value.
    """

    __slots__ = ("_settings",)

    def __init__(self, settings: Optional[Mapping[str, Any]] = None) -> None:
        self._settings: dict[str, str] = {
            str(key).strip().upper(): "" if value is None else str(value)
            for key, value in (settings or {}).items()
        }

    def __getitem__(self, key: str) -> str:
        return self._settings[key.upper()]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.upper() in self._settings

    def __iter__(self) -> Iterator[str]:
        return iter(self._settings)

    def __len__(self) -> int:
        return len(self._settings)

    def __hash__(self) -> int:
        return hash(frozenset(self._settings.items()))

    def __repr__(self) -> str:
        return f"TagSettings({self._settings!r})"


@dataclasses.dataclass(frozen=True)
class FieldDescription:
    """
    Immutable description of one mapped field.

    ``kind`` is the declared kind; when omitted it is reflected from
    ``value_type``.
    """

    name: str
    kind: Optional[FieldKind] = None
    value_type: Optional[type] = None
    tag_settings: TagSettings = dataclasses.field(default_factory=TagSettings)
    primary_key: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.tag_settings, TagSettings):
            object.__setattr__(self, "tag_settings", TagSettings(self.tag_settings))
        if self.value_type is not None:
            object.__setattr__(self, "value_type", unwrap_optional(self.value_type))
        if self.kind is None and self.value_type is None:
            raise FieldError(f"Field '{self.name}' needs a kind or a value type.")
        if self.kind is not None and not isinstance(self.kind, FieldKind):
            object.__setattr__(self, "kind", FieldKind(self.kind))

    @property
    def reflected_kind(self) -> FieldKind:
        if self.kind is not None:
            return self.kind
        return reflect_kind(self.value_type)

    @property
    def explicit_type(self) -> str:
        return self.tag_settings.get("TYPE", "")

    @property
    def size(self) -> int:
        if "SIZE" not in self.tag_settings:
            return 255
        try:
            return int(self.tag_settings["SIZE"])
        except ValueError:
            return 0

    @property
    def not_null(self) -> str:
        return self.tag_settings.get("NOT NULL", "")

    @property
    def unique(self) -> str:
        return self.tag_settings.get("UNIQUE", "")

    @property
    def default_value(self) -> str:
        return self.tag_settings.get("DEFAULT", "")

    @property
    def comment(self) -> str:
        return self.tag_settings.get("COMMENT", "")


def unwrap_optional(python_type: Any) -> Any:
    """
    ``Optional[X]`` -> ``X``; other types are returned unchanged.
    """
    origin = typing.get_origin(python_type)
    if origin is Union or origin is getattr(types, "UnionType", None):
        members = [arg for arg in typing.get_args(python_type) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return python_type


def reflect_kind(python_type: Any) -> FieldKind:
    python_type = unwrap_optional(python_type)
    if not isinstance(python_type, type):
        return FieldKind.CUSTOM
    # bool is a subclass of int
    if issubclass(python_type, bool):
        return FieldKind.BOOLEAN
    if issubclass(python_type, int):
        return FieldKind.INT
    if issubclass(python_type, float):
        return FieldKind.FLOAT64
    if issubclass(python_type, str):
        return FieldKind.TEXT
    if issubclass(python_type, datetime):
        return FieldKind.TIMESTAMP
    if is_byte_sequence(python_type):
        return FieldKind.BINARY
    if is_struct(python_type):
        return FieldKind.STRUCT
    return FieldKind.CUSTOM


# Capability queries --------------------------------------------------------
def declares_data_type(value_type: Any) -> bool:
    """True when the type supplies its own column type via ``db_data_type(dialect)``."""
    return value_type is not None and callable(getattr(value_type, "db_data_type", None))


def is_scanner(value_type: Any) -> bool:
    """True when the type decodes database values itself via ``scan(value)``."""
    return value_type is not None and callable(getattr(value_type, "scan", None))


def is_struct(value_type: Any) -> bool:
    return isinstance(value_type, type) and dataclasses.is_dataclass(value_type)


def is_byte_sequence(value_type: Any) -> bool:
    return isinstance(value_type, type) and issubclass(value_type, BYTE_SEQUENCE_TYPES)


def _describe_dataclass_field(field: dataclasses.Field, hints: Mapping[str, Any]) -> FieldDescription:
    value_type = unwrap_optional(hints.get(field.name, field.type))
    if typing.get_origin(value_type) is not None or not isinstance(value_type, type):
        value_type = None
    kind = field.metadata.get("kind")
    if kind is None and value_type is None:
        kind = FieldKind.CUSTOM
    return FieldDescription(
        name=field.name,
        kind=kind,
        value_type=value_type,
        tag_settings=TagSettings(field.metadata.get("tags")),
        primary_key=bool(field.metadata.get("primary_key", False)),
    )


def first_member(value_type: type) -> Optional[FieldDescription]:
    """
    Description of the first declared member of a dataclass, or ``None``.
    """
    members = dataclasses.fields(value_type)
    if not members:
        return None
    return _describe_dataclass_field(members[0], typing.get_type_hints(value_type))


def describe_fields(cls: type) -> list[FieldDescription]:
    """
    Field descriptions for every field of a dataclass model, in declaration order.

    Per-field settings come from ``dataclasses.field(metadata=...)``:
    ``tags`` (parsed tag settings), ``kind`` (a :class:`FieldKind` pinning the
    width) and ``primary_key``.
    """
    if not is_struct(cls):
        raise FieldError(f"{cls!r} is not a dataclass model.")
    hints = typing.get_type_hints(cls)
    return [_describe_dataclass_field(field, hints) for field in dataclasses.fields(cls)]


def table_name_for(cls: type) -> str:
    explicit = getattr(cls, "__tablename__", None)
    if explicit:
        return explicit
    return camel_to_snake(cls.__name__)
