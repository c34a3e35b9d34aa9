"""
oradialect public package initialization.

Maps field descriptions onto Oracle column types, index/constraint names and
catalog queries for an object-relational mapping layer.
"""

from .adapters import ConnectionConfig, OracleAdapter  # noqa: F401
from .core.fields import FieldDescription, FieldKind, TagSettings, describe_fields  # noqa: F401
from .dialects import (  # noqa: F401
    DialectError,
    DialectRegistry,
    OracleDialect,
    UnresolvableColumnTypeError,
)
from .schema import SchemaBuilder, SchemaInspector  # noqa: F401

__all__ = [
    "ConnectionConfig",
    "DialectError",
    "DialectRegistry",
    "FieldDescription",
    "FieldKind",
    "OracleAdapter",
    "OracleDialect",
    "SchemaBuilder",
    "SchemaInspector",
    "TagSettings",
    "UnresolvableColumnTypeError",
    "describe_fields",
]
