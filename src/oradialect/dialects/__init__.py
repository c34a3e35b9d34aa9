"""
Dialect strategies and the registry that names them.
"""

from .base import Dialect, DialectError, UnresolvableColumnTypeError
from .oracle import OracleDialect
from .oracle_types import ParsedField, normalize_explicit_type, parse_field, resolve_column_type
from .registry import DialectRegistry

__all__ = [
    "Dialect",
    "DialectError",
    "DialectRegistry",
    "OracleDialect",
    "ParsedField",
    "UnresolvableColumnTypeError",
    "normalize_explicit_type",
    "parse_field",
    "resolve_column_type",
]
