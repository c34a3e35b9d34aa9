"""
Field descriptions and capability queries shared by dialects.
"""

from .fields import (
    FieldDescription,
    FieldError,
    FieldKind,
    TagSettings,
    declares_data_type,
    describe_fields,
    first_member,
    is_byte_sequence,
    is_scanner,
    is_struct,
    reflect_kind,
    table_name_for,
)

__all__ = [
    "FieldDescription",
    "FieldError",
    "FieldKind",
    "TagSettings",
    "declares_data_type",
    "describe_fields",
    "first_member",
    "is_byte_sequence",
    "is_scanner",
    "is_struct",
    "reflect_kind",
    "table_name_for",
]
