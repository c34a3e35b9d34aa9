"""
Oracle dialect implementation.
"""

from __future__ import annotations

import hashlib
import re
from typing import Any, Final, Optional

from ..core.fields import FieldDescription
from ..utils import get_logger
from ..utils.naming import build_key_name as generic_key_name
from .base import CatalogQuery, DialectError
from .oracle_types import resolve_column_type

_KEY_PREFIX_RE = re.compile("(_*[^a-zA-Z]+_*|_+)")
_LEGACY_OCTAL_RE = re.compile(r"([+-]?)0([0-7_]+)")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

HAS_TABLE_SQL = "SELECT COUNT(*) FROM USER_TABLES WHERE TABLE_NAME = :1"
HAS_COLUMN_SQL = "SELECT COUNT(*) FROM USER_TAB_COLUMNS WHERE TABLE_NAME = :1 AND COLUMN_NAME = :2"
HAS_INDEX_SQL = "SELECT COUNT(*) FROM USER_INDEXES WHERE TABLE_NAME = :1 AND INDEX_NAME = :2"
HAS_FOREIGN_KEY_SQL = (
    "SELECT COUNT(*) FROM USER_CONSTRAINTS "
    "WHERE CONSTRAINT_TYPE = 'R' AND TABLE_NAME = :1 AND CONSTRAINT_NAME = :2"
)


def _parse_limit(limit: Any) -> Optional[int]:
    """
    Integer literal with an optional ``0x``, ``0o`` or ``0b`` prefix, where a
    bare leading ``0`` also means octal. Surrounding whitespace and values
    outside the signed 64-bit range are rejected.
    """
    text = str(limit)
    if not text.isascii() or text != text.strip():
        return None
    match = _LEGACY_OCTAL_RE.fullmatch(text)
    if match:
        text = f"{match.group(1)}0o{match.group(2)}"
    try:
        value = int(text, 0)
    except ValueError:
        return None
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


class OracleDialect:
    """
    Oracle dialect using numeric (``:1``) bind variables.

    Targets servers without ``OFFSET ... FETCH`` support, so pagination is
    limited to a ``ROWNUM`` filter.
    """

    name: Final[str] = "oracle"
    param_style: Final[str] = "numeric"
    max_identifier_length: Final[int] = 30

    def __init__(self) -> None:
        self.logger = get_logger("dialects.oracle")

    # Identifiers ---------------------------------------------------------
    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.upper().replace('"', '""')
        return f'"{escaped}"'

    def format_table(self, table_name: str) -> str:
        if "." in table_name:
            schema, table = table_name.split(".", 1)
            return f"{self.quote_identifier(schema)}.{self.quote_identifier(table)}"
        return self.quote_identifier(table_name)

    def build_key_name(self, kind: str, table_name: str, *fields: str) -> str:
        """
        Index/constraint name that fits Oracle's 30 character limit.

        Short names are the generic ``kind_table_fields`` form. Longer ones
        become the sanitised first field followed by the SHA-1 of the full
        name, cut to 29 characters.
        """
        key_name = generic_key_name(kind, table_name, *fields)
        if len(key_name) <= self.max_identifier_length:
            return key_name

        digest = hashlib.sha1(key_name.encode("utf-8")).hexdigest()
        prefix = _KEY_PREFIX_RE.sub("_", fields[0]) if fields else ""
        result = f"{prefix}{digest}"
        if len(result) <= self.max_identifier_length:
            return result
        # TODO: keep the digest suffix once existing schemas can be renamed
        shortened = result[: self.max_identifier_length - 1]
        self.logger.debug("Shortened key name %s to %s", key_name, shortened)
        return shortened

    # Statements ----------------------------------------------------------
    def select_from_dummy_table(self) -> str:
        return "FROM dual"

    def parameter_placeholder(self, position: int | None = None) -> str:
        if position is None or position < 1:
            raise DialectError("Oracle bind variables need a 1-based position.")
        return f":{position}"

    def limit_clause(self, limit: Any, offset: Any) -> str:
        # offset is ignored until OFFSET ... FETCH NEXT (12c) is targeted
        if limit is None:
            return ""
        parsed_limit = _parse_limit(limit)
        if parsed_limit is None or parsed_limit < 0:
            return ""
        return f"ROWNUM <= {parsed_limit}"

    def render_column_definition(self, column: str, column_type: str, *, nullable: bool) -> str:
        null_clause = "" if nullable else " NOT NULL"
        return f"{self.quote_identifier(column)} {column_type}{null_clause}"

    # Types ---------------------------------------------------------------
    def data_type_of(self, field: FieldDescription) -> str:
        return resolve_column_type(field, self)

    # Catalog -------------------------------------------------------------
    def has_table_query(self, table_name: str) -> CatalogQuery:
        return HAS_TABLE_SQL, (table_name.upper(),)

    def has_column_query(self, table_name: str, column_name: str) -> CatalogQuery:
        return HAS_COLUMN_SQL, (table_name.upper(), column_name.upper())

    def has_index_query(self, table_name: str, index_name: str) -> CatalogQuery:
        return HAS_INDEX_SQL, (table_name.upper(), index_name.upper())

    def has_foreign_key_query(self, table_name: str, foreign_key_name: str) -> CatalogQuery:
        return HAS_FOREIGN_KEY_SQL, (table_name.upper(), foreign_key_name.upper())
