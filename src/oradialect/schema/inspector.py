"""
Catalog existence checks run through an adapter.
"""

from __future__ import annotations

from typing import Any, Sequence

from ..adapters.base import AdapterError, DatabaseAdapter
from ..dialects.base import Dialect
from ..utils import get_logger


class SchemaInspector:
    """
    Answers "does this table/column/index/foreign key exist?".

    Each check runs one ``COUNT(*)`` catalog query. A failed query counts as
    zero, so a failure reads the same as "does not exist".
    """

    def __init__(self, adapter: DatabaseAdapter, dialect: Dialect | None = None) -> None:
        self.adapter = adapter
        self.dialect = dialect or adapter.dialect
        self.logger = get_logger("schema.inspector")

    def has_table(self, table_name: str) -> bool:
        return self._count(*self.dialect.has_table_query(table_name)) > 0

    def has_column(self, table_name: str, column_name: str) -> bool:
        return self._count(*self.dialect.has_column_query(table_name, column_name)) > 0

    def has_index(self, table_name: str, index_name: str) -> bool:
        return self._count(*self.dialect.has_index_query(table_name, index_name)) > 0

    def has_foreign_key(self, table_name: str, foreign_key_name: str) -> bool:
        return self._count(*self.dialect.has_foreign_key_query(table_name, foreign_key_name)) > 0

    def _count(self, sql: str, params: Sequence[Any]) -> int:
        try:
            value = self.adapter.fetch_value(sql, params)
        except AdapterError as exc:
            self.logger.warning("Catalog query failed, treating as missing: %s", exc)
            return 0
        if value is None:
            return 0
        try:
            return int(value)
        except (TypeError, ValueError):
            self.logger.warning("Unexpected catalog count %r, treating as missing", value)
            return 0
