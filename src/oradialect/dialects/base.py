"""
Dialect strategy interfaces describing database-specific SQL behaviours.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence

from ..core.fields import FieldDescription


class DialectError(RuntimeError):
    """Base error for dialect failures."""


class UnresolvableColumnTypeError(DialectError):
    """
    Raised when no column type can be inferred for a field.

    This is a schema-definition error; callers should not recover from it.
    """


CatalogQuery = tuple[str, Sequence[Any]]


class Dialect(Protocol):
    """
    Strategy interface consumed by the schema builder, inspector and adapters.
    """

    @property
    def name(self) -> str: ...

    @property
    def param_style(self) -> str: ...

    @property
    def max_identifier_length(self) -> int: ...

    def quote_identifier(self, identifier: str) -> str: ...

    def format_table(self, table_name: str) -> str: ...

    def limit_clause(self, limit: Any, offset: Any) -> str: ...

    def parameter_placeholder(self, position: int | None = None) -> str: ...

    def select_from_dummy_table(self) -> str: ...

    def render_column_definition(self, column: str, column_type: str, *, nullable: bool) -> str: ...

    def data_type_of(self, field: FieldDescription) -> str: ...

    def build_key_name(self, kind: str, table_name: str, *fields: str) -> str: ...

    def has_table_query(self, table_name: str) -> CatalogQuery: ...

    def has_column_query(self, table_name: str, column_name: str) -> CatalogQuery: ...

    def has_index_query(self, table_name: str, index_name: str) -> CatalogQuery: ...

    def has_foreign_key_query(self, table_name: str, foreign_key_name: str) -> CatalogQuery: ...
