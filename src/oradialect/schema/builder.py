"""
Schema builder converting field descriptions into DDL statements.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from ..core.fields import FieldDescription, describe_fields, table_name_for
from ..dialects.base import Dialect
from ..dialects.registry import DialectRegistry
from ..utils import get_logger


class SchemaBuilder:
    """
    Produces dialect-specific SQL for schema manipulation.

    Column types come from ``dialect.data_type_of`` and index/constraint
    names from ``dialect.build_key_name``.
    """

    def __init__(self, dialect: Dialect) -> None:
        self.dialect = dialect
        self.logger = get_logger("schema.builder")

    @classmethod
    def for_dialect(cls, name: str, registry: Optional[DialectRegistry] = None) -> "SchemaBuilder":
        registry = registry or DialectRegistry.default()
        return cls(registry.get(name))

    def create_table_sql(self, table_name: str, fields: Iterable[FieldDescription]) -> str:
        fields = list(fields)
        if not fields:
            raise ValueError(f"Table '{table_name}' needs at least one column.")
        pieces = self._render_columns(fields)
        primary_keys = [self.dialect.quote_identifier(field.name) for field in fields if field.primary_key]
        if primary_keys:
            pieces.append(f"PRIMARY KEY ({', '.join(primary_keys)})")
        table = self.dialect.format_table(table_name)
        return f"CREATE TABLE {table} ({', '.join(pieces)})"

    def create_model_sql(self, model: type) -> str:
        return self.create_table_sql(table_name_for(model), describe_fields(model))

    def create_index_sql(
        self, table_name: str, columns: Sequence[str], *, unique: bool = False
    ) -> str:
        if not columns:
            raise ValueError("An index needs at least one column.")
        kind = "uix" if unique else "idx"
        index_name = self.dialect.build_key_name(kind, table_name, *columns)
        column_list = ", ".join(self.dialect.quote_identifier(column) for column in columns)
        prefix = "CREATE UNIQUE INDEX" if unique else "CREATE INDEX"
        return (
            f"{prefix} {self.dialect.quote_identifier(index_name)} "
            f"ON {self.dialect.format_table(table_name)} ({column_list})"
        )

    def add_foreign_key_sql(
        self,
        table_name: str,
        column: str,
        referenced_table: str,
        referenced_column: str,
        *,
        on_delete: str | None = None,
    ) -> str:
        constraint = self.dialect.build_key_name("fk", table_name, column)
        sql = (
            f"ALTER TABLE {self.dialect.format_table(table_name)} "
            f"ADD CONSTRAINT {self.dialect.quote_identifier(constraint)} "
            f"FOREIGN KEY ({self.dialect.quote_identifier(column)}) "
            f"REFERENCES {self.dialect.format_table(referenced_table)} "
            f"({self.dialect.quote_identifier(referenced_column)})"
        )
        if on_delete:
            sql += f" ON DELETE {on_delete.upper()}"
        return sql

    def drop_table_sql(self, table_name: str) -> str:
        table = self.dialect.format_table(table_name)
        self.logger.warning(
            "DROP TABLE generated for %s; confirm destructive migration before applying.",
            table,
        )
        return f"DROP TABLE {table}"

    def _render_columns(self, fields: Iterable[FieldDescription]) -> List[str]:
        pieces: List[str] = []
        for field in fields:
            column_type = self.dialect.data_type_of(field)
            self.logger.debug("Column %s resolved to %s", field.name, column_type)
            pieces.append(
                self.dialect.render_column_definition(field.name, column_type, nullable=True)
            )
        return pieces
