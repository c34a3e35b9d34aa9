"""
Render and apply the inventory schema with the Oracle dialect.
"""

from __future__ import annotations

from typing import List, Optional

from oradialect.adapters import ConnectionConfig, DatabaseAdapter, OracleAdapter
from oradialect.core import table_name_for
from oradialect.dialects import DialectRegistry
from oradialect.schema import SchemaBuilder, SchemaInspector
from oradialect.utils import get_logger

from .models import StockItem, Supplier

logger = get_logger("examples.inventory")


def render_schema(registry: Optional[DialectRegistry] = None) -> List[str]:
    """
    DDL for the inventory tables, indexes and constraints.
    """
    builder = SchemaBuilder.for_dialect("oracle", registry=registry)
    stock_table = table_name_for(StockItem)
    return [
        builder.create_model_sql(Supplier),
        builder.create_model_sql(StockItem),
        builder.create_index_sql(stock_table, ["supplier_id"]),
        builder.add_foreign_key_sql(stock_table, "supplier_id", table_name_for(Supplier), "id"),
    ]


def ensure_schema(adapter: DatabaseAdapter) -> List[str]:
    """
    Create whichever inventory tables are missing; returns the executed DDL.
    """
    builder = SchemaBuilder(adapter.dialect)
    inspector = SchemaInspector(adapter)
    executed: List[str] = []
    for model in (Supplier, StockItem):
        table = table_name_for(model)
        if inspector.has_table(table):
            logger.info("Table %s already exists; skipping", table)
            continue
        sql = builder.create_model_sql(model)
        adapter.execute(sql).close()
        executed.append(sql)
    return executed


def run_demo(dsn: Optional[str] = None) -> List[str]:
    """
    Print the inventory DDL, applying it when a DSN is given.
    """
    if dsn is None:
        statements = render_schema()
    else:
        adapter = OracleAdapter()
        adapter.connect(ConnectionConfig.from_dsn(dsn))
        try:
            statements = ensure_schema(adapter)
        finally:
            adapter.close()
    for statement in statements:
        print(f"{statement};")
    return statements


if __name__ == "__main__":  # pragma: no cover
    run_demo()
