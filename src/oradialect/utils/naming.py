"""
Naming utilities shared by dialects and the schema builder.
"""

import re


_FIRST_CAP_RE = re.compile("(.)([A-Z][a-z]+)")
_ALL_CAP_RE = re.compile("([a-z0-9])([A-Z])")
_KEY_NAME_RE = re.compile("[^a-zA-Z0-9]+")


def camel_to_snake(name: str) -> str:
    """
    Convert ``CamelCase`` names to ``snake_case`` for table naming.
    """
    step1 = _FIRST_CAP_RE.sub(r"\1_\2", name)
    return _ALL_CAP_RE.sub(r"\1_\2", step1).lower()


def build_key_name(kind: str, table_name: str, *fields: str) -> str:
    """
    Database-agnostic name for an index or constraint.

    ``build_key_name("idx", "orders", "customer_id")`` gives
    ``idx_orders_customer_id``. Every run of characters outside
    ``[a-zA-Z0-9]`` collapses to a single underscore.
    """
    key_name = f"{kind}_{table_name}_{'_'.join(fields)}"
    return _KEY_NAME_RE.sub("_", key_name)
