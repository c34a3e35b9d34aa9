import hashlib

import pytest

from oradialect.dialects import OracleDialect
from oradialect.utils.naming import build_key_name

dialect = OracleDialect()


def sha1_hex(value: str) -> str:
    return hashlib.sha1(value.encode("utf-8")).hexdigest()


def test_short_names_are_returned_unchanged():
    assert dialect.build_key_name("idx", "users", "name") == "idx_users_name"
    assert dialect.build_key_name("uix", "users", "first", "last") == "uix_users_first_last"


def test_name_at_the_limit_is_unchanged():
    candidate = build_key_name("idx", "abcdefghij", "abcdefghijklmno")
    assert len(candidate) == 30
    assert dialect.build_key_name("idx", "abcdefghij", "abcdefghijklmno") == candidate


def test_long_name_is_prefix_plus_digest_cut_to_29():
    candidate = "idx_very_long_table_name_for_orders_id"
    assert len(candidate) > 30
    result = dialect.build_key_name("idx", "very_long_table_name_for_orders", "id")
    assert result == ("id" + sha1_hex(candidate))[:29]
    assert len(result) == 29


def test_long_name_from_long_field_keeps_field_prefix():
    candidate = build_key_name("idx", "orders", "customer_identifier_reference_code")
    assert len(candidate) == 45
    result = dialect.build_key_name("idx", "orders", "customer_identifier_reference_code")
    assert len(result) <= 30
    assert result.startswith("customer_")
    assert result == "customer_identifier_reference"


def test_first_field_is_sanitised():
    fields = ("2nd__field-name", "other")
    candidate = build_key_name("fk", "shipment_allocations", *fields)
    result = dialect.build_key_name("fk", "shipment_allocations", *fields)
    assert result == ("_nd_field_name" + sha1_hex(candidate))[:29]


def test_digest_tells_similar_long_names_apart():
    first = dialect.build_key_name("idx", "warehouse_inventory_snapshots", "code")
    second = dialect.build_key_name("idx", "warehouse_inventory_snapshotz", "code")
    assert first.startswith("code")
    assert second.startswith("code")
    assert first != second


def test_naming_is_deterministic():
    args = ("fk", "purchase_order_line_items", "purchase_order_id")
    assert dialect.build_key_name(*args) == dialect.build_key_name(*args)
    assert dialect.build_key_name(*args) == OracleDialect().build_key_name(*args)


@pytest.mark.parametrize(
    "table, fields",
    [
        ("t", ("a" * 60,)),
        ("x" * 80, ("id",)),
        ("orders", ("customer_id", "created_at", "status", "region")),
        ("orders", ("___",)),
    ],
)
def test_shortened_names_fit_identifier_limit(table, fields):
    assert len(dialect.build_key_name("idx", table, *fields)) <= 30


def test_generic_key_name_collapses_separators():
    assert build_key_name("idx", "my-table", "a b") == "idx_my_table_a_b"
    assert build_key_name("idx", "app.users", "email__address") == "idx_app_users_email_address"
