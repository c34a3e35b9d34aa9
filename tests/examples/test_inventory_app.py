from examples.inventory_app import ensure_schema, render_schema, run_demo
from oradialect.dialects import OracleDialect


class FakeCursor:
    closed = False

    def close(self):
        self.closed = True


class FakeAdapter:
    def __init__(self, existing):
        self.dialect = OracleDialect()
        self.existing = {name.upper() for name in existing}
        self.executed = []
        self.cursors = []

    def fetch_value(self, sql, params=None):
        return 1 if params[0] in self.existing else 0

    def execute(self, sql, params=None):
        self.executed.append(sql)
        cursor = FakeCursor()
        self.cursors.append(cursor)
        return cursor


def test_render_schema():
    statements = render_schema()
    assert statements[0] == (
        'CREATE TABLE "SUPPLIERS" ("ID" NUMBER(10), "NAME" VARCHAR2(120) NOT NULL, '
        '"CONTACT_EMAIL" VARCHAR2(255), PRIMARY KEY ("ID"))'
    )
    assert statements[1] == (
        'CREATE TABLE "STOCK_ITEMS" ("ID" NUMBER(10), "SUPPLIER_ID" NUMBER(10), '
        '"SKU" VARCHAR2(32) NOT NULL UNIQUE, "QUANTITY" NUMBER(10) DEFAULT 0, '
        '"UNIT_PRICE" NUMBER(12,2), "DISCONTINUED" CHAR(1) DEFAULT \'0\', "NOTES" CLOB, '
        '"RECEIVED_AT" TIMESTAMP, PRIMARY KEY ("ID"))'
    )
    assert statements[2] == 'CREATE INDEX "IDX_STOCK_ITEMS_SUPPLIER_ID" ON "STOCK_ITEMS" ("SUPPLIER_ID")'
    assert statements[3].startswith('ALTER TABLE "STOCK_ITEMS" ADD CONSTRAINT "FK_STOCK_ITEMS_SUPPLIER_ID"')


def test_ensure_schema_skips_existing_tables():
    adapter = FakeAdapter(existing=["suppliers"])
    executed = ensure_schema(adapter)
    assert len(executed) == 1
    assert executed[0].startswith('CREATE TABLE "STOCK_ITEMS"')
    assert adapter.executed == executed
    assert all(cursor.closed for cursor in adapter.cursors)


def test_run_demo_prints_statements(capsys):
    statements = run_demo()
    out = capsys.readouterr().out
    assert len(statements) == 4
    assert out.count(";\n") == 4
