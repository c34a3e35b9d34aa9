"""
Data models for the oradialect inventory example.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from oradialect.core import FieldKind


@dataclass
class NullString:
    """Nullable string that decodes database values itself."""

    value: str = ""
    valid: bool = False

    def scan(self, raw: object) -> None:
        self.valid = raw is not None
        self.value = "" if raw is None else str(raw)


class Money(Decimal):
    @classmethod
    def db_data_type(cls, dialect) -> str:
        return "NUMBER(12,2)"


@dataclass
class Supplier:
    __tablename__ = "suppliers"

    id: int = field(metadata={"primary_key": True})
    name: str = field(default="", metadata={"tags": {"SIZE": "120", "NOT NULL": "NOT NULL"}})
    contact_email: NullString = field(default_factory=NullString, metadata={"tags": {"SIZE": "255"}})


@dataclass
class StockItem:
    __tablename__ = "stock_items"

    id: int = field(metadata={"primary_key": True})
    supplier_id: int = 0
    sku: str = field(default="", metadata={"tags": {"SIZE": "32", "NOT NULL": "NOT NULL", "UNIQUE": "UNIQUE"}})
    quantity: int = field(default=0, metadata={"kind": FieldKind.INT32, "tags": {"DEFAULT": "0"}})
    unit_price: Money = field(default=Money("0"))
    discontinued: bool = field(default=False, metadata={"tags": {"DEFAULT": "'0'"}})
    notes: str = field(default="", metadata={"tags": {"TYPE": "CLOB"}})
    received_at: Optional[datetime] = None
