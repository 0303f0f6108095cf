"""Domain models for location ledgers, customers, products and delivery entries."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional


def new_id() -> str:
    """Return a fresh opaque identifier."""
    return uuid.uuid4().hex


@dataclass(slots=True)
class HistoryItem:
    """Customer-owned projection of one delivery entry."""

    entry_id: Optional[str]
    date: date
    product: str
    qty: Decimal
    rate: Decimal
    amount: Decimal


@dataclass(slots=True)
class Customer:
    """A delivery customer with a running balance derived from its entries."""

    name: str
    phone: str = ""
    balance: Decimal = Decimal("0")
    history: list[HistoryItem] = field(default_factory=list)
    id: str = field(default_factory=new_id)


@dataclass(slots=True)
class Product:
    """A product sold at a location, priced per unit."""

    name: str
    rate: Decimal
    id: str = field(default_factory=new_id)


@dataclass(slots=True)
class Entry:
    """One delivery of a product to a customer.

    ``customer_name`` and ``product_name`` are snapshots taken when the entry was
    recorded; renaming the customer or product later does not touch them.
    """

    date: date
    customer_id: str
    customer_name: str
    product_id: str
    product_name: str
    qty: Decimal
    rate: Decimal
    amount: Decimal
    id: str = field(default_factory=new_id)


@dataclass(slots=True)
class Location:
    """An independent ledger scope."""

    customers: list[Customer] = field(default_factory=list)
    products: list[Product] = field(default_factory=list)
    entries: list[Entry] = field(default_factory=list)

    def find_customer(self, customer_id: str) -> Optional[Customer]:
        return next((c for c in self.customers if c.id == customer_id), None)

    def find_product(self, product_id: str) -> Optional[Product]:
        return next((p for p in self.products if p.id == product_id), None)

    def find_entry(self, entry_id: str) -> Optional[Entry]:
        return next((e for e in self.entries if e.id == entry_id), None)


@dataclass(slots=True)
class Store:
    """Every location ledger, keyed by location name."""

    locations: dict[str, Location] = field(default_factory=dict)

    def get_location(self, name: str) -> Optional[Location]:
        return self.locations.get(name)
