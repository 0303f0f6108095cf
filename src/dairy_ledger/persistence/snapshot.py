"""Conversion between the in-memory store and its snapshot document."""

from __future__ import annotations

from ..models.domain import Customer, Entry, HistoryItem, Location, Product, Store
from ..schemas.snapshot import (
    CustomerRecord,
    EntryRecord,
    HistoryRecord,
    LocationRecord,
    ProductRecord,
    StoreSnapshot,
)


def store_to_snapshot(store: Store) -> StoreSnapshot:
    return StoreSnapshot(
        locations={name: _location_to_record(location) for name, location in store.locations.items()}
    )


def snapshot_to_store(snapshot: StoreSnapshot) -> Store:
    return Store(
        locations={name: _location_from_record(record) for name, record in snapshot.locations.items()}
    )


def _location_to_record(location: Location) -> LocationRecord:
    return LocationRecord(
        customers=[
            CustomerRecord(
                id=customer.id,
                name=customer.name,
                phone=customer.phone,
                balance=customer.balance,
                history=[
                    HistoryRecord(
                        entry_id=item.entry_id,
                        date=item.date,
                        product=item.product,
                        qty=item.qty,
                        rate=item.rate,
                        amount=item.amount,
                    )
                    for item in customer.history
                ],
            )
            for customer in location.customers
        ],
        products=[ProductRecord(id=p.id, name=p.name, rate=p.rate) for p in location.products],
        entries=[
            EntryRecord(
                id=entry.id,
                date=entry.date,
                customer_id=entry.customer_id,
                customer_name=entry.customer_name,
                product_id=entry.product_id,
                product_name=entry.product_name,
                qty=entry.qty,
                rate=entry.rate,
                amount=entry.amount,
            )
            for entry in location.entries
        ],
    )


def _location_from_record(record: LocationRecord) -> Location:
    return Location(
        customers=[
            Customer(
                id=c.id,
                name=c.name,
                phone=c.phone,
                balance=c.balance,
                history=[
                    HistoryItem(
                        entry_id=h.entry_id,
                        date=h.date,
                        product=h.product,
                        qty=h.qty,
                        rate=h.rate,
                        amount=h.amount,
                    )
                    for h in c.history
                ],
            )
            for c in record.customers
        ],
        products=[Product(id=p.id, name=p.name, rate=p.rate) for p in record.products],
        entries=[
            Entry(
                id=e.id,
                date=e.date,
                customer_id=e.customer_id,
                customer_name=e.customer_name,
                product_id=e.product_id,
                product_name=e.product_name,
                qty=e.qty,
                rate=e.rate,
                amount=e.amount,
            )
            for e in record.entries
        ],
    )
