"""Process-level ledger book: the store, the location selection and persistence."""

from __future__ import annotations

import logging
import threading
from datetime import date
from typing import Any, Callable, Optional

from ..config import settings
from ..models.domain import Customer, Entry, Location, Product, Store
from ..persistence.filesystem import SnapshotStorage
from ..persistence.snapshot import snapshot_to_store, store_to_snapshot
from . import ledger, registry, reports

logger = logging.getLogger(__name__)


class DairyBook:
    """Entry point for collaborators.

    Every mutating call changes the in-memory store first and then saves a full
    snapshot. When the save raises ``StorageError`` the change is still applied
    in memory; ``flush()`` retries the save.

    The API serves requests from a thread pool, so each mutation and its save
    run under one lock, as do reads that walk the store.
    """

    def __init__(
        self,
        store: Store,
        storage: SnapshotStorage,
        *,
        selected: Optional[str] = None,
        clock: Callable[[], date] = date.today,
        reverse_balances_on_product_delete: Optional[bool] = None,
        search_limit: Optional[int] = None,
    ) -> None:
        self.store = store
        self.storage = storage
        self.clock = clock
        self.reverse_balances_on_product_delete = (
            settings.reverse_balances_on_product_delete
            if reverse_balances_on_product_delete is None
            else reverse_balances_on_product_delete
        )
        self.search_limit = settings.search_limit if search_limit is None else search_limit
        if selected is None or selected not in store.locations:
            selected = next(iter(store.locations), None)
        self.selected = selected
        self._lock = threading.RLock()

    @classmethod
    def open(
        cls,
        storage: SnapshotStorage,
        *,
        default_location: Optional[str] = None,
        **kwargs: Any,
    ) -> "DairyBook":
        """Load the store from ``storage``, seeding a default location when it is empty."""
        snapshot = storage.load()
        store = snapshot_to_store(snapshot) if snapshot is not None else Store()
        book = cls(store, storage, **kwargs)
        if not store.locations:
            name = registry.create_location(store, default_location or settings.default_location_name)
            book.selected = name
            logger.info("Seeded empty store with location '%s'", name)
            book.flush()
        return book

    def flush(self) -> None:
        with self._lock:
            self.storage.save(store_to_snapshot(self.store))

    def location(self, name: Optional[str] = None) -> Location:
        with self._lock:
            return registry.get_location(self.store, name if name is not None else self.selected)

    # Locations

    def list_locations(self) -> list[str]:
        with self._lock:
            return registry.list_locations(self.store)

    def create_location(self, name: str) -> str:
        with self._lock:
            self.selected = registry.create_location(self.store, name)
            self.flush()
            return self.selected

    def delete_location(self, name: str) -> Optional[str]:
        with self._lock:
            self.selected = registry.delete_location(self.store, name, self.selected)
            self.flush()
            return self.selected

    def select_location(self, name: str) -> str:
        with self._lock:
            self.selected = registry.select_location(self.store, name)
            return self.selected

    # Customers

    def list_customers(self, location: Optional[str] = None) -> list[Customer]:
        with self._lock:
            return list(self.location(location).customers)

    def get_customer(self, customer_id: str, location: Optional[str] = None) -> Customer:
        with self._lock:
            return registry.get_customer(self.location(location), customer_id)

    def add_customer(self, name: str, phone: Optional[str] = "", location: Optional[str] = None) -> Customer:
        with self._lock:
            customer = registry.add_customer(self.location(location), name, phone)
            self.flush()
            return customer

    def edit_customer(
        self,
        customer_id: str,
        name: str,
        phone: Optional[str] = "",
        location: Optional[str] = None,
    ) -> Customer:
        with self._lock:
            customer = registry.edit_customer(self.location(location), customer_id, name, phone)
            self.flush()
            return customer

    def delete_customer(self, customer_id: str, location: Optional[str] = None) -> Optional[Customer]:
        with self._lock:
            customer = registry.delete_customer(self.location(location), customer_id)
            self.flush()
            return customer

    # Products

    def list_products(self, location: Optional[str] = None) -> list[Product]:
        with self._lock:
            return list(self.location(location).products)

    def add_product(self, name: str, rate: Any, location: Optional[str] = None) -> Product:
        with self._lock:
            product = registry.add_product(self.location(location), name, rate)
            self.flush()
            return product

    def edit_product(self, product_id: str, name: str, rate: Any, location: Optional[str] = None) -> Product:
        with self._lock:
            product = registry.edit_product(self.location(location), product_id, name, rate)
            self.flush()
            return product

    def delete_product(self, product_id: str, location: Optional[str] = None) -> Optional[Product]:
        with self._lock:
            product = registry.delete_product(
                self.location(location),
                product_id,
                reverse_balances=self.reverse_balances_on_product_delete,
            )
            self.flush()
            return product

    # Entries

    def list_entries(self, location: Optional[str] = None) -> list[Entry]:
        with self._lock:
            return ledger.list_entries(self.location(location))

    def add_entry(
        self,
        customer_id: str,
        product_id: str,
        qty: Any,
        rate: Any = None,
        entry_date: Optional[date] = None,
        location: Optional[str] = None,
    ) -> Entry:
        with self._lock:
            entry = ledger.add_entry(
                self.location(location),
                customer_id,
                product_id,
                entry_date or self.clock(),
                qty,
                rate,
            )
            self.flush()
            return entry

    def delete_entry(self, entry_id: str, location: Optional[str] = None) -> Optional[Entry]:
        with self._lock:
            entry = ledger.delete_entry(self.location(location), entry_id)
            if entry is not None:
                self.flush()
            return entry

    # Reports

    def compute_dashboard(
        self,
        location: Optional[str] = None,
        reference_date: Optional[date] = None,
    ) -> reports.DashboardTotals:
        with self._lock:
            return reports.compute_dashboard(self.location(location), reference_date or self.clock())

    def compute_monthly_summary(self, year: int, month: int, location: Optional[str] = None) -> reports.MonthlySummary:
        with self._lock:
            return reports.compute_monthly_summary(self.location(location), year, month)

    def search(self, query: str) -> list[reports.SearchHit]:
        with self._lock:
            return reports.search(self.store, query, limit=self.search_limit)
