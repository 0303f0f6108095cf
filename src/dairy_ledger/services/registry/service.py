"""Location, customer and product lifecycle, including cascading deletes."""

from __future__ import annotations

import logging
from typing import Any, Optional

from ...exceptions import ConflictError, NotFoundError, ValidationError
from ...models.domain import Customer, Location, Product, Store
from ..ledger import reverse_entry
from ..money import parse_rate

logger = logging.getLogger(__name__)


def _require_name(name: Optional[str], label: str) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError(f"{label} name is required", code="name_required")
    return cleaned


def _clean_phone(phone: Optional[str]) -> str:
    return (phone or "").strip()


# Locations


def list_locations(store: Store) -> list[str]:
    return list(store.locations)


def create_location(store: Store, name: str) -> str:
    """Add an empty location and return its name, the new selection."""
    location_name = _require_name(name, "Location")
    if location_name in store.locations:
        raise ConflictError(f"Location '{location_name}' already exists", code="location_exists")
    store.locations[location_name] = Location()
    logger.info("Created location '%s'", location_name)
    return location_name


def delete_location(store: Store, name: str, selected: Optional[str] = None) -> Optional[str]:
    """Drop a location with all of its data and return the resulting selection."""
    if store.locations.pop(name, None) is not None:
        logger.info("Deleted location '%s'", name)
    if selected is not None and selected != name and selected in store.locations:
        return selected
    return next(iter(store.locations), None)


def select_location(store: Store, name: str) -> str:
    if name not in store.locations:
        raise NotFoundError(f"Location '{name}' not found", code="location_not_found")
    return name


def get_location(store: Store, name: Optional[str]) -> Location:
    if name is None:
        raise ValidationError("Select a location first", code="no_location")
    location = store.get_location(name)
    if location is None:
        raise NotFoundError(f"Location '{name}' not found", code="location_not_found")
    return location


# Customers


def add_customer(location: Location, name: str, phone: Optional[str] = "") -> Customer:
    customer = Customer(name=_require_name(name, "Customer"), phone=_clean_phone(phone))
    location.customers.append(customer)
    logger.info("Added customer %s (%s)", customer.id, customer.name)
    return customer


def get_customer(location: Location, customer_id: str) -> Customer:
    customer = location.find_customer(customer_id)
    if customer is None:
        raise NotFoundError(f"Customer '{customer_id}' not found", code="customer_not_found")
    return customer


def edit_customer(location: Location, customer_id: str, name: str, phone: Optional[str] = "") -> Customer:
    """Rename a customer. Balance, history and entry name snapshots are left as they are."""
    customer = get_customer(location, customer_id)
    customer.name = _require_name(name, "Customer")
    customer.phone = _clean_phone(phone)
    logger.info("Edited customer %s", customer.id)
    return customer


def delete_customer(location: Location, customer_id: str) -> Optional[Customer]:
    """Remove a customer together with every entry recorded against it."""
    customer = location.find_customer(customer_id)
    location.customers = [c for c in location.customers if c.id != customer_id]
    before = len(location.entries)
    location.entries = [e for e in location.entries if e.customer_id != customer_id]
    if customer is not None:
        logger.info(
            "Deleted customer %s and %d entries",
            customer_id,
            before - len(location.entries),
        )
    return customer


# Products


def add_product(location: Location, name: str, rate: Any) -> Product:
    product_name = _require_name(name, "Product")
    product = Product(name=product_name, rate=parse_rate(rate))
    location.products.append(product)
    logger.info("Added product %s (%s @ %s)", product.id, product.name, product.rate)
    return product


def get_product(location: Location, product_id: str) -> Product:
    product = location.find_product(product_id)
    if product is None:
        raise NotFoundError(f"Product '{product_id}' not found", code="product_not_found")
    return product


def edit_product(location: Location, product_id: str, name: str, rate: Any) -> Product:
    """Update a product's name and rate. Existing entries keep the values they were recorded with."""
    product = get_product(location, product_id)
    product_name = _require_name(name, "Product")
    product_rate = parse_rate(rate)
    product.name = product_name
    product.rate = product_rate
    logger.info("Edited product %s", product.id)
    return product


def delete_product(location: Location, product_id: str, *, reverse_balances: bool = True) -> Optional[Product]:
    """Remove a product together with every entry referencing it.

    With ``reverse_balances`` each removed entry is also taken out of its
    customer's balance and history. Without it the customers keep the
    amounts of entries that no longer exist.
    """
    product = location.find_product(product_id)
    location.products = [p for p in location.products if p.id != product_id]

    removed = [e for e in location.entries if e.product_id == product_id]
    if reverse_balances:
        for entry in removed:
            customer = location.find_customer(entry.customer_id)
            if customer is not None:
                reverse_entry(customer, entry)
    elif removed:
        logger.warning(
            "Deleted %d entries for product %s without reversing customer balances",
            len(removed),
            product_id,
        )
    location.entries = [e for e in location.entries if e.product_id != product_id]
    if product is not None:
        logger.info("Deleted product %s and %d entries", product_id, len(removed))
    return product
