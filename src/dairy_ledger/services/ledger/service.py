"""Entry lifecycle and the balance/history invariant."""

from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

from ...exceptions import NotFoundError, ValidationError
from ...models.domain import Customer, Entry, HistoryItem, Location
from ..money import compute_amount, parse_quantity, parse_rate

logger = logging.getLogger(__name__)


def add_entry(
    location: Location,
    customer_id: str,
    product_id: str,
    entry_date: date,
    qty: Any,
    rate: Any = None,
) -> Entry:
    """Record a delivery and post it to the customer's balance and history.

    ``rate`` defaults to the product's configured rate. Every input is checked
    before the location is touched, so a failure leaves it unchanged.
    """
    if isinstance(entry_date, datetime):
        entry_date = entry_date.date()
    if not isinstance(entry_date, date):
        raise ValidationError("date must be a calendar date", code="invalid_date")
    quantity = parse_quantity(qty)

    customer = location.find_customer(customer_id)
    if customer is None:
        raise NotFoundError(f"Customer '{customer_id}' not found", code="customer_not_found")
    product = location.find_product(product_id)
    if product is None:
        raise NotFoundError(f"Product '{product_id}' not found", code="product_not_found")

    unit_rate = parse_rate(product.rate if rate is None else rate)
    amount = compute_amount(quantity, unit_rate)

    entry = Entry(
        date=entry_date,
        customer_id=customer.id,
        customer_name=customer.name,
        product_id=product.id,
        product_name=product.name,
        qty=quantity,
        rate=unit_rate,
        amount=amount,
    )
    location.entries.append(entry)
    customer.balance += amount
    customer.history.append(
        HistoryItem(
            entry_id=entry.id,
            date=entry.date,
            product=product.name,
            qty=quantity,
            rate=unit_rate,
            amount=amount,
        )
    )
    logger.info(
        "Added entry %s for customer %s: %s x %s = %s",
        entry.id,
        customer.id,
        quantity,
        unit_rate,
        amount,
    )
    return entry


def delete_entry(location: Location, entry_id: str) -> Optional[Entry]:
    """Remove an entry and reverse it from its customer. Unknown ids are ignored."""
    entry = location.find_entry(entry_id)
    if entry is None:
        return None

    customer = location.find_customer(entry.customer_id)
    if customer is not None:
        reverse_entry(customer, entry)
    location.entries = [e for e in location.entries if e.id != entry.id]
    logger.info("Deleted entry %s (amount %s)", entry.id, entry.amount)
    return entry


def reverse_entry(customer: Customer, entry: Entry) -> None:
    """Take ``entry`` back out of the customer's balance and history."""
    customer.balance -= entry.amount
    index = _history_index(customer, entry)
    if index is not None:
        del customer.history[index]


def _history_index(customer: Customer, entry: Entry) -> Optional[int]:
    for index, item in enumerate(customer.history):
        if item.entry_id == entry.id:
            return index
    # History loaded from snapshots that predate entry ids is matched by value.
    for index, item in enumerate(customer.history):
        if (
            item.entry_id is None
            and item.date == entry.date
            and item.qty == entry.qty
            and item.amount == entry.amount
        ):
            logger.warning("Matched history for entry %s by value; no linked history item", entry.id)
            return index
    return None


def list_entries(location: Location) -> list[Entry]:
    """Entries newest first (reverse insertion order)."""
    return list(reversed(location.entries))


def balance_drift(location: Location) -> dict[str, Decimal]:
    """Customers whose balance differs from the sum of their entries, with the difference."""
    posted: dict[str, Decimal] = {customer.id: Decimal("0") for customer in location.customers}
    for entry in location.entries:
        if entry.customer_id in posted:
            posted[entry.customer_id] += entry.amount
    drift: dict[str, Decimal] = {}
    for customer in location.customers:
        difference = customer.balance - posted[customer.id]
        if difference:
            drift[customer.id] = difference
    return drift
