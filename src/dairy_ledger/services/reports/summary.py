"""Read-only ledger aggregations: dashboard, monthly summary and search."""

from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Iterable, Literal

from ...exceptions import ValidationError
from ...models.domain import Entry, Location, Store
from ..money import round_money

DEFAULT_SEARCH_LIMIT = 50


@dataclass(slots=True)
class DashboardTotals:
    month: int
    year: int
    total_qty: Decimal
    total_amount: Decimal
    customer_count: int
    entry_count: int


@dataclass(slots=True)
class MonthlySummary:
    year: int
    month: int
    total_qty: Decimal
    total_amount: Decimal
    totals: dict[str, Decimal] = field(default_factory=dict)


@dataclass(slots=True)
class SearchHit:
    kind: Literal["customer", "product"]
    name: str
    location: str
    entity_id: str

    @property
    def label(self) -> str:
        return f"{self.name} — {self.kind} @ {self.location}"


def _sum_totals(entries: Iterable[Entry]) -> tuple[Decimal, Decimal]:
    total_qty = Decimal("0")
    total_amount = Decimal("0")
    for entry in entries:
        total_qty += entry.qty
        total_amount += entry.amount
    return round_money(total_qty), round_money(total_amount)


def compute_dashboard(location: Location, reference_date: date) -> DashboardTotals:
    """Month-to-date totals for the month of ``reference_date`` plus all-time counts."""
    in_month = [
        entry
        for entry in location.entries
        if entry.date.year == reference_date.year and entry.date.month == reference_date.month
    ]
    total_qty, total_amount = _sum_totals(in_month)
    return DashboardTotals(
        month=reference_date.month,
        year=reference_date.year,
        total_qty=total_qty,
        total_amount=total_amount,
        customer_count=len(location.customers),
        entry_count=len(location.entries),
    )


def month_bounds(year: int, month: int) -> tuple[date, date]:
    if not 1 <= month <= 12:
        raise ValidationError("month must be between 1 and 12", code="invalid_month")
    if not 1 <= year <= 9999:
        raise ValidationError("year is out of range", code="invalid_month")
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def parse_month(value: str) -> tuple[int, int]:
    """Parse a ``YYYY-MM`` month string."""
    text = (value or "").strip()
    parts = text.split("-")
    if len(parts) != 2 or not all(part.isdigit() for part in parts):
        raise ValidationError(f"Invalid month '{value}', expected YYYY-MM", code="invalid_month")
    year, month = int(parts[0]), int(parts[1])
    month_bounds(year, month)
    return year, month


def compute_monthly_summary(location: Location, year: int, month: int) -> MonthlySummary:
    """Totals for one calendar month with per-customer quantities.

    Customers are keyed by the name recorded on the entry, in order of first appearance.
    """
    first_day, last_day = month_bounds(year, month)
    rows = [entry for entry in location.entries if first_day <= entry.date <= last_day]

    totals: dict[str, Decimal] = {}
    for entry in rows:
        totals[entry.customer_name] = totals.get(entry.customer_name, Decimal("0")) + entry.qty

    total_qty, total_amount = _sum_totals(rows)
    return MonthlySummary(
        year=year,
        month=month,
        total_qty=total_qty,
        total_amount=total_amount,
        totals={name: round_money(qty) for name, qty in totals.items()},
    )


def search(store: Store, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> list[SearchHit]:
    """Case-insensitive substring search over customer and product names in every location."""
    needle = (query or "").strip().lower()
    if not needle:
        raise ValidationError("Search query is required", code="query_required")

    hits: list[SearchHit] = []
    for location_name, location in store.locations.items():
        for customer in location.customers:
            if needle in customer.name.lower():
                hits.append(SearchHit("customer", customer.name, location_name, customer.id))
        for product in location.products:
            if needle in product.name.lower():
                hits.append(SearchHit("product", product.name, location_name, product.id))
        if len(hits) >= limit:
            break
    return hits[: max(limit, 0)]
