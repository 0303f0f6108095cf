from datetime import date
from decimal import Decimal

import pytest

from dairy_ledger.exceptions import ValidationError
from dairy_ledger.models.domain import Location, Store
from dairy_ledger.services.ledger import add_entry
from dairy_ledger.services.registry import add_customer, add_product, create_location, edit_customer
from dairy_ledger.services.reports import (
    compute_dashboard,
    compute_monthly_summary,
    parse_month,
    search,
)


def _may_ledger():
    location = Location()
    asha = add_customer(location, "Asha", "9999")
    ravi = add_customer(location, "Ravi")
    milk = add_product(location, "Milk", 50)
    add_entry(location, ravi.id, milk.id, date(2024, 5, 31), 1)
    add_entry(location, asha.id, milk.id, date(2024, 5, 1), 2)
    add_entry(location, asha.id, milk.id, date(2024, 5, 20), 3)
    add_entry(location, asha.id, milk.id, date(2024, 4, 30), 7)
    add_entry(location, asha.id, milk.id, date(2024, 6, 1), 11)
    return location, asha, ravi


def test_monthly_summary_for_may():
    location, _, _ = _may_ledger()

    summary = compute_monthly_summary(location, 2024, 5)

    assert summary.total_qty == Decimal("6.00")
    assert summary.total_amount == Decimal("300.00")
    assert summary.totals == {"Ravi": Decimal("1.00"), "Asha": Decimal("5.00")}
    # first occurrence order
    assert list(summary.totals) == ["Ravi", "Asha"]


def test_monthly_summary_two_entries_scenario():
    location = Location()
    asha = add_customer(location, "Asha", "9999")
    milk = add_product(location, "Milk", 50)
    add_entry(location, asha.id, milk.id, date(2024, 5, 1), 2, 50)
    add_entry(location, asha.id, milk.id, date(2024, 5, 15), 3, 50)

    summary = compute_monthly_summary(location, 2024, 5)

    assert summary.total_qty == Decimal("5.00")
    assert summary.total_amount == Decimal("250.00")
    assert summary.totals["Asha"] == Decimal("5.00")


def test_monthly_summary_groups_by_recorded_name():
    location, asha, _ = _may_ledger()
    edit_customer(location, asha.id, "Asha Devi")
    milk = location.products[0]
    add_entry(location, asha.id, milk.id, date(2024, 5, 25), 1)

    summary = compute_monthly_summary(location, 2024, 5)

    assert summary.totals["Asha"] == Decimal("5.00")
    assert summary.totals["Asha Devi"] == Decimal("1.00")


def test_monthly_summary_handles_leap_february_and_empty_months():
    location = Location()
    asha = add_customer(location, "Asha")
    milk = add_product(location, "Milk", 10)
    add_entry(location, asha.id, milk.id, date(2024, 2, 29), 1)

    assert compute_monthly_summary(location, 2024, 2).total_qty == Decimal("1.00")
    empty = compute_monthly_summary(location, 2024, 3)
    assert empty.total_qty == Decimal("0.00")
    assert empty.totals == {}


@pytest.mark.parametrize("month", [0, 13])
def test_monthly_summary_rejects_invalid_month(month):
    with pytest.raises(ValidationError):
        compute_monthly_summary(Location(), 2024, month)


def test_parse_month():
    assert parse_month("2024-05") == (2024, 5)
    for bad in ("", "2024", "2024-13", "May 2024", "2024-5-1"):
        with pytest.raises(ValidationError):
            parse_month(bad)


def test_dashboard_counts_current_month_and_all_time():
    location, _, _ = _may_ledger()
    snapshot = list(location.entries)

    totals = compute_dashboard(location, date(2024, 5, 10))

    assert totals.total_qty == Decimal("6.00")
    assert totals.total_amount == Decimal("300.00")
    assert totals.customer_count == 2
    assert totals.entry_count == 5
    assert (totals.month, totals.year) == (5, 2024)
    assert location.entries == snapshot


def test_dashboard_ignores_same_month_of_other_years():
    location, asha, _ = _may_ledger()
    add_entry(location, asha.id, location.products[0].id, date(2023, 5, 10), 4)

    assert compute_dashboard(location, date(2024, 5, 1)).total_qty == Decimal("6.00")


def _store():
    store = Store()
    for name in ("Main Farm", "Hill Dairy"):
        create_location(store, name)
    main = store.locations["Main Farm"]
    hill = store.locations["Hill Dairy"]
    add_customer(main, "Asha")
    add_product(main, "Milk", 50)
    add_customer(hill, "Prakash")
    add_product(hill, "Buttermilk", 20)
    return store


def test_search_is_case_insensitive_across_locations():
    store = _store()

    hits = search(store, "  MILK ")

    assert [(h.kind, h.name, h.location) for h in hits] == [
        ("product", "Milk", "Main Farm"),
        ("product", "Buttermilk", "Hill Dairy"),
    ]
    assert hits[0].label == "Milk — product @ Main Farm"
    assert hits[0].entity_id == store.locations["Main Farm"].products[0].id


def test_search_tags_customers():
    hits = search(_store(), "asha")

    assert [(h.kind, h.name) for h in hits] == [("customer", "Asha")]


def test_search_caps_results():
    store = Store()
    create_location(store, "Big")
    location = store.locations["Big"]
    for i in range(60):
        add_customer(location, f"Customer {i}")
    for i in range(10):
        add_product(location, f"Product for customer {i}", 1)

    assert len(search(store, "customer")) == 50
    assert len(search(store, "customer", limit=5)) == 5


@pytest.mark.parametrize("query", ["", "   ", None])
def test_search_rejects_blank_query(query):
    with pytest.raises(ValidationError):
        search(_store(), query)


def test_search_without_matches_returns_empty_list():
    assert search(_store(), "goat") == []
