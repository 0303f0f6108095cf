from datetime import date
from decimal import Decimal

import pytest

from dairy_ledger.exceptions import ConflictError, NotFoundError, ValidationError
from dairy_ledger.models.domain import Location, Store
from dairy_ledger.services.ledger import add_entry, balance_drift
from dairy_ledger.services.registry import (
    add_customer,
    add_product,
    create_location,
    delete_customer,
    delete_location,
    delete_product,
    edit_customer,
    edit_product,
    get_customer,
    get_location,
    list_locations,
    select_location,
)


def _ledger():
    location = Location()
    asha = add_customer(location, "Asha", "9999")
    ravi = add_customer(location, "Ravi")
    milk = add_product(location, "Milk", 50)
    curd = add_product(location, "Curd", 40)
    add_entry(location, asha.id, milk.id, date(2024, 5, 1), 2)
    add_entry(location, asha.id, curd.id, date(2024, 5, 2), 1)
    add_entry(location, ravi.id, milk.id, date(2024, 5, 2), 3)
    return location, asha, ravi, milk, curd


def test_create_location_rejects_duplicates_and_blank_names():
    store = Store()

    assert create_location(store, "Main Farm") == "Main Farm"
    assert isinstance(store.locations["Main Farm"], Location)
    with pytest.raises(ConflictError):
        create_location(store, "Main Farm")
    # blank is a ValidationError rather than a ConflictError: it is missing input, like blank customer names
    with pytest.raises(ValidationError):
        create_location(store, "   ")
    # names are case-sensitive
    assert create_location(store, "main farm") == "main farm"
    assert list_locations(store) == ["Main Farm", "main farm"]


def test_delete_location_moves_selection():
    store = Store()
    for name in ("North", "South", "East"):
        create_location(store, name)

    assert delete_location(store, "North", selected="North") == "South"
    assert "North" not in store.locations
    assert delete_location(store, "South", selected="East") == "East"
    assert delete_location(store, "East", selected="East") is None
    assert store.locations == {}


def test_delete_missing_location_is_a_noop():
    store = Store()
    create_location(store, "North")

    assert delete_location(store, "Nowhere", selected="North") == "North"
    assert list_locations(store) == ["North"]


def test_select_location_requires_existing_name():
    store = Store()
    create_location(store, "North")

    assert select_location(store, "North") == "North"
    with pytest.raises(NotFoundError):
        select_location(store, "South")
    with pytest.raises(ValidationError):
        get_location(store, None)


def test_add_customer_validates_name():
    location = Location()

    customer = add_customer(location, "  Asha ", None)

    assert customer.name == "Asha"
    assert customer.phone == ""
    assert customer.balance == 0
    assert customer.history == []
    with pytest.raises(ValidationError):
        add_customer(location, "", "123")
    assert len(location.customers) == 1


def test_customer_ids_are_unique():
    location = Location()
    ids = {add_customer(location, f"C{i}").id for i in range(50)}
    assert len(ids) == 50


def test_edit_customer_keeps_balance_and_entry_snapshots():
    location, asha, _, _, _ = _ledger()
    balance = asha.balance

    edit_customer(location, asha.id, "Asha Devi", "1234")

    assert get_customer(location, asha.id).name == "Asha Devi"
    assert asha.phone == "1234"
    assert asha.balance == balance
    assert {e.customer_name for e in location.entries if e.customer_id == asha.id} == {"Asha"}


def test_edit_customer_errors():
    location, asha, _, _, _ = _ledger()

    with pytest.raises(NotFoundError):
        edit_customer(location, "missing", "Name")
    with pytest.raises(ValidationError):
        edit_customer(location, asha.id, " ")
    assert asha.name == "Asha"


def test_delete_customer_cascades_entries():
    location, asha, ravi, _, _ = _ledger()

    removed = delete_customer(location, asha.id)

    assert removed is asha
    assert asha not in location.customers
    assert all(e.customer_id != asha.id for e in location.entries)
    known = {c.id for c in location.customers}
    assert all(e.customer_id in known for e in location.entries)
    assert ravi.balance == Decimal("150.00")
    assert delete_customer(location, asha.id) is None


def test_add_and_edit_product_validate_rate():
    location = Location()

    with pytest.raises(ValidationError):
        add_product(location, "Milk", "free")
    with pytest.raises(ValidationError):
        add_product(location, "Milk", -1)
    with pytest.raises(ValidationError):
        add_product(location, "", 10)
    product = add_product(location, "Milk", "52.5")
    assert product.rate == Decimal("52.5")

    with pytest.raises(ValidationError):
        edit_product(location, product.id, "Milk", "bad")
    assert product.rate == Decimal("52.5")
    with pytest.raises(NotFoundError):
        edit_product(location, "missing", "Milk", 1)

    edit_product(location, product.id, "Toned Milk", 48)
    assert (product.name, product.rate) == ("Toned Milk", Decimal("48"))


def test_edit_product_does_not_rewrite_entries():
    location, _, _, milk, _ = _ledger()

    edit_product(location, milk.id, "Buffalo Milk", 70)

    milk_entries = [e for e in location.entries if e.product_id == milk.id]
    assert {e.product_name for e in milk_entries} == {"Milk"}
    assert {e.rate for e in milk_entries} == {Decimal("50")}


def test_delete_product_reverses_balances_by_default():
    location, asha, ravi, milk, curd = _ledger()

    delete_product(location, milk.id)

    assert all(e.product_id != milk.id for e in location.entries)
    assert asha.balance == Decimal("40.00")
    assert [h.product for h in asha.history] == ["Curd"]
    assert ravi.balance == Decimal("0.00")
    assert ravi.history == []
    assert balance_drift(location) == {}


def test_delete_product_legacy_mode_leaves_balances_stale():
    # Legacy behavior: entries go, balances and history stay. It is unclear
    # whether stale balances were ever intended, so this mode is opt-in.
    location, asha, ravi, milk, _ = _ledger()

    delete_product(location, milk.id, reverse_balances=False)

    assert all(e.product_id != milk.id for e in location.entries)
    assert asha.balance == Decimal("140.00")
    assert len(asha.history) == 2
    assert balance_drift(location) == {asha.id: Decimal("100.00"), ravi.id: Decimal("150.00")}


def test_delete_missing_product_is_a_noop():
    location, asha, _, _, _ = _ledger()
    count = len(location.entries)

    assert delete_product(location, "missing") is None
    assert len(location.entries) == count
