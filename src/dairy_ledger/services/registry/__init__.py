"""Registry service helpers."""

from .service import (
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
    get_product,
    list_locations,
    select_location,
)

__all__ = [
    "list_locations",
    "create_location",
    "delete_location",
    "select_location",
    "get_location",
    "add_customer",
    "get_customer",
    "edit_customer",
    "delete_customer",
    "add_product",
    "get_product",
    "edit_product",
    "delete_product",
]
