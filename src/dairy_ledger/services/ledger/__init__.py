"""Ledger service helpers."""

from .service import add_entry, balance_drift, delete_entry, list_entries, reverse_entry

__all__ = [
    "add_entry",
    "delete_entry",
    "list_entries",
    "reverse_entry",
    "balance_drift",
]
