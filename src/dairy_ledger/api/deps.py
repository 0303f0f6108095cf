"""Shared FastAPI dependencies."""

from __future__ import annotations

from ..data.store_repository import get_book
from ..services.book import DairyBook


def book_dependency() -> DairyBook:
    return get_book()
