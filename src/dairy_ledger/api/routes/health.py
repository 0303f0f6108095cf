"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...services.book import DairyBook
from ..deps import book_dependency

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/store", status_code=status.HTTP_200_OK)
def health_store(book: DairyBook = Depends(book_dependency)) -> dict:
    """Report where the snapshot lives and how much it holds."""
    return {
        "service": "store",
        "locations": len(book.store.locations),
        "selected": book.selected,
        "path": str(getattr(book.storage, "path", "")),
    }
