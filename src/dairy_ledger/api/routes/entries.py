"""Delivery entry endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response, status

from ...schemas.ledger import EntryCreateRequest, EntryModel
from ...services.book import DairyBook
from ..deps import book_dependency

router = APIRouter(prefix="/locations/{location}/entries", tags=["entries"])


@router.get("", response_model=List[EntryModel], status_code=status.HTTP_200_OK)
def list_entries(location: str, book: DairyBook = Depends(book_dependency)) -> List[EntryModel]:
    """Entries newest first."""
    return [EntryModel.model_validate(entry) for entry in book.list_entries(location)]


@router.post("", response_model=EntryModel, status_code=status.HTTP_201_CREATED)
def add_entry(location: str, payload: EntryCreateRequest, book: DairyBook = Depends(book_dependency)) -> EntryModel:
    entry = book.add_entry(
        payload.customer_id,
        payload.product_id,
        payload.qty,
        rate=payload.rate,
        entry_date=payload.date,
        location=location,
    )
    return EntryModel.model_validate(entry)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_entry(location: str, entry_id: str, book: DairyBook = Depends(book_dependency)) -> Response:
    book.delete_entry(entry_id, location=location)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
