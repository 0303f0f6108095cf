"""Cross-location search endpoint."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query, status

from ...schemas.ledger import SearchHitModel
from ...services.book import DairyBook
from ..deps import book_dependency

router = APIRouter(tags=["search"])


@router.get("/search", response_model=List[SearchHitModel], status_code=status.HTTP_200_OK)
def search(
    q: str = Query(default="", description="Case-insensitive name fragment"),
    book: DairyBook = Depends(book_dependency),
) -> List[SearchHitModel]:
    return [SearchHitModel.model_validate(hit) for hit in book.search(q)]
