"""Location endpoints, including dashboard and monthly summary reports."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, Path, Query, status

from ...schemas.ledger import (
    DashboardResponse,
    LocationCreateRequest,
    LocationListResponse,
    MonthlySummaryResponse,
    SelectionResponse,
)
from ...services.book import DairyBook
from ...services.reports import parse_month
from ..deps import book_dependency

router = APIRouter(prefix="/locations", tags=["locations"])


@router.get("", response_model=LocationListResponse, status_code=status.HTTP_200_OK)
def list_locations(book: DairyBook = Depends(book_dependency)) -> LocationListResponse:
    return LocationListResponse(locations=book.list_locations(), selected=book.selected)


@router.post("", response_model=SelectionResponse, status_code=status.HTTP_201_CREATED)
def create_location(payload: LocationCreateRequest, book: DairyBook = Depends(book_dependency)) -> SelectionResponse:
    return SelectionResponse(selected=book.create_location(payload.name))


@router.delete("/{name}", response_model=SelectionResponse, status_code=status.HTTP_200_OK)
def delete_location(
    name: str = Path(..., description="Location name"),
    book: DairyBook = Depends(book_dependency),
) -> SelectionResponse:
    return SelectionResponse(selected=book.delete_location(name))


@router.post("/{name}/select", response_model=SelectionResponse, status_code=status.HTTP_200_OK)
def select_location(
    name: str = Path(..., description="Location name"),
    book: DairyBook = Depends(book_dependency),
) -> SelectionResponse:
    return SelectionResponse(selected=book.select_location(name))


@router.get("/{name}/dashboard", response_model=DashboardResponse, status_code=status.HTTP_200_OK)
def get_dashboard(
    name: str = Path(..., description="Location name"),
    book: DairyBook = Depends(book_dependency),
) -> DashboardResponse:
    totals = book.compute_dashboard(location=name)
    return DashboardResponse(location=name, **asdict(totals))


@router.get("/{name}/summary", response_model=MonthlySummaryResponse, status_code=status.HTTP_200_OK)
def get_monthly_summary(
    name: str = Path(..., description="Location name"),
    month: str = Query(..., description="Month to summarize, formatted YYYY-MM"),
    book: DairyBook = Depends(book_dependency),
) -> MonthlySummaryResponse:
    year, month_number = parse_month(month)
    summary = book.compute_monthly_summary(year, month_number, location=name)
    return MonthlySummaryResponse(location=name, **asdict(summary))
