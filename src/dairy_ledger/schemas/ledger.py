"""Pydantic request/response models for ledger endpoints."""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class AttributeModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class LocationCreateRequest(BaseModel):
    name: str = Field(..., description="Unique, case-sensitive location name.")


class LocationListResponse(BaseModel):
    locations: List[str]
    selected: Optional[str] = None


class SelectionResponse(BaseModel):
    selected: Optional[str] = None


class CustomerRequest(BaseModel):
    name: str
    phone: Optional[str] = Field(default="", description="Optional contact number.")


class HistoryItemModel(AttributeModel):
    entry_id: Optional[str] = None
    date: dt.date
    product: str
    qty: Decimal
    rate: Decimal
    amount: Decimal


class CustomerModel(AttributeModel):
    id: str
    name: str
    phone: str
    balance: Decimal


class CustomerDetailModel(CustomerModel):
    history: List[HistoryItemModel]


class ProductRequest(BaseModel):
    name: str
    rate: Decimal = Field(..., description="Price per unit.")


class ProductModel(AttributeModel):
    id: str
    name: str
    rate: Decimal


class EntryCreateRequest(BaseModel):
    customer_id: str
    product_id: str
    qty: Decimal
    rate: Optional[Decimal] = Field(default=None, description="Defaults to the product rate.")
    date: Optional[dt.date] = Field(default=None, description="Defaults to today.")


class EntryModel(AttributeModel):
    id: str
    date: dt.date
    customer_id: str
    customer_name: str
    product_id: str
    product_name: str
    qty: Decimal
    rate: Decimal
    amount: Decimal


class DashboardResponse(AttributeModel):
    location: str
    month: int
    year: int
    total_qty: Decimal
    total_amount: Decimal
    customer_count: int
    entry_count: int


class MonthlySummaryResponse(AttributeModel):
    location: str
    year: int
    month: int
    total_qty: Decimal
    total_amount: Decimal
    totals: Dict[str, Decimal]


class SearchHitModel(AttributeModel):
    kind: Literal["customer", "product"]
    name: str
    location: str
    entity_id: str
    label: str
