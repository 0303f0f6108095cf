"""Pydantic document model of the persisted ledger snapshot."""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SnapshotModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class HistoryRecord(SnapshotModel):
    entry_id: Optional[str] = Field(default=None, alias="entryId")
    date: dt.date
    product: str
    qty: Decimal
    rate: Decimal
    amount: Decimal


class CustomerRecord(SnapshotModel):
    id: str
    name: str
    phone: str = ""
    balance: Decimal = Decimal("0")
    history: List[HistoryRecord] = Field(default_factory=list)

    @field_validator("phone", mode="before")
    @classmethod
    def _phone_or_blank(cls, value: Optional[str]) -> str:
        return value or ""

    @field_validator("balance", mode="before")
    @classmethod
    def _balance_or_zero(cls, value):
        return Decimal("0") if value is None else value

    @field_validator("history", mode="before")
    @classmethod
    def _history_or_empty(cls, value):
        return value or []


class ProductRecord(SnapshotModel):
    id: str
    name: str
    rate: Decimal


class EntryRecord(SnapshotModel):
    id: str
    date: dt.date
    customer_id: str = Field(alias="customerId")
    customer_name: str = Field(alias="customerName")
    product_id: str = Field(alias="productId")
    product_name: str = Field(alias="productName")
    qty: Decimal
    rate: Decimal
    amount: Decimal


class LocationRecord(SnapshotModel):
    customers: List[CustomerRecord] = Field(default_factory=list)
    products: List[ProductRecord] = Field(default_factory=list)
    entries: List[EntryRecord] = Field(default_factory=list)


class StoreSnapshot(SnapshotModel):
    locations: Dict[str, LocationRecord] = Field(default_factory=dict)
