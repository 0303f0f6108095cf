"""Customer endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response, status

from ...schemas.ledger import CustomerDetailModel, CustomerModel, CustomerRequest
from ...services.book import DairyBook
from ..deps import book_dependency

router = APIRouter(prefix="/locations/{location}/customers", tags=["customers"])


@router.get("", response_model=List[CustomerModel], status_code=status.HTTP_200_OK)
def list_customers(location: str, book: DairyBook = Depends(book_dependency)) -> List[CustomerModel]:
    return [CustomerModel.model_validate(customer) for customer in book.list_customers(location)]


@router.post("", response_model=CustomerModel, status_code=status.HTTP_201_CREATED)
def add_customer(
    location: str,
    payload: CustomerRequest,
    book: DairyBook = Depends(book_dependency),
) -> CustomerModel:
    customer = book.add_customer(payload.name, payload.phone, location=location)
    return CustomerModel.model_validate(customer)


@router.get("/{customer_id}", response_model=CustomerDetailModel, status_code=status.HTTP_200_OK)
def get_customer(location: str, customer_id: str, book: DairyBook = Depends(book_dependency)) -> CustomerDetailModel:
    return CustomerDetailModel.model_validate(book.get_customer(customer_id, location=location))


@router.put("/{customer_id}", response_model=CustomerModel, status_code=status.HTTP_200_OK)
def edit_customer(
    location: str,
    customer_id: str,
    payload: CustomerRequest,
    book: DairyBook = Depends(book_dependency),
) -> CustomerModel:
    customer = book.edit_customer(customer_id, payload.name, payload.phone, location=location)
    return CustomerModel.model_validate(customer)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(location: str, customer_id: str, book: DairyBook = Depends(book_dependency)) -> Response:
    book.delete_customer(customer_id, location=location)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
