"""Product endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response, status

from ...schemas.ledger import ProductModel, ProductRequest
from ...services.book import DairyBook
from ..deps import book_dependency

router = APIRouter(prefix="/locations/{location}/products", tags=["products"])


@router.get("", response_model=List[ProductModel], status_code=status.HTTP_200_OK)
def list_products(location: str, book: DairyBook = Depends(book_dependency)) -> List[ProductModel]:
    return [ProductModel.model_validate(product) for product in book.list_products(location)]


@router.post("", response_model=ProductModel, status_code=status.HTTP_201_CREATED)
def add_product(location: str, payload: ProductRequest, book: DairyBook = Depends(book_dependency)) -> ProductModel:
    return ProductModel.model_validate(book.add_product(payload.name, payload.rate, location=location))


@router.put("/{product_id}", response_model=ProductModel, status_code=status.HTTP_200_OK)
def edit_product(
    location: str,
    product_id: str,
    payload: ProductRequest,
    book: DairyBook = Depends(book_dependency),
) -> ProductModel:
    product = book.edit_product(product_id, payload.name, payload.rate, location=location)
    return ProductModel.model_validate(product)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(location: str, product_id: str, book: DairyBook = Depends(book_dependency)) -> Response:
    book.delete_product(product_id, location=location)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
