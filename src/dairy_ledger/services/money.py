"""Decimal parsing and two-place rounding helpers."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from ..exceptions import ValidationError

TWO_PLACES = Decimal("0.01")


def round_money(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def parse_number(value: Any, field_name: str) -> Decimal:
    """Coerce ``value`` to a finite Decimal or raise ``ValidationError``."""
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"{field_name} must be a number", code="invalid_number")
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float, str)):
        try:
            # str() keeps floats at their shortest repr (2.1 -> "2.1")
            number = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValidationError(f"{field_name} must be a number", code="invalid_number") from exc
    else:
        raise ValidationError(f"{field_name} must be a number", code="invalid_number")
    if not number.is_finite():
        raise ValidationError(f"{field_name} must be finite", code="invalid_number")
    return number


def parse_quantity(value: Any) -> Decimal:
    qty = parse_number(value, "qty")
    if qty <= 0:
        raise ValidationError("qty must be greater than zero", code="invalid_qty")
    return qty


def parse_rate(value: Any) -> Decimal:
    rate = parse_number(value, "rate")
    if rate < 0:
        raise ValidationError("rate must not be negative", code="invalid_rate")
    return rate


def compute_amount(qty: Decimal, rate: Decimal) -> Decimal:
    return round_money(qty * rate)
