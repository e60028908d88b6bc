from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def parse_amount(value: Union[str, int, Decimal, None], field_name: str) -> Decimal:
    """Parse a currency amount from form input. Sign is not checked here."""
    if isinstance(value, Decimal):
        amount = value
    else:
        raw = str(value if value is not None else "").strip()
        if not raw:
            raise ValidationError(f"{field_name} is required")
        try:
            amount = Decimal(raw)
        except InvalidOperation:
            raise ValidationError(f"{field_name} must be a number")
    if not amount.is_finite():
        raise ValidationError(f"{field_name} must be a number")
    return amount


def require_positive_amount(value: Union[str, int, Decimal, None], field_name: str) -> Decimal:
    amount = parse_amount(value, field_name)
    if amount <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return amount
