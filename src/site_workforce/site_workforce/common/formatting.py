from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

_CENTS = Decimal("0.01")


def format_money(amount: Decimal) -> str:
    """Two-decimal presentation of a currency amount (display/export only)."""
    return str(Decimal(amount).quantize(_CENTS, rounding=ROUND_HALF_UP))
