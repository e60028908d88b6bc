from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class WagePayment:
    """Domain entity: a cash advance paid to an employee ahead of settlement.

    ``advance_amount`` sign is not constrained; a negative advance acts as a
    bonus when netted against wages.
    """

    payment_id: int
    employee_id: int
    advance_amount: Decimal
    payment_date: date
    paid_by: Optional[int] = None
