from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import WagePayment


class AdvanceRepository(Protocol):
    def list_for_employee(self, employee_id: int) -> Sequence[WagePayment]:
        raise NotImplementedError

    def create_payment(
        self,
        *,
        employee_id: int,
        advance_amount: Decimal,
        payment_date: date,
        paid_by: Optional[int],
    ) -> int:
        raise NotImplementedError

    def delete_by_id(self, payment_id: int) -> bool:
        raise NotImplementedError
