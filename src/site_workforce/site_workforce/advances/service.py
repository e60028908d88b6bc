from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence, Union

from ..common.datetime_utils import today_local
from ..common.validators import parse_amount
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..employees.repository import EmployeeRepository
from ..employees.service import employee_in_scope
from ..profiles.scope import AccessScope
from .model import WagePayment
from .repository import AdvanceRepository

log = logging.getLogger(__name__)


class AdvanceService:
    """Use case: record cash advances against an employee's wages."""

    def __init__(self, advances: AdvanceRepository, employees: EmployeeRepository):
        self._advances = advances
        self._employees = employees

    def record_advance(
        self,
        *,
        scope: AccessScope,
        paid_by: int,
        employee_id: Optional[int],
        amount: Union[str, Decimal, None],
        payment_date: Optional[date] = None,
    ) -> int:
        if not employee_id or amount is None or not str(amount).strip():
            raise ValidationError("Please select an employee and enter advance amount.")

        advance = parse_amount(amount, "Advance amount")
        employee = employee_in_scope(self._employees, scope, employee_id)

        payment_id = self._advances.create_payment(
            employee_id=employee.employee_id,
            advance_amount=advance,
            payment_date=payment_date or today_local(),
            paid_by=int(paid_by),
        )
        log.info("advance %s: %s to employee %s by %s", payment_id, advance, employee.employee_id, paid_by)
        return payment_id

    def list_for_employee(self, scope: AccessScope, employee_id: int) -> Sequence[WagePayment]:
        employee = employee_in_scope(self._employees, scope, employee_id)
        return list(self._advances.list_for_employee(employee.employee_id))

    def remove_advance(self, *, current_role: Role, payment_id: int) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can remove advance payments")

        if not self._advances.delete_by_id(int(payment_id)):
            raise ValidationError("Advance payment not found")
        log.info("advance %s removed", payment_id)
