from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional

from ..advances.repository import AdvanceRepository
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import in_range
from ..core.enums import AdvanceScoping, AttendanceType, WageStatus
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..employees.service import employees_for_scope
from ..profiles.scope import AccessScope
from .calculator.base import WageCalculator
from .calculator.standard_calculator import StandardWageCalculator

ZERO = Decimal("0")


@dataclass(frozen=True)
class WageLine:
    work_date: date
    attendance_type: AttendanceType
    wage: Decimal


@dataclass(frozen=True)
class WagePeriod:
    total_wage: Decimal = ZERO
    days_worked: int = 0
    breakdown: list[WageLine] = field(default_factory=list)


@dataclass(frozen=True)
class WageSummary:
    """One row of the wage sheet."""

    employee: Employee
    total_wage: Decimal
    days_worked: int
    advances: Decimal
    remaining: Decimal
    status: WageStatus


def remaining(total_wage: Decimal, total_advances: Decimal) -> Decimal:
    return total_wage - total_advances


def wage_status(balance: Decimal) -> WageStatus:
    """Pending / Overpaid / Settled; recomputed on every view, never stored."""
    if balance > 0:
        return WageStatus.PENDING
    if balance < 0:
        return WageStatus.OVERPAID
    return WageStatus.SETTLED


class PayrollService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        advances: AdvanceRepository,
        *,
        calculator: Optional[WageCalculator] = None,
        advance_scoping: AdvanceScoping = AdvanceScoping.UNBOUNDED,
    ):
        self._attendance = attendance
        self._employees = employees
        self._advances = advances
        self._calculator = calculator or StandardWageCalculator()
        self._advance_scoping = AdvanceScoping(advance_scoping)

    @property
    def advance_scoping(self) -> AdvanceScoping:
        return self._advance_scoping

    def day_wage(self, daily_wage: Decimal, attendance_type: AttendanceType) -> Decimal:
        return self._calculator.day_wage(daily_wage, attendance_type)

    def total_wage_for_period(self, employee_id: int, start: date, end: date) -> WagePeriod:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            return WagePeriod()
        return self._period_for(employee, start, end)

    def _period_for(self, employee: Employee, start: date, end: date) -> WagePeriod:
        records = [
            r for r in self._attendance.list_for_employee(employee.employee_id)
            if in_range(r.work_date, start, end)
        ]

        total = ZERO
        breakdown = []
        for r in records:
            wage = self.day_wage(employee.daily_wage, r.attendance_type)
            total += wage
            breakdown.append(WageLine(work_date=r.work_date, attendance_type=r.attendance_type, wage=wage))

        return WagePeriod(total_wage=total, days_worked=len(records), breakdown=breakdown)

    def total_advances(self, employee_id: int, start: Optional[date] = None, end: Optional[date] = None) -> Decimal:
        payments = self._advances.list_for_employee(int(employee_id))
        if self._advance_scoping == AdvanceScoping.SAME_PERIOD and start and end:
            payments = [p for p in payments if in_range(p.payment_date, start, end)]
        return sum((p.advance_amount for p in payments), ZERO)

    def wage_sheet(self, scope: AccessScope, start: Optional[date], end: Optional[date]) -> list[WageSummary]:
        if not start or not end:
            raise ValidationError("Please select both start and end dates.")

        out = []
        for employee in employees_for_scope(self._employees, scope):
            period = self._period_for(employee, start, end)
            advances = self.total_advances(employee.employee_id, start, end)
            balance = remaining(period.total_wage, advances)
            out.append(
                WageSummary(
                    employee=employee,
                    total_wage=period.total_wage,
                    days_worked=period.days_worked,
                    advances=advances,
                    remaining=balance,
                    status=wage_status(balance),
                )
            )
        return out
