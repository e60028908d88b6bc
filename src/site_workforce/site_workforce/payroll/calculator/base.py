from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ...core.enums import AttendanceType


class WageCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def day_wage(self, daily_wage: Decimal, attendance_type: AttendanceType) -> Decimal:
        raise NotImplementedError
