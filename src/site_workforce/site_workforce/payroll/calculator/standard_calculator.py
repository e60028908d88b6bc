from __future__ import annotations

from decimal import Decimal

from ...core.enums import AttendanceType
from .base import WageCalculator


class StandardWageCalculator(WageCalculator):
    """Standard rule: day-rate x type multiplier (1.0 / 0.5 / 1.5), unrounded."""

    def day_wage(self, daily_wage: Decimal, attendance_type: AttendanceType) -> Decimal:
        return Decimal(daily_wage) * attendance_type.multiplier


def day_wage(daily_wage: Decimal, attendance_type: AttendanceType) -> Decimal:
    return StandardWageCalculator().day_wage(daily_wage, attendance_type)
