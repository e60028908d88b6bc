from __future__ import annotations

from decimal import Decimal
from enum import Enum


class Role(str, Enum):
    """User roles used for authorization."""

    ADMIN = "admin"
    SUPERVISOR = "supervisor"


class AttendanceType(str, Enum):
    """Day classification stored on every attendance record."""

    FULL = "full"
    HALF = "half"
    ONE_AND_HALF = "1.5"

    @property
    def multiplier(self) -> Decimal:
        return _MULTIPLIERS[self]

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def time_window(self) -> str:
        return _TIME_WINDOWS[self]


_MULTIPLIERS = {
    AttendanceType.FULL: Decimal("1.0"),
    AttendanceType.HALF: Decimal("0.5"),
    AttendanceType.ONE_AND_HALF: Decimal("1.5"),
}

_LABELS = {
    AttendanceType.FULL: "Full Day",
    AttendanceType.HALF: "Half Day",
    AttendanceType.ONE_AND_HALF: "1.5 Day",
}

_TIME_WINDOWS = {
    AttendanceType.FULL: "9:00 AM - 5:00 PM",
    AttendanceType.HALF: "1:00 PM - 5:00 PM",
    AttendanceType.ONE_AND_HALF: "8:00 AM - 7:00 PM",
}


class WageStatus(str, Enum):
    """Display classification of the remaining wage balance."""

    PENDING = "Pending"
    OVERPAID = "Overpaid"
    SETTLED = "Settled"


class ReportFilter(str, Enum):
    ALL = "all"
    EMPLOYEE = "employee"
    SITE = "site"


class AdvanceScoping(str, Enum):
    """Which advances are netted against a wage period.

    UNBOUNDED sums every advance ever recorded for the employee;
    SAME_PERIOD only those dated inside the wage period.
    """

    UNBOUNDED = "unbounded"
    SAME_PERIOD = "same-period"
