from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceType


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one day of attendance for one employee."""

    attendance_id: int
    employee_id: int
    work_date: date
    attendance_type: AttendanceType
    marked_by: Optional[int] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class AttendanceRowUI:
    """Read-model for the daily attendance table."""

    attendance_id: int
    employee_name: str
    employee_code: str
    type_label: str
    time_window: str
    marked_by: str
