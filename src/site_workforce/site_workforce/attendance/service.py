from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Union

from ..common.datetime_utils import today_local
from ..core.constants import SYSTEM_MARKER
from ..core.enums import AttendanceType, Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..employees.repository import EmployeeRepository
from ..employees.service import employee_in_scope, employees_for_scope
from ..profiles.repository import ProfileRepository
from ..profiles.scope import AccessScope
from .model import AttendanceRowUI
from .repository import AttendanceRepository

log = logging.getLogger(__name__)


def parse_attendance_type(value: Union[str, AttendanceType, None]) -> AttendanceType:
    if isinstance(value, AttendanceType):
        return value
    try:
        return AttendanceType((value or "").strip())
    except ValueError:
        raise ValidationError("Invalid attendance type")


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        profiles: ProfileRepository,
    ):
        self._attendance = attendance
        self._employees = employees
        self._profiles = profiles

    def mark_attendance(
        self,
        *,
        scope: AccessScope,
        marked_by: int,
        employee_id: Optional[int],
        attendance_type: Union[str, AttendanceType],
        work_date: Optional[date] = None,
    ) -> int:
        """Record one day for one employee.

        The existence check runs before the insert so a repeat is rejected
        without touching storage; the unique key on (employee, date) still
        rejects a concurrent duplicate at insert time.
        """

        work_date = work_date or today_local()
        a_type = parse_attendance_type(attendance_type)
        employee = employee_in_scope(self._employees, scope, employee_id)

        if self._attendance.get_for_employee_and_date(employee.employee_id, work_date):
            raise ValidationError("Attendance already marked for this employee on this date.")

        attendance_id = self._attendance.create_record(
            employee_id=employee.employee_id,
            work_date=work_date,
            attendance_type=a_type,
            marked_by=int(marked_by),
        )
        log.info(
            "attendance %s: employee %s %s on %s (marked by %s)",
            attendance_id, employee.employee_id, a_type.value, work_date.isoformat(), marked_by,
        )
        return attendance_id

    def list_for_date(self, scope: AccessScope, work_date: date) -> list[AttendanceRowUI]:
        employees = {e.employee_id: e for e in employees_for_scope(self._employees, scope)}
        records = [r for r in self._attendance.list_for_date(work_date) if r.employee_id in employees]

        markers = {
            p.user_id: p.name
            for p in self._profiles.list_by_ids(r.marked_by for r in records if r.marked_by is not None)
        }

        rows = []
        for r in records:
            emp = employees[r.employee_id]
            rows.append(
                AttendanceRowUI(
                    attendance_id=r.attendance_id,
                    employee_name=emp.name,
                    employee_code=emp.employee_code,
                    type_label=r.attendance_type.label,
                    time_window=r.attendance_type.time_window,
                    marked_by=markers.get(r.marked_by, SYSTEM_MARKER),
                )
            )
        return rows

    def remove_attendance(self, *, current_role: Role, attendance_id: int) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can remove attendance records")

        if not self._attendance.delete_by_id(int(attendance_id)):
            raise ValidationError("Attendance record not found")
        log.info("attendance %s removed", attendance_id)
