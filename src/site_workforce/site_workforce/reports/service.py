from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Mapping, Optional, Sequence, Union

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import in_range
from ..core.constants import UNKNOWN_TEXT
from ..core.enums import ReportFilter
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..employees.service import employees_for_scope
from ..payroll.calculator.base import WageCalculator
from ..payroll.calculator.standard_calculator import StandardWageCalculator
from ..profiles.scope import AccessScope

ZERO = Decimal("0")


@dataclass(frozen=True)
class ReportQuery:
    filter_mode: ReportFilter = ReportFilter.ALL
    employee_id: Optional[int] = None
    site: Optional[str] = None
    start: Optional[date] = None
    end: Optional[date] = None


@dataclass(frozen=True)
class ReportRow:
    """One attendance record joined with its employee (display/export)."""

    employee_name: str
    employee_code: str
    job_category: str
    site_location: str
    work_date: date
    attendance_type: str
    daily_wage: Decimal
    calculated_wage: Decimal


@dataclass(frozen=True)
class ReportStats:
    total_records: int
    total_wages: Decimal
    unique_employees: int
    unique_sites: int


@dataclass(frozen=True)
class DashboardStats:
    total_employees: int
    marked_today: int
    active_sites: int


@dataclass(frozen=True)
class ReportData:
    rows: list[ReportRow]
    stats: ReportStats


def parse_report_filter(value: Union[str, ReportFilter, None]) -> ReportFilter:
    if isinstance(value, ReportFilter):
        return value
    try:
        return ReportFilter((value or ReportFilter.ALL.value).strip())
    except ValueError:
        raise ValidationError("Invalid report filter")


def filter_records(
    records: Iterable[AttendanceRecord],
    employees: Sequence[Employee],
    scope: AccessScope,
    query: ReportQuery,
) -> list[AttendanceRecord]:
    """Date range, then one selected filter, then the caller's site scope."""

    selected = list(records)

    # A partial range (only one bound) applies no date filter at all.
    if query.start and query.end:
        selected = [r for r in selected if in_range(r.work_date, query.start, query.end)]

    if query.filter_mode == ReportFilter.EMPLOYEE:
        if not query.employee_id:
            raise ValidationError("Please select an employee.")
        selected = [r for r in selected if r.employee_id == int(query.employee_id)]
    elif query.filter_mode == ReportFilter.SITE:
        if not query.site:
            raise ValidationError("Please select a site.")
        site_ids = {e.employee_id for e in employees if e.site_location == query.site}
        selected = [r for r in selected if r.employee_id in site_ids]

    if not scope.can_see_all_sites:
        scoped_ids = {e.employee_id for e in employees if scope.allows(e)}
        selected = [r for r in selected if r.employee_id in scoped_ids]

    return selected


def compute_stats(records: Sequence[AttendanceRecord], rows: Sequence[ReportRow]) -> ReportStats:
    return ReportStats(
        total_records=len(rows),
        total_wages=sum((r.calculated_wage for r in rows), ZERO),
        unique_employees=len({r.employee_id for r in records}),
        unique_sites=len({r.site_location for r in rows}),
    )


class ReportService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[WageCalculator] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._calculator = calculator or StandardWageCalculator()

    def build_report(self, scope: AccessScope, query: ReportQuery) -> ReportData:
        employees = list(self._employees.list_all())
        by_id = {e.employee_id: e for e in employees}

        records = filter_records(self._attendance.list_all(), employees, scope, query)
        rows = [self._to_row(r, by_id) for r in records]
        return ReportData(rows=rows, stats=compute_stats(records, rows))

    def _to_row(self, record: AttendanceRecord, by_id: Mapping[int, Employee]) -> ReportRow:
        emp = by_id.get(record.employee_id)
        if emp is None:
            return ReportRow(
                employee_name=UNKNOWN_TEXT,
                employee_code=UNKNOWN_TEXT,
                job_category=UNKNOWN_TEXT,
                site_location=UNKNOWN_TEXT,
                work_date=record.work_date,
                attendance_type=record.attendance_type.label,
                daily_wage=ZERO,
                calculated_wage=ZERO,
            )
        return ReportRow(
            employee_name=emp.name,
            employee_code=emp.employee_code,
            job_category=emp.job_category,
            site_location=emp.site_location,
            work_date=record.work_date,
            attendance_type=record.attendance_type.label,
            daily_wage=emp.daily_wage,
            calculated_wage=self._calculator.day_wage(emp.daily_wage, record.attendance_type),
        )

    def available_sites(self, scope: AccessScope) -> list[str]:
        return sorted({e.site_location for e in employees_for_scope(self._employees, scope)})

    def dashboard_stats(self, scope: AccessScope, today: date) -> DashboardStats:
        employees = employees_for_scope(self._employees, scope)
        ids = {e.employee_id for e in employees}
        marked_today = sum(1 for r in self._attendance.list_for_date(today) if r.employee_id in ids)
        if scope.can_see_all_sites:
            active_sites = len({e.site_location for e in employees})
        else:
            active_sites = 1 if scope.scope_site else 0
        return DashboardStats(total_employees=len(employees), marked_today=marked_today, active_sites=active_sites)
