from __future__ import annotations

from dataclasses import dataclass

from .advances.mysql_advance_repository import MySQLAdvanceRepository
from .advances.repository import AdvanceRepository
from .advances.service import AdvanceService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.enums import AdvanceScoping
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .payroll.calculator.standard_calculator import StandardWageCalculator
from .payroll.service import PayrollService
from .profiles.mysql_profile_repository import MySQLProfileRepository
from .profiles.repository import ProfileRepository
from .profiles.service import AuthService, ProfileService
from .reports.service import ReportService


@dataclass(frozen=True)
class Container:
    profiles_repo: ProfileRepository
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    advances_repo: AdvanceRepository

    auth_service: AuthService
    profile_service: ProfileService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    advance_service: AdvanceService
    payroll_service: PayrollService
    report_service: ReportService


def wire_container(
    *,
    profiles_repo: ProfileRepository,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    advances_repo: AdvanceRepository,
    advance_scoping: AdvanceScoping = AdvanceScoping.UNBOUNDED,
) -> Container:
    """Build every service on top of the given repositories."""

    calculator = StandardWageCalculator()

    return Container(
        profiles_repo=profiles_repo,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        advances_repo=advances_repo,
        auth_service=AuthService(profiles_repo),
        profile_service=ProfileService(profiles_repo),
        employee_service=EmployeeService(employees_repo),
        attendance_service=AttendanceService(attendance_repo, employees_repo, profiles_repo),
        advance_service=AdvanceService(advances_repo, employees_repo),
        payroll_service=PayrollService(
            attendance_repo,
            employees_repo,
            advances_repo,
            calculator=calculator,
            advance_scoping=advance_scoping,
        ),
        report_service=ReportService(attendance_repo, employees_repo, calculator=calculator),
    )


def build_container(*, db_config: dict, advance_scoping: str = AdvanceScoping.UNBOUNDED.value) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return wire_container(
        profiles_repo=MySQLProfileRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        advances_repo=MySQLAdvanceRepository(conn),
        advance_scoping=AdvanceScoping(advance_scoping),
    )
