from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

import pytest
from werkzeug.security import generate_password_hash

from site_workforce.advances.model import WagePayment
from site_workforce.attendance.model import AttendanceRecord
from site_workforce.container import wire_container
from site_workforce.core.enums import AttendanceType, Role
from site_workforce.core.exceptions import DuplicateRecordError
from site_workforce.employees.model import Employee
from site_workforce.profiles.model import UserProfile
from site_workforce.profiles.scope import AccessScope


class InMemoryProfiles:
    def __init__(self):
        self.by_id: dict[int, UserProfile] = {}
        self._id = 0

    def add(self, *, name: str, email: str, password: str, role: Role, site_location: Optional[str] = None) -> UserProfile:
        user_id = self.create_profile(
            name=name,
            email=email,
            password_hash=generate_password_hash(password),
            role=role,
            site_location=site_location,
        )
        return self.by_id[user_id]

    def get_by_id(self, user_id: int) -> Optional[UserProfile]:
        return self.by_id.get(user_id)

    def get_by_email(self, email: str) -> Optional[UserProfile]:
        return next((p for p in self.by_id.values() if p.email == email), None)

    def list_by_ids(self, user_ids: Iterable[int]):
        return [self.by_id[i] for i in set(user_ids) if i in self.by_id]

    def create_profile(self, *, name, email, password_hash, role, site_location) -> int:
        if self.get_by_email(email):
            raise DuplicateRecordError("Email already registered")
        self._id += 1
        self.by_id[self._id] = UserProfile(
            user_id=self._id,
            name=name,
            email=email,
            password_hash=password_hash,
            role=role,
            site_location=site_location,
        )
        return self._id

    def update_profile(self, *, user_id, name, email, site_location) -> None:
        self.by_id[user_id] = replace(self.by_id[user_id], name=name, email=email, site_location=site_location)


class InMemoryEmployees:
    def __init__(self):
        self.by_id: dict[int, Employee] = {}
        self._id = 0

    def add(self, code: str, name: str, wage, site: str, job: str = "Mason") -> Employee:
        employee_id = self.create_employee(
            employee_code=code,
            name=name,
            job_category=job,
            daily_wage=Decimal(str(wage)),
            site_location=site,
            added_by=None,
        )
        return self.by_id[employee_id]

    def list_all(self):
        return sorted(self.by_id.values(), key=lambda e: e.employee_id)

    def list_by_site(self, site_location: str):
        return [e for e in self.list_all() if e.site_location == site_location]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.by_id.get(employee_id)

    def get_by_code(self, employee_code: str) -> Optional[Employee]:
        return next((e for e in self.by_id.values() if e.employee_code == employee_code), None)

    def create_employee(self, *, employee_code, name, job_category, daily_wage, site_location, added_by) -> int:
        if self.get_by_code(employee_code):
            raise DuplicateRecordError("Employee ID already exists.")
        self._id += 1
        self.by_id[self._id] = Employee(
            employee_id=self._id,
            employee_code=employee_code,
            name=name,
            job_category=job_category,
            daily_wage=daily_wage,
            site_location=site_location,
            added_by=added_by,
        )
        return self._id

    def delete_by_id(self, employee_id: int) -> bool:
        return self.by_id.pop(employee_id, None) is not None


class InMemoryAttendance:
    def __init__(self):
        self.by_id: dict[int, AttendanceRecord] = {}
        self.insert_calls = 0
        self._id = 0

    def add(self, employee_id: int, work_date: date, attendance_type: AttendanceType, marked_by=None) -> int:
        return self.create_record(
            employee_id=employee_id,
            work_date=work_date,
            attendance_type=attendance_type,
            marked_by=marked_by,
        )

    def list_all(self):
        return sorted(self.by_id.values(), key=lambda r: r.attendance_id)

    def list_for_employee(self, employee_id: int):
        return [r for r in self.list_all() if r.employee_id == employee_id]

    def list_for_date(self, work_date: date):
        return [r for r in self.list_all() if r.work_date == work_date]

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        return next(
            (r for r in self.by_id.values() if r.employee_id == employee_id and r.work_date == work_date),
            None,
        )

    def create_record(self, *, employee_id, work_date, attendance_type, marked_by) -> int:
        self.insert_calls += 1
        if self.get_for_employee_and_date(employee_id, work_date):
            raise DuplicateRecordError("Attendance already marked for this employee on this date.")
        self._id += 1
        self.by_id[self._id] = AttendanceRecord(
            attendance_id=self._id,
            employee_id=employee_id,
            work_date=work_date,
            attendance_type=attendance_type,
            marked_by=marked_by,
        )
        return self._id

    def delete_by_id(self, attendance_id: int) -> bool:
        return self.by_id.pop(attendance_id, None) is not None


class InMemoryAdvances:
    def __init__(self):
        self.by_id: dict[int, WagePayment] = {}
        self._id = 0

    def add(self, employee_id: int, amount, payment_date: date) -> int:
        return self.create_payment(
            employee_id=employee_id,
            advance_amount=Decimal(str(amount)),
            payment_date=payment_date,
            paid_by=None,
        )

    def list_for_employee(self, employee_id: int):
        return [p for p in self.by_id.values() if p.employee_id == employee_id]

    def create_payment(self, *, employee_id, advance_amount, payment_date, paid_by) -> int:
        self._id += 1
        self.by_id[self._id] = WagePayment(
            payment_id=self._id,
            employee_id=employee_id,
            advance_amount=advance_amount,
            payment_date=payment_date,
            paid_by=paid_by,
        )
        return self._id

    def delete_by_id(self, payment_id: int) -> bool:
        return self.by_id.pop(payment_id, None) is not None


@pytest.fixture
def profiles():
    return InMemoryProfiles()


@pytest.fixture
def employees():
    return InMemoryEmployees()


@pytest.fixture
def attendance():
    return InMemoryAttendance()


@pytest.fixture
def advances():
    return InMemoryAdvances()


@pytest.fixture
def container(profiles, employees, attendance, advances):
    return wire_container(
        profiles_repo=profiles,
        employees_repo=employees,
        attendance_repo=attendance,
        advances_repo=advances,
    )


@pytest.fixture
def admin_scope():
    return AccessScope.for_role(Role.ADMIN, None)


@pytest.fixture
def downtown_scope():
    return AccessScope.for_role(Role.SUPERVISOR, "Downtown")
