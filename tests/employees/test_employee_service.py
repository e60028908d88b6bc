from decimal import Decimal

import pytest

from site_workforce.core.enums import Role
from site_workforce.core.exceptions import AuthorizationError, DuplicateRecordError, ValidationError
from site_workforce.employees.service import EmployeeService


@pytest.fixture
def service(employees):
    return EmployeeService(employees)


def _create(service, scope, **overrides):
    values = dict(
        scope=scope,
        added_by=1,
        name="Ravi",
        employee_code="E1",
        job_category="Mason",
        daily_wage="650.50",
        site_location="Uptown",
    )
    values.update(overrides)
    return service.create_employee(**values)


def test_admin_creates_employee_at_given_site(service, employees, admin_scope):
    employee_id = _create(service, admin_scope)

    emp = employees.get_by_id(employee_id)
    assert emp.site_location == "Uptown"
    assert emp.daily_wage == Decimal("650.50")


def test_supervisor_employee_is_forced_to_own_site(service, employees, downtown_scope):
    employee_id = _create(service, downtown_scope, site_location="Uptown")
    assert employees.get_by_id(employee_id).site_location == "Downtown"


def test_blank_fields_are_rejected(service, admin_scope):
    with pytest.raises(ValidationError, match="Please fill in all fields."):
        _create(service, admin_scope, job_category="  ")
    with pytest.raises(ValidationError, match="Please fill in all fields."):
        _create(service, admin_scope, daily_wage="")


def test_wage_must_be_positive(service, admin_scope):
    with pytest.raises(ValidationError, match="greater than 0"):
        _create(service, admin_scope, daily_wage="0")
    with pytest.raises(ValidationError, match="must be a number"):
        _create(service, admin_scope, daily_wage="abc")


def test_duplicate_code_is_rejected(service, admin_scope):
    _create(service, admin_scope)
    with pytest.raises(DuplicateRecordError, match="already exists"):
        _create(service, admin_scope, name="Other")


def test_list_for_scope(service, employees, admin_scope, downtown_scope):
    employees.add("E1", "Ravi", 500, "Downtown")
    employees.add("E2", "Anil", 800, "Uptown")

    assert [e.employee_code for e in service.list_for_scope(admin_scope)] == ["E1", "E2"]
    assert [e.employee_code for e in service.list_for_scope(downtown_scope)] == ["E1"]


def test_only_admin_deletes(service, employees):
    emp = employees.add("E1", "Ravi", 500, "Downtown")

    with pytest.raises(AuthorizationError):
        service.delete_employee(current_role=Role.SUPERVISOR, employee_id=emp.employee_id)

    service.delete_employee(current_role=Role.ADMIN, employee_id=emp.employee_id)
    assert employees.get_by_id(emp.employee_id) is None

    with pytest.raises(ValidationError, match="not found"):
        service.delete_employee(current_role=Role.ADMIN, employee_id=emp.employee_id)
