from datetime import date
from decimal import Decimal

import pytest

from site_workforce.advances.service import AdvanceService
from site_workforce.core.enums import Role
from site_workforce.core.exceptions import AuthorizationError, ValidationError


@pytest.fixture
def service(advances, employees):
    return AdvanceService(advances, employees)


def test_record_advance(service, advances, employees, downtown_scope):
    emp = employees.add("E1", "Ravi", 500, "Downtown")

    payment_id = service.record_advance(
        scope=downtown_scope, paid_by=3, employee_id=emp.employee_id, amount="250.75", payment_date=date(2025, 1, 9)
    )

    payment = advances.by_id[payment_id]
    assert payment.advance_amount == Decimal("250.75")
    assert payment.payment_date == date(2025, 1, 9)
    assert payment.paid_by == 3


def test_negative_advance_is_allowed(service, employees, admin_scope):
    emp = employees.add("E1", "Ravi", 500, "Downtown")
    service.record_advance(scope=admin_scope, paid_by=1, employee_id=emp.employee_id, amount="-100")

    [payment] = service.list_for_employee(admin_scope, emp.employee_id)
    assert payment.advance_amount == Decimal("-100")


@pytest.mark.parametrize("employee_id, amount", [(None, "100"), (1, ""), (1, None)])
def test_missing_input(service, employees, admin_scope, employee_id, amount):
    employees.add("E1", "Ravi", 500, "Downtown")
    with pytest.raises(ValidationError, match="select an employee and enter advance amount"):
        service.record_advance(scope=admin_scope, paid_by=1, employee_id=employee_id, amount=amount)


def test_other_site_is_forbidden(service, employees, downtown_scope):
    emp = employees.add("E2", "Anil", 800, "Uptown")
    with pytest.raises(AuthorizationError):
        service.record_advance(scope=downtown_scope, paid_by=2, employee_id=emp.employee_id, amount="50")


def test_only_admin_removes(service, advances, employees):
    emp = employees.add("E1", "Ravi", 500, "Downtown")
    payment_id = advances.add(emp.employee_id, 100, date(2025, 1, 1))

    with pytest.raises(AuthorizationError):
        service.remove_advance(current_role=Role.SUPERVISOR, payment_id=payment_id)

    service.remove_advance(current_role=Role.ADMIN, payment_id=payment_id)
    assert advances.by_id == {}
