from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional, Sequence, Union

from ..common.validators import require_non_empty, require_positive_amount
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, DuplicateRecordError, ValidationError
from ..profiles.scope import AccessScope
from .model import Employee
from .repository import EmployeeRepository

log = logging.getLogger(__name__)


def employees_for_scope(employees: EmployeeRepository, scope: AccessScope) -> list[Employee]:
    if scope.can_see_all_sites:
        return list(employees.list_all())
    if not scope.scope_site:
        return []
    return list(employees.list_by_site(scope.scope_site))


def employee_in_scope(employees: EmployeeRepository, scope: AccessScope, employee_id: Optional[int]) -> Employee:
    """Load an employee the caller is allowed to act on."""

    if not employee_id:
        raise ValidationError("Please select an employee.")

    employee = employees.get_by_id(int(employee_id))
    if not employee:
        raise ValidationError("Employee not found")
    if not scope.allows(employee):
        raise AuthorizationError("Employee belongs to another site")
    return employee


class EmployeeService:
    """Use case: register, list and remove site workers."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_for_scope(self, scope: AccessScope) -> Sequence[Employee]:
        return employees_for_scope(self._employees, scope)

    def create_employee(
        self,
        *,
        scope: AccessScope,
        added_by: int,
        name: str,
        employee_code: str,
        job_category: str,
        daily_wage: Union[str, Decimal],
        site_location: Optional[str] = None,
    ) -> int:
        # Supervisors can only add workers to their own site.
        if not scope.can_see_all_sites:
            site_location = scope.scope_site

        try:
            name = require_non_empty(name, "Name")
            employee_code = require_non_empty(employee_code, "Employee ID")
            job_category = require_non_empty(job_category, "Job category")
            site_location = require_non_empty(site_location, "Site location")
            require_non_empty(str(daily_wage if daily_wage is not None else ""), "Daily wage")
        except ValidationError:
            raise ValidationError("Please fill in all fields.")

        wage = require_positive_amount(daily_wage, "Daily wage")

        if self._employees.get_by_code(employee_code):
            raise DuplicateRecordError("Employee ID already exists.")

        employee_id = self._employees.create_employee(
            employee_code=employee_code,
            name=name,
            job_category=job_category,
            daily_wage=wage,
            site_location=site_location,
            added_by=int(added_by),
        )
        log.info("employee %s (%s) added at %r by %s", employee_id, employee_code, site_location, added_by)
        return employee_id

    def delete_employee(self, *, current_role: Role, employee_id: int) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can remove employees")

        if not self._employees.get_by_id(int(employee_id)):
            raise ValidationError("Employee not found")

        if not self._employees.delete_by_id(int(employee_id)):
            raise ValidationError("Failed to remove employee")
        log.info("employee %s removed", employee_id)
