from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def list_by_site(self, site_location: str) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_code(self, employee_code: str) -> Optional[Employee]:
        raise NotImplementedError

    def create_employee(
        self,
        *,
        employee_code: str,
        name: str,
        job_category: str,
        daily_wage: Decimal,
        site_location: str,
        added_by: Optional[int],
    ) -> int:
        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        """Hard delete. Attendance and advance rows are left in place."""

        raise NotImplementedError
