from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchall, fetchone, unique_violation_as
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, employee_code, name, job_category, daily_wage, site_location, added_by, created_at"


def _to_employee(row: dict) -> Employee:
    return Employee(
        employee_id=int(row["employee_id"]),
        employee_code=row["employee_code"],
        name=row["name"],
        job_category=row["job_category"],
        daily_wage=as_decimal(row["daily_wage"]),
        site_location=row["site_location"],
        added_by=row.get("added_by"),
        created_at=row.get("created_at"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY employee_id")
            return [_to_employee(r) for r in fetchall(cur)]

    def list_by_site(self, site_location: str) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE site_location=%s ORDER BY employee_id",
                (site_location,),
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def get_by_code(self, employee_code: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_code=%s", (employee_code,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

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
        with unique_violation_as("Employee ID already exists."):
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO employees(employee_code, name, job_category, daily_wage, site_location, added_by)
                    VALUES(%s,%s,%s,%s,%s,%s)
                    """,
                    (employee_code, name, job_category, daily_wage, site_location, added_by),
                )
                return int(cur.lastrowid)

    def delete_by_id(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (int(employee_id),))
            return cur.rowcount > 0
