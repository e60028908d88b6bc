from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchall
from .model import WagePayment
from .repository import AdvanceRepository


class MySQLAdvanceRepository(AdvanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: int) -> Sequence[WagePayment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT payment_id, employee_id, advance_amount, payment_date, paid_by
                FROM wage_payments
                WHERE employee_id=%s
                ORDER BY payment_date, payment_id
                """,
                (int(employee_id),),
            )
            return [
                WagePayment(
                    payment_id=int(r["payment_id"]),
                    employee_id=int(r["employee_id"]),
                    advance_amount=as_decimal(r["advance_amount"]),
                    payment_date=r["payment_date"],
                    paid_by=r.get("paid_by"),
                )
                for r in fetchall(cur)
            ]

    def create_payment(
        self,
        *,
        employee_id: int,
        advance_amount: Decimal,
        payment_date: date,
        paid_by: Optional[int],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO wage_payments(employee_id, advance_amount, payment_date, paid_by)
                VALUES(%s,%s,%s,%s)
                """,
                (int(employee_id), advance_amount, payment_date, paid_by),
            )
            return int(cur.lastrowid)

    def delete_by_id(self, payment_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM wage_payments WHERE payment_id=%s", (int(payment_id),))
            return cur.rowcount > 0
