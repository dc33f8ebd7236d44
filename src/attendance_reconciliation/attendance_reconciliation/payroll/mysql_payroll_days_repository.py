from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchone
from .repository import PayrollDaysProvider


class MySQLPayrollDaysRepository(PayrollDaysProvider):
    """Reads the payroll system's monthly export (`payroll_days` table)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_payroll_days(self, employee_id: int, month: str) -> Optional[float]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT payroll_days FROM payroll_days WHERE employee_id=%s AND payroll_month=%s",
                (int(employee_id), month),
            )
            r = fetchone(cur)
            return as_float(r["payroll_days"]) if r else None
