from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Holiday
from .repository import HolidayRepository

_COLUMNS = "holiday_id, holiday_date, holiday_name, year, is_active"


def _to_holiday(r: dict) -> Holiday:
    return Holiday(
        holiday_id=int(r["holiday_id"]),
        holiday_date=r["holiday_date"],
        name=r["holiday_name"],
        year=int(r["year"]),
        is_active=bool(r["is_active"]),
    )


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_holidays(self, *, year: Optional[int] = None, active_only: Optional[bool] = True) -> Sequence[Holiday]:
        clauses = ["1=1"]
        params: list[object] = []
        if year is not None:
            clauses.append("year=%s")
            params.append(int(year))
        if active_only is not None:
            clauses.append("is_active=%s")
            params.append(1 if active_only else 0)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM holidays WHERE {' AND '.join(clauses)} ORDER BY holiday_date",
                tuple(params),
            )
            return [_to_holiday(r) for r in fetchall(cur)]

    def list_between(self, *, start: date, end: date, active_only: bool = True) -> Sequence[Holiday]:
        sql = f"SELECT {_COLUMNS} FROM holidays WHERE holiday_date BETWEEN %s AND %s"
        if active_only:
            sql += " AND is_active=1"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql + " ORDER BY holiday_date", (start, end))
            return [_to_holiday(r) for r in fetchall(cur)]

    def get_by_id(self, holiday_id: int) -> Optional[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM holidays WHERE holiday_id=%s", (int(holiday_id),))
            r = fetchone(cur)
            return _to_holiday(r) if r else None

    def create(self, *, holiday_date: date, name: str, is_active: bool = True) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO holidays(holiday_date, holiday_name, year, is_active)
                VALUES(%s,%s,%s,%s)
                """,
                (holiday_date, name, holiday_date.year, 1 if is_active else 0),
            )
            return int(cur.lastrowid)

    def set_active(self, holiday_id: int, *, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE holidays SET is_active=%s WHERE holiday_id=%s",
                (1 if is_active else 0, int(holiday_id)),
            )
            return cur.rowcount > 0

    def delete(self, holiday_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM holidays WHERE holiday_id=%s", (int(holiday_id),))
            return cur.rowcount > 0
