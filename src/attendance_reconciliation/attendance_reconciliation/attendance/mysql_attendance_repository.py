from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone
from .model import AttendanceFilter, DailyAttendanceRecord
from .repository import AttendanceRepository

_SELECT = """
    SELECT
        da.attendance_id, da.employee_id, da.work_date, da.status,
        da.check_in, da.check_out, da.working_hours, da.location, da.remarks,
        CONCAT(e.first_name, ' ', e.last_name) AS employee_name,
        e.employee_code, e.department_id
    FROM daily_attendance da
    JOIN employees e ON e.employee_id = da.employee_id
"""


def _to_record(r: dict) -> DailyAttendanceRecord:
    return DailyAttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        status=AttendanceStatus(r["status"]),
        check_in=r.get("check_in"),
        check_out=r.get("check_out"),
        working_hours=as_float(r.get("working_hours")),
        location=r.get("location"),
        remarks=r.get("remarks"),
        employee_name=(r.get("employee_name") or "").strip() or None,
        employee_code=r.get("employee_code"),
        department_id=r.get("department_id"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, attendance_id: int) -> Optional[DailyAttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE da.attendance_id=%s", (int(attendance_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[DailyAttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE da.employee_id=%s AND da.work_date=%s", (int(employee_id), work_date))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def upsert(self, record: DailyAttendanceRecord) -> DailyAttendanceRecord:
        # uq_daily_attendance_employee_date turns a racing insert into an update;
        # the merge mirrors the synchronizer (keep ON_LEAVE, never null out).
        # Row alias form needs MySQL 8.0.19+; status is assigned last so the
        # ON_LEAVE checks above still see the stored value.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO daily_attendance(
                    employee_id, work_date, status, check_in, check_out, working_hours, location, remarks
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s) AS incoming
                ON DUPLICATE KEY UPDATE
                    attendance_id = LAST_INSERT_ID(daily_attendance.attendance_id),
                    check_in = IF(daily_attendance.status='ON_LEAVE', daily_attendance.check_in,
                                  COALESCE(incoming.check_in, daily_attendance.check_in)),
                    check_out = IF(daily_attendance.status='ON_LEAVE', daily_attendance.check_out,
                                   COALESCE(incoming.check_out, daily_attendance.check_out)),
                    working_hours = IF(daily_attendance.status='ON_LEAVE', daily_attendance.working_hours,
                                       COALESCE(incoming.working_hours, daily_attendance.working_hours)),
                    location = IF(daily_attendance.status='ON_LEAVE', daily_attendance.location,
                                  COALESCE(incoming.location, daily_attendance.location)),
                    remarks = IF(daily_attendance.status='ON_LEAVE', daily_attendance.remarks,
                                 COALESCE(incoming.remarks, daily_attendance.remarks)),
                    status = IF(daily_attendance.status='ON_LEAVE', daily_attendance.status, incoming.status)
                """,
                (
                    int(record.employee_id),
                    record.work_date,
                    record.status.value,
                    record.check_in,
                    record.check_out,
                    record.working_hours,
                    record.location,
                    record.remarks,
                ),
            )
            attendance_id = int(cur.lastrowid)
            cur.execute(_SELECT + " WHERE da.attendance_id=%s", (attendance_id,))
            return _to_record(fetchone(cur))

    def list_records(self, filters: AttendanceFilter) -> Sequence[DailyAttendanceRecord]:
        clauses = ["1=1"]
        params: list[object] = []

        if filters.employee_id is not None:
            clauses.append("da.employee_id=%s")
            params.append(int(filters.employee_id))
        if filters.work_date is not None:
            clauses.append("da.work_date=%s")
            params.append(filters.work_date)
        if filters.start is not None:
            clauses.append("da.work_date >= %s")
            params.append(filters.start)
        if filters.end is not None:
            clauses.append("da.work_date <= %s")
            params.append(filters.end)
        if filters.status is not None:
            clauses.append("da.status=%s")
            params.append(filters.status.value)
        if filters.department_id is not None:
            clauses.append("e.department_id=%s")
            params.append(int(filters.department_id))
        if filters.search:
            like = f"%{filters.search.strip()}%"
            clauses.append(
                "(e.first_name LIKE %s OR e.last_name LIKE %s OR e.employee_code LIKE %s"
                " OR da.location LIKE %s OR da.remarks LIKE %s)"
            )
            params.extend([like] * 5)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + f" WHERE {' AND '.join(clauses)} ORDER BY da.work_date DESC, da.employee_id ASC",
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_employee_between(self, employee_id: int, start: date, end: date) -> Sequence[DailyAttendanceRecord]:
        return self.list_records(AttendanceFilter(employee_id=employee_id, start=start, end=end))
