from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import PunchStatus, PunchType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, as_utc, db_cursor, fetchall, to_db_utc
from .model import Punch, PunchFilter
from .repository import PunchRepository

_COLUMN_NAMES = (
    "punch_id", "employee_id", "punch_type", "punch_time", "latitude", "longitude", "status",
    "geofence_id", "geofence_name", "project_id", "location", "remarks",
)
_COLUMNS = ", ".join(_COLUMN_NAMES)
_JOINED_COLUMNS = ", ".join(f"p.{c}" for c in _COLUMN_NAMES)


def _to_punch(r: dict) -> Punch:
    return Punch(
        punch_id=int(r["punch_id"]),
        employee_id=int(r["employee_id"]),
        punch_type=PunchType(r["punch_type"]),
        punch_time=as_utc(r["punch_time"]),
        latitude=as_float(r["latitude"]),
        longitude=as_float(r["longitude"]),
        status=PunchStatus(r["status"]),
        geofence_id=r.get("geofence_id"),
        geofence_name=r.get("geofence_name"),
        project_id=r.get("project_id"),
        location=r.get("location"),
        remarks=r.get("remarks"),
    )


class MySQLPunchRepository(PunchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: int, start_utc: datetime, end_utc: datetime) -> Sequence[Punch]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM punches
                WHERE employee_id=%s AND punch_time >= %s AND punch_time < %s
                ORDER BY punch_time ASC, punch_id ASC
                """,
                (int(employee_id), to_db_utc(start_utc), to_db_utc(end_utc)),
            )
            return [_to_punch(r) for r in fetchall(cur)]

    def list_punches(self, filters: PunchFilter) -> Sequence[Punch]:
        clauses = ["1=1"]
        params: list[object] = []
        if filters.employee_id is not None:
            clauses.append("p.employee_id=%s")
            params.append(int(filters.employee_id))
        if filters.punch_type is not None:
            clauses.append("p.punch_type=%s")
            params.append(filters.punch_type.value)
        if filters.status is not None:
            clauses.append("p.status=%s")
            params.append(filters.status.value)
        if filters.project_id is not None:
            clauses.append("p.project_id=%s")
            params.append(int(filters.project_id))
        if filters.search:
            like = f"%{filters.search.strip()}%"
            clauses.append("(e.first_name LIKE %s OR e.last_name LIKE %s OR e.employee_code LIKE %s)")
            params.extend([like] * 3)
        if filters.start_utc is not None:
            clauses.append("p.punch_time >= %s")
            params.append(to_db_utc(filters.start_utc))
        if filters.end_utc is not None:
            clauses.append("p.punch_time < %s")
            params.append(to_db_utc(filters.end_utc))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_JOINED_COLUMNS}
                FROM punches p
                JOIN employees e ON e.employee_id = p.employee_id
                WHERE {' AND '.join(clauses)}
                ORDER BY p.punch_time DESC, p.punch_id DESC
                """,
                tuple(params),
            )
            return [_to_punch(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        employee_id: int,
        punch_type: PunchType,
        punch_time: datetime,
        latitude: float,
        longitude: float,
        status: PunchStatus,
        geofence_id: Optional[int] = None,
        geofence_name: Optional[str] = None,
        project_id: Optional[int] = None,
        location: Optional[str] = None,
        remarks: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO punches(
                    employee_id, punch_type, punch_time, latitude, longitude, status,
                    geofence_id, geofence_name, project_id, location, remarks
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(employee_id),
                    punch_type.value,
                    to_db_utc(punch_time),
                    latitude,
                    longitude,
                    status.value,
                    geofence_id,
                    geofence_name,
                    project_id,
                    location,
                    remarks,
                ),
            )
            return int(cur.lastrowid)
