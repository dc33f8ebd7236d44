from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceFilter, DailyAttendanceRecord


class AttendanceRepository(Protocol):
    def get_by_id(self, attendance_id: int) -> Optional[DailyAttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[DailyAttendanceRecord]:
        raise NotImplementedError

    def upsert(self, record: DailyAttendanceRecord) -> DailyAttendanceRecord:
        """Insert or update keyed by (employee_id, work_date).

        Must be safe when two syncs of the same employee race: the store
        enforces the key and an existing ON_LEAVE status is kept.
        """

        raise NotImplementedError

    def list_records(self, filters: AttendanceFilter) -> Sequence[DailyAttendanceRecord]:
        raise NotImplementedError

    def list_for_employee_between(self, employee_id: int, start: date, end: date) -> Sequence[DailyAttendanceRecord]:
        raise NotImplementedError
