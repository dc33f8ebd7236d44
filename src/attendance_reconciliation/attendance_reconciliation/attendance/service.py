from __future__ import annotations

from dataclasses import asdict
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..core.enums import AttendanceStatus, PunctualityStatus
from ..core.exceptions import AttendanceRecordNotFoundError, ValidationError
from .model import AttendanceFilter, AttendanceStatistics, DailyAttendanceRecord
from .punctuality import PunctualityPolicy
from .repository import AttendanceRepository
from .synchronizer import ReconciliationSynchronizer, SyncResult

# Days that carry no presence expectation.
_NON_WORKING = {AttendanceStatus.HOLIDAY, AttendanceStatus.WEEK_OFF, AttendanceStatus.ON_LEAVE}


def parse_status(value: Optional[str]) -> Optional[AttendanceStatus]:
    v = (value or "").strip().upper()
    if not v or v == "ALL":
        return None
    try:
        return AttendanceStatus(v)
    except ValueError:
        raise ValidationError(f"Invalid attendance status: {value!r}")


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        synchronizer: ReconciliationSynchronizer,
        *,
        punctuality: Optional[PunctualityPolicy] = None,
    ):
        self._attendance = attendance
        self._synchronizer = synchronizer
        self._punctuality = punctuality or PunctualityPolicy()

    def generate(self, employee_id: int, start: str, end: str, *, now: Optional[datetime] = None) -> dict:
        """Generate/sync records for one employee; always reports partial results."""

        result = self._synchronizer.sync(int(employee_id), parse_iso_date(start), parse_iso_date(end), now=now)
        return self.result_to_dict(result)

    def generate_active(self, start: str, end: str, *, now: Optional[datetime] = None) -> dict:
        result = self._synchronizer.sync_active(parse_iso_date(start), parse_iso_date(end), now=now)
        return self.result_to_dict(result)

    def list_records(self, filters: AttendanceFilter) -> Sequence[DailyAttendanceRecord]:
        return self._attendance.list_records(filters)

    def get_record(self, attendance_id: int) -> DailyAttendanceRecord:
        record = self._attendance.get_by_id(int(attendance_id))
        if not record:
            raise AttendanceRecordNotFoundError(attendance_id)
        return record

    def punctuality_of(self, record: DailyAttendanceRecord) -> Optional[PunctualityStatus]:
        if record.status in _NON_WORKING:
            return None
        if record.status == AttendanceStatus.ABSENT:
            return PunctualityStatus.ABSENT
        return self._punctuality.classify(record.check_in, record.check_out)

    def statistics(self, *, start: Optional[date] = None, end: Optional[date] = None) -> AttendanceStatistics:
        counts = {s: 0 for s in PunctualityStatus}
        for record in self._attendance.list_records(AttendanceFilter(start=start, end=end)):
            p = self.punctuality_of(record)
            if p is not None:
                counts[p] += 1

        return AttendanceStatistics(
            total=sum(counts.values()),
            present=counts[PunctualityStatus.PRESENT],
            late=counts[PunctualityStatus.LATE],
            early_departure=counts[PunctualityStatus.EARLY_DEPARTURE],
            absent=counts[PunctualityStatus.ABSENT],
        )

    def to_dict(self, record: DailyAttendanceRecord) -> dict:
        punctuality = self.punctuality_of(record)
        return {
            "id": record.attendance_id,
            "employee_id": record.employee_id,
            "employee_name": record.employee_name,
            "employee_code": record.employee_code,
            "department": record.department_id,
            "date": record.work_date.strftime("%Y-%m-%d"),
            "check_in": record.check_in,
            "check_out": record.check_out,
            "working_hours": record.working_hours,
            "status": record.status.value,
            "punctuality": punctuality.value if punctuality else None,
            "location": record.location,
            "remarks": record.remarks,
        }

    def result_to_dict(self, result: SyncResult) -> dict:
        return {
            "message": result.message,
            "count": len(result.records),
            "records": [self.to_dict(r) for r in result.records],
            "errors": [
                {"employee_id": e.employee_id, "date": e.work_date.strftime("%Y-%m-%d"), "reason": e.reason}
                for e in result.errors
            ],
        }

    @staticmethod
    def statistics_to_dict(stats: AttendanceStatistics) -> dict:
        return asdict(stats)
