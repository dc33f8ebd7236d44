from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable, Mapping, Optional, Sequence

from ..calendar_rules.repository import HolidayRepository
from ..calendar_rules.resolver import CalendarResolver, index_holidays
from ..common.datetime_utils import iter_dates, parse_time_of_day
from ..common.local_calendar import LocalCalendar
from ..core.enums import AttendanceStatus
from ..core.exceptions import EmployeeNotFoundError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..punches.aggregator import PunchAggregator
from ..punches.model import Punch
from ..punches.repository import PunchRepository
from .classifier import AttendanceClassifier
from .model import DailyAttendanceRecord
from .repository import AttendanceRepository
from .strategies.base import StatusDecision

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyncError:
    work_date: date
    reason: str
    employee_id: Optional[int] = None


@dataclass
class SyncResult:
    records: list[DailyAttendanceRecord] = field(default_factory=list)
    errors: list[SyncError] = field(default_factory=list)

    @property
    def message(self) -> str:
        msg = f"Generated/updated {len(self.records)} attendance records"
        if self.errors:
            msg += f", {len(self.errors)} dates failed"
        return msg

    def extend(self, other: "SyncResult") -> None:
        self.records.extend(other.records)
        self.errors.extend(other.errors)


def _hours_between(check_in: Optional[str], check_out: Optional[str]) -> Optional[float]:
    if not check_in or not check_out:
        return None
    start = datetime.combine(date.min, parse_time_of_day(check_in))
    end = datetime.combine(date.min, parse_time_of_day(check_out))
    return round(max((end - start).total_seconds(), 0) / 3600, 2)


def merge_decision(
    employee_id: int,
    work_date: date,
    decision: StatusDecision,
    existing: Optional[DailyAttendanceRecord],
) -> DailyAttendanceRecord:
    """Build the record to store; new data augments existing data, never erases it.

    Working hours always describe the stored check-in/check-out pair: when the
    times are merged from two sources they are recomputed from that pair.
    """

    if existing is None:
        return DailyAttendanceRecord(
            attendance_id=None,
            employee_id=employee_id,
            work_date=work_date,
            status=decision.status,
            check_in=decision.check_in,
            check_out=decision.check_out,
            working_hours=decision.working_hours,
            location=decision.location,
            remarks=decision.remark,
        )

    check_in = decision.check_in or existing.check_in
    check_out = decision.check_out or existing.check_out
    if (check_in, check_out) == (decision.check_in, decision.check_out):
        working_hours = decision.working_hours
    elif (check_in, check_out) == (existing.check_in, existing.check_out):
        working_hours = existing.working_hours
    else:
        working_hours = _hours_between(check_in, check_out)

    return DailyAttendanceRecord(
        attendance_id=existing.attendance_id,
        employee_id=employee_id,
        work_date=work_date,
        status=decision.status,
        check_in=check_in,
        check_out=check_out,
        working_hours=working_hours,
        location=decision.location or existing.location,
        remarks=decision.remark or existing.remarks,
        employee_name=existing.employee_name,
        employee_code=existing.employee_code,
        department_id=existing.department_id,
    )


class ReconciliationSynchronizer:
    """Drive the classifier over a date range and upsert one record per employee-day.

    Re-running over overlapping ranges updates in place. Dates after the
    local "today" are never generated. A failing date is reported in
    `SyncResult.errors` and the remaining dates still run.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        punches: PunchRepository,
        holidays: HolidayRepository,
        *,
        calendar: LocalCalendar,
        resolver: CalendarResolver,
        aggregator: Optional[PunchAggregator] = None,
        classifier: Optional[AttendanceClassifier] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._punches = punches
        self._holidays = holidays
        self._calendar = calendar
        self._resolver = resolver
        self._aggregator = aggregator or PunchAggregator(calendar)
        self._classifier = classifier or AttendanceClassifier(calendar)

    def sync(self, employee_id: int, start_date: date, end_date: date, *, now: Optional[datetime] = None) -> SyncResult:
        if start_date > end_date:
            raise ValidationError("Start date must not be after end date")
        if not self._employees.get_by_id(int(employee_id)):
            raise EmployeeNotFoundError(employee_id)

        result = SyncResult()
        last_date = min(end_date, self._calendar.today(now))
        if start_date > last_date:
            logger.info("Nothing to sync for employee %s: %s is in the future", employee_id, start_date)
            return result

        holidays = index_holidays(self._holidays.list_between(start=start_date, end=last_date))
        start_utc, end_utc = self._calendar.range_bounds_utc(start_date, last_date)
        punches_by_day = self._aggregator.group_by_local_day(
            self._punches.list_for_employee(int(employee_id), start_utc, end_utc)
        )

        for work_date in iter_dates(start_date, last_date):
            try:
                record = self._sync_day(int(employee_id), work_date, holidays, punches_by_day.get(work_date, ()))
            except Exception as exc:
                logger.exception("Attendance sync failed for employee %s on %s", employee_id, work_date)
                result.errors.append(SyncError(work_date=work_date, reason=str(exc) or type(exc).__name__, employee_id=int(employee_id)))
                continue
            result.records.append(record)

        logger.info(
            "Synced employee %s from %s to %s: %d records, %d errors",
            employee_id, start_date, last_date, len(result.records), len(result.errors),
        )
        return result

    def sync_many(
        self,
        employee_ids: Iterable[int],
        start_date: date,
        end_date: date,
        *,
        now: Optional[datetime] = None,
    ) -> SyncResult:
        """Sequential batch driver; a missing employee is reported, not raised."""

        combined = SyncResult()
        for employee_id in employee_ids:
            try:
                combined.extend(self.sync(employee_id, start_date, end_date, now=now))
            except NotFoundError as exc:
                logger.warning("Skipping employee %s: %s", employee_id, exc)
                combined.errors.append(SyncError(work_date=start_date, reason=str(exc), employee_id=int(employee_id)))
        return combined

    def sync_active(self, start_date: date, end_date: date, *, now: Optional[datetime] = None) -> SyncResult:
        employee_ids = [e.employee_id for e in self._employees.list_active()]
        return self.sync_many(employee_ids, start_date, end_date, now=now)

    def _sync_day(
        self,
        employee_id: int,
        work_date: date,
        holidays: Mapping[date, str],
        punches: Sequence[Punch],
    ) -> DailyAttendanceRecord:
        calendar_day = self._resolver.resolve(work_date, holidays)
        decision = self._classifier.classify(work_date, calendar_day, self._aggregator.aggregate(punches))

        existing = self._attendance.get_for_employee_and_date(employee_id, work_date)
        if existing is not None and existing.status == AttendanceStatus.ON_LEAVE:
            # Set by the leave workflow; the generator never overrides it.
            return existing

        return self._attendance.upsert(merge_decision(employee_id, work_date, decision, existing))
