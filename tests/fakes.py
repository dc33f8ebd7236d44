"""In-memory repositories shared by the test modules."""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from src.attendance_reconciliation.attendance_reconciliation.attendance.model import (
    AttendanceFilter,
    DailyAttendanceRecord,
)
from src.attendance_reconciliation.attendance_reconciliation.calendar_rules.model import Holiday
from src.attendance_reconciliation.attendance_reconciliation.common.datetime_utils import parse_utc_instant
from src.attendance_reconciliation.attendance_reconciliation.common.local_calendar import LocalCalendar
from src.attendance_reconciliation.attendance_reconciliation.core.enums import (
    AttendanceStatus,
    PunchStatus,
    PunchType,
)
from src.attendance_reconciliation.attendance_reconciliation.employees.model import Employee, SalaryComponent
from src.attendance_reconciliation.attendance_reconciliation.punches.model import Punch, PunchFilter

IST = timezone(timedelta(hours=5, minutes=30))


def ist_calendar() -> LocalCalendar:
    return LocalCalendar(IST)


def make_employee(employee_id: int = 1, *, salary: Optional[float] = 26000, **kwargs) -> Employee:
    components = ()
    if salary is not None:
        components = (SalaryComponent("Basic", "earning", "fixed-amount", salary),)
    defaults = dict(
        employee_code=f"EMP{employee_id:03d}",
        first_name=f"First{employee_id}",
        last_name=f"Last{employee_id}",
        department_id=10,
        department_name="Operations",
        salary_components=components,
    )
    defaults.update(kwargs)
    return Employee(employee_id=employee_id, **defaults)


def make_punch(
    employee_id: int,
    punch_type: str,
    instant: str,
    *,
    punch_id: int = 0,
    status: PunchStatus = PunchStatus.VALID,
    geofence_name: Optional[str] = None,
    project_id: Optional[int] = None,
) -> Punch:
    return Punch(
        punch_id=punch_id,
        employee_id=employee_id,
        punch_type=PunchType(punch_type),
        punch_time=parse_utc_instant(instant),
        latitude=12.97,
        longitude=77.59,
        status=status,
        geofence_name=geofence_name,
        project_id=project_id,
    )


class InMemoryEmployees:
    def __init__(self, employees=()):
        self._by_id = {e.employee_id: e for e in employees}

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._by_id.get(int(employee_id))

    def list_active(self, *, search: Optional[str] = None):
        items = [e for e in self._by_id.values() if e.is_active]
        if search:
            s = search.lower()
            items = [
                e for e in items
                if s in e.first_name.lower() or s in e.last_name.lower() or s in e.employee_code.lower()
            ]
        return sorted(items, key=lambda e: e.employee_code)


class InMemoryPunches:
    def __init__(self, punches=(), *, employees=None):
        self.punches: list[Punch] = []
        self._employees = employees
        for p in punches:
            self._store(p)

    def _store(self, punch: Punch) -> Punch:
        punch = replace(punch, punch_id=len(self.punches) + 1)
        self.punches.append(punch)
        return punch

    def add(self, employee_id: int, punch_type: str, instant: str, **kwargs) -> Punch:
        return self._store(make_punch(employee_id, punch_type, instant, **kwargs))

    def list_for_employee(self, employee_id: int, start_utc: datetime, end_utc: datetime):
        items = [
            p for p in self.punches
            if p.employee_id == employee_id and start_utc <= p.punch_time < end_utc
        ]
        return sorted(items, key=lambda p: p.punch_time)

    def _matches_search(self, punch: Punch, search: Optional[str]) -> bool:
        if not search:
            return True
        employee = self._employees.get_by_id(punch.employee_id) if self._employees else None
        if employee is None:
            return False
        s = search.lower()
        return any(s in v.lower() for v in (employee.first_name, employee.last_name, employee.employee_code))

    def list_punches(self, filters: PunchFilter):
        items = [
            p for p in self.punches
            if (filters.employee_id is None or p.employee_id == filters.employee_id)
            and (filters.punch_type is None or p.punch_type == filters.punch_type)
            and (filters.status is None or p.status == filters.status)
            and (filters.project_id is None or p.project_id == filters.project_id)
            and (filters.start_utc is None or p.punch_time >= filters.start_utc)
            and (filters.end_utc is None or p.punch_time < filters.end_utc)
            and self._matches_search(p, filters.search)
        ]
        return sorted(items, key=lambda p: p.punch_time, reverse=True)

    def create(self, **fields) -> int:
        return self._store(Punch(punch_id=0, **fields)).punch_id


class InMemoryHolidays:
    def __init__(self, holidays=()):
        self._by_id: dict[int, Holiday] = {}
        for holiday_date, name in holidays:
            self.create(holiday_date=holiday_date, name=name)

    def _put(self, holiday: Holiday) -> None:
        self._by_id[holiday.holiday_id] = holiday

    def list_holidays(self, *, year=None, active_only=True):
        return [
            h for h in sorted(self._by_id.values(), key=lambda h: h.holiday_date)
            if (year is None or h.year == year) and (active_only is None or h.is_active == active_only)
        ]

    def list_between(self, *, start: date, end: date, active_only: bool = True):
        return [
            h for h in sorted(self._by_id.values(), key=lambda h: h.holiday_date)
            if start <= h.holiday_date <= end and (h.is_active or not active_only)
        ]

    def get_by_id(self, holiday_id: int):
        return self._by_id.get(int(holiday_id))

    def create(self, *, holiday_date: date, name: str, is_active: bool = True) -> int:
        holiday_id = len(self._by_id) + 1
        self._put(Holiday(holiday_id, holiday_date, name, holiday_date.year, is_active))
        return holiday_id

    def set_active(self, holiday_id: int, *, is_active: bool) -> bool:
        holiday = self._by_id.get(int(holiday_id))
        if not holiday:
            return False
        self._put(replace(holiday, is_active=is_active))
        return True

    def delete(self, holiday_id: int) -> bool:
        return self._by_id.pop(int(holiday_id), None) is not None


class InMemoryAttendance:
    """Keyed by (employee_id, work_date) like the unique index in MySQL."""

    def __init__(self, *, fail_on=()):
        self._by_key: dict[tuple[int, date], DailyAttendanceRecord] = {}
        self._next_id = 1
        self._fail_on = set(fail_on)
        self.upsert_calls = 0

    def seed(self, employee_id: int, work_date: date, status: AttendanceStatus, **kwargs) -> DailyAttendanceRecord:
        return self.upsert(DailyAttendanceRecord(None, employee_id, work_date, status, **kwargs))

    def get_by_id(self, attendance_id: int):
        return next((r for r in self._by_key.values() if r.attendance_id == int(attendance_id)), None)

    def get_for_employee_and_date(self, employee_id: int, work_date: date):
        return self._by_key.get((employee_id, work_date))

    def upsert(self, record: DailyAttendanceRecord) -> DailyAttendanceRecord:
        self.upsert_calls += 1
        if record.work_date in self._fail_on:
            raise RuntimeError(f"storage unavailable for {record.work_date}")

        key = (record.employee_id, record.work_date)
        existing = self._by_key.get(key)
        if existing and existing.status == AttendanceStatus.ON_LEAVE:
            return existing
        if existing:
            stored = replace(record, attendance_id=existing.attendance_id)
        else:
            stored = replace(record, attendance_id=self._next_id)
            self._next_id += 1
        self._by_key[key] = stored
        return stored

    def list_records(self, filters: AttendanceFilter):
        items = [
            r for r in self._by_key.values()
            if (filters.employee_id is None or r.employee_id == filters.employee_id)
            and (filters.work_date is None or r.work_date == filters.work_date)
            and (filters.start is None or r.work_date >= filters.start)
            and (filters.end is None or r.work_date <= filters.end)
            and (filters.status is None or r.status == filters.status)
        ]
        return sorted(items, key=lambda r: (r.work_date, r.employee_id), reverse=True)

    def list_for_employee_between(self, employee_id: int, start: date, end: date):
        return self.list_records(AttendanceFilter(employee_id=employee_id, start=start, end=end))

    def all(self):
        return sorted(self._by_key.values(), key=lambda r: (r.employee_id, r.work_date))


class InMemoryPayrollDays:
    def __init__(self, days=None):
        self._days = dict(days or {})

    def get_payroll_days(self, employee_id: int, month: str):
        return self._days.get((employee_id, month))
