from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class DailyAttendanceRecord:
    """System of record for one employee-day.

    At most one record exists per (employee_id, work_date); `check_in` and
    `check_out` are local time-of-day strings ("HH:MM:SS").
    """

    attendance_id: Optional[int]
    employee_id: int
    work_date: date
    status: AttendanceStatus
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    working_hours: Optional[float] = None
    location: Optional[str] = None
    remarks: Optional[str] = None
    employee_name: Optional[str] = None
    employee_code: Optional[str] = None
    department_id: Optional[int] = None


@dataclass(frozen=True)
class AttendanceFilter:
    employee_id: Optional[int] = None
    work_date: Optional[date] = None
    status: Optional[AttendanceStatus] = None
    department_id: Optional[int] = None
    search: Optional[str] = None
    start: Optional[date] = None
    end: Optional[date] = None


@dataclass(frozen=True)
class AttendanceStatistics:
    total: int
    present: int
    late: int
    early_departure: int
    absent: int
