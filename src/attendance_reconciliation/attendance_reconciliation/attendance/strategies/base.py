from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ...calendar_rules.model import CalendarDay
from ...common.local_calendar import LocalCalendar
from ...core.enums import AttendanceStatus
from ...punches.model import DayPunches


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    working_hours: Optional[float] = None
    remark: Optional[str] = None
    location: Optional[str] = None


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a day's attendance status."""

    @abstractmethod
    def decide(
        self,
        *,
        work_date: date,
        calendar_day: CalendarDay,
        day_punches: DayPunches,
        calendar: LocalCalendar,
    ) -> StatusDecision:
        raise NotImplementedError
