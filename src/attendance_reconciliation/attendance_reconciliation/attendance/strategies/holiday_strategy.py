from __future__ import annotations

from datetime import date

from ...calendar_rules.model import CalendarDay
from ...common.local_calendar import LocalCalendar
from ...core.enums import AttendanceStatus
from ...punches.model import DayPunches
from .base import AttendanceStrategy, StatusDecision


class HolidayStrategy(AttendanceStrategy):
    """Declared holiday; remark carries the holiday name."""

    def decide(self, *, work_date: date, calendar_day: CalendarDay, day_punches: DayPunches, calendar: LocalCalendar) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.HOLIDAY, remark=calendar_day.holiday_name or "Holiday")
