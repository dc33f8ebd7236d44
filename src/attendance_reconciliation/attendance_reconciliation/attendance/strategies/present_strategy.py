from __future__ import annotations

from datetime import date

from ...calendar_rules.model import CalendarDay
from ...common.datetime_utils import format_time_of_day
from ...common.local_calendar import LocalCalendar
from ...core import constants
from ...core.enums import AttendanceStatus
from ...punches.model import DayPunches
from .base import AttendanceStrategy, StatusDecision


def working_hours_between(day_punches: DayPunches) -> float | None:
    """Hours from first IN to last OUT, 2 decimals; None unless both exist.

    A last OUT earlier than the first IN yields 0.0.
    """
    if not day_punches.first_in or not day_punches.last_out:
        return None
    seconds = (day_punches.last_out.punch_time - day_punches.first_in.punch_time).total_seconds()
    return round(max(seconds, 0) / 3600, 2)


class PresentStrategy(AttendanceStrategy):
    """An IN punch exists. Always emits plain PRESENT; lateness is a reporting concern."""

    def decide(self, *, work_date: date, calendar_day: CalendarDay, day_punches: DayPunches, calendar: LocalCalendar) -> StatusDecision:
        first_in = day_punches.first_in
        last_out = day_punches.last_out

        return StatusDecision(
            status=AttendanceStatus.PRESENT,
            check_in=format_time_of_day(calendar.time_of_day(first_in.punch_time)),
            check_out=format_time_of_day(calendar.time_of_day(last_out.punch_time)) if last_out else None,
            working_hours=working_hours_between(day_punches),
            remark=first_in.geofence_name or constants.DEFAULT_PUNCH_REMARK,
            location=first_in.location,
        )
