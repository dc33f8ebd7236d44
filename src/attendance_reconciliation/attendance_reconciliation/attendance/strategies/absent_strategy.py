from __future__ import annotations

from datetime import date

from ...calendar_rules.model import CalendarDay
from ...common.datetime_utils import format_time_of_day
from ...common.local_calendar import LocalCalendar
from ...core import constants
from ...core.enums import AttendanceStatus
from ...punches.model import DayPunches
from .base import AttendanceStrategy, StatusDecision


class AbsentStrategy(AttendanceStrategy):
    """Working day without an IN punch.

    A stray OUT punch is kept as check-out for review but never turns the day
    into presence.
    """

    def decide(self, *, work_date: date, calendar_day: CalendarDay, day_punches: DayPunches, calendar: LocalCalendar) -> StatusDecision:
        last_out = day_punches.last_out
        if last_out is None:
            return StatusDecision(status=AttendanceStatus.ABSENT, remark=constants.NO_PUNCH_REMARK)

        return StatusDecision(
            status=AttendanceStatus.ABSENT,
            check_out=format_time_of_day(calendar.time_of_day(last_out.punch_time)),
            remark=constants.NO_IN_PUNCH_REMARK,
        )
