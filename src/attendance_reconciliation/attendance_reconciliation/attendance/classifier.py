from __future__ import annotations

from datetime import date
from typing import Optional

from ..calendar_rules.model import CalendarDay
from ..common.local_calendar import LocalCalendar
from ..punches.model import DayPunches
from .factory import AttendanceStrategyFactory
from .strategies.base import StatusDecision


class AttendanceClassifier:
    """Pure function: calendar facts + punches of one employee-day -> decision.

    Never produces ON_LEAVE; that status belongs to the leave workflow.
    """

    def __init__(self, calendar: LocalCalendar, *, strategy_factory: Optional[AttendanceStrategyFactory] = None):
        self._calendar = calendar
        self._factory = strategy_factory or AttendanceStrategyFactory()

    def classify(self, work_date: date, calendar_day: CalendarDay, day_punches: DayPunches) -> StatusDecision:
        strategy = self._factory.for_day(calendar_day=calendar_day, day_punches=day_punches)
        return strategy.decide(
            work_date=work_date,
            calendar_day=calendar_day,
            day_punches=day_punches,
            calendar=self._calendar,
        )
