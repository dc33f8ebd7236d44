from __future__ import annotations

from dataclasses import dataclass

from ..calendar_rules.model import CalendarDay
from ..punches.model import DayPunches
from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import AttendanceStrategy
from .strategies.holiday_strategy import HolidayStrategy
from .strategies.present_strategy import PresentStrategy
from .strategies.week_off_strategy import WeekOffStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose the strategy by precedence.

    holiday > week-off > punch-derived presence > absence; first match wins.
    """

    def for_day(self, *, calendar_day: CalendarDay, day_punches: DayPunches) -> AttendanceStrategy:
        if calendar_day.is_holiday:
            return HolidayStrategy()
        if calendar_day.is_week_off:
            return WeekOffStrategy()
        if day_punches.has_presence:
            return PresentStrategy()
        return AbsentStrategy()
