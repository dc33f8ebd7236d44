from __future__ import annotations

from datetime import date
from typing import Iterable, Mapping, Union

from .model import CalendarDay, Holiday
from .rules import WeekOffRule

HolidaySet = Union[Mapping[date, str], Iterable[Holiday]]


def index_holidays(holidays: Iterable[Holiday]) -> dict[date, str]:
    """Map active holidays by date; the first declared name wins."""
    out: dict[date, str] = {}
    for h in holidays:
        if h.is_active and h.holiday_date not in out:
            out[h.holiday_date] = h.name
    return out


class CalendarResolver:
    """Decide whether a local date is a holiday or a week-off.

    Holiday is checked first and short-circuits, so a holiday falling on a
    Sunday is reported as a holiday only.
    """

    def __init__(self, week_off_rule: WeekOffRule):
        self._week_off_rule = week_off_rule

    def resolve(self, day: date, holidays: HolidaySet) -> CalendarDay:
        return resolve(day, holidays, self._week_off_rule)


def resolve(day: date, holidays: HolidaySet, week_off_rule: WeekOffRule) -> CalendarDay:
    by_date = holidays if isinstance(holidays, Mapping) else index_holidays(holidays)

    name = by_date.get(day)
    if name is not None:
        return CalendarDay(is_holiday=True, holiday_name=name or "Holiday")

    reason = week_off_rule.reason_for(day)
    if reason:
        return CalendarDay(is_week_off=True, week_off_reason=reason)

    return CalendarDay()
