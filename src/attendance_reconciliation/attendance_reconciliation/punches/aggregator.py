from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable, Optional

from ..common.local_calendar import LocalCalendar
from ..core.enums import PunchStatus, PunchType
from .model import DayPunches, Punch


class PunchAggregator:
    """Group punches into local days and pick first IN / last OUT.

    `include_statuses` restricts which punches count; by default every
    punch counts regardless of its validity status.
    """

    def __init__(self, calendar: LocalCalendar, *, include_statuses: Optional[Iterable[PunchStatus]] = None):
        self._calendar = calendar
        self._include = frozenset(include_statuses) if include_statuses is not None else None

    def _accepts(self, punch: Punch) -> bool:
        return self._include is None or punch.status in self._include

    def group_by_local_day(self, punches: Iterable[Punch]) -> dict[date, list[Punch]]:
        by_day: dict[date, list[Punch]] = defaultdict(list)
        for p in punches:
            if self._accepts(p):
                by_day[self._calendar.local_date(p.punch_time)].append(p)
        for day_punches in by_day.values():
            day_punches.sort(key=lambda p: p.punch_time)
        return dict(by_day)

    def aggregate(self, punches: Iterable[Punch]) -> DayPunches:
        """Punches of one employee and one local day."""
        ordered = sorted((p for p in punches if self._accepts(p)), key=lambda p: p.punch_time)

        first_in = next((p for p in ordered if p.punch_type == PunchType.IN), None)
        last_out = next((p for p in reversed(ordered) if p.punch_type == PunchType.OUT), None)
        return DayPunches(first_in=first_in, last_out=last_out)
