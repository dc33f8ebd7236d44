"""Instant -> local calendar conversion.

The server clock is the single source of truth: every punch is stored as a
UTC instant and this module is the only place that decides which local day
and time-of-day it belongs to.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

from ..core.exceptions import ValidationError
from .datetime_utils import now_utc


@dataclass(frozen=True)
class LocalMoment:
    day: date
    time_of_day: time


class LocalCalendar:
    def __init__(self, tz: tzinfo):
        self._tz = tz

    @classmethod
    def for_zone(cls, name: str) -> "LocalCalendar":
        return cls(ZoneInfo(name))

    @property
    def tz(self) -> tzinfo:
        return self._tz

    def to_local(self, instant: datetime) -> LocalMoment:
        if instant.tzinfo is None:
            raise ValidationError("Naive datetime is not an instant")
        local = instant.astimezone(self._tz)
        return LocalMoment(day=local.date(), time_of_day=local.time().replace(microsecond=0))

    def local_date(self, instant: datetime) -> date:
        return self.to_local(instant).day

    def time_of_day(self, instant: datetime) -> time:
        return self.to_local(instant).time_of_day

    def day_bounds_utc(self, local_date: date) -> tuple[datetime, datetime]:
        """Half-open UTC range [start, end) covering one local day."""
        start = datetime.combine(local_date, time.min, tzinfo=self._tz)
        end = datetime.combine(local_date + timedelta(days=1), time.min, tzinfo=self._tz)
        return start.astimezone(timezone.utc), end.astimezone(timezone.utc)

    def range_bounds_utc(self, start: date, end: date) -> tuple[datetime, datetime]:
        return self.day_bounds_utc(start)[0], self.day_bounds_utc(end)[1]

    def today(self, now: Optional[datetime] = None) -> date:
        return self.local_date(now or now_utc())
