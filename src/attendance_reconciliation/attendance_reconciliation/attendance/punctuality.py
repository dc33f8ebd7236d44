from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional, Union

from ..common.datetime_utils import parse_time_of_day
from ..core import constants
from ..core.enums import PunctualityStatus

TimeLike = Union[time, str, None]


def _minutes(value: time) -> int:
    return value.hour * 60 + value.minute


def _as_time(value: TimeLike) -> Optional[time]:
    if value is None or value == "":
        return None
    if isinstance(value, time):
        return value
    return parse_time_of_day(value)


@dataclass(frozen=True)
class PunctualityPolicy:
    """LATE / EARLY_DEPARTURE thresholds, compared at minute granularity.

    LATE when check-in is more than `late_grace_minutes` after the standard
    start (09:16 is late, 09:15 is not); EARLY_DEPARTURE when check-out is
    more than `early_departure_minutes` before the standard end.
    """

    standard_start: time = constants.DEFAULT_STANDARD_START
    standard_end: time = constants.DEFAULT_STANDARD_END
    late_grace_minutes: int = constants.DEFAULT_LATE_GRACE_MINUTES
    early_departure_minutes: int = constants.DEFAULT_EARLY_DEPARTURE_MINUTES

    @classmethod
    def from_config(cls, engine_config: dict) -> "PunctualityPolicy":
        return cls(
            standard_start=_as_time(engine_config.get("standard_start")) or constants.DEFAULT_STANDARD_START,
            standard_end=_as_time(engine_config.get("standard_end")) or constants.DEFAULT_STANDARD_END,
            late_grace_minutes=int(engine_config.get("late_grace_minutes", constants.DEFAULT_LATE_GRACE_MINUTES)),
            early_departure_minutes=int(
                engine_config.get("early_departure_minutes", constants.DEFAULT_EARLY_DEPARTURE_MINUTES)
            ),
        )

    def is_late(self, check_in: TimeLike) -> bool:
        t = _as_time(check_in)
        return t is not None and _minutes(t) > _minutes(self.standard_start) + self.late_grace_minutes

    def is_early_departure(self, check_out: TimeLike) -> bool:
        t = _as_time(check_out)
        return t is not None and _minutes(t) < _minutes(self.standard_end) - self.early_departure_minutes

    def classify(self, check_in: TimeLike, check_out: TimeLike = None) -> PunctualityStatus:
        if _as_time(check_in) is None:
            return PunctualityStatus.ABSENT
        if self.is_late(check_in):
            return PunctualityStatus.LATE
        if self.is_early_departure(check_out):
            return PunctualityStatus.EARLY_DEPARTURE
        return PunctualityStatus.PRESENT
