from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Optional, Protocol, Sequence

from ..core import constants
from ..core.exceptions import ValidationError

WEEKDAYS = {
    "MONDAY": 0,
    "TUESDAY": 1,
    "WEDNESDAY": 2,
    "THURSDAY": 3,
    "FRIDAY": 4,
    "SATURDAY": 5,
    "SUNDAY": 6,
}

_ORDINALS = {1: "1st", 2: "2nd", 3: "3rd"}


def weekday_number(name: str) -> int:
    try:
        return WEEKDAYS[(name or "").strip().upper()]
    except KeyError:
        raise ValidationError(f"Unknown weekday: {name!r}")


def ordinal(n: int) -> str:
    return _ORDINALS.get(n, f"{n}th")


class WeekOffRule(Protocol):
    """Predicate deciding whether a local date is a recurring rest day."""

    def reason_for(self, day: date) -> Optional[str]:
        raise NotImplementedError


@dataclass(frozen=True)
class WeeklyRestDay:
    """Every occurrence of one weekday, e.g. every Sunday."""

    weekday: int
    label: str

    def reason_for(self, day: date) -> Optional[str]:
        return self.label if day.weekday() == self.weekday else None


@dataclass(frozen=True)
class NthWeekdayRestDay:
    """The n-th occurrence of a weekday in its month, e.g. 2nd Saturday."""

    weekday: int
    occurrence: int
    label: str

    def reason_for(self, day: date) -> Optional[str]:
        if day.weekday() != self.weekday:
            return None
        if math.ceil(day.day / 7) != self.occurrence:
            return None
        return self.label


@dataclass(frozen=True)
class CompositeWeekOffRule:
    rules: Sequence[WeekOffRule]

    def reason_for(self, day: date) -> Optional[str]:
        for rule in self.rules:
            reason = rule.reason_for(day)
            if reason:
                return reason
        return None


def build_week_off_rule(
    *,
    weekly_rest_day: Optional[str] = constants.DEFAULT_WEEKLY_REST_DAY,
    occasional_rest_day: Optional[str] = constants.DEFAULT_OCCASIONAL_REST_DAY,
    occasional_rest_occurrence: int = constants.DEFAULT_OCCASIONAL_REST_OCCURRENCE,
) -> CompositeWeekOffRule:
    rules: list[WeekOffRule] = []
    if weekly_rest_day:
        rules.append(WeeklyRestDay(weekday_number(weekly_rest_day), weekly_rest_day.strip().capitalize()))
    if occasional_rest_day:
        occurrence = int(occasional_rest_occurrence)
        if not 1 <= occurrence <= 5:
            raise ValidationError("Rest day occurrence must be between 1 and 5")
        label = f"{ordinal(occurrence)} {occasional_rest_day.strip().capitalize()}"
        rules.append(NthWeekdayRestDay(weekday_number(occasional_rest_day), occurrence, label))
    return CompositeWeekOffRule(tuple(rules))


def default_week_off_rule() -> CompositeWeekOffRule:
    """Sunday plus 2nd Saturday."""
    return build_week_off_rule()


def week_off_rule_from_config(engine_config: dict) -> CompositeWeekOffRule:
    return build_week_off_rule(
        weekly_rest_day=engine_config.get("weekly_rest_day", constants.DEFAULT_WEEKLY_REST_DAY),
        occasional_rest_day=engine_config.get("occasional_rest_day", constants.DEFAULT_OCCASIONAL_REST_DAY),
        occasional_rest_occurrence=int(
            engine_config.get("occasional_rest_occurrence", constants.DEFAULT_OCCASIONAL_REST_OCCURRENCE)
        ),
    )
