from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Holiday:
    """Declared holiday. `year` is denormalized from the date for filtering."""

    holiday_id: int
    holiday_date: date
    name: str
    year: int
    is_active: bool = True


@dataclass(frozen=True)
class CalendarDay:
    is_holiday: bool = False
    holiday_name: Optional[str] = None
    is_week_off: bool = False
    week_off_reason: Optional[str] = None

    @property
    def is_working_day(self) -> bool:
        return not self.is_holiday and not self.is_week_off
