from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import HolidayNotFoundError
from .model import Holiday
from .repository import HolidayRepository


class HolidayService:
    """Maintenance of the declared-holiday calendar (read-only to the engine)."""

    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def create(self, *, holiday_date: date, name: str, is_active: bool = True) -> Holiday:
        name = require_non_empty(name, "Holiday name")
        holiday_id = self._holidays.create(holiday_date=holiday_date, name=name, is_active=is_active)
        return Holiday(holiday_id=holiday_id, holiday_date=holiday_date, name=name, year=holiday_date.year, is_active=is_active)

    def list(self, *, year: Optional[int] = None, active: Optional[bool] = None) -> Sequence[Holiday]:
        return self._holidays.list_holidays(year=year, active_only=active)

    def get(self, holiday_id: int) -> Holiday:
        holiday = self._holidays.get_by_id(int(holiday_id))
        if not holiday:
            raise HolidayNotFoundError(holiday_id)
        return holiday

    def toggle_active(self, holiday_id: int) -> Holiday:
        holiday = self.get(holiday_id)
        self._holidays.set_active(holiday.holiday_id, is_active=not holiday.is_active)
        return replace(holiday, is_active=not holiday.is_active)

    def delete(self, holiday_id: int) -> None:
        holiday = self.get(holiday_id)
        self._holidays.delete(holiday.holiday_id)
