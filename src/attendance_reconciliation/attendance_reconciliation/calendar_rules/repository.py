from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Holiday


class HolidayRepository(Protocol):
    def list_holidays(self, *, year: Optional[int] = None, active_only: Optional[bool] = True) -> Sequence[Holiday]:
        raise NotImplementedError

    def list_between(self, *, start: date, end: date, active_only: bool = True) -> Sequence[Holiday]:
        """Holidays in [start, end]; may span a year boundary."""

        raise NotImplementedError

    def get_by_id(self, holiday_id: int) -> Optional[Holiday]:
        raise NotImplementedError

    def create(self, *, holiday_date: date, name: str, is_active: bool = True) -> int:
        raise NotImplementedError

    def set_active(self, holiday_id: int, *, is_active: bool) -> bool:
        raise NotImplementedError

    def delete(self, holiday_id: int) -> bool:
        raise NotImplementedError
