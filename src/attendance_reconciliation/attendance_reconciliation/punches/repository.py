from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import PunchStatus, PunchType
from .model import Punch, PunchFilter


class PunchRepository(Protocol):
    def list_for_employee(self, employee_id: int, start_utc: datetime, end_utc: datetime) -> Sequence[Punch]:
        """Punches with start_utc <= punch_time < end_utc, ascending."""

        raise NotImplementedError

    def list_punches(self, filters: PunchFilter) -> Sequence[Punch]:
        """Matching punches, newest first. `search` matches employee name or code."""

        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        punch_type: PunchType,
        punch_time: datetime,
        latitude: float,
        longitude: float,
        status: PunchStatus,
        geofence_id: Optional[int] = None,
        geofence_name: Optional[str] = None,
        project_id: Optional[int] = None,
        location: Optional[str] = None,
        remarks: Optional[str] = None,
    ) -> int:
        raise NotImplementedError
