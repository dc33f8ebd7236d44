from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import PunchStatus, PunchType


@dataclass(frozen=True)
class Punch:
    """One GPS/biometric event. `punch_time` is the only authoritative time (UTC)."""

    punch_id: int
    employee_id: int
    punch_type: PunchType
    punch_time: datetime
    latitude: float
    longitude: float
    status: PunchStatus = PunchStatus.VALID
    geofence_id: Optional[int] = None
    geofence_name: Optional[str] = None
    project_id: Optional[int] = None
    location: Optional[str] = None
    remarks: Optional[str] = None


@dataclass(frozen=True)
class DayPunches:
    """First IN / last OUT of one employee-day."""

    first_in: Optional[Punch] = None
    last_out: Optional[Punch] = None

    @property
    def has_presence(self) -> bool:
        # An OUT without any IN is not presence evidence.
        return self.first_in is not None


@dataclass(frozen=True)
class PunchFilter:
    """Read-path filter; `None` means "any". Bounds are a half-open UTC range."""

    employee_id: Optional[int] = None
    punch_type: Optional[PunchType] = None
    status: Optional[PunchStatus] = None
    project_id: Optional[int] = None
    search: Optional[str] = None
    start_utc: Optional[datetime] = None
    end_utc: Optional[datetime] = None
