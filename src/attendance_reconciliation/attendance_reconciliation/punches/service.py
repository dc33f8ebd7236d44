from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import parse_utc_instant
from ..common.local_calendar import LocalCalendar
from ..common.validators import optional_str, require_in_range
from ..core.enums import PunchStatus, PunchType
from ..core.exceptions import EmployeeNotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Punch, PunchFilter
from .repository import PunchRepository

logger = logging.getLogger(__name__)


def _parse_enum(enum_cls, value, field_name: str):
    try:
        return enum_cls((value or "").strip().upper())
    except (ValueError, AttributeError):
        raise ValidationError(f"Invalid {field_name}: {value!r}")


def _is_any(value) -> bool:
    return value is None or str(value).strip().lower() in {"", "all"}


def parse_punch_type(value: Optional[str]) -> Optional[PunchType]:
    """Filter value; empty or "all" means any type."""
    return None if _is_any(value) else _parse_enum(PunchType, value, "punch type")


def parse_punch_status(value: Optional[str]) -> Optional[PunchStatus]:
    return None if _is_any(value) else _parse_enum(PunchStatus, value, "punch status")


@dataclass(frozen=True)
class NewPunch:
    employee_id: int
    punch_type: str
    punch_time: Optional[str]
    latitude: float
    longitude: float
    status: str
    geofence_id: Optional[int] = None
    geofence_name: Optional[str] = None
    project_id: Optional[int] = None
    location: Optional[str] = None
    remarks: Optional[str] = None


class PunchService:
    def __init__(self, punches: PunchRepository, employees: EmployeeRepository, calendar: LocalCalendar):
        self._punches = punches
        self._employees = employees
        self._calendar = calendar

    def record_punch(self, data: NewPunch) -> Punch:
        punch_type = _parse_enum(PunchType, data.punch_type, "punch type")
        status = _parse_enum(PunchStatus, data.status, "punch status")
        # Only a true instant may decide the day a punch belongs to.
        punch_time = parse_utc_instant(data.punch_time)
        latitude = require_in_range(data.latitude, "latitude", -90, 90)
        longitude = require_in_range(data.longitude, "longitude", -180, 180)

        if not self._employees.get_by_id(int(data.employee_id)):
            raise EmployeeNotFoundError(data.employee_id)

        fields = dict(
            employee_id=int(data.employee_id),
            punch_type=punch_type,
            punch_time=punch_time,
            latitude=latitude,
            longitude=longitude,
            status=status,
            geofence_id=data.geofence_id,
            geofence_name=optional_str(data.geofence_name),
            project_id=data.project_id,
            location=optional_str(data.location),
            remarks=optional_str(data.remarks),
        )
        punch_id = self._punches.create(**fields)
        logger.info("Recorded %s punch %s for employee %s at %s", punch_type.value, punch_id, data.employee_id, punch_time.isoformat())
        return Punch(punch_id=punch_id, **fields)

    def list_punches(
        self,
        *,
        employee_id: Optional[int] = None,
        punch_type: Optional[PunchType] = None,
        status: Optional[PunchStatus] = None,
        project_id: Optional[int] = None,
        search: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[Punch]:
        """Start/end are local dates, both inclusive."""

        filters = PunchFilter(
            employee_id=employee_id,
            punch_type=punch_type,
            status=status,
            project_id=project_id,
            search=optional_str(search),
            start_utc=self._calendar.day_bounds_utc(start)[0] if start else None,
            end_utc=self._calendar.day_bounds_utc(end)[1] if end else None,
        )
        return self._punches.list_punches(filters)

    def to_dict(self, punch: Punch) -> dict:
        local = self._calendar.to_local(punch.punch_time)
        return {
            "id": punch.punch_id,
            "employee_id": punch.employee_id,
            "punch_type": punch.punch_type.value,
            "punch_time": punch.punch_time.isoformat().replace("+00:00", "Z"),
            "local_date": local.day.isoformat(),
            "local_time": local.time_of_day.strftime("%H:%M:%S"),
            "latitude": punch.latitude,
            "longitude": punch.longitude,
            "status": punch.status.value,
            "geofence_id": punch.geofence_id,
            "geofence_name": punch.geofence_name,
            "project_id": punch.project_id,
            "location": punch.location,
            "remarks": punch.remarks,
        }
