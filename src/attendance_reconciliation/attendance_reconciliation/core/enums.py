from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status stored on a daily attendance record."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    LATE = "LATE"
    HALF_DAY = "HALF_DAY"
    ON_LEAVE = "ON_LEAVE"
    HOLIDAY = "HOLIDAY"
    WEEK_OFF = "WEEK_OFF"


class PunctualityStatus(str, Enum):
    """Sub-classification used by the statistics view."""

    PRESENT = "PRESENT"
    LATE = "LATE"
    EARLY_DEPARTURE = "EARLY_DEPARTURE"
    ABSENT = "ABSENT"


class PunchType(str, Enum):
    IN = "IN"
    OUT = "OUT"


class PunchStatus(str, Enum):
    VALID = "VALID"
    INVALID = "INVALID"
    OUTSIDE_GEOFENCE = "OUTSIDE_GEOFENCE"


class MatchStatus(str, Enum):
    """Verdict of the attendance vs. payroll comparison."""

    MATCHED = "Matched"
    UNDER_REVIEW = "Under Review"
    MISMATCH = "Mismatch"
    UNAVAILABLE = "Unavailable"

    @classmethod
    def parse(cls, value: str) -> "MatchStatus":
        v = (value or "").strip()
        for member in cls:
            if v == member.value or v.upper() == member.name:
                return member
        raise ValueError(f"Unknown match status: {value!r}")


# Statuses that count towards attendance days and their weight.
ATTENDANCE_DAY_WEIGHTS = {
    AttendanceStatus.PRESENT: 1,
    AttendanceStatus.LATE: 1,
    AttendanceStatus.HALF_DAY: 0.5,
}
