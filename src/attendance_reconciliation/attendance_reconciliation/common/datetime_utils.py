from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterator, Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime((value or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {value!r}")


def parse_utc_instant(value: Optional[str]) -> datetime:
    """Parse a UTC ISO-8601 instant ("2024-03-04T03:35:00Z").

    The value must carry an offset; a bare local time is not an instant and
    is rejected instead of being guessed.
    """
    v = (value or "").strip()
    if not v:
        raise ValidationError("Instant is required (UTC ISO-8601)")
    if v.endswith(("Z", "z")):
        v = v[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(v)
    except ValueError:
        raise ValidationError(f"Invalid instant (UTC ISO-8601): {value!r}")
    if parsed.tzinfo is None:
        raise ValidationError(f"Instant must include a UTC offset: {value!r}")
    return parsed.astimezone(timezone.utc)


def parse_month(value: str) -> tuple[int, int]:
    """Parse YYYY-MM into (year, month)."""
    try:
        parsed = datetime.strptime((value or "").strip(), "%Y-%m")
    except ValueError:
        raise ValidationError(f"Invalid month (YYYY-MM): {value!r}")
    return parsed.year, parsed.month


def format_month(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def month_bounds(year: int, month: int) -> tuple[date, date]:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Yield every date from start to end inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def format_time_of_day(value: time) -> str:
    return value.strftime("%H:%M:%S")


def parse_time_of_day(value: str) -> time:
    """Parse HH:MM or HH:MM:SS."""
    v = (value or "").strip()
    for fmt in ("%H:%M:%S", "%H:%M"):
        try:
            return datetime.strptime(v, fmt).time()
        except ValueError:
            continue
    raise ValidationError(f"Invalid time of day (HH:MM[:SS]): {value!r}")


def now_utc() -> datetime:
    """Current UTC instant.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)
