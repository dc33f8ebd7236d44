import os


def _env_int(name: str, default: int) -> int:
    return int(os.environ.get(name, str(default)))


def db_config_from_env(default_database: str = "attendance_reconciliation") -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": _env_int("DB_PORT", 3306),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", ""),
        "database": os.getenv("DB_NAME", default_database),
    }


def engine_config_from_env() -> dict:
    """Reconciliation engine settings shared by every environment."""

    return {
        # Local calendar every punch is bucketed into.
        "timezone": os.getenv("ATTENDANCE_TIMEZONE", "Asia/Kolkata"),
        "standard_start": os.getenv("STANDARD_START", "09:00"),
        "standard_end": os.getenv("STANDARD_END", "18:00"),
        "late_grace_minutes": _env_int("LATE_GRACE_MINUTES", 15),
        "early_departure_minutes": _env_int("EARLY_DEPARTURE_MINUTES", 30),
        "working_days_per_month": _env_int("WORKING_DAYS_PER_MONTH", 26),
        "review_day_threshold": _env_int("REVIEW_DAY_THRESHOLD", 1),
        "review_amount_threshold": _env_int("REVIEW_AMOUNT_THRESHOLD", 1000),
        "weekly_rest_day": os.getenv("WEEKLY_REST_DAY", "SUNDAY"),
        "occasional_rest_day": os.getenv("OCCASIONAL_REST_DAY", "SATURDAY"),
        "occasional_rest_occurrence": _env_int("OCCASIONAL_REST_OCCURRENCE", 2),
    }
