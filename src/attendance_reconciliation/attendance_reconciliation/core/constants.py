"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

DEFAULT_TIMEZONE = "Asia/Kolkata"

DEFAULT_STANDARD_START = time(9, 0)
DEFAULT_STANDARD_END = time(18, 0)
DEFAULT_LATE_GRACE_MINUTES = 15
DEFAULT_EARLY_DEPARTURE_MINUTES = 30

DEFAULT_WORKING_DAYS_PER_MONTH = 26
DEFAULT_REVIEW_DAY_THRESHOLD = 1
DEFAULT_REVIEW_AMOUNT_THRESHOLD = 1000

DEFAULT_WEEKLY_REST_DAY = "SUNDAY"
DEFAULT_OCCASIONAL_REST_DAY = "SATURDAY"
DEFAULT_OCCASIONAL_REST_OCCURRENCE = 2

DEFAULT_PUNCH_REMARK = "GPS Punch"
NO_PUNCH_REMARK = "No punch recorded."
NO_IN_PUNCH_REMARK = "No IN punch recorded."
PAYROLL_UNAVAILABLE_REMARK = "Payroll days unavailable"
