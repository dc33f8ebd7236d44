from datetime import time

from src.attendance_reconciliation.attendance_reconciliation.attendance.punctuality import PunctualityPolicy
from src.attendance_reconciliation.attendance_reconciliation.core.enums import PunctualityStatus


def test_grace_boundary_is_minute_granular():
    policy = PunctualityPolicy()

    assert policy.classify("09:15:59", "18:00:00") == PunctualityStatus.PRESENT
    assert policy.classify("09:16:00", "18:00:00") == PunctualityStatus.LATE


def test_early_departure():
    policy = PunctualityPolicy()

    assert policy.classify("09:00:00", "17:29:00") == PunctualityStatus.EARLY_DEPARTURE
    assert policy.classify("09:00:00", "17:30:00") == PunctualityStatus.PRESENT


def test_late_takes_precedence_over_early_departure():
    assert PunctualityPolicy().classify(time(10, 0), time(12, 0)) == PunctualityStatus.LATE


def test_missing_check_in_is_absent():
    assert PunctualityPolicy().classify(None, "18:00:00") == PunctualityStatus.ABSENT


def test_missing_check_out_is_not_early():
    assert PunctualityPolicy().classify("09:00:00") == PunctualityStatus.PRESENT


def test_from_config():
    policy = PunctualityPolicy.from_config(
        {"standard_start": "10:00", "standard_end": "19:00", "late_grace_minutes": 5, "early_departure_minutes": 0}
    )

    assert policy.is_late("10:06")
    assert not policy.is_late("10:05")
    assert policy.is_early_departure("18:59")
