from datetime import date, timedelta

import pytest

from src.attendance_reconciliation.attendance_reconciliation.common.datetime_utils import parse_utc_instant
from src.attendance_reconciliation.attendance_reconciliation.core.enums import AttendanceStatus, MatchStatus
from src.attendance_reconciliation.attendance_reconciliation.core.exceptions import (
    PayrollDaysUnavailableError,
    ValidationError,
)
from src.attendance_reconciliation.attendance_reconciliation.payroll.matcher import (
    MatchThresholds,
    PayrollVarianceMatcher,
    count_attendance_days,
    prorate,
    round_half_up,
)
from tests.fakes import InMemoryAttendance, InMemoryEmployees, InMemoryPayrollDays, ist_calendar, make_employee


def _present_days(attendance, employee_id, n, status=AttendanceStatus.PRESENT, start=date(2024, 3, 1)):
    for i in range(n):
        attendance.seed(employee_id, start + timedelta(days=i), status)


def _matcher(attendance, payroll_days, employees=None):
    return PayrollVarianceMatcher(
        InMemoryEmployees(employees or [make_employee(1)]),
        attendance,
        InMemoryPayrollDays(payroll_days),
        calendar=ist_calendar(),
    )


def test_mismatch_when_two_days_short():
    attendance = InMemoryAttendance()
    _present_days(attendance, 1, 20)

    (record,) = _matcher(attendance, {(1, "2024-03"): 22}).match(month="2024-03")

    assert record.attendance_days == 20
    assert record.attendance_amount == 20000
    assert record.payroll_amount == 22000
    assert record.difference == -2
    assert record.amount_difference == -2000
    assert record.match_status == MatchStatus.MISMATCH
    assert record.remarks == "Days difference: -2, Amount difference: 2000"


def test_within_thresholds_is_under_review():
    attendance = InMemoryAttendance()
    _present_days(attendance, 1, 21)

    (record,) = _matcher(attendance, {(1, "2024-03"): 22}).match(month="2024-03")

    assert record.match_status == MatchStatus.UNDER_REVIEW
    assert record.amount_difference == -1000


def test_equal_days_match_without_remarks():
    attendance = InMemoryAttendance()
    _present_days(attendance, 1, 20)
    _present_days(attendance, 1, 2, AttendanceStatus.LATE, start=date(2024, 3, 25))

    (record,) = _matcher(attendance, {(1, "2024-03"): 22}).match(month="2024-03")

    assert record.match_status == MatchStatus.MATCHED
    assert record.remarks is None


def test_half_days_count_half():
    attendance = InMemoryAttendance()
    _present_days(attendance, 1, 3, AttendanceStatus.HALF_DAY)
    _present_days(attendance, 1, 2, AttendanceStatus.ABSENT, start=date(2024, 3, 10))

    matcher = _matcher(attendance, {})
    assert matcher.attendance_days(1, 2024, 3) == 1.5


def test_other_months_are_ignored():
    attendance = InMemoryAttendance()
    _present_days(attendance, 1, 3, start=date(2024, 2, 28))

    assert _matcher(attendance, {}).attendance_days(1, 2024, 3) == 1


def test_missing_payroll_days_is_unavailable():
    attendance = InMemoryAttendance()
    _present_days(attendance, 1, 5)

    (record,) = _matcher(attendance, {}).match(month="2024-03")

    assert record.match_status == MatchStatus.UNAVAILABLE
    assert record.payroll_days is None
    assert record.remarks == "Payroll days unavailable"
    assert record.to_dict()["match_status"] == "Unavailable"


def test_provider_error_is_unavailable():
    class FailingPayrollDays:
        def get_payroll_days(self, employee_id, month):
            raise PayrollDaysUnavailableError("payroll not closed")

    matcher = PayrollVarianceMatcher(
        InMemoryEmployees([make_employee(1)]),
        InMemoryAttendance(),
        FailingPayrollDays(),
        calendar=ist_calendar(),
    )

    assert matcher.match(month="2024-03")[0].match_status == MatchStatus.UNAVAILABLE


def test_status_and_search_filters():
    attendance = InMemoryAttendance()
    _present_days(attendance, 1, 22)
    _present_days(attendance, 2, 18)
    employees = [make_employee(1, first_name="Asha"), make_employee(2, first_name="Ravi")]
    matcher = _matcher(attendance, {(1, "2024-03"): 22, (2, "2024-03"): 22}, employees)

    assert [r.employee_id for r in matcher.match(status="Mismatch", month="2024-03")] == [2]
    assert [r.employee_id for r in matcher.match(status="MATCHED", month="2024-03")] == [1]
    assert len(matcher.match(status="all", month="2024-03")) == 2
    assert [r.employee_id for r in matcher.match(month="2024-03", search="ravi")] == [2]

    with pytest.raises(ValidationError):
        matcher.match(status="Maybe", month="2024-03")


def test_month_defaults_to_current_local_month():
    (record,) = _matcher(InMemoryAttendance(), {}).match(now=parse_utc_instant("2024-03-31T20:00:00Z"))
    assert record.payroll_month == "2024-04"


def test_to_dict_shape():
    attendance = InMemoryAttendance()
    _present_days(attendance, 1, 22)

    data = _matcher(attendance, {(1, "2024-03"): 22}).match(month="2024-03")[0].to_dict()

    assert data["id"] == "1-2024-03"
    assert data["department"] == "Operations"
    assert data["match_status"] == "Matched"
    assert "record_id" not in data


def test_rounding_helpers():
    assert float(round_half_up(2.25, "0.5")) == 2.5
    assert float(round_half_up(-1.05, "0.1")) == -1.1
    assert prorate(26000, 1.5, 26) == 1500
    assert prorate(26000, 5, 0) == 0
    assert count_attendance_days([]) == 0


def test_threshold_boundaries():
    thresholds = MatchThresholds(review_days=1, review_amount=1000)

    assert thresholds.classify(0, 0) == MatchStatus.MATCHED
    assert thresholds.classify(-1, 1000) == MatchStatus.UNDER_REVIEW
    assert thresholds.classify(0.5, 1001) == MatchStatus.MISMATCH
