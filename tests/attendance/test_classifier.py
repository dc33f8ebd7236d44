from datetime import date

from src.attendance_reconciliation.attendance_reconciliation.attendance.classifier import AttendanceClassifier
from src.attendance_reconciliation.attendance_reconciliation.attendance.factory import AttendanceStrategyFactory
from src.attendance_reconciliation.attendance_reconciliation.attendance.strategies.absent_strategy import AbsentStrategy
from src.attendance_reconciliation.attendance_reconciliation.attendance.strategies.holiday_strategy import HolidayStrategy
from src.attendance_reconciliation.attendance_reconciliation.attendance.strategies.present_strategy import PresentStrategy
from src.attendance_reconciliation.attendance_reconciliation.attendance.strategies.week_off_strategy import WeekOffStrategy
from src.attendance_reconciliation.attendance_reconciliation.calendar_rules.model import CalendarDay
from src.attendance_reconciliation.attendance_reconciliation.core.enums import AttendanceStatus
from src.attendance_reconciliation.attendance_reconciliation.punches.model import DayPunches
from tests.fakes import ist_calendar, make_punch

WORKDAY = CalendarDay()
MONDAY = date(2024, 3, 4)


def _classify(calendar_day, day_punches):
    return AttendanceClassifier(ist_calendar()).classify(MONDAY, calendar_day, day_punches)


def test_factory_precedence():
    factory = AttendanceStrategyFactory()
    punched = DayPunches(first_in=make_punch(1, "IN", "2024-03-04T03:35:00Z"))
    holiday = CalendarDay(is_holiday=True, holiday_name="Holi", is_week_off=True, week_off_reason="Sunday")

    assert isinstance(factory.for_day(calendar_day=holiday, day_punches=punched), HolidayStrategy)
    assert isinstance(
        factory.for_day(calendar_day=CalendarDay(is_week_off=True, week_off_reason="Sunday"), day_punches=punched),
        WeekOffStrategy,
    )
    assert isinstance(factory.for_day(calendar_day=WORKDAY, day_punches=punched), PresentStrategy)
    assert isinstance(factory.for_day(calendar_day=WORKDAY, day_punches=DayPunches()), AbsentStrategy)


def test_present_day_from_in_and_out():
    decision = _classify(
        WORKDAY,
        DayPunches(
            first_in=make_punch(1, "IN", "2024-03-04T03:35:00Z"),
            last_out=make_punch(1, "OUT", "2024-03-04T12:10:00Z"),
        ),
    )

    assert decision.status == AttendanceStatus.PRESENT
    assert decision.check_in == "09:05:00"
    assert decision.check_out == "17:40:00"
    assert decision.working_hours == 8.58
    assert decision.remark == "GPS Punch"


def test_present_remark_uses_geofence_name():
    decision = _classify(
        WORKDAY,
        DayPunches(first_in=make_punch(1, "IN", "2024-03-04T03:35:00Z", geofence_name="Head Office")),
    )

    assert decision.remark == "Head Office"
    assert decision.check_out is None
    assert decision.working_hours is None


def test_out_before_in_clamps_hours_to_zero():
    decision = _classify(
        WORKDAY,
        DayPunches(
            first_in=make_punch(1, "IN", "2024-03-04T06:00:00Z"),
            last_out=make_punch(1, "OUT", "2024-03-04T04:00:00Z"),
        ),
    )

    assert decision.working_hours == 0.0


def test_holiday_ignores_punches():
    decision = _classify(
        CalendarDay(is_holiday=True, holiday_name="Independence Day"),
        DayPunches(first_in=make_punch(1, "IN", "2024-03-04T03:35:00Z")),
    )

    assert decision.status == AttendanceStatus.HOLIDAY
    assert decision.remark == "Independence Day"
    assert decision.check_in is None


def test_week_off_reason_becomes_remark():
    decision = _classify(CalendarDay(is_week_off=True, week_off_reason="2nd Saturday"), DayPunches())
    assert (decision.status, decision.remark) == (AttendanceStatus.WEEK_OFF, "2nd Saturday")


def test_absent_without_punches():
    decision = _classify(WORKDAY, DayPunches())
    assert (decision.status, decision.remark) == (AttendanceStatus.ABSENT, "No punch recorded.")


def test_out_only_day_is_absent_with_check_out():
    decision = _classify(WORKDAY, DayPunches(last_out=make_punch(1, "OUT", "2024-03-04T12:10:00Z")))

    assert decision.status == AttendanceStatus.ABSENT
    assert decision.check_out == "17:40:00"
    assert decision.remark == "No IN punch recorded."


def test_in_and_out_at_same_instant_is_present_with_zero_hours():
    decision = _classify(
        WORKDAY,
        DayPunches(
            first_in=make_punch(1, "IN", "2024-03-04T03:35:00Z"),
            last_out=make_punch(1, "OUT", "2024-03-04T03:35:00Z"),
        ),
    )

    assert decision.status == AttendanceStatus.PRESENT
    assert decision.check_in == decision.check_out == "09:05:00"
    assert decision.working_hours == 0.0
