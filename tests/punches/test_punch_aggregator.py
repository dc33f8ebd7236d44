from datetime import date

from src.attendance_reconciliation.attendance_reconciliation.core.enums import PunchStatus
from src.attendance_reconciliation.attendance_reconciliation.punches.aggregator import PunchAggregator
from tests.fakes import ist_calendar, make_punch


def test_first_in_and_last_out_regardless_of_arrival_order():
    punches = [
        make_punch(1, "OUT", "2024-03-04T12:10:00Z", punch_id=4),
        make_punch(1, "IN", "2024-03-04T07:00:00Z", punch_id=3),
        make_punch(1, "IN", "2024-03-04T03:35:00Z", punch_id=1),
        make_punch(1, "OUT", "2024-03-04T06:00:00Z", punch_id=2),
    ]

    day = PunchAggregator(ist_calendar()).aggregate(punches)

    assert day.first_in.punch_id == 1
    assert day.last_out.punch_id == 4
    assert day.has_presence


def test_out_only_day_is_not_presence():
    day = PunchAggregator(ist_calendar()).aggregate([make_punch(1, "OUT", "2024-03-04T12:10:00Z")])

    assert day.first_in is None
    assert day.last_out is not None
    assert not day.has_presence


def test_grouping_uses_local_day():
    punches = [
        make_punch(1, "IN", "2024-03-04T03:35:00Z", punch_id=1),
        make_punch(1, "IN", "2024-03-04T19:00:00Z", punch_id=2),
    ]

    grouped = PunchAggregator(ist_calendar()).group_by_local_day(punches)

    assert [p.punch_id for p in grouped[date(2024, 3, 4)]] == [1]
    assert [p.punch_id for p in grouped[date(2024, 3, 5)]] == [2]


def test_all_statuses_count_by_default():
    punch = make_punch(1, "IN", "2024-03-04T03:35:00Z", status=PunchStatus.OUTSIDE_GEOFENCE)
    assert PunchAggregator(ist_calendar()).aggregate([punch]).has_presence


def test_status_filter_drops_excluded_punches():
    aggregator = PunchAggregator(ist_calendar(), include_statuses=[PunchStatus.VALID])
    punches = [
        make_punch(1, "IN", "2024-03-04T03:00:00Z", punch_id=1, status=PunchStatus.INVALID),
        make_punch(1, "IN", "2024-03-04T03:35:00Z", punch_id=2),
    ]

    assert aggregator.aggregate(punches).first_in.punch_id == 2


def test_in_and_out_at_same_instant_are_both_kept():
    punches = [
        make_punch(1, "OUT", "2024-03-04T03:35:00Z", punch_id=1),
        make_punch(1, "IN", "2024-03-04T03:35:00Z", punch_id=2),
    ]

    day = PunchAggregator(ist_calendar()).aggregate(punches)

    assert day.first_in.punch_id == 2
    assert day.last_out.punch_id == 1
    assert day.has_presence
