from datetime import datetime, timedelta, timezone
from app.domain.enums import EventStatus
from app.domain.event_status import EventRecord, compute_event_status, REVIEW_MS_PER_HOUR

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)
ONE_MS = timedelta(milliseconds=1)
REVIEW_WINDOW = timedelta(milliseconds=REVIEW_MS_PER_HOUR)


def make_event(end_offset: timedelta, hours: float = 1) -> EventRecord:
    """Helper to create an event ending at NOW + end_offset"""
    return EventRecord(end_date=NOW + end_offset, review_duration_in_hours=hours)


def test_no_event_is_done():
    assert compute_event_status(None, NOW) == EventStatus.DONE


def test_end_date_after_now_is_active():
    assert compute_event_status(make_event(ONE_MS), NOW) == EventStatus.ACTIVE


def test_end_date_equal_to_now_is_active():
    assert compute_event_status(make_event(timedelta(0)), NOW) == EventStatus.ACTIVE


def test_end_date_just_before_now_is_in_review():
    assert compute_event_status(make_event(-ONE_MS), NOW) == EventStatus.IN_REVIEW


def test_review_deadline_after_now_is_in_review():
    event = make_event(-REVIEW_WINDOW + ONE_MS)
    assert compute_event_status(event, NOW) == EventStatus.IN_REVIEW


def test_review_deadline_equal_to_now_is_in_review():
    event = make_event(-REVIEW_WINDOW)
    assert event.review_deadline == NOW
    assert compute_event_status(event, NOW) == EventStatus.IN_REVIEW


def test_review_deadline_before_now_is_done():
    event = make_event(-REVIEW_WINDOW - ONE_MS)
    assert compute_event_status(event, NOW) == EventStatus.DONE


def test_review_window_uses_legacy_hour_factor():
    # one configured hour spans six minutes of wall time
    event = make_event(timedelta(0), hours=1)
    assert event.review_deadline - event.end_date == timedelta(minutes=6)


def test_zero_review_window_is_done_right_after_end():
    assert compute_event_status(make_event(-ONE_MS, hours=0), NOW) == EventStatus.DONE


def test_status_values_match_wire_strings():
    assert [s.value for s in EventStatus] == ["active", "inReview", "done"]


def test_huge_review_window_stays_in_review():
    event = make_event(-timedelta(hours=1), hours=1e9)
    assert event.review_deadline is None
    assert compute_event_status(event, NOW) == EventStatus.IN_REVIEW


def test_window_beyond_timedelta_range_stays_in_review():
    event = make_event(-timedelta(days=365), hours=1e15)
    assert event.review_window is None
    assert compute_event_status(event, NOW) == EventStatus.IN_REVIEW


def test_infinite_review_window_stays_in_review():
    event = make_event(-ONE_MS, hours=float("inf"))
    assert compute_event_status(event, NOW) == EventStatus.IN_REVIEW


def test_nan_review_window_is_done_after_end():
    assert compute_event_status(make_event(-ONE_MS, hours=float("nan")), NOW) == EventStatus.DONE
    assert compute_event_status(make_event(ONE_MS, hours=float("nan")), NOW) == EventStatus.ACTIVE
