"""Staleness rules for the daily publication threshold."""

from __future__ import annotations

from datetime import datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from cnb_fixing.schedule import ScheduleThreshold, is_stale

PRAGUE = ZoneInfo("Europe/Prague")
THRESHOLD = ScheduleThreshold()


def _prague(*args: int) -> datetime:
    return datetime(*args, tzinfo=PRAGUE)


def test_missing_cache_is_always_stale():
    assert is_stale(_prague(2026, 10, 19, 3, 0), None, THRESHOLD)
    assert is_stale(_prague(2026, 10, 19, 20, 0), None, THRESHOLD)


def test_before_threshold_cache_is_fresh_even_if_old():
    now = _prague(2026, 10, 19, 14, 29, 59)
    assert not is_stale(now, _prague(2026, 10, 17, 9, 0), THRESHOLD)


def test_after_threshold_cache_from_before_threshold_is_stale():
    now = _prague(2026, 10, 19, 14, 30)
    assert is_stale(now, _prague(2026, 10, 19, 14, 29, 59), THRESHOLD)
    assert is_stale(now, _prague(2026, 10, 18, 16, 0), THRESHOLD)


def test_cache_refreshed_after_threshold_stays_fresh_until_next_day():
    refreshed = _prague(2026, 10, 19, 14, 31)
    assert not is_stale(_prague(2026, 10, 19, 23, 59), refreshed, THRESHOLD)
    assert not is_stale(_prague(2026, 10, 20, 9, 0), refreshed, THRESHOLD)
    assert is_stale(_prague(2026, 10, 20, 14, 30), refreshed, THRESHOLD)


def test_threshold_uses_feed_timezone_not_utc():
    # 12:45 UTC is 14:45 in Prague during summer time, past the threshold.
    now = datetime(2026, 7, 1, 12, 45, tzinfo=timezone.utc)
    refreshed = datetime(2026, 7, 1, 6, 0, tzinfo=timezone.utc)
    assert is_stale(now, refreshed, THRESHOLD)
    # In winter the same UTC instant is 13:45 in Prague, before the threshold.
    assert not is_stale(
        datetime(2026, 1, 15, 12, 45, tzinfo=timezone.utc),
        datetime(2026, 1, 15, 6, 0, tzinfo=timezone.utc),
        THRESHOLD,
    )


@pytest.mark.parametrize(
    ("wall_clock", "expected"),
    [(time(14, 0), False), (time(14, 30), True), (time(18, 15), True)],
)
def test_same_wall_clock_across_dst_change_gives_same_verdict(wall_clock, expected):
    # Europe/Prague switched from CET to CEST on 2026-03-29.
    before = datetime.combine(datetime(2026, 3, 28).date(), wall_clock, tzinfo=PRAGUE)
    after = datetime.combine(datetime(2026, 3, 30).date(), wall_clock, tzinfo=PRAGUE)
    assert before.utcoffset() != after.utcoffset()

    verdict_before = is_stale(before, before - timedelta(days=1), THRESHOLD)
    verdict_after = is_stale(after, after - timedelta(days=1), THRESHOLD)
    assert verdict_before == verdict_after == expected


def test_threshold_instant_follows_dst_offset():
    winter = THRESHOLD.instant_on(datetime(2026, 1, 15, 9, 0, tzinfo=timezone.utc))
    summer = THRESHOLD.instant_on(datetime(2026, 7, 15, 9, 0, tzinfo=timezone.utc))
    assert winter.astimezone(timezone.utc).hour == 13
    assert summer.astimezone(timezone.utc).hour == 12


def test_custom_threshold_time_and_zone():
    threshold = ScheduleThreshold.from_time(time(9, 0), "America/New_York")
    now = datetime(2026, 10, 19, 13, 30, tzinfo=timezone.utc)  # 09:30 EDT
    assert is_stale(now, datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc), threshold)
    assert not is_stale(now, datetime(2026, 10, 19, 13, 5, tzinfo=timezone.utc), threshold)


def test_naive_datetimes_are_rejected():
    with pytest.raises(ValueError):
        is_stale(datetime(2026, 10, 19, 15, 0), _prague(2026, 10, 18, 15, 0), THRESHOLD)
    with pytest.raises(ValueError):
        is_stale(_prague(2026, 10, 19, 15, 0), datetime(2026, 10, 18, 15, 0), THRESHOLD)
