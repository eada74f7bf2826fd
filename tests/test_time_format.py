from datetime import timedelta

import pytest

from playerstats.db.models import StoredPlayer
from playerstats.models.session import LiveSession
from playerstats.utils.time_format import format_duration, format_span, format_timedelta, time_played


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0, ""),
        (1, "1 second"),
        (2, "2 seconds"),
        (60, "1 minute"),
        (90, "1 minute, 30 seconds"),
        (3600, "1 hour"),
        (3661, "1 hour, 1 minute, 1 second"),
        (86400, "1 day"),
        (604800, "1 week"),
        (691200, "1 week, 1 day"),
        (2 * 604800 + 3 * 86400 + 4 * 3600 + 5 * 60 + 6, "2 weeks, 3 days, 4 hours, 5 minutes, 6 seconds"),
    ],
)
def test_format_duration(seconds, expected):
    """Test rendering of whole-second durations."""
    assert format_duration(seconds) == expected


def test_format_duration_skips_zero_units():
    """Zero units in the middle are omitted without leaving empty separators."""
    assert format_duration(604800 + 5) == "1 week, 5 seconds"
    assert format_duration(7200 + 3) == "2 hours, 3 seconds"


def test_format_duration_truncates_fractions():
    """Fractional seconds are dropped, never rounded up."""
    assert format_duration(0.9) == ""
    assert format_duration(90.99) == "1 minute, 30 seconds"
    assert format_duration(691200.5) == "1 week, 1 day"


def test_format_duration_has_no_trailing_separator():
    result = format_duration(604800 + 86400 + 3600)
    assert result == "1 week, 1 day, 1 hour"
    assert not result.endswith(", ")


def test_format_span():
    """Test formatting of already decomposed spans."""
    assert format_span(0, 0, 0) == ""
    assert format_span(1, 0, 0) == "1 hour"
    assert format_span(2, 1, 0) == "2 hours, 1 minute"
    assert format_span(0, 0, 45) == "45 seconds"
    assert format_span(0, 10, 1) == "10 minutes, 1 second"


def test_format_timedelta_ignores_days():
    """Whole days of a timedelta are not part of its sub-day span."""
    assert format_timedelta(timedelta(hours=1, minutes=2, seconds=3)) == "1 hour, 2 minutes, 3 seconds"
    assert format_timedelta(timedelta(days=2, minutes=5)) == "5 minutes"
    assert format_timedelta(timedelta()) == ""


def test_time_played_for_session_and_record():
    """Both live sessions and stored records report their play time."""
    session = LiveSession(name="Alice", time_played=90)
    record = StoredPlayer(name="Alice", total_time=604800)

    assert time_played(session) == "1 minute, 30 seconds"
    assert time_played(record) == "1 week"


def test_time_played_for_unsaved_record():
    assert time_played(StoredPlayer(name="Fresh")) == ""
