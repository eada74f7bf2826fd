from datetime import timedelta

from playerstats.db.models import StoredPlayer
from playerstats.models.session import LiveSession
from playerstats.utils.helpers import pluralize

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
SECONDS_PER_WEEK = 604800


def _join_units(units: list[tuple[int, str]]) -> str:
    """
    Render (value, unit) pairs as a comma-separated English string.

    Zero-valued units are skipped.

    Args:
        units: Ordered pairs of value and singular unit name

    Returns:
        String like "1 hour, 5 minutes", or "" if every value is zero
    """
    parts = [f"{value} {pluralize(value, unit)}" for value, unit in units if value > 0]
    return ", ".join(parts)


def format_duration(total_seconds: int | float) -> str:
    """
    Format an elapsed number of seconds as weeks, days, hours, minutes and seconds.

    Fractional seconds are truncated before decomposition.

    Args:
        total_seconds: Non-negative duration in seconds

    Returns:
        Human-readable duration, e.g. "1 week, 1 day"; empty string for zero
    """
    remainder = int(total_seconds)

    weeks, remainder = divmod(remainder, SECONDS_PER_WEEK)
    days, remainder = divmod(remainder, SECONDS_PER_DAY)
    hours, remainder = divmod(remainder, SECONDS_PER_HOUR)
    minutes, seconds = divmod(remainder, SECONDS_PER_MINUTE)

    return _join_units(
        [
            (weeks, "week"),
            (days, "day"),
            (hours, "hour"),
            (minutes, "minute"),
            (seconds, "second"),
        ]
    )


def format_span(hours: int, minutes: int, seconds: int) -> str:
    """
    Format an already decomposed sub-day span.

    Args:
        hours: Hour component
        minutes: Minute component
        seconds: Second component

    Returns:
        Human-readable span, e.g. "2 hours, 1 second"
    """
    return _join_units([(hours, "hour"), (minutes, "minute"), (seconds, "second")])


def format_timedelta(delta: timedelta) -> str:
    """Format the hour, minute and second components of a timedelta, ignoring whole days."""
    hours, remainder = divmod(delta.seconds, SECONDS_PER_HOUR)
    minutes, seconds = divmod(remainder, SECONDS_PER_MINUTE)
    return format_span(hours, minutes, seconds)


def time_played(player: LiveSession | StoredPlayer) -> str:
    """
    Format the play time collected by a live session or a stored record.

    Args:
        player: LiveSession (``time_played``) or StoredPlayer (``total_time``)

    Returns:
        Human-readable play time
    """
    if isinstance(player, LiveSession):
        return format_duration(player.time_played)
    return format_duration(player.total_time)
