from datetime import UTC, datetime


def format_general(moment: datetime) -> str:
    """
    Format a datetime in the general date-time pattern, e.g. ``10/9/2026 3:04:05 PM``.

    Month, day and hour are not zero-padded; minutes and seconds are.

    Args:
        moment: Datetime to format

    Returns:
        Formatted timestamp string
    """
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{moment.month}/{moment.day}/{moment.year} {hour}:{moment.minute:02d}:{moment.second:02d} {meridiem}"


def local_now() -> str:
    """Current local time in the general format."""
    return format_general(datetime.now())


def utc_now() -> str:
    """Current UTC time in the general format."""
    return format_general(datetime.now(UTC))
