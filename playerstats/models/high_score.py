from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass
class HighScore:
    """
    Leaderboard entry.

    Attributes:
        name: Player name.
        score: Score value; leaderboards keep entries sorted by it, highest first.
    """

    name: str
    score: int = 0


def find_high_score(entries: Iterable[HighScore], name: str) -> HighScore | None:
    """
    Find the first leaderboard entry whose name matches, ignoring case.

    Args:
        entries: Leaderboard entries in iteration order
        name: Player name to look up

    Returns:
        Matching entry or None if not found
    """
    wanted = name.casefold()
    return next((entry for entry in entries if entry.name.casefold() == wanted), None)


def get_top_score(entries: Sequence[HighScore]) -> HighScore | None:
    """Return the first entry of a leaderboard already sorted by the caller, or None if empty."""
    return entries[0] if entries else None
