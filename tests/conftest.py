from unittest.mock import MagicMock

import pytest

from playerstats.db.database import Database
from playerstats.db.models import StoredPlayer
from playerstats.models.high_score import HighScore
from playerstats.models.session import LiveSession


@pytest.fixture
def stored_player() -> StoredPlayer:
    """Stored record of a returning player."""
    return StoredPlayer(
        name="Alice",
        total_time=3661,
        first_login="1/2/2026 9:15:00 AM",
        last_seen="3/4/2026 6:30:00 PM",
        login_count=5,
        known_accounts=["alice"],
        known_ips=["10.0.0.1"],
        kills=12,
        deaths=4,
        mob_kills=150,
        boss_kills=2,
    )


@pytest.fixture
def live_session(stored_player: StoredPlayer) -> LiveSession:
    """Freshly connected session attached to the stored record."""
    return LiveSession(name="Alice", storage=stored_player)


@pytest.fixture
def mock_store() -> MagicMock:
    """Persistence collaborator double."""
    store = MagicMock()
    store.save_user.return_value = None
    return store


@pytest.fixture
def leaderboard() -> list[HighScore]:
    """Leaderboard sorted by score, highest first."""
    return [HighScore("Alice", 300), HighScore("bob", 200), HighScore("Charlie", 100)]


@pytest.fixture
def db() -> Database:
    """
    Fixture to provide an in-memory SQLite database for testing.

    Returns:
        Database: An instance of the Database class connected to in-memory SQLite.
    """
    database = Database(dsn="sqlite:///:memory:")
    database.connect()

    yield database

    database.close()
