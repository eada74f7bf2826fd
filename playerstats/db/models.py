from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


_DEFAULTS: dict[str, Any] = {
    "total_time": 0,
    "first_login": "",
    "last_seen": "",
    "login_count": 0,
    "known_accounts": list,
    "known_ips": list,
    "kills": 0,
    "deaths": 0,
    "mob_kills": 0,
    "boss_kills": 0,
}


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""

    pass


class StoredPlayer(Base):
    """
    Durable statistics record of a player.

    Attributes:
        id (int): Primary key.
        name (str): Unique player name.
        total_time (int): Accumulated play time in seconds.
        first_login (str): Timestamp of the first login.
        last_seen (str): Timestamp of the last save.
        login_count (int): Number of logins.
        known_accounts (list[str]): Account names used by the player.
        known_ips (list[str]): Addresses the player connected from.
        kills (int): Player kills.
        deaths (int): Deaths.
        mob_kills (int): Regular mob kills.
        boss_kills (int): Boss kills.
        created_at (datetime): Record creation timestamp.
        updated_at (datetime): Record last update timestamp.
    """

    __tablename__ = "stored_players"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    total_time: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    first_login: Mapped[str] = mapped_column(String(64), default="", nullable=False)
    last_seen: Mapped[str] = mapped_column(String(64), default="", nullable=False)
    login_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    known_accounts: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    known_ips: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    kills: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    deaths: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    mob_kills: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    boss_kills: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.now, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.now, onupdate=datetime.now, nullable=False)

    def __init__(self, **kwargs: Any) -> None:
        """Fill zero and empty values for fields not given, so unsaved records are usable."""
        for key, default in _DEFAULTS.items():
            kwargs.setdefault(key, default() if callable(default) else default)
        super().__init__(**kwargs)

    def kill_death_ratio(self) -> float:
        """
        Calculate the player's kill/death ratio.

        Returns:
            float: Kills per death (kills itself if the player never died).
        """
        if self.deaths == 0:
            return float(self.kills)
        return self.kills / self.deaths

    def __repr__(self) -> str:
        return (
            f"StoredPlayer("
            f"id={self.id}, "
            f"name='{self.name}', "
            f"total_time={self.total_time}, "
            f"logins={self.login_count}, "
            f"kd={self.kill_death_ratio():.2f}"
            f")"
        )
