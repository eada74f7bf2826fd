from dataclasses import dataclass, field

from playerstats.db.models import StoredPlayer


@dataclass
class LiveSession:
    """
    In-memory statistics of a connected player.

    Attributes:
        name: Player name.
        time_played: Total play time in seconds.
        first_login: Timestamp of the first login.
        last_seen: Timestamp of the last activity.
        login_count: Number of logins so far.
        known_accounts: Account names used by the player.
        known_ips: Addresses the player connected from.
        kills: Player kills.
        deaths: Deaths.
        mob_kills: Regular mob kills.
        boss_kills: Boss kills.
        storage: Durable record the session reconciles against, if loaded.
    """

    name: str
    time_played: int = 0
    first_login: str = ""
    last_seen: str = ""
    login_count: int = 0
    known_accounts: list[str] = field(default_factory=list)
    known_ips: list[str] = field(default_factory=list)
    kills: int = 0
    deaths: int = 0
    mob_kills: int = 0
    boss_kills: int = 0
    storage: StoredPlayer | None = field(default=None, repr=False)
