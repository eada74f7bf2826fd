import logging
from typing import Protocol

from playerstats.db.models import StoredPlayer
from playerstats.models.session import LiveSession
from playerstats.utils.clock import local_now, utc_now

logger = logging.getLogger(__name__)


class UserStore(Protocol):
    def save_user(self, record: StoredPlayer) -> None: ...


def save_stats(session: LiveSession | None, store: UserStore) -> None:
    """
    Copy a player's session stats into their stored record and persist it.

    Does nothing when there is no session or no stored record.
    Errors raised by the store are not caught.

    Args:
        session: Live session of the player
        store: Persistence collaborator receiving the updated record
    """
    if session is None or session.storage is None:
        logger.debug("No stored record to save into, skipping")
        return

    storage = session.storage
    storage.total_time = session.time_played
    storage.first_login = session.first_login
    storage.last_seen = local_now()
    storage.login_count = session.login_count
    storage.known_accounts = list(session.known_accounts)
    storage.known_ips = list(session.known_ips)

    storage.kills = session.kills
    storage.deaths = session.deaths
    storage.mob_kills = session.mob_kills
    storage.boss_kills = session.boss_kills

    store.save_user(storage)
    logger.info(f"Saved stats for {session.name}")


def sync_stats(session: LiveSession | None) -> None:
    """
    Load a player's stored stats into their session on login.

    Counts the login, so call it once per login event.

    Args:
        session: Live session of the player
    """
    if session is None or session.storage is None:
        logger.debug("No stored record to sync from, skipping")
        return

    storage = session.storage
    session.time_played = storage.total_time
    session.first_login = storage.first_login
    session.last_seen = utc_now()
    session.login_count = storage.login_count + 1
    session.known_accounts = list(storage.known_accounts)
    session.known_ips = list(storage.known_ips)

    session.kills = storage.kills
    session.deaths = storage.deaths
    session.mob_kills = storage.mob_kills
    session.boss_kills = storage.boss_kills

    logger.info(f"Synced stats for {session.name} (login #{session.login_count})")
