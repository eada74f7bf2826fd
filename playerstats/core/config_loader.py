import configparser
import logging
import pathlib
from typing import Any

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def load_settings(config_path: str = "settings.ini") -> dict[str, Any]:
    """
    Load statistics settings from INI file.

    Creates default configuration file if it doesn't exist and returns
    parsed settings with appropriate data types.

    Args:
        config_path: Path to the configuration file

    Returns:
        Dictionary containing database and logging settings
    """
    config = configparser.ConfigParser()

    if not pathlib.Path(config_path).exists():
        config["DATABASE"] = {"dsn": "sqlite:///statistics.sqlite3"}
        config["LOGGING"] = {"level": "INFO"}
        with pathlib.Path(config_path).open("w") as configfile:
            config.write(configfile)

    config.read(config_path)

    settings = {
        "database": {"dsn": config.get("DATABASE", "dsn", fallback="sqlite:///statistics.sqlite3")},
        "logging": {"level": config.get("LOGGING", "level", fallback="INFO").strip().upper()},
    }

    return settings


def configure_logging(settings: dict[str, Any]) -> None:
    """Apply the configured log level and the standard log format."""
    logging.basicConfig(level=settings["logging"]["level"], format=LOG_FORMAT)
