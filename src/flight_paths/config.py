"""
Configuration module for the flight paths engine.

Loads environment variables (optionally from a .env file) and exposes
them as a frozen Settings dataclass.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

from src.flight_paths.exceptions import ConfigurationError

# Load environment variables from .env file
load_dotenv()

DEFAULT_MAX_FRONTIER = 200_000
DEFAULT_LOG_LEVEL = "INFO"


def _read_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(name, raw, "an integer") from None
    if value <= 0:
        raise ConfigurationError(name, raw, "a positive integer")
    return value


def _read_optional(name: str) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return raw.strip()


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings for searches, logging and data loading.

    Attributes:
        max_frontier: Largest number of partial paths the minimum-hop
            search may hold in its queue before giving up.
        log_level: Root logger level used by the CLI and the API.
        routes_file: Optional CSV or SQLite file used to seed the API graph.
        required_property: Default property filter for the demo CLI.
    """

    max_frontier: int = DEFAULT_MAX_FRONTIER
    log_level: str = DEFAULT_LOG_LEVEL
    routes_file: Optional[str] = None
    required_property: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the current process environment."""
        return cls(
            max_frontier=_read_int("FLIGHT_PATHS_MAX_FRONTIER", DEFAULT_MAX_FRONTIER),
            log_level=(os.getenv("FLIGHT_PATHS_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
            routes_file=_read_optional("FLIGHT_PATHS_ROUTES_FILE"),
            required_property=_read_optional("FLIGHT_PATHS_REQUIRED_PROPERTY"),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return process-wide settings, read once from the environment."""
    return Settings.from_env()
