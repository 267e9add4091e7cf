# /// script
# requires-python = ">=3.12"
# dependencies = []
# ///
"""Centralized configuration for environment variables."""

import logging
import os

TEAM_COUNT_ENV = "SCORECARD_TEAMS"
LOG_LEVEL_ENV = "SCORECARD_LOG_LEVEL"
PORT_ENV = "PORT"

DEFAULT_TEAM_COUNT = 2
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_PORT = 5050

DEFAULT_TEAM_NAMES: dict[int, tuple[str, ...]] = {
    1: ("HOME",),
    2: ("AWAY", "HOME"),
}


def get_team_count() -> int:
    """Return how many teams the scorecard tracks (1 or 2)."""
    raw = os.environ.get(TEAM_COUNT_ENV, "")
    if not raw:
        return DEFAULT_TEAM_COUNT
    try:
        count = int(raw)
    except ValueError:
        raise ValueError(f"{TEAM_COUNT_ENV} must be 1 or 2, got {raw!r}") from None
    if count not in DEFAULT_TEAM_NAMES:
        raise ValueError(f"{TEAM_COUNT_ENV} must be 1 or 2, got {raw!r}")
    return count


def default_team_names(team_count: int) -> tuple[str, ...]:
    if team_count not in DEFAULT_TEAM_NAMES:
        raise ValueError(f"team_count must be 1 or 2, got {team_count}")
    return DEFAULT_TEAM_NAMES[team_count]


def get_log_level() -> int:
    """Return the configured logging level, falling back to INFO."""
    name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_port() -> int:
    return int(os.environ.get(PORT_ENV, DEFAULT_PORT))
