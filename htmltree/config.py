import logging
import os
from dataclasses import dataclass

from . import __version__

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 256
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = f"htmltree/{__version__}"
DEFAULT_LOG_LEVEL = "WARNING"


def _env_number(name, default, cast):
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError:
        logger.warning("[Config] %s=%r is not a valid number, using %s", name, raw, default)
        return default
    if value <= 0:
        logger.warning("[Config] %s must be positive, using %s", name, default)
        return default
    return value


def _env_log_level(name, default):
    raw = os.getenv(name, "").strip().upper()
    if not raw:
        return default
    if not isinstance(logging.getLevelName(raw), int):
        logger.warning("[Config] %s=%r is not a logging level, using %s", name, raw, default)
        return default
    return raw


@dataclass(frozen=True)
class Settings:
    max_depth: int = DEFAULT_MAX_DEPTH
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls):
        return cls(
            max_depth=_env_number("HTMLTREE_MAX_DEPTH", DEFAULT_MAX_DEPTH, int),
            timeout=_env_number("HTMLTREE_TIMEOUT", DEFAULT_TIMEOUT, float),
            user_agent=os.getenv("HTMLTREE_USER_AGENT", DEFAULT_USER_AGENT),
            log_level=_env_log_level("HTMLTREE_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )


def get_settings():
    return Settings.from_env()
