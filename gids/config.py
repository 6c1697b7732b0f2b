"""Environment configuration for Nederlandse Gids."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

log = logging.getLogger("gids.config")

DEFAULT_FETCH_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "WARNING"


class ConfigError(Exception):
    """Raised when the environment does not describe a usable data store."""

    pass


@dataclass(frozen=True)
class Settings:
    """Connection and logging settings."""

    supabase_url: str
    supabase_key: str
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ

        Raises:
            ConfigError: If required variables are missing or invalid
        """
        env = os.environ if environ is None else environ

        url = env.get("GIDS_SUPABASE_URL") or env.get("SUPABASE_URL", "")
        key = env.get("GIDS_SUPABASE_ANON_KEY") or env.get("SUPABASE_ANON_KEY", "")

        missing = []
        if not url:
            missing.append("GIDS_SUPABASE_URL")
        if not key:
            missing.append("GIDS_SUPABASE_ANON_KEY")
        if missing:
            raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

        raw_timeout = env.get("GIDS_FETCH_TIMEOUT", "")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_FETCH_TIMEOUT
        except ValueError as e:
            raise ConfigError(f"GIDS_FETCH_TIMEOUT must be a number, got '{raw_timeout}'") from e

        log_level = (env.get("GIDS_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            log.warning("Unknown GIDS_LOG_LEVEL %s, using %s", log_level, DEFAULT_LOG_LEVEL)
            log_level = DEFAULT_LOG_LEVEL

        return cls(
            supabase_url=url,
            supabase_key=key,
            fetch_timeout=timeout,
            log_level=log_level,
        )
