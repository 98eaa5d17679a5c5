"""
Configuration for the commit message parser.

Settings come from environment variables; the launchers load a `.env` file
with python-dotenv before reading them:
- COMMIT_PARSER_MAX_LENGTH: Maximum message length in characters (unset or 0: no limit)
- COMMIT_PARSER_HOST / COMMIT_PARSER_PORT: HTTP service bind address
- ERROR_INCLUDE_DETAILS: Include detailed error reports in API responses
- LOG_LEVEL / LOG_FORMAT: See logging_config
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_MAX_LENGTH = 0
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value)
    except ValueError:
        logger.warning(f"Invalid {name} '{value}', defaulting to {default}")
        return default
    if parsed < 0:
        logger.warning(f"Negative {name} '{value}', defaulting to {default}")
        return default
    return parsed


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes")


@dataclass
class Settings:
    """Parser and service settings"""
    max_message_length: int = DEFAULT_MAX_LENGTH
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    include_error_details: bool = False
    log_level: str = "INFO"
    log_format: str = "simple"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        return cls(
            max_message_length=_env_int("COMMIT_PARSER_MAX_LENGTH", DEFAULT_MAX_LENGTH),
            host=os.getenv("COMMIT_PARSER_HOST", DEFAULT_HOST),
            port=_env_int("COMMIT_PARSER_PORT", DEFAULT_PORT),
            include_error_details=_env_bool("ERROR_INCLUDE_DETAILS"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "simple"),
        )

    @property
    def max_length(self) -> Optional[int]:
        """Length limit to enforce, None when disabled."""
        return self.max_message_length or None


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the settings instance."""
    global _settings

    if _settings is None:
        _settings = Settings.from_env()

    return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
