"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class Settings:
    """Application settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Logging
    log_level: str = field(default="WARNING")
    log_colors: bool = field(default=True)

    # Content probing
    magic_file: str | None = field(default=None)

    # Extension table
    types_file: str | None = field(default=None)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from MEDIATYPES_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        settings = cls(
            log_level=cls._get_log_level("MEDIATYPES_LOG_LEVEL", "WARNING"),
            log_colors=cls._get_bool("MEDIATYPES_LOG_COLORS", True),
            magic_file=cls._get_path("MEDIATYPES_MAGIC_FILE"),
            types_file=cls._get_path("MEDIATYPES_TYPES_FILE"),
        )
        logger.debug(
            "Settings loaded: log_level=%s, magic_file=%s, types_file=%s",
            settings.log_level,
            settings.magic_file,
            settings.types_file,
        )
        return settings

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set or unrecognized

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        value = value.strip().lower()
        if value in TRUE_VALUES:
            return True
        if value in FALSE_VALUES:
            return False

        logger.warning("Invalid bool for %s: %s, using default %s", key, value, default)
        return default

    @staticmethod
    def _get_log_level(key: str, default: str) -> str:
        """Get a logging level name from environment."""
        value = os.getenv(key, "").strip().upper()
        if not value:
            return default
        if value not in LOG_LEVELS:
            logger.warning("Invalid log level for %s: %s, using default %s", key, value, default)
            return default
        return value

    @staticmethod
    def _get_path(key: str) -> str | None:
        """Get a user path from environment, with ~ expanded."""
        value = os.getenv(key, "").strip()
        if not value:
            return None
        return os.path.expanduser(value)
