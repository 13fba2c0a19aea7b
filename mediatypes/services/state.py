"""Global state management for mediatypes."""

from mediatypes.config import Settings
from mediatypes.services.extensions import ExtensionMediaTypes

# Global state (initialized on first access)
_settings: Settings | None = None
_extensions: ExtensionMediaTypes | None = None


def get_settings() -> Settings:
    """Get or load settings from environment."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def get_extensions() -> ExtensionMediaTypes:
    """Get or create the extension table.

    Raises:
        FileNotFoundError: If the configured types file does not exist.
    """
    global _extensions
    if _extensions is None:
        settings = get_settings()
        _extensions = ExtensionMediaTypes(path=settings.types_file)
    return _extensions


def reset_state() -> None:
    """Reset global state for testing.

    This function clears the singleton instances, allowing tests
    to start with fresh state. Should only be used in test fixtures.
    """
    global _settings, _extensions
    _settings = None
    _extensions = None


def set_settings(settings: Settings) -> None:
    """Set the global settings instance.

    The extension table is dropped so it is rebuilt from the new settings.

    Args:
        settings: Settings instance to use globally.
    """
    global _settings, _extensions
    _settings = settings
    _extensions = None
