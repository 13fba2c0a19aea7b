"""Services for mediatypes."""

from mediatypes.services.extensions import ExtensionMediaTypes
from mediatypes.services.probe import probe_file
from mediatypes.services.state import (
    get_extensions,
    get_settings,
    reset_state,
    set_settings,
)

__all__ = [
    "ExtensionMediaTypes",
    "get_extensions",
    "get_settings",
    "probe_file",
    "reset_state",
    "set_settings",
]
