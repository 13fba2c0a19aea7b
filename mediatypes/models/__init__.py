"""Data models for mediatypes."""

from mediatypes.models.media_type import MediaType
from mediatypes.models.parameter import Parameter

__all__ = [
    "MediaType",
    "Parameter",
]
