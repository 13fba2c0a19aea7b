"""Protocol interfaces for media type sources.

Callers that only need "a media type for this path" depend on the
MediaTypes protocol instead of a concrete table, so lookup tables and
test doubles can be swapped freely.

Usage Example:

    from mediatypes.protocols import MediaTypes

    def describe(source: MediaTypes, path: str) -> str:
        return str(source.get_media_type(path))

    from mediatypes.services import ExtensionMediaTypes
    describe(ExtensionMediaTypes(), "report.pdf")  # "application/pdf"
"""

from pathlib import PurePath
from typing import Protocol, runtime_checkable

from mediatypes.models import MediaType


@runtime_checkable
class MediaTypes(Protocol):
    """Protocol for anything that maps a file path to a media type.

    Example implementation:
        class FixedMediaTypes:
            def get_media_type(self, path: str | PurePath) -> MediaType:
                return MediaType.from_mime("application/octet-stream")
    """

    def get_media_type(self, path: str | PurePath) -> MediaType:
        """Get the media type for a file path.

        Args:
            path: File path

        Returns:
            Parsed MediaType

        Raises:
            ValueError: If no media type corresponds to the path
        """
        ...
