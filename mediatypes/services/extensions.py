"""Extension to media type lookup table."""

import logging
import mimetypes
import re
from collections.abc import Mapping
from pathlib import Path, PurePath

from mediatypes.models import MediaType

logger = logging.getLogger(__name__)


def _normalize_extension(extension: str) -> str:
    return extension.lstrip(".").lower()


def _natural_key(value: str) -> list[int | str]:
    """Sort key ordering embedded numbers numerically ("mp2" < "mp10")."""
    return [int(part) if part.isdigit() else part for part in re.split(r"(\d+)", value)]


def _load_table(path: Path | None = None) -> dict[str, str]:
    """Build an extension table from the standard library defaults.

    Platform mime.types files are not read. When path is given its entries
    extend and override the defaults.
    """
    filenames = (str(path),) if path is not None else ()
    db = mimetypes.MimeTypes(filenames=filenames)

    # types_map is (non-strict, strict); strict entries win
    table: dict[str, str] = {}
    for types_map in db.types_map:
        for extension, mime in types_map.items():
            table[_normalize_extension(extension)] = mime
    return table


class ExtensionMediaTypes:
    """Media type detection by file extension.

    Example:
        >>> types = ExtensionMediaTypes()
        >>> str(types.get_media_type("report.pdf"))
        'application/pdf'
        >>> types.matches_extension("image/jpeg")
        ['jpe', 'jpeg', 'jpg']
    """

    def __init__(
        self,
        mapping: Mapping[str, str] | None = None,
        path: str | Path | None = None,
    ) -> None:
        """Initialize the table.

        Args:
            mapping: Explicit extension to media type mapping. Takes
                precedence over path.
            path: mime.types file extending the standard library table.

        Raises:
            FileNotFoundError: If path does not exist.
        """
        if mapping is not None:
            self._extension_to_type = {
                _normalize_extension(ext): mime for ext, mime in mapping.items()
            }
            return

        types_path = Path(path) if path is not None else None
        if types_path is not None and not types_path.exists():
            raise FileNotFoundError(f"Media types file not found: {types_path}")

        self._extension_to_type = _load_table(types_path)
        logger.debug(
            "Loaded %d extension mapping(s)%s",
            len(self._extension_to_type),
            f" from {types_path}" if types_path else "",
        )

    def __len__(self) -> int:
        return len(self._extension_to_type)

    def add_mapping(self, extension: str, mime: str) -> None:
        """Add or replace the media type of one extension."""
        self._extension_to_type[_normalize_extension(extension)] = mime

    def get_media_type(self, path: str | PurePath) -> MediaType:
        """Get the media type for a file path from its extension.

        Args:
            path: File path, only its name is inspected.

        Returns:
            Parsed MediaType.

        Raises:
            ValueError: If the path has no extension or it is unknown.
            InvalidMediaTypeError: If the mapped string is not a media type.
        """
        name = PurePath(path).name
        if "." not in name:
            raise ValueError(
                f"The extension can not be found in the specified file path ({path})."
            )

        extension = name.rsplit(".", 1)[1].lower()
        mime = self._extension_to_type.get(extension)
        if mime is None:
            raise ValueError(
                f"A media type corresponding to the extension could not be found ({extension})."
            )

        return MediaType.from_mime(mime)

    def matches_extension(self, mime: str) -> list[str]:
        """Get every extension mapped exactly to a media type string.

        Returns:
            Lowercase extensions in natural order, empty if none match.
        """
        extensions = {ext.lower() for ext, value in self._extension_to_type.items() if value == mime}
        return sorted(extensions, key=_natural_key)
