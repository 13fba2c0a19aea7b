"""Content probing through libmagic.

libmagic is reached through python-magic. The module is imported on first
probe so that the rest of the package works on hosts without libmagic.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def coarse_probe(path: Path, magic_file: str | None = None) -> str | None:
    """Ask libmagic for the bare media type of a file, e.g. "text/plain".

    Returns:
        Media type string, or None if libmagic failed or the file is unreadable.
    """
    import magic

    try:
        if magic_file:
            detector = magic.Magic(mime=True, magic_file=magic_file)
            return detector.from_file(str(path))
        return magic.from_file(str(path), mime=True)
    except (magic.MagicException, OSError) as e:
        logger.warning("Coarse probe failed for %s: %s", path, e)
        return None


def detailed_probe(path: Path, magic_file: str | None = None) -> str | None:
    """Ask libmagic for the media type with its encoding.

    Returns:
        String like "text/plain; charset=us-ascii", or None if the file cannot be probed.
    """
    import magic

    try:
        detector = magic.Magic(mime=True, mime_encoding=True, magic_file=magic_file)
        return detector.from_file(str(path))
    except (magic.MagicException, OSError) as e:
        logger.warning("Detailed probe failed for %s: %s", path, e)
        return None


def probe_file(path: Path, magic_file: str | None = None) -> str | None:
    """Probe a file for its raw media type string.

    Tries the coarse probe first and falls back to the detailed probe.

    Args:
        path: Existing file to probe.
        magic_file: Optional libmagic database path.

    Returns:
        Raw media type string, or None if neither probe produced one.
    """
    for probe in (coarse_probe, detailed_probe):
        result = probe(path, magic_file=magic_file)
        if result:
            logger.debug("%s determined %s for %s", probe.__name__, result, path)
            return result

    return None
