"""Media type component validation."""

import re
from typing import Final


class InvalidMediaTypeError(ValueError):
    """Text claiming to be a media type is not one."""

    pass


VALID_TYPES: Final[frozenset[str]] = frozenset(
    {
        "application",
        "audio",
        "example",
        "font",
        "image",
        "message",
        "model",
        "multipart",
        "text",
        "video",
    }
)

VALID_TREES: Final[frozenset[str]] = frozenset({"vnd", "prs", "x"})

VALID_SUFFIXES: Final[frozenset[str]] = frozenset(
    {
        "xml",
        "json",
        "ber",
        "der",
        "fastinfoset",
        "wbxml",
        "zip",
        "cbor",
    }
)

# restricted-name from RFC 6838 section 4.2
TYPE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[0-9a-z][0-9a-z!#$&\-^_.+]{0,126}$", re.IGNORECASE
)


def _matches_pattern(value: str) -> bool:
    # fullmatch so a trailing newline is not accepted by "$"
    return TYPE_PATTERN.fullmatch(value) is not None


def is_valid_type(value: str) -> bool:
    """Check a top-level type against the syntax pattern and the whitelist.

    The whitelist comparison is case-sensitive: callers parsing raw text
    lowercase the type first.

    Args:
        value: Candidate top-level type, e.g. "text".

    Returns:
        True if the type is usable.
    """
    return _matches_pattern(value) and value in VALID_TYPES


def is_valid_subtype(value: str) -> bool:
    """Check a full subtype (tree and suffix included) against the syntax pattern."""
    return _matches_pattern(value)


def is_valid_suffix(value: str) -> bool:
    """Check a structured syntax suffix against the whitelist."""
    return value in VALID_SUFFIXES


def is_valid_tree(value: str) -> bool:
    """Check a registration tree facet against the whitelist."""
    return value in VALID_TREES
