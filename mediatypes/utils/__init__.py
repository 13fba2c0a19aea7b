"""Utilities for mediatypes."""

from mediatypes.utils.console import ColorfulFormatter, configure_logging
from mediatypes.utils.parser import parse_parameter, split_mime
from mediatypes.utils.validation import (
    VALID_SUFFIXES,
    VALID_TREES,
    VALID_TYPES,
    InvalidMediaTypeError,
    is_valid_subtype,
    is_valid_suffix,
    is_valid_tree,
    is_valid_type,
)

__all__ = [
    "ColorfulFormatter",
    "configure_logging",
    "InvalidMediaTypeError",
    "is_valid_subtype",
    "is_valid_suffix",
    "is_valid_tree",
    "is_valid_type",
    "parse_parameter",
    "split_mime",
    "VALID_SUFFIXES",
    "VALID_TREES",
    "VALID_TYPES",
]
