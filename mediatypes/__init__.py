"""Internet media type parsing and validation."""

from mediatypes.models import MediaType, Parameter
from mediatypes.services import ExtensionMediaTypes
from mediatypes.utils.validation import (
    InvalidMediaTypeError,
    is_valid_subtype,
    is_valid_suffix,
    is_valid_tree,
    is_valid_type,
)

__version__ = "0.1.0"

__all__ = [
    "ExtensionMediaTypes",
    "InvalidMediaTypeError",
    "MediaType",
    "Parameter",
    "__version__",
    "is_valid_subtype",
    "is_valid_suffix",
    "is_valid_tree",
    "is_valid_type",
]
