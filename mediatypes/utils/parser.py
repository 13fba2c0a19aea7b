"""Raw media type string parsing."""

import logging

from mediatypes.utils.validation import (
    InvalidMediaTypeError,
    is_valid_subtype,
    is_valid_type,
)

logger = logging.getLogger(__name__)

RawParameter = tuple[str, str | None]


def parse_parameter(piece: str) -> RawParameter:
    """Parse one ``name=value`` piece of a media type string.

    The name is trimmed. A value that is non-empty after trimming loses one
    layer of surrounding double quotes; a missing or blank value is None.

    Raises:
        InvalidMediaTypeError: If the name is empty.
    """
    # Split on first "=" only (quoted values may contain "=")
    name, _, raw_value = piece.partition("=")
    name = name.strip()
    if not name:
        raise InvalidMediaTypeError(f"Parameter name is empty ({piece.strip()}).")

    value: str | None = raw_value.strip()
    if not value:
        value = None
    elif value.startswith('"') and value.endswith('"'):
        value = value[1:-1]

    return name, value


def split_mime(raw: str) -> tuple[str, str, list[RawParameter]]:
    """Split a raw media type string into its components.

    Formats:
        - "text/plain"
        - "text/plain; charset=utf-8; format=flowed"
        - "application/vnd.api+json; charset=\"utf-8\""

    The type and subtype are lowercased and trimmed. Suffix and tree facets
    are left inside the subtype; they are validated when the value is built.

    Returns:
        Tuple of (type, subtype, [(name, value), ...]) in order of appearance.

    Raises:
        ValueError: If raw is empty.
        InvalidMediaTypeError: If the type or subtype is missing or invalid.
    """
    if not raw:
        raise ValueError("Media type string must not be empty.")

    # Split on first slash only
    type_part, slash, rest = raw.partition("/")
    type_ = type_part.strip().lower()

    if not type_:
        raise InvalidMediaTypeError(f"There is no type ({raw}).")

    if not is_valid_type(type_):
        raise InvalidMediaTypeError(f"Type is not valid ({type_}).")

    if not slash or not rest:
        raise InvalidMediaTypeError(f"There is no subtype ({raw}).")

    pieces = rest.split(";")
    subtype = pieces[0].strip().lower()

    if not is_valid_subtype(subtype):
        raise InvalidMediaTypeError(f"Sub type is not valid ({subtype}).")

    parameters = [parse_parameter(piece) for piece in pieces[1:] if piece.strip()]

    logger.debug(
        "Split %r into type=%s, subtype=%s, %d parameter(s)",
        raw,
        type_,
        subtype,
        len(parameters),
    )
    return type_, subtype, parameters
