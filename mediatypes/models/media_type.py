"""Media type value model."""

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from mediatypes.models.parameter import Parameter
from mediatypes.utils.parser import split_mime
from mediatypes.utils.validation import (
    InvalidMediaTypeError,
    is_valid_subtype,
    is_valid_suffix,
    is_valid_tree,
    is_valid_type,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MediaType:
    """A validated media type such as ``application/vnd.api+json; charset=utf-8``.

    The tree and suffix facets are derived from the subtype: the tree is the
    part before the first ".", the suffix the part after the first "+". Both
    are computed from the full subtype, so a subtype may carry either, both
    or neither.

    Raises:
        ValueError: If the type, subtype, suffix or tree is invalid, or a
            parameter name is repeated.
    """

    type: str
    subtype: str
    # Any iterable of Parameter is accepted and stored as a tuple
    parameters: tuple[Parameter, ...] = ()
    tree: str | None = field(default=None, init=False)
    suffix: str | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        if not is_valid_type(self.type):
            raise ValueError(f"Type is not valid ({self.type}).")

        if not is_valid_subtype(self.subtype):
            raise ValueError(f"Sub type is not valid ({self.subtype}).")

        if "+" in self.subtype:
            suffix = self.subtype.split("+", 1)[1].strip().lower()
            if not is_valid_suffix(suffix):
                raise ValueError(f"Suffix is not valid ({suffix}).")
            object.__setattr__(self, "suffix", suffix)

        if "." in self.subtype:
            tree = self.subtype.split(".", 1)[0].strip().lower()
            if not is_valid_tree(tree):
                raise ValueError(f"Tree is not valid ({tree}).")
            object.__setattr__(self, "tree", tree)

        seen: set[str] = set()
        for parameter in self.parameters:
            if parameter.name in seen:
                raise ValueError(f"Duplicate parameter name ({parameter.name}).")
            seen.add(parameter.name)
        object.__setattr__(self, "parameters", tuple(self.parameters))

    def __str__(self) -> str:
        rendered = f"{self.type}/{self.subtype}"
        if self.parameters:
            rendered += "; " + "; ".join(str(p) for p in self.parameters)
        return rendered

    @classmethod
    def create(
        cls,
        type: str,
        subtype: str,
        parameters: Mapping[str, str | None] | Iterable[Parameter] | None = None,
    ) -> "MediaType":
        """Build a MediaType from parameters given as a mapping or as Parameters.

        Args:
            type: Top-level type, e.g. "text".
            subtype: Full subtype, e.g. "vnd.api+json".
            parameters: Either ``{"charset": "utf-8"}`` or Parameter objects.

        Returns:
            Validated MediaType.

        Raises:
            ValueError: If any component is invalid.
        """
        if parameters is None:
            return cls(type, subtype)
        if isinstance(parameters, Mapping):
            return cls(type, subtype, tuple(Parameter.from_mapping(parameters)))
        return cls(type, subtype, tuple(parameters))

    @classmethod
    def from_mime(cls, mime: str) -> "MediaType":
        """Parse a raw media type string.

        Args:
            mime: Raw string, e.g. from a Content-Type header.

        Returns:
            Validated MediaType.

        Raises:
            ValueError: If mime is empty.
            InvalidMediaTypeError: If mime is not a valid media type.
        """
        type_, subtype, raw_parameters = split_mime(mime)
        parameters = tuple(Parameter(name, value) for name, value in raw_parameters)

        try:
            return cls(type_, subtype, parameters)
        except ValueError as e:
            raise InvalidMediaTypeError(str(e)) from e

    @classmethod
    def from_file(
        cls, path: str | os.PathLike[str], magic_file: str | None = None
    ) -> "MediaType | None":
        """Determine the media type of a file from its content.

        Args:
            path: File to probe.
            magic_file: Optional libmagic database to use instead of the default.

        Returns:
            MediaType, or None if no probe could determine a type.

        Raises:
            InvalidMediaTypeError: If the path does not exist or is a directory,
                or the probe result is not a valid media type.
        """
        # services import models, so the probe is imported on use
        from mediatypes.services.probe import probe_file

        file_path = Path(path)
        if not file_path.exists():
            raise InvalidMediaTypeError(f"File not found ({path}).")

        if file_path.is_dir():
            raise InvalidMediaTypeError(f"Not a file ({path}).")

        mime = probe_file(file_path, magic_file=magic_file)
        if not mime:
            logger.debug("No media type determined for %s", file_path)
            return None

        return cls.from_mime(mime)

    is_valid_type = staticmethod(is_valid_type)
    is_valid_subtype = staticmethod(is_valid_subtype)
    is_valid_suffix = staticmethod(is_valid_suffix)
    is_valid_tree = staticmethod(is_valid_tree)

    def get_type(self) -> str:
        return self.type

    def get_subtype(self) -> str:
        return self.subtype

    def get_tree(self) -> str | None:
        return self.tree

    def get_suffix(self) -> str | None:
        return self.suffix

    def get_parameter(self, name: str) -> Parameter | None:
        """Get a parameter by exact (case-sensitive) name."""
        for parameter in self.parameters:
            if parameter.name == name:
                return parameter
        return None

    def get_parameters(self) -> dict[str, Parameter]:
        """Get parameters keyed by name, in order of appearance."""
        return {p.name: p for p in self.parameters}

    def is_experimental(self) -> bool:
        """Check for an "x-" prefixed type or subtype."""
        return self.type.startswith("x-") or self.subtype.startswith("x-")

    def is_unregistered(self) -> bool:
        """Check for the unregistered "x." tree.

        application/x-www-form-urlencoded is registered despite its name.
        """
        if self.type == "application" and self.subtype == "x-www-form-urlencoded":
            return False
        return self.tree == "x"

    def is_vendor(self) -> bool:
        """Check for the vendor "vnd." tree."""
        return self.tree == "vnd"
