"""Media type parameter model."""

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class Parameter:
    """A media type parameter, e.g. ``charset=utf-8``.

    Neither name nor value is validated here; duplicate names are rejected
    by the owning MediaType.
    """

    name: str
    value: str | None = None

    def __str__(self) -> str:
        # None renders like an empty value
        value = self.value if self.value is not None else ""
        return f"{self.name}={value}"

    def get_name(self) -> str:
        return self.name

    def get_value(self) -> str | None:
        return self.value

    @classmethod
    def from_mapping(cls, parameters: Mapping[str, str | None]) -> list["Parameter"]:
        """Wrap each mapping entry into a Parameter, keeping mapping order."""
        return [cls(name, value) for name, value in parameters.items()]
