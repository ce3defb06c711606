"""Parameters or meta information associated with a property.

Property parameters are additional modifiers on a property to specify extra
information about the value for the property (e.g. the value type, or the
timezone of a date-time).

Parameters are kept as an ordered list of name/value pairs on a property. The
order they were supplied in is preserved and a name may appear more than once,
which is what validation of a property checks for.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .parsing.property import ParsedPropertyParameter

__all__ = [
    "Parameter",
    "VALUE",
    "TZID",
    "DATE",
    "DATE_TIME",
    "from_parsed_parameters",
]

VALUE = "VALUE"
"""Declares the value type of the property value."""

TZID = "TZID"
"""References the timezone of a DATE-TIME property value."""

DATE = "DATE"
"""VALUE parameter marker for a date-only value."""

DATE_TIME = "DATE-TIME"
"""VALUE parameter marker for a date-time value."""


@dataclass(frozen=True)
class Parameter:
    """A single property parameter name and value."""

    name: str
    value: str

    def __post_init__(self) -> None:
        """Canonicalize the parameter name."""
        object.__setattr__(self, "name", self.name.upper())

    def __str__(self) -> str:
        return f"{self.name}={self.value}"


def from_parsed_parameters(
    params: Iterable[ParsedPropertyParameter] | None,
) -> list[Parameter]:
    """Convert tokenizer parameters into Parameter objects.

    A tokenizer parameter with multiple values becomes a single parameter
    with the values joined by commas, as they appeared in the content line.
    """
    if not params:
        return []
    return [Parameter(param.name, ",".join(param.values)) for param in params]
