"""Factories that create typed properties from a property name.

A factory declares the property names it supports and creates a new
property from the parameters and value of a content line. The builder is
given an ordered sequence of factories for each build; the library's own
factories are collected in a PropertyFactoryRegistry.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Protocol, TypeVar

from .parameters import Parameter

if TYPE_CHECKING:
    from .properties import Property

__all__ = [
    "PropertyFactory",
    "NamedPropertyFactory",
    "PropertyFactoryRegistry",
]

_LOGGER = logging.getLogger(__name__)

T_TYPE = TypeVar("T_TYPE", bound=type)


class PropertyFactory(Protocol):
    """Defines the protocol implemented by property factories."""

    def supports(self, name: str) -> bool:
        """Return True if the factory creates properties for the upper case name."""

    def create(self, params: list[Parameter], value: str) -> Property | None:
        """Create a new property, or None to decline."""


class NamedPropertyFactory:
    """A factory for a single property name and property class.

    Properties with the temporal capability are created without a value, since
    the value can only be interpreted once the timezone registry is known. The
    builder binds the value after creation.
    """

    def __init__(self, name: str, property_type: type[Property]) -> None:
        """Initialize NamedPropertyFactory."""
        self._name = name.upper()
        self._property_type = property_type

    @property
    def name(self) -> str:
        """Return the property name created by this factory."""
        return self._name

    def supports(self, name: str) -> bool:
        """Return True if the name is the name of this factory."""
        return name == self._name

    def create(self, params: list[Parameter], value: str) -> Property:
        """Create a new property of the property class."""
        if self._property_type.temporal:
            return self._property_type(self._name, params)
        return self._property_type(self._name, params, value)

    def __repr__(self) -> str:
        return f"NamedPropertyFactory({self._name}, {self._property_type.__name__})"


class PropertyFactoryRegistry:
    """Ordered collection of property factories."""

    def __init__(self) -> None:
        """Initialize PropertyFactoryRegistry."""
        self._factories: list[PropertyFactory] = []

    def register(self, *names: str) -> Callable[[T_TYPE], T_TYPE]:
        """Return decorator to register a property class for the names."""

        def decorator(property_type: T_TYPE) -> T_TYPE:
            """Register decorated property class."""
            for name in names:
                self.add(NamedPropertyFactory(name, property_type))
            return property_type

        return decorator

    def add(self, factory: PropertyFactory) -> None:
        """Append a factory, taking precedence over factories added earlier."""
        _LOGGER.debug("Registering property factory %s", factory)
        self._factories.append(factory)

    @property
    def factories(self) -> list[PropertyFactory]:
        """Return a copy of the registered factories in registration order."""
        return list(self._factories)

    def __iter__(self) -> Iterator[PropertyFactory]:
        return iter(self.factories)

    def __len__(self) -> int:
        return len(self._factories)
