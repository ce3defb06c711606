"""Library for building typed properties from raw property attributes.

The builder accumulates the name, value and parameters of a single content
line along with the factories and timezone registry to use, then creates
the property in `build()`:

```python
from icalprop.builder import PropertyBuilder
from icalprop.parameters import Parameter
from icalprop.properties import PROPERTY_FACTORIES

prop = (
    PropertyBuilder()
    .factories(PROPERTY_FACTORIES)
    .name("dtstart")
    .parameter(Parameter("TZID", "America/New_York"))
    .value("20230615T090000")
    .build()
)
prop.validate()
print(prop.get_date())
```

The above example will output:
```
2023-06-15 09:00:00-04:00
```

Factory order is significant. Every factory that supports the name is asked
to create the property and the last one to return a property wins, so a
custom factory appended after the defaults overrides them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Self, cast

from .compat import property_compat
from .exceptions import UnsupportedNameError
from .factories import PropertyFactory
from .parameters import Parameter, from_parsed_parameters
from .parsing.property import ParsedProperty
from .properties import DateProperty, ExtraProperty, Property
from .timezone_registry import TimezoneRegistry
from .types.text import unescape

__all__ = [
    "PropertyBuilder",
    "EXPERIMENTAL_PREFIX",
    "is_experimental_name",
]

_LOGGER = logging.getLogger(__name__)

EXPERIMENTAL_PREFIX = "X-"


def is_experimental_name(name: str) -> bool:
    """Return True if the name is a non-standard, vendor defined name."""
    return name.startswith(EXPERIMENTAL_PREFIX) and len(name) > len(
        EXPERIMENTAL_PREFIX
    )


class PropertyBuilder:
    """Builds a single property from its name, parameters and value.

    Configuration methods only accumulate state and return the builder so
    that they can be chained. A builder is meant for a single build session
    and is not safe to configure from multiple threads.
    """

    def __init__(self, allow_illegal_names: bool | None = None) -> None:
        """Initialize PropertyBuilder.

        When `allow_illegal_names` is not set, unrecognized names are allowed
        only when relaxed parsing is enabled in `icalprop.compat`.
        """
        self._factories: list[PropertyFactory] = []
        self._name = ""
        self._value = ""
        self._params: list[Parameter] = []
        self._timezone_registry: TimezoneRegistry | None = None
        self._allow_illegal_names = allow_illegal_names

    def factories(self, factories: Iterable[PropertyFactory]) -> Self:
        """Append factories used to create the property."""
        self._factories.extend(factories)
        return self

    def name(self, name: str) -> Self:
        """Set the property name, which is case-insensitive."""
        self._name = name.upper()
        return self

    def value(self, value: str) -> Self:
        """Set the property value, ignoring surrounding whitespace."""
        self._value = value.strip()
        return self

    def parameter(self, parameter: Parameter) -> Self:
        """Append a property parameter."""
        self._params.append(parameter)
        return self

    def parameters(self, parameters: Iterable[Parameter]) -> Self:
        """Append property parameters in order."""
        self._params.extend(parameters)
        return self

    def timezone_registry(self, timezone_registry: TimezoneRegistry) -> Self:
        """Set the registry used to resolve TZID parameters."""
        self._timezone_registry = timezone_registry
        return self

    def parsed_property(self, prop: ParsedProperty) -> Self:
        """Set the name, value and parameters from a tokenized content line."""
        return (
            self.name(prop.name)
            .value(prop.value)
            .parameters(from_parsed_parameters(prop.params))
        )

    def allow_illegal_names(self) -> bool:
        """Return True if names without a factory are built as extra properties."""
        if self._allow_illegal_names is not None:
            return self._allow_illegal_names
        return property_compat.is_relaxed_parsing_enabled()

    def _create(self) -> Property | None:
        """Return the property created by the last supporting factory."""
        result: Property | None = None
        result_factory: PropertyFactory | None = None
        # All supporting factories are invoked on purpose: a later factory
        # overrides the result of an earlier one for the same name.
        for factory in self._factories:
            if not factory.supports(self._name):
                continue
            if (prop := factory.create(self._params, self._value)) is None:
                continue
            if result is not None:
                _LOGGER.debug(
                    "Property factory %s overrides %s for %s",
                    factory,
                    result_factory,
                    self._name,
                )
            result = prop
            result_factory = factory
        return result

    def build(self) -> Property:
        """Build the property.

        Raises UnsupportedNameError when no factory creates the property and
        the name is not allowed as an extra property. Errors from factories or
        from parsing a DATE or DATE-TIME value are raised as is.
        """
        if (prop := self._create()) is not None:
            if prop.escapable:
                prop.set_value(unescape(self._value))
            elif prop.temporal:
                date_prop = cast(DateProperty, prop)
                date_prop.set_timezone_registry(self._timezone_registry)
                date_prop.set_value(self._value)
            _LOGGER.debug("Built property %s", prop)
            return prop

        if is_experimental_name(self._name) or self.allow_illegal_names():
            _LOGGER.debug("Building extra property %s", self._name)
            return ExtraProperty(self._name, self._params, self._value)

        raise UnsupportedNameError(self._name)
