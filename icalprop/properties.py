"""Typed rfc5545 properties.

A property is a name, an ordered list of parameters, and a value. The kind
of value a property holds is described by capability flags on the property
class rather than by its type:

  escapable   the value is TEXT that may contain backslash escape sequences
  temporal    the value is a DATE or DATE-TIME

A property class never sets both. The PropertyBuilder reads these flags to
decide how the raw value text is applied to a newly created property.

Properties are mutable: a builder sets the value during construction and
callers may later change the value or the parameters. Validation is never
performed implicitly, call `validate()` before handing a property on.
"""

from __future__ import annotations

import copy
import datetime
import logging
from collections.abc import Iterable
from typing import ClassVar, Self

from .exceptions import (
    DateTimeValueParameterError,
    DateValueParameterError,
    TzidMismatchError,
    TzidParameterCountError,
    UtcRequiredError,
    ValueParameterCountError,
)
from .factories import PropertyFactoryRegistry
from .parameters import DATE, DATE_TIME, TZID, VALUE, Parameter
from .timezone_registry import TimezoneRegistry, ZoneInfoRegistry
from .types.temporal import (
    DateOnly,
    TemporalValue,
    UtcInstant,
    ZonedDateTime,
    parse_temporal,
)

__all__ = [
    "Property",
    "TextProperty",
    "ExtraProperty",
    "DateProperty",
    "UtcDateProperty",
    "PROPERTY_FACTORIES",
]

_LOGGER = logging.getLogger(__name__)

PROPERTY_FACTORIES: PropertyFactoryRegistry = PropertyFactoryRegistry()
"""Factories for the properties defined in rfc5545."""


class Property:
    """A property with a plain string value."""

    escapable: ClassVar[bool] = False
    """The value is TEXT and is unescaped when built from a content line."""

    temporal: ClassVar[bool] = False
    """The value is a DATE or DATE-TIME interpreted when set."""

    def __init__(
        self,
        name: str,
        params: Iterable[Parameter] | None = None,
        value: str = "",
    ) -> None:
        """Initialize Property."""
        self.name = name.upper()
        self.params: list[Parameter] = list(params or [])
        self._value = value

    @property
    def value(self) -> str:
        """Return the value of the property as a string."""
        return self._value

    def set_value(self, value: str) -> None:
        """Set the value of the property."""
        self._value = value

    def get_parameter(self, name: str) -> Parameter | None:
        """Return the first parameter with the specified name."""
        name = name.upper()
        for param in self.params:
            if param.name == name:
                return param
        return None

    def get_parameters(self, name: str) -> list[Parameter]:
        """Return all parameters with the specified name."""
        name = name.upper()
        return [param for param in self.params if param.name == name]

    def add_parameter(self, parameter: Parameter) -> None:
        """Append a parameter, even if the name is already present."""
        self.params.append(parameter)

    def remove_parameters(self, name: str) -> None:
        """Remove all parameters with the specified name."""
        name = name.upper()
        self.params = [param for param in self.params if param.name != name]

    def replace_parameter(self, parameter: Parameter) -> None:
        """Replace all parameters with the name of the new parameter."""
        self.remove_parameters(parameter.name)
        self.add_parameter(parameter)

    def validate(self) -> None:
        """Validate the property parameters and value.

        A plain property has no rules. Subclasses raise a
        PropertyValidationError when the property is not consistent.
        """

    def copy(self) -> Self:
        """Return a copy of the property with an independent parameter list."""
        result = copy.copy(self)
        result.params = list(self.params)
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Property):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.name == other.name
            and self.params == other.params
            and self.value == other.value
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, params={self.params!r}, "
            f"value={self.value!r})"
        )


@PROPERTY_FACTORIES.register(
    "VERSION",
    "CALSCALE",
    "METHOD",
    "STATUS",
    "CLASS",
    "TRANSP",
    "PRIORITY",
    "SEQUENCE",
    "URL",
    "GEO",
    "RRULE",
    "DURATION",
)
class PlainProperty(Property):
    """A property whose value has no escape sequences and is kept as is."""


@PROPERTY_FACTORIES.register(
    "SUMMARY",
    "DESCRIPTION",
    "LOCATION",
    "COMMENT",
    "CONTACT",
    "UID",
    "CATEGORIES",
    "RESOURCES",
    "PRODID",
    "TZNAME",
    "TZID",
)
class TextProperty(Property):
    """A property with a TEXT value."""

    escapable = True


class ExtraProperty(Property):
    """A property that has no factory, such as an experimental X- property.

    The name, parameters and value are kept exactly as they were given.
    """


@PROPERTY_FACTORIES.register("DTSTART", "DTEND", "DUE", "RECURRENCE-ID")
class DateProperty(Property):
    """A property with a DATE or DATE-TIME value.

    The value is stored as a TemporalValue once set, or is empty. When the
    property has a TZID parameter, `get_date` returns the stored value viewed
    at that timezone. The TZID parameter is consulted on every read, so
    changing it changes subsequent reads without setting the value again.

    Equality and hashing use only the result of `get_date`. Two date
    properties are equal when they resolve to the same date or instant, even
    when their names or parameters differ. Keep this in mind when placing
    date properties in a set or using them as dictionary keys.
    """

    temporal = True

    def __init__(
        self,
        name: str,
        params: Iterable[Parameter] | None = None,
        value: str = "",
        timezone_registry: TimezoneRegistry | None = None,
    ) -> None:
        """Initialize DateProperty."""
        super().__init__(name, params)
        self._timezone_registry: TimezoneRegistry = (
            timezone_registry or ZoneInfoRegistry()
        )
        self._date: TemporalValue | None = None
        self.set_value(value)

    @property
    def timezone_registry(self) -> TimezoneRegistry:
        """Return the registry used to resolve the TZID parameter."""
        return self._timezone_registry

    def set_timezone_registry(self, timezone_registry: TimezoneRegistry | None) -> None:
        """Set the registry used to resolve the TZID parameter."""
        self._timezone_registry = timezone_registry or ZoneInfoRegistry()

    @property
    def tzid(self) -> str | None:
        """Return the value of the TZID parameter if present."""
        if param := self.get_parameter(TZID):
            return param.value
        return None

    @property
    def temporal_value(self) -> TemporalValue | None:
        """Return the stored value, unaffected by the TZID parameter."""
        return self._date

    @property
    def value(self) -> str:
        """Return the stored value as an ICS string, or empty if not set."""
        if self._date is None:
            return ""
        return self._date.ics()

    def set_value(self, value: str) -> None:
        """Set the value from a DATE or DATE-TIME string.

        With a TZID parameter the string must be a local DATE-TIME, which is
        interpreted in that timezone. Without one, a DATE-TIME that is not in
        UTC is interpreted in the registry default zone. The previous value is
        kept if the string can't be parsed.
        """
        if not value:
            self._date = None
            return
        self._date = parse_temporal(value, self.tzid, self._timezone_registry)

    def get_date(self) -> datetime.date | datetime.datetime | None:
        """Return the date or date-time, resolved at the TZID if present."""
        if self._date is None:
            return None
        if (tzid := self.tzid) is not None:
            return self._date.to_local(self._timezone_registry.get_timezone(tzid))
        return self._date.value

    def set_date(self, value: TemporalValue | None) -> None:
        """Set the stored value directly."""
        self._date = value

    def is_utc(self) -> bool:
        """Return True if the stored value is in UTC time."""
        return isinstance(self._date, UtcInstant)

    def validate(self) -> None:
        """Validate the VALUE and TZID parameters against the stored value."""
        if len(self.get_parameters(VALUE)) > 1:
            raise ValueParameterCountError(
                f"Parameter [{VALUE}] must be specified no more than once"
            )

        tzid_count = len(self.get_parameters(TZID))
        if self.is_utc():
            if tzid_count:
                raise TzidParameterCountError(
                    f"Parameter [{TZID}] is not applicable for a UTC value"
                )
        elif tzid_count > 1:
            raise TzidParameterCountError(
                f"Parameter [{TZID}] must be specified no more than once"
            )

        if self._date is None:
            return

        value_param = self.get_parameter(VALUE)
        if isinstance(self._date, DateOnly):
            if value_param is None:
                raise DateValueParameterError(
                    f"VALUE parameter [{DATE}] must be specified for DATE instance"
                )
            if value_param.value != DATE:
                raise DateValueParameterError(
                    f"VALUE parameter [{value_param.value}] is invalid for DATE instance"
                )
            return

        if value_param is not None and value_param.value != DATE_TIME:
            raise DateTimeValueParameterError(
                f"VALUE parameter [{value_param.value}] is invalid for DATE-TIME instance"
            )

        if isinstance(self._date, ZonedDateTime):
            tzid = self.tzid
            if tzid is None or tzid != self._date.tzid:
                raise TzidMismatchError(
                    f"TZID parameter [{tzid}] does not match the timezone "
                    f"[{self._date.tzid}]"
                )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateProperty):
            return NotImplemented
        return self.get_date() == other.get_date()

    def __hash__(self) -> int:
        return hash(self.get_date())


@PROPERTY_FACTORIES.register("DTSTAMP", "CREATED", "LAST-MODIFIED", "COMPLETED")
class UtcDateProperty(DateProperty):
    """A date property that only allows a DATE-TIME value in UTC time."""

    def validate(self) -> None:
        """Validate the property, additionally requiring a UTC value."""
        super().validate()
        if self._date is not None and not self.is_utc():
            _LOGGER.debug("Property %s has non-UTC value %s", self.name, self._date)
            raise UtcRequiredError(
                f"Property [{self.name}] must be specified as a UTC date-time"
            )
