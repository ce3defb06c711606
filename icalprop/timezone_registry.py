"""Library for resolving timezone identifiers to timezone rules.

The property library never reads timezone rules itself. A TZID parameter is
resolved through a registry that is passed in explicitly to the builder and
to each date property. The default registry follows the same approach as
zoneinfo for loading timezone data: it first checks the system TZPATH, then
falls back to the tzdata python package.

A registry is shared read only across many builds, so implementations must
be safe for concurrent lookups.
"""

from __future__ import annotations

import datetime
import logging
import zoneinfo
from typing import Protocol

from .compat import timezone_compat
from .exceptions import ReferenceResolutionError
from .extended_timezones import EXTENDED_TIMEZONES

__all__ = [
    "TimezoneRegistry",
    "ZoneInfoRegistry",
    "DEFAULT_TZID",
]

_LOGGER = logging.getLogger(__name__)

DEFAULT_TZID = "UTC"


class TimezoneRegistry(Protocol):
    """Defines the protocol for resolving a timezone identifier."""

    default_tzid: str
    """Zone used for a DATE-TIME value that has no TZID and is not UTC."""

    def get_timezone(self, tzid: str) -> datetime.tzinfo:
        """Return the timezone for the identifier.

        Raises ReferenceResolutionError when the identifier is unknown.
        """


class ZoneInfoRegistry:
    """A TimezoneRegistry backed by the IANA timezone database."""

    def __init__(self, default_tzid: str = DEFAULT_TZID) -> None:
        """Initialize ZoneInfoRegistry."""
        self.default_tzid = default_tzid

    def get_timezone(self, tzid: str) -> datetime.tzinfo:
        """Return the zoneinfo for the identifier."""
        key = tzid
        if timezone_compat.is_extended_timezones_enabled():
            if target_timezone := EXTENDED_TIMEZONES.get(tzid):
                _LOGGER.debug("Using extended timezone: %s", target_timezone)
                key = target_timezone
        try:
            return zoneinfo.ZoneInfo(key)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError, OSError) as err:
            raise ReferenceResolutionError(
                f"Unable to find timezone for TZID '{tzid}'"
            ) from err

    def __repr__(self) -> str:
        return f"ZoneInfoRegistry(default_tzid={self.default_tzid!r})"
