"""Compatibility layer for Windows timezone names in TZID parameters.

Calendars produced by Exchange Server and Office 365 name zones such as
`W. Europe Standard Time` instead of using IANA identifiers. While extended
timezones are enabled in the current context, `ZoneInfoRegistry.get_timezone`
maps a Windows name to the IANA zone Windows uses by default for it before
the lookup. Identifiers that are not Windows names are resolved unchanged.

The switch is a context variable, so enabling it in one thread or task does
not affect lookups made elsewhere.
"""

from collections.abc import Generator
import contextlib
import contextvars


_extended_timezones = contextvars.ContextVar("extended_timezones", default=False)


@contextlib.contextmanager
def enable_extended_timezones() -> Generator[None]:
    """Context manager to resolve Windows timezone names in TZID parameters."""
    token = _extended_timezones.set(True)
    try:
        yield
    finally:
        _extended_timezones.reset(token)


def is_extended_timezones_enabled() -> bool:
    """Check if Windows timezone names are resolved."""
    return _extended_timezones.get()
