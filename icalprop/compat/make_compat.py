"""Compatibility layer for Office 365 and Exchange Server iCalendar files.

This module provides a context manager that can allow properties from known
non-conforming producers to be built.
"""

import contextlib
from collections.abc import Generator
import logging

from . import property_compat, timezone_compat


_LOGGER = logging.getLogger(__name__)

_EXCHANGE_PRODID = "Microsoft Exchange Server"


@contextlib.contextmanager
def enable_compat_mode(prodid: str | None) -> Generator[None]:
    """Enable compatibility mode based on the PRODID of the calendar."""

    if prodid and _EXCHANGE_PRODID in prodid:
        _LOGGER.debug("Enabling compatibility mode for Microsoft Exchange Server")
        with (
            property_compat.enable_relaxed_parsing(),
            timezone_compat.enable_extended_timezones(),
        ):
            yield
    else:
        _LOGGER.debug("No compatibility mode needed")
        yield
