"""Compatibility layer for building properties from non-conforming calendars.

This module provides switches for handling content from calendar producers
that do not follow rfc5545 exactly.
"""

from .make_compat import enable_compat_mode

__all__ = [
    "enable_compat_mode",
]
