"""Library for parsing rfc5545 Property Value Data Types."""

from .temporal import DateOnly, TemporalValue, UtcInstant, ZonedDateTime, parse_temporal
from .text import escape, unescape

__all__ = [
    "DateOnly",
    "TemporalValue",
    "UtcInstant",
    "ZonedDateTime",
    "escape",
    "parse_temporal",
    "unescape",
]
