"""
.. include:: ../README.md
"""

__all__ = [
    "builder",
    "compat",
    "exceptions",
    "extended_timezones",
    "factories",
    "parameters",
    "properties",
    "timezone_registry",
    "types",
]
