"""Compatibility layer for accepting unrecognized property names.

Relaxed parsing allows property names that have no registered factory and
that are not experimental (X-) names. These are built as an ExtraProperty
holding the raw name, parameters and value rather than failing the build.
"""

from collections.abc import Generator
import contextlib
import contextvars


_relaxed_parsing = contextvars.ContextVar("relaxed_parsing", default=False)


@contextlib.contextmanager
def enable_relaxed_parsing() -> Generator[None]:
    """Context manager to allow unrecognized property names."""
    token = _relaxed_parsing.set(True)
    try:
        yield
    finally:
        _relaxed_parsing.reset(token)


def is_relaxed_parsing_enabled() -> bool:
    """Check if relaxed parsing is enabled."""
    return _relaxed_parsing.get()
