"""Test fixtures."""

from collections.abc import Callable
import datetime

import pytest

from icalprop.builder import PropertyBuilder
from icalprop.exceptions import ReferenceResolutionError
from icalprop.properties import PROPERTY_FACTORIES
from icalprop.timezone_registry import ZoneInfoRegistry

CUSTOM_TZID = "Custom/Zone"
CUSTOM_TZ = datetime.timezone(datetime.timedelta(hours=5), "CUSTOM")


class FakeTimezoneRegistry:
    """A registry with a fixed set of timezones."""

    def __init__(
        self,
        timezones: dict[str, datetime.tzinfo] | None = None,
        default_tzid: str = CUSTOM_TZID,
    ) -> None:
        self.default_tzid = default_tzid
        self.timezones = timezones if timezones is not None else {CUSTOM_TZID: CUSTOM_TZ}
        self.lookups: list[str] = []

    def get_timezone(self, tzid: str) -> datetime.tzinfo:
        self.lookups.append(tzid)
        if (tz := self.timezones.get(tzid)) is None:
            raise ReferenceResolutionError(f"Unknown timezone {tzid}")
        return tz


@pytest.fixture(name="registry")
def mock_registry() -> ZoneInfoRegistry:
    """Fixture for the default timezone registry."""
    return ZoneInfoRegistry()


@pytest.fixture(name="fake_registry")
def mock_fake_registry() -> FakeTimezoneRegistry:
    """Fixture for a timezone registry with a single custom zone."""
    return FakeTimezoneRegistry()


@pytest.fixture(name="builder")
def mock_builder(registry: ZoneInfoRegistry) -> Callable[[], PropertyBuilder]:
    """Fixture that creates a builder with the default factories."""

    def _builder() -> PropertyBuilder:
        return (
            PropertyBuilder()
            .factories(PROPERTY_FACTORIES)
            .timezone_registry(registry)
        )

    return _builder
