"""Tests for all compatibility modules."""

import pytest

from icalprop.builder import PropertyBuilder
from icalprop.compat import enable_compat_mode, property_compat, timezone_compat
from icalprop.parameters import Parameter
from icalprop.properties import PROPERTY_FACTORIES, DateProperty, ExtraProperty


def test_compat_mode_exchange() -> None:
    """Test Microsoft Exchange Server compatibility."""
    with enable_compat_mode("Microsoft Exchange Server 2010"):
        assert property_compat.is_relaxed_parsing_enabled()
        assert timezone_compat.is_extended_timezones_enabled()

        prop = (
            PropertyBuilder()
            .factories(PROPERTY_FACTORIES)
            .name("DTSTART")
            .parameter(Parameter("TZID", "W. Europe Standard Time"))
            .value("20230615T090000")
            .build()
        )
        assert isinstance(prop, DateProperty)
        assert prop.get_date().utcoffset().total_seconds() == 7200  # type: ignore[union-attr]
        prop.validate()

        prop = PropertyBuilder().name("ILLEGAL").value("value").build()
        assert isinstance(prop, ExtraProperty)

    assert not property_compat.is_relaxed_parsing_enabled()
    assert not timezone_compat.is_extended_timezones_enabled()


@pytest.mark.parametrize(
    "prodid",
    [None, "", "-//Google Inc//Google Calendar 70.9054//EN"],
)
def test_compat_mode_not_needed(prodid: str | None) -> None:
    """Test compatibility mode is not enabled for other producers."""
    with enable_compat_mode(prodid):
        assert not property_compat.is_relaxed_parsing_enabled()
        assert not timezone_compat.is_extended_timezones_enabled()


def test_relaxed_parsing() -> None:
    """Test the relaxed parsing context manager."""
    assert not property_compat.is_relaxed_parsing_enabled()
    with property_compat.enable_relaxed_parsing():
        assert property_compat.is_relaxed_parsing_enabled()
    assert not property_compat.is_relaxed_parsing_enabled()
