"""Tests for property factories."""

import pytest

from icalprop.factories import NamedPropertyFactory, PropertyFactoryRegistry
from icalprop.parameters import Parameter
from icalprop.properties import (
    PROPERTY_FACTORIES,
    DateProperty,
    PlainProperty,
    Property,
    TextProperty,
    UtcDateProperty,
)


def test_named_factory() -> None:
    """Test a factory for a single property name."""
    factory = NamedPropertyFactory("summary", TextProperty)
    assert factory.name == "SUMMARY"
    assert factory.supports("SUMMARY")
    assert not factory.supports("summary")
    assert not factory.supports("DESCRIPTION")

    params = [Parameter("LANGUAGE", "en")]
    prop = factory.create(params, "Meeting\\, room 1")
    assert prop == TextProperty("SUMMARY", [Parameter("LANGUAGE", "en")], "Meeting\\, room 1")
    assert prop.params is not params
    assert repr(factory) == "NamedPropertyFactory(SUMMARY, TextProperty)"


def test_named_factory_temporal() -> None:
    """Test a temporal property is created without binding the value."""
    factory = NamedPropertyFactory("DTSTART", DateProperty)
    prop = factory.create([Parameter("TZID", "Invalid/Zone")], "20230615T090000")
    assert isinstance(prop, DateProperty)
    assert prop.get_date() is None


def test_registry() -> None:
    """Test registering property classes with a registry."""
    registry = PropertyFactoryRegistry()
    assert len(registry) == 0

    @registry.register("X-ONE", "X-TWO")
    class CustomProperty(Property):
        """Property under test."""

    assert len(registry) == 2
    assert [factory.supports("X-TWO") for factory in registry] == [False, True]
    prop = registry.factories[0].create([], "value")
    assert isinstance(prop, CustomProperty)
    assert prop.name == "X-ONE"

    registry.add(NamedPropertyFactory("X-ONE", PlainProperty))
    assert len(registry) == 3

    # Changes to the returned list do not change the registry
    registry.factories.clear()
    assert len(registry) == 3


@pytest.mark.parametrize(
    ("name", "property_type"),
    [
        ("SUMMARY", TextProperty),
        ("DESCRIPTION", TextProperty),
        ("UID", TextProperty),
        ("TZID", TextProperty),
        ("DTSTART", DateProperty),
        ("DTEND", DateProperty),
        ("DUE", DateProperty),
        ("RECURRENCE-ID", DateProperty),
        ("DTSTAMP", UtcDateProperty),
        ("LAST-MODIFIED", UtcDateProperty),
        ("VERSION", PlainProperty),
        ("RRULE", PlainProperty),
    ],
)
def test_default_factories(name: str, property_type: type[Property]) -> None:
    """Test the default factories for rfc5545 properties."""
    factories = [factory for factory in PROPERTY_FACTORIES if factory.supports(name)]
    assert len(factories) == 1
    prop = factories[0].create([], "")
    assert type(prop) is property_type
    assert prop.name == name


def test_default_factories_unique() -> None:
    """Test each default property name has a single factory."""
    names = [factory.name for factory in PROPERTY_FACTORIES]  # type: ignore[attr-defined]
    assert len(names) == len(set(names))
    assert not any(name.startswith("X-") for name in names)
