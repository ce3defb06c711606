"""Tests for property parameters."""

import dataclasses

import pytest

from icalprop.parameters import Parameter, from_parsed_parameters
from icalprop.parsing.property import ParsedPropertyParameter


def test_parameter_name() -> None:
    """Test parameter names are upper case."""
    param = Parameter("tzid", "America/New_York")
    assert param.name == "TZID"
    assert param.value == "America/New_York"
    assert param == Parameter("TZID", "America/New_York")
    assert str(param) == "TZID=America/New_York"


def test_parameter_immutable() -> None:
    """Test parameters can't be modified."""
    param = Parameter("VALUE", "DATE")
    with pytest.raises(dataclasses.FrozenInstanceError):
        param.value = "DATE-TIME"  # type: ignore[misc]


def test_from_parsed_parameters() -> None:
    """Test converting tokenizer parameters."""
    assert from_parsed_parameters(None) == []
    assert from_parsed_parameters([]) == []
    assert from_parsed_parameters(
        [
            ParsedPropertyParameter(name="VALUE", values=["DATE"]),
            ParsedPropertyParameter(name="member", values=["a", "b"]),
            ParsedPropertyParameter(name="VALUE", values=["DATE-TIME"]),
        ]
    ) == [
        Parameter("VALUE", "DATE"),
        Parameter("MEMBER", "a,b"),
        Parameter("VALUE", "DATE-TIME"),
    ]
