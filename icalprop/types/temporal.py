"""Library for parsing and encoding DATE and DATE-TIME values.

A temporal value is one of three variants, decided from the lexical form of
the value when it is parsed. A value with a TZID must be a local date-time:

  DateOnly       20230615            a calendar date
  UtcInstant     20230615T090000Z    an absolute instant in UTC
  ZonedDateTime  20230615T090000     a local date-time bound to a zone

The variants are immutable and may be shared freely between properties. A
value can be viewed at another timezone with `to_local`, which returns a new
python date or datetime and never changes the stored variant.
"""

from __future__ import annotations

import datetime
import logging
import re
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, field_validator

from icalprop.exceptions import TemporalFormatError
from icalprop.timezone_registry import TimezoneRegistry

__all__ = [
    "DateOnly",
    "UtcInstant",
    "ZonedDateTime",
    "TemporalValue",
    "parse_temporal",
]

_LOGGER = logging.getLogger(__name__)

DATE_REGEX = re.compile(r"^([0-9]{8})$")
DATETIME_REGEX = re.compile(r"^([0-9]{8})T([0-9]{6})(Z)?$")
LOCAL_DATETIME_REGEX = re.compile(r"^([0-9]{8})T([0-9]{6})$")

_DATE_FORMAT = "%Y%m%d"
_DATETIME_FORMAT = "%Y%m%dT%H%M%S"


class DateOnly(BaseModel):
    """A DATE value."""

    model_config = ConfigDict(frozen=True)

    value: datetime.date

    @field_validator("value", mode="before")
    @classmethod
    def _reject_datetime(cls, value: Any) -> Any:
        if isinstance(value, datetime.datetime):
            raise ValueError(f"Expected a date without a time, got {value}")
        return value

    def ics(self) -> str:
        """Serialize as an ICS value."""
        return self.value.strftime(_DATE_FORMAT)

    def to_local(self, tzinfo: datetime.tzinfo) -> datetime.date:
        """Return the date, which has no time to convert."""
        return self.value


class UtcInstant(BaseModel):
    """A DATE-TIME value in UTC."""

    model_config = ConfigDict(frozen=True)

    value: datetime.datetime

    @field_validator("value")
    @classmethod
    def _normalize_utc(cls, value: datetime.datetime) -> datetime.datetime:
        if value.tzinfo is None or value.utcoffset():
            raise ValueError(f"Expected a UTC date-time, got {value}")
        return value.astimezone(datetime.timezone.utc)

    def ics(self) -> str:
        """Serialize as an ICS value."""
        return self.value.strftime(f"{_DATETIME_FORMAT}Z")

    def to_local(self, tzinfo: datetime.tzinfo) -> datetime.datetime:
        """Return the same instant as a local time in the timezone."""
        return self.value.astimezone(tzinfo)


class ZonedDateTime(BaseModel):
    """A DATE-TIME value that is a local time in a specific timezone."""

    model_config = ConfigDict(frozen=True)

    value: datetime.datetime
    """The local time, with the tzinfo of the zone."""

    tzid: str
    """The timezone identifier the value was bound to."""

    @field_validator("value")
    @classmethod
    def _require_aware(cls, value: datetime.datetime) -> datetime.datetime:
        if value.tzinfo is None:
            raise ValueError(f"Expected a date-time with a timezone, got {value}")
        return value

    def ics(self) -> str:
        """Serialize as an ICS value, without the zone."""
        return self.value.strftime(_DATETIME_FORMAT)

    def to_local(self, tzinfo: datetime.tzinfo) -> datetime.datetime:
        """Return the same instant as a local time in the timezone."""
        return self.value.astimezone(tzinfo)


TemporalValue = Union[DateOnly, UtcInstant, ZonedDateTime]


def _parse_date(value: str) -> datetime.date:
    year = int(value[0:4])
    month = int(value[4:6])
    day = int(value[6:])
    return datetime.date(year, month, day)


def _parse_time(value: str) -> datetime.time:
    hour = int(value[0:2])
    minute = int(value[2:4])
    second = int(value[4:6])
    return datetime.time(hour, minute, second)


def parse_temporal(
    value: str, tzid: str | None, registry: TimezoneRegistry
) -> TemporalValue:
    """Parse an rfc5545 DATE or DATE-TIME into a temporal value.

    Without a TZID the variant is determined by the lexical form of the value,
    and a DATE-TIME that is not in UTC is bound to the default zone of the
    registry. With a TZID the value must be a local DATE-TIME, which is bound
    to that zone; a DATE or a UTC value is rejected.
    """
    result: TemporalValue
    if tzid is not None and not LOCAL_DATETIME_REGEX.fullmatch(value):
        raise TemporalFormatError(
            f"Expected DATE-TIME value without UTC marker for TZID '{tzid}': "
            f"'{value}'",
            detailed_error=value,
        )
    if match := DATE_REGEX.fullmatch(value):
        try:
            result = DateOnly(value=_parse_date(match.group(1)))
        except ValueError as err:
            raise TemporalFormatError(
                f"Invalid DATE value: '{value}'", detailed_error=str(err)
            ) from err
    elif match := DATETIME_REGEX.fullmatch(value):
        try:
            local = datetime.datetime.combine(
                _parse_date(match.group(1)), _parse_time(match.group(2))
            )
        except ValueError as err:
            raise TemporalFormatError(
                f"Invalid DATE-TIME value: '{value}'", detailed_error=str(err)
            ) from err
        if match.group(3):
            result = UtcInstant(value=local.replace(tzinfo=datetime.timezone.utc))
        else:
            # Unknown zones raise from the registry and are not translated
            zone = tzid if tzid is not None else registry.default_tzid
            tzinfo = registry.get_timezone(zone)
            result = ZonedDateTime(value=local.replace(tzinfo=tzinfo), tzid=zone)
    else:
        raise TemporalFormatError(
            f"Expected value to match DATE or DATE-TIME pattern: '{value}'",
            detailed_error=value,
        )
    _LOGGER.debug("parse_temporal returned %s", result)
    return result
