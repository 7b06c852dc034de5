"""Time input classification and XML schema timestamps.

Values handed to the Time handler are sorted into one of three shapes
before conversion:

    Timestamp(datetime)  - a point in time; naive values are taken as UTC
    CalendarDate(date)   - year/month/day only; becomes UTC midnight
    TimeText(str)        - anything else, parsed from its text form

TimeText accepts ISO 8601 forms only: "2024-03-05", "2024-03-05T10:30",
"2024-03-05 10:30:00+02:00", "2024-03-05T10:30:00Z". Number-like text
("12345", "1700000000", "2024") and prose or RFC 2822 dates
("March 5, 2024", "Tue, 05 Mar 2024 10:00:00 GMT") do not parse.

Classification is an isinstance check (datetime before date, since datetime
subclasses date). Callers that know better may pass one of the wrappers
directly and it is used unchanged.

The wire form is XML schema in UTC without fraction digits:

    2024-01-15T10:30:00Z
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Any

from pydantic import TypeAdapter, ValidationError

from indexcast.exceptions import CastError

logger = logging.getLogger(__name__)

_DATETIME_ADAPTER = TypeAdapter(datetime)

_XMLSCHEMA = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<zone>Z|[+-]\d{2}:\d{2})?",
    re.ASCII,
)

# Epoch-style numbers; pydantic reads these as Unix time
_NUMERIC_TEXT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


@dataclass(frozen=True, slots=True)
class Timestamp:
    """A datetime, converted to UTC as is."""

    value: datetime


@dataclass(frozen=True, slots=True)
class CalendarDate:
    """A date without time of day."""

    value: date


@dataclass(frozen=True, slots=True)
class TimeText:
    """Free text to be parsed as a timestamp."""

    value: str


TimeInput = Timestamp | CalendarDate | TimeText


def classify_time_input(value: Any) -> TimeInput:
    """Sort a native value into one of the accepted time input shapes."""
    if isinstance(value, (Timestamp, CalendarDate, TimeText)):
        return value
    if isinstance(value, datetime):
        return Timestamp(value)
    if isinstance(value, date):
        return CalendarDate(value)
    return TimeText(str(value))


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _parse_text(text: str) -> datetime | None:
    stripped = text.strip()
    if _NUMERIC_TEXT.fullmatch(stripped):
        logger.warning("Refusing numeric text %r as a timestamp", text)
        return None
    try:
        parsed = _DATETIME_ADAPTER.validate_python(stripped)
    except ValidationError:
        logger.warning("Cannot parse %r as a timestamp", text)
        return None
    return _as_utc(parsed)


def to_utc(time_input: TimeInput) -> datetime | None:
    """Convert a classified time input to an aware UTC datetime.

    Returns None when TimeText does not parse.
    """
    if isinstance(time_input, Timestamp):
        return _as_utc(time_input.value)
    if isinstance(time_input, CalendarDate):
        day = time_input.value
        return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    return _parse_text(time_input.value)


def format_xmlschema(value: datetime) -> str:
    """Format an aware datetime as a UTC XML schema string, dropping fractions."""
    value = _as_utc(value)
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}Z"
    )


def parse_xmlschema(text: str) -> datetime:
    """Parse an XML schema timestamp into an aware UTC datetime.

    A missing zone designator means UTC. Raises CastError for anything that
    is not an XML schema dateTime.
    """
    match = _XMLSCHEMA.fullmatch(text)
    if match is None:
        raise CastError(f"Invalid XML schema timestamp: {text!r}")

    fraction = match.group("fraction") or ""
    microsecond = int((fraction + "000000")[:6])

    zone = match.group("zone")
    offset = timedelta()
    if zone is not None and zone != "Z":
        sign = -1 if zone[0] == "-" else 1
        offset = sign * timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6]))

    try:
        tzinfo = timezone(offset)
        parsed = datetime(
            int(match.group("year")),
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(match.group("second")),
            microsecond,
            tzinfo=tzinfo,
        ).astimezone(timezone.utc)
    except (OverflowError, ValueError) as e:
        raise CastError(f"Invalid XML schema timestamp: {text!r}") from e
    return parsed


__all__ = [
    "Timestamp",
    "CalendarDate",
    "TimeText",
    "TimeInput",
    "classify_time_input",
    "to_utc",
    "format_xmlschema",
    "parse_xmlschema",
]
