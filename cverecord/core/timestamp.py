"""
Timestamp values of CVE Records.

The record format allows date-times with and without a UTC offset. Both shapes
are kept apart as separate types; nothing converts between them unless
``assume_utc`` is called explicitly.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Tuple, Union

from cverecord.core.errors import MalformedTimestamp, StructuralMismatch, UnrepresentableTimestamp, json_type

# A date followed by at least the hour of a time component.
_DATE_TIME = re.compile(r"^\d{4}-?\d{2}-?\d{2}T\d{2}")


@dataclass(frozen=True)
class OffsetTimestamp:
    """A date-time with full offset information."""

    value: datetime

    def __post_init__(self):
        if self.value.utcoffset() is None:
            raise ValueError(f"OffsetTimestamp requires an offset-aware datetime, got {self.value!r}")

    def assume_utc(self) -> datetime:
        return self.value


@dataclass(frozen=True)
class LocalTimestamp:
    """A date-time without offset information."""

    value: datetime

    def __post_init__(self):
        if self.value.tzinfo is not None:
            raise ValueError(f"LocalTimestamp requires a naive datetime, got {self.value!r}")

    def assume_utc(self) -> datetime:
        """Reinterpret the wall-clock value as UTC."""
        return self.value.replace(tzinfo=timezone.utc)


Timestamp = Union[OffsetTimestamp, LocalTimestamp]


def timestamp_from_datetime(value: datetime) -> Timestamp:
    """Wrap a datetime in the variant matching its awareness."""
    if value.utcoffset() is None:
        return LocalTimestamp(value.replace(tzinfo=None))
    return OffsetTimestamp(value)


def _parse_iso(text: str) -> datetime:
    if not _DATE_TIME.match(text):
        raise ValueError(f"no time component in {text!r}")
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def _parse_offset(text: str) -> Timestamp:
    value = _parse_iso(text)
    offset = value.utcoffset()
    if offset is None:
        raise ValueError(f"no offset in {text!r}")
    # fromisoformat also takes '+HH:MM:SS', which is not an ISO 8601 offset
    if offset % timedelta(minutes=1):
        raise ValueError(f"offset with seconds in {text!r}")
    return OffsetTimestamp(value)


def _parse_local(text: str) -> Timestamp:
    value = _parse_iso(text)
    if value.tzinfo is not None:
        raise ValueError(f"unexpected offset in {text!r}")
    return LocalTimestamp(value)


# Offset first: an offset-qualified value must never end up as local time.
_PARSERS: Tuple[Callable[[str], Timestamp], ...] = (_parse_offset, _parse_local)


def decode_timestamp(value: Any, path: str = "$") -> Timestamp:
    """
    Decode an ISO 8601 date-time, with or without offset.

    Args:
        value: JSON value read from the document
        path: Location of the value, used in error messages

    Returns:
        OffsetTimestamp or LocalTimestamp

    Raises:
        StructuralMismatch: If the value is not a string
        MalformedTimestamp: If the string is neither shape
    """
    if not isinstance(value, str):
        raise StructuralMismatch(path, f"expected an ISO 8601 timestamp string, found {json_type(value)}")

    for parser in _PARSERS:
        try:
            return parser(value)
        except ValueError:
            continue

    raise MalformedTimestamp(value, path)


def encode_timestamp(timestamp: Timestamp) -> str:
    """
    Encode a timestamp with millisecond precision.

    Offset values carry 'Z' or '+HH:MM'; local values carry no zone designator.
    """
    if isinstance(timestamp, OffsetTimestamp):
        offset = timestamp.value.utcoffset()
        if offset % timedelta(minutes=1):
            raise UnrepresentableTimestamp(timestamp, f"offset {offset} is not a whole number of minutes")
        text = timestamp.value.isoformat(timespec="milliseconds")
        if offset == timedelta(0):
            # isoformat always ends in '+00:00' here
            text = text[:-6] + "Z"
        return text

    if isinstance(timestamp, LocalTimestamp):
        return timestamp.value.isoformat(timespec="milliseconds")

    raise UnrepresentableTimestamp(timestamp, f"expected a timestamp, found {type(timestamp).__name__}")
