"""Normalization of offsets and date inputs."""

from __future__ import annotations

import logging
import math
import numbers
from datetime import date, datetime, timedelta, timezone, tzinfo
from email.utils import parsedate_to_datetime

from ms_time.core.errors import InvalidDateError, InvalidOffsetError

logger = logging.getLogger(__name__)

DateInput = datetime | int | float | str

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def valid_offset(value: object) -> bool:
    """True for any real number that is neither NaN nor infinite."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    if isinstance(value, numbers.Integral):
        return True
    if isinstance(value, numbers.Rational) and value.denominator == 1:
        return True
    try:
        return math.isfinite(value)
    except OverflowError:
        # non-integral rational too large for a float
        return False


def read_offset(value: object) -> int | float:
    """Return a valid offset or raise InvalidOffsetError.

    Integral floats come back as ``int`` so that formatting and hashing
    behave the same for ``3600000`` and ``3600000.0``.
    """
    if not valid_offset(value):
        raise InvalidOffsetError("Invalid time offset supplied.")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Rational) and value.denominator == 1:
        return int(value.numerator)
    value = float(value)
    if value.is_integer():
        return int(value)
    return value


def from_timestamp(ms: int | float, tz: tzinfo = timezone.utc) -> datetime:
    """Convert a millisecond Unix timestamp into an aware datetime in ``tz``."""
    if not valid_offset(ms):
        logger.debug("Rejected timestamp %r", ms)
        raise InvalidDateError("Invalid timestamp provided.")
    ms = read_offset(ms)
    try:
        return (EPOCH + timedelta(milliseconds=ms)).astimezone(tz)
    except OverflowError as exc:
        raise InvalidDateError(f"Timestamp out of range: {ms!r}") from exc


def parse_date(text: str) -> datetime:
    """Parse a date string.

    ISO 8601 is tried first; a trailing ``Z`` means UTC and a date-only
    form is UTC midnight. RFC 2822 (``Mon, 01 Jan 2024 00:00:00 GMT``)
    is accepted as a fallback.
    """
    text = text.strip()
    try:
        day = date.fromisoformat(text)
    except ValueError:
        pass
    else:
        return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError) as exc:
        logger.debug("Rejected date string %r", text)
        raise InvalidDateError("Invalid date string provided.") from exc


def read_date(value: DateInput, tz: tzinfo = timezone.utc) -> datetime:
    """Return a datetime for ``value`` or raise InvalidDateError.

    Strings are parsed, numbers are millisecond timestamps materialized
    in ``tz``, datetimes pass through unchanged.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        return parse_date(value)
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return from_timestamp(value, tz)
    logger.debug("Rejected date input of type %s", type(value).__name__)
    raise InvalidDateError(f"Unsupported date input: {type(value).__name__}")
