"""Time-of-day value type: a signed millisecond offset from midnight."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from ms_time.config import TimeConfig
from ms_time.core.dates import DateInput, read_date, read_offset, valid_offset
from ms_time.core.errors import InvalidDateError
from ms_time.core.units import MS_HOUR, MS_MIN, MS_SEC


@dataclass(frozen=True, eq=False)
class Time:
    """Immutable millisecond offset.

    The offset may be negative (before midnight) or exceed 24 hours
    (elapsed duration). Only NaN and infinite values are rejected.
    """

    offset: int | float = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "offset", read_offset(self.offset))

    # ---- instance API ----

    def to_date(
        self, date: DateInput | None = None, config: TimeConfig | None = None
    ) -> datetime:
        """Apply this offset to ``date`` (default: now) and return a new datetime."""
        config = config or TimeConfig()
        if date is None:
            date = config.clock.now()
        return Time.offset_date(date, self.offset, config=config)

    def to_string(self) -> str:
        return Time.offset_to_string(self.offset)

    def equals(self, other: TimeWrappable) -> bool:
        return Time.equal(self, other)

    def lt(self, other: TimeWrappable) -> bool:
        return Time.less_than(self, other)

    def lte(self, other: TimeWrappable) -> bool:
        return Time.less_than_eq(self, other)

    def gt(self, other: TimeWrappable) -> bool:
        return Time.greater_than(self, other)

    def gte(self, other: TimeWrappable) -> bool:
        return Time.greater_than_eq(self, other)

    # ---- Python protocols ----

    def __str__(self) -> str:
        return self.to_string()

    def __int__(self) -> int:
        return int(self.offset)

    def __hash__(self) -> int:
        return hash(self.offset)

    def __eq__(self, other: object) -> bool:
        if not _is_wrappable(other):
            return NotImplemented
        return Time.equal(self, other)

    def __lt__(self, other: object) -> bool:
        if not _is_wrappable(other):
            return NotImplemented
        return Time.less_than(self, other)

    def __le__(self, other: object) -> bool:
        if not _is_wrappable(other):
            return NotImplemented
        return Time.less_than_eq(self, other)

    def __gt__(self, other: object) -> bool:
        if not _is_wrappable(other):
            return NotImplemented
        return Time.greater_than(self, other)

    def __ge__(self, other: object) -> bool:
        if not _is_wrappable(other):
            return NotImplemented
        return Time.greater_than_eq(self, other)

    # ---- static helpers ----

    @staticmethod
    def offset_to_string(offset: int | float) -> str:
        """Render an offset as ``[-]H:M:S.ms`` without zero padding."""
        offset = read_offset(offset)
        ms = abs(offset)
        is_neg = offset < 0

        hr = int(ms // MS_HOUR)
        ms -= hr * MS_HOUR

        minutes = int(ms // MS_MIN)
        ms -= minutes * MS_MIN

        sec = int(ms // MS_SEC)
        ms -= sec * MS_SEC

        return f"{'-' if is_neg else ''}{hr}:{minutes}:{sec}.{ms}"

    @staticmethod
    def valid_offset(offset: object) -> bool:
        return valid_offset(offset)

    @staticmethod
    def wrap(value: TimeWrappable) -> Time:
        """Return ``value`` if it is already a Time, else build one from milliseconds."""
        if isinstance(value, Time):
            return value
        return Time(value)

    @staticmethod
    def from_date(date: DateInput, config: TimeConfig | None = None) -> Time:
        """Build a Time from the wall-clock components of ``date``; the day is ignored."""
        config = config or TimeConfig()
        date = read_date(date, config.timestamp_tz)
        return Time(_wall_clock_ms(date))

    @staticmethod
    def from_date_utc(date: DateInput, config: TimeConfig | None = None) -> Time:
        """Like ``from_date`` but reads the UTC components.

        Naive datetimes are taken to be in system local time.
        """
        config = config or TimeConfig()
        date = read_date(date, config.timestamp_tz).astimezone(timezone.utc)
        return Time(_wall_clock_ms(date))

    @staticmethod
    def equal(a: TimeWrappable, b: TimeWrappable) -> bool:
        return Time.wrap(a).offset == Time.wrap(b).offset

    @staticmethod
    def less_than(a: TimeWrappable, b: TimeWrappable) -> bool:
        return Time.wrap(a).offset < Time.wrap(b).offset

    @staticmethod
    def less_than_eq(a: TimeWrappable, b: TimeWrappable) -> bool:
        return Time.wrap(a).offset <= Time.wrap(b).offset

    @staticmethod
    def greater_than(a: TimeWrappable, b: TimeWrappable) -> bool:
        return Time.wrap(a).offset > Time.wrap(b).offset

    @staticmethod
    def greater_than_eq(a: TimeWrappable, b: TimeWrappable) -> bool:
        return Time.wrap(a).offset >= Time.wrap(b).offset

    @staticmethod
    def offset_date(
        date: DateInput, offset: int | float = 0, config: TimeConfig | None = None
    ) -> datetime:
        """Return a new datetime shifted by ``offset`` milliseconds (negative allowed)."""
        config = config or TimeConfig()
        base = read_date(date, config.timestamp_tz)
        offset = read_offset(offset)
        try:
            return base + timedelta(milliseconds=offset)
        except OverflowError as exc:
            raise InvalidDateError(
                f"Offset {offset!r} moves {base.isoformat()} out of range"
            ) from exc


TimeWrappable = Time | int | float


def _is_wrappable(value: object) -> bool:
    return isinstance(value, Time) or valid_offset(value)


def _wall_clock_ms(date: datetime) -> int:
    return (
        date.hour * MS_HOUR
        + date.minute * MS_MIN
        + date.second * MS_SEC
        + date.microsecond // 1000
    )
