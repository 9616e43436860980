"""ms-time: time-of-day values as millisecond offsets from midnight."""

from ms_time.config import TimeConfig
from ms_time.core.clock import Clock, SystemClock
from ms_time.core.errors import InvalidDateError, InvalidOffsetError, TimeError
from ms_time.time_of_day import Time, TimeWrappable

__all__ = [
    "Clock",
    "InvalidDateError",
    "InvalidOffsetError",
    "SystemClock",
    "Time",
    "TimeConfig",
    "TimeError",
    "TimeWrappable",
]
