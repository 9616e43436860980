"""Exception hierarchy for ms-time."""


class TimeError(Exception):
    """Package base exception."""


class InvalidOffsetError(TimeError, ValueError):
    """Offset is NaN, infinite or not a number."""


class InvalidDateError(TimeError, ValueError):
    """Date input cannot be resolved to a point in time."""
