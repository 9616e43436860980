"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from ms_time.config import TimeConfig


class FixedClock:
    """Clock that returns a fixed moment."""

    def __init__(self, ts: datetime = datetime(2026, 2, 25, 10, 0, tzinfo=timezone.utc)):
        self._ts = ts

    def now(self) -> datetime:
        return self._ts


@pytest.fixture
def fixed_clock():
    return FixedClock()


@pytest.fixture
def fixed_config(fixed_clock):
    return TimeConfig(clock=fixed_clock)
