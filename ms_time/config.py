"""Runtime configuration models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timezone, tzinfo

from ms_time.core.clock import Clock, SystemClock


@dataclass
class TimeConfig:
    clock: Clock = field(default_factory=SystemClock)
    timestamp_tz: tzinfo = timezone.utc  # zone numeric timestamps are read into
