"""Millisecond unit constants."""

MS_HOUR = 3600000
MS_MIN = 60000
MS_SEC = 1000
