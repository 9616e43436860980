"""Core utilities: clock, errors, date normalization, units."""
