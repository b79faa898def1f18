"""Unit sizes and configuration defaults for duration handling."""

SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60

DEFAULT_HOURS_PER_DAY = 24
"""Radix used when carrying hours into days."""

DEFAULT_FORMAT_PATTERN = "hh:mm:SS"
"""Pattern used by format() and str() when none is given."""

PAD_WIDTH = 2
"""Width of zero-padded tokens (dd, hh, HH, mm, ss, SS)."""
