"""timeduration - Parse, normalize and format elapsed-time durations."""

from __future__ import annotations

try:
    from timeduration._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

import logging
from typing import Any

from timeduration._constants import DEFAULT_FORMAT_PATTERN, DEFAULT_HOURS_PER_DAY
from timeduration._errors import (
    ERR_MSG_INVALID_DURATION,
    ConflictingTokensError,
    DurationError,
    InvalidConfigurationError,
    InvalidDurationError,
)
from timeduration._normalizer import Components
from timeduration._parser import DurationInput
from timeduration.duration import Duration, TimeDuration

__all__ = [
    "format_duration",
    "humanize",
    "parse",
    "to_minutes",
    "to_seconds",
    "valid",
    "Components",
    "Duration",
    "TimeDuration",
    "DurationError",
    "ConflictingTokensError",
    "InvalidConfigurationError",
    "InvalidDurationError",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())


def parse(
    value: DurationInput,
    *,
    hours_per_day: int = DEFAULT_HOURS_PER_DAY,
    format_pattern: str = DEFAULT_FORMAT_PATTERN,
) -> Duration | None:
    """Parse a duration into an immutable Duration, or None if unrecognized.

    Args:
        value: Seconds as a number or numeric string, or text such as
            ``"1d 2h 30m"``, ``"10:29:30"`` or ``"2d 12:01:01"``.
        hours_per_day: Radix used when carrying hours into days.
        format_pattern: Default pattern for format() and str().

    Returns:
        The parsed Duration, or None for negative or unrecognized input.
    """
    return Duration.parse(
        value, hours_per_day=hours_per_day, format_pattern=format_pattern
    )


def valid(value: Any) -> bool:
    """Return True if ``value`` is a well-formed duration."""
    return TimeDuration.valid(value)


def _require(value: DurationInput, config: dict[str, Any]) -> Duration:
    duration = parse(value, **config)
    if duration is None:
        raise InvalidDurationError(
            ERR_MSG_INVALID_DURATION, f"cannot parse duration from {value!r}"
        )
    return duration


def to_seconds(
    value: DurationInput, precision: int | None = None, **config: Any
) -> float:
    """Total seconds of ``value``.

    Raises:
        InvalidDurationError: If ``value`` does not parse.
    """
    return _require(value, config).to_seconds(precision)


def to_minutes(
    value: DurationInput, precision: int | None = None, **config: Any
) -> float:
    """Total minutes of ``value``.

    Raises:
        InvalidDurationError: If ``value`` does not parse.
    """
    return _require(value, config).to_minutes(precision)


def humanize(value: DurationInput, **config: Any) -> str:
    """Compact human-readable form of ``value``, e.g. ``"1h 42m"``.

    Raises:
        InvalidDurationError: If ``value`` does not parse.
    """
    return _require(value, config).humanize()


def format_duration(
    value: DurationInput, pattern: str | None = None, **config: Any
) -> str:
    """Format ``value`` through ``pattern`` (or the default pattern).

    Raises:
        InvalidDurationError: If ``value`` does not parse.
        ConflictingTokensError: If the pattern mixes ``d`` and ``H`` tokens.
    """
    return _require(value, config).format(pattern)
