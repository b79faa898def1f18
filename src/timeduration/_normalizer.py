"""Decompose a total-seconds scalar into days, hours, minutes and seconds."""

from __future__ import annotations

import math
from dataclasses import dataclass

from timeduration._constants import HOUR, MINUTES_PER_HOUR, SECONDS_PER_MINUTE
from timeduration._errors import (
    ERR_MSG_INVALID_HOURS_PER_DAY,
    InvalidConfigurationError,
)
from timeduration._utils import decimal_places, round_half_up


@dataclass(frozen=True)
class Components:
    """Canonical decomposition of a duration."""

    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: float = 0.0

    def total_seconds(self, hours_per_day: int) -> float:
        return (
            self.days * hours_per_day * HOUR
            + self.hours * HOUR
            + self.minutes * SECONDS_PER_MINUTE
            + self.seconds
        )

    def is_zero(self) -> bool:
        return not (self.days or self.hours or self.minutes or self.seconds)


ZERO = Components()


def validate_hours_per_day(hours_per_day: object) -> int:
    """Return ``hours_per_day`` if it is a positive int, raise otherwise."""
    if isinstance(hours_per_day, bool) or not isinstance(hours_per_day, int):
        raise InvalidConfigurationError(
            ERR_MSG_INVALID_HOURS_PER_DAY,
            f"hours_per_day must be an int, got {type(hours_per_day).__name__}",
        )
    if hours_per_day <= 0:
        raise InvalidConfigurationError(
            ERR_MSG_INVALID_HOURS_PER_DAY,
            f"hours_per_day must be positive, got {hours_per_day}",
        )
    return hours_per_day


def pattern_has_seconds(pattern: str) -> bool:
    return "s" in pattern.lower()


def normalize(total_seconds: float, hours_per_day: int, pattern: str) -> Components:
    """Carry ``total_seconds`` up through minutes, hours and days.

    Fractional seconds keep the precision of the input scalar through the
    minute carry. Seconds are dropped entirely when ``pattern`` cannot
    express them.
    """
    validate_hours_per_day(hours_per_day)

    if total_seconds < 0:
        return ZERO

    seconds = float(total_seconds)
    minutes = hours = days = 0

    if seconds >= SECONDS_PER_MINUTE:
        minutes = math.floor(seconds / SECONDS_PER_MINUTE)
        precision = decimal_places(seconds)
        seconds = round_half_up(seconds - minutes * SECONDS_PER_MINUTE, precision)

    if minutes >= MINUTES_PER_HOUR:
        hours = minutes // MINUTES_PER_HOUR
        minutes -= hours * MINUTES_PER_HOUR

    if hours >= hours_per_day:
        days = hours // hours_per_day
        hours -= days * hours_per_day

    if seconds > 0 and not pattern_has_seconds(pattern):
        seconds = 0.0

    return Components(days=days, hours=hours, minutes=minutes, seconds=seconds)
