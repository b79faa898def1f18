"""Input recognition: numeric scalars and textual duration fragments.

Text is scanned by an ordered set of independent fragment matchers. Each
matcher contributes an optional number of seconds:

* day fragments (``1.5d``) always add to the total;
* a clock fragment (``10:29`` or ``550:250:150``) supplies hours, minutes
  and seconds;
* unit-suffix fragments (``2h``, ``30m``, ``4.5s``) are consulted only when
  no clock fragment matched.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from timeduration._constants import DAY, HOUR, MINUTE, SECOND

logger = logging.getLogger(__name__)

DurationInput = int | float | str

NUMERIC_RE = re.compile(
    r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$", re.ASCII
)

_LEADING_NUMBER_RE = re.compile(r"\d*(?:\.\d+)?", re.ASCII)


def _leading_float(text: str) -> float:
    """Read the numeric prefix of a fragment value (``1.2.3`` -> ``1.2``)."""
    match = _LEADING_NUMBER_RE.match(text)
    if match is None or not match.group(0):
        return 0.0
    return float(match.group(0))


@dataclass(frozen=True)
class UnitMatcher:
    """Matches ``<number><unit letter>`` and scales the number to seconds."""

    name: str
    regex: re.Pattern[str]
    unit: int

    def contribution(self, text: str) -> float | None:
        match = self.regex.search(text)
        if match is None:
            return None
        return _leading_float(match.group(1)) * self.unit


@dataclass(frozen=True)
class ClockMatcher:
    """Matches ``H:M`` or ``H:M:S`` with 1-4 digit parts."""

    name: str
    regex: re.Pattern[str]

    def contribution(self, text: str) -> float | None:
        match = self.regex.search(text)
        if match is None:
            return None
        hours = int(match.group("hours"))
        minutes = int(match.group("minutes"))
        seconds = int(match.group("seconds") or 0)
        return float(hours * HOUR + minutes * MINUTE + seconds * SECOND)


_UNIT_FLAGS = re.IGNORECASE | re.ASCII

DAY_MATCHER = UnitMatcher("day", re.compile(r"([0-9.]+)\s?d", _UNIT_FLAGS), DAY)

CLOCK_MATCHER = ClockMatcher(
    "clock",
    re.compile(
        r"\b(?P<hours>\d{1,4}):(?P<minutes>\d{1,4})(?::(?P<seconds>\d{1,4}))?\b",
        re.ASCII,
    ),
)

UNIT_MATCHERS: tuple[UnitMatcher, ...] = (
    UnitMatcher("hour", re.compile(r"([0-9.]+)\s?h", _UNIT_FLAGS), HOUR),
    UnitMatcher("minute", re.compile(r"([0-9]{1,4})\s?m", _UNIT_FLAGS), MINUTE),
    UnitMatcher(
        "second", re.compile(r"([0-9]{1,4}(?:\.\d+)?)\s?s", _UNIT_FLAGS), SECOND
    ),
)


def is_numeric(value: object) -> bool:
    """Return True for ints, floats and strings that spell a plain number."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    return isinstance(value, str) and NUMERIC_RE.match(value) is not None


def _text_seconds(text: str) -> float | None:
    total = 0.0
    matched = False

    days = DAY_MATCHER.contribution(text)
    if days is not None:
        total += days
        matched = True

    clock = CLOCK_MATCHER.contribution(text)
    if clock is not None:
        total += clock
        matched = True
    else:
        for matcher in UNIT_MATCHERS:
            amount = matcher.contribution(text)
            if amount is not None:
                total += amount
                matched = True

    if not matched:
        logger.debug("no duration fragment found in %r", text)
        return None
    return total


def parse_total_seconds(value: DurationInput) -> float | None:
    """Reduce a numeric or textual duration to total seconds.

    Returns None when the input is negative, non-finite or carries no
    recognizable fragment. Never raises for malformed input.
    """
    if is_numeric(value):
        try:
            total = float(value)
        except OverflowError:
            logger.debug("duration %r does not fit in a float", value)
            return None
    elif isinstance(value, str):
        total = _text_seconds(value)
        if total is None:
            return None
    else:
        logger.debug("unsupported duration input type %s", type(value).__name__)
        return None

    if not math.isfinite(total):
        logger.debug("non-finite duration %r rejected", value)
        return None
    if total < 0:
        logger.debug("negative duration %r rejected", value)
        return None
    return total
