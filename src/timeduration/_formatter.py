"""Pattern tokenizing and rendering of duration components.

Patterns are split by a lark lexer. Placeholder terminals carry a higher
priority than the catch-all ``LITERAL`` terminal, and lark orders terminals
of equal priority by width, so ``dd`` is always taken before ``d``.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache

from lark import Lark

from timeduration._constants import PAD_WIDTH
from timeduration._errors import ERR_MSG_CONFLICTING_TOKENS, ConflictingTokensError
from timeduration._normalizer import Components
from timeduration._utils import number_to_string, round_half_up, zero_pad

PATTERN_GRAMMAR = r"""
    start: _token*

    _token: DAYS_PADDED | DAYS
          | HOURS_PADDED | HOURS
          | TOTAL_HOURS_PADDED | TOTAL_HOURS
          | MINUTES_PADDED | MINUTES
          | SECONDS_PADDED | SECONDS
          | ROUNDED_SECONDS_PADDED | ROUNDED_SECONDS
          | LITERAL

    DAYS_PADDED.1: "dd"
    DAYS.1: "d"
    HOURS_PADDED.1: "hh"
    HOURS.1: "h"
    TOTAL_HOURS_PADDED.1: "HH"
    TOTAL_HOURS.1: "H"
    MINUTES_PADDED.1: "mm"
    MINUTES.1: "m"
    SECONDS_PADDED.1: "ss"
    SECONDS.1: "s"
    ROUNDED_SECONDS_PADDED.1: "SS"
    ROUNDED_SECONDS.1: "S"
    LITERAL: /./s
"""

_pattern_lexer = Lark(PATTERN_GRAMMAR, parser="lalr", lexer="basic")

DAY_TOKENS = frozenset({"DAYS_PADDED", "DAYS"})
TOTAL_HOUR_TOKENS = frozenset({"TOTAL_HOURS_PADDED", "TOTAL_HOURS"})

Renderer = Callable[[Components, int], str]


def _days(components: Components, hours_per_day: int) -> str:
    return str(components.days)


def _hours(components: Components, hours_per_day: int) -> str:
    return str(components.hours)


def _total_hours(components: Components, hours_per_day: int) -> str:
    return str(components.hours + components.days * hours_per_day)


def _minutes(components: Components, hours_per_day: int) -> str:
    return str(components.minutes)


def _seconds(components: Components, hours_per_day: int) -> str:
    return number_to_string(components.seconds)


def _rounded_seconds(components: Components, hours_per_day: int) -> str:
    return str(int(round_half_up(components.seconds)))


def _padded(render: Renderer) -> Renderer:
    def pad(components: Components, hours_per_day: int) -> str:
        return zero_pad(render(components, hours_per_day), PAD_WIDTH)

    return pad


RENDERERS: dict[str, Renderer] = {
    "DAYS_PADDED": _padded(_days),
    "DAYS": _days,
    "HOURS_PADDED": _padded(_hours),
    "HOURS": _hours,
    "TOTAL_HOURS_PADDED": _padded(_total_hours),
    "TOTAL_HOURS": _total_hours,
    "MINUTES_PADDED": _padded(_minutes),
    "MINUTES": _minutes,
    "SECONDS_PADDED": _padded(_seconds),
    "SECONDS": _seconds,
    "ROUNDED_SECONDS_PADDED": _padded(_rounded_seconds),
    "ROUNDED_SECONDS": _rounded_seconds,
}


@lru_cache(maxsize=128)
def tokenize_pattern(pattern: str) -> tuple[tuple[str, str], ...]:
    """Split a format pattern into ``(terminal name, text)`` pairs."""
    return tuple((token.type, str(token)) for token in _pattern_lexer.lex(pattern))


def check_pattern(pattern: str) -> tuple[tuple[str, str], ...]:
    """Tokenize ``pattern`` and reject day tokens mixed with total-hour tokens."""
    tokens = tokenize_pattern(pattern)
    kinds = {kind for kind, _ in tokens}
    if kinds & DAY_TOKENS and kinds & TOTAL_HOUR_TOKENS:
        raise ConflictingTokensError(
            ERR_MSG_CONFLICTING_TOKENS,
            f"pattern {pattern!r} combines day tokens with total-hour tokens",
        )
    return tokens


def format_components(
    components: Components, pattern: str, hours_per_day: int
) -> str:
    """Substitute every placeholder token in ``pattern``.

    Raises:
        ConflictingTokensError: If the pattern mixes ``d``/``dd`` with ``H``/``HH``.
    """
    parts = []
    for kind, text in check_pattern(pattern):
        render = RENDERERS.get(kind)
        parts.append(text if render is None else render(components, hours_per_day))
    return "".join(parts)


def humanize_components(components: Components) -> str:
    """Render non-zero units largest first, e.g. ``"1d 2h 30s"``.

    An all-zero duration renders as ``"0s"``.
    """
    if components.is_zero():
        return "0s"

    units = (
        (components.days, "d"),
        (components.hours, "h"),
        (components.minutes, "m"),
        (components.seconds, "s"),
    )
    return " ".join(
        f"{number_to_string(value)}{suffix}" for value, suffix in units if value > 0
    )
