"""Numeric helpers: precision counting, half-up rounding, compact rendering."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def decimal_places(value: float) -> int:
    """Count the fractional digits in the shortest text form of ``value``.

    ``3661.8`` has one, ``90.25`` has two, ``1e+20`` has none.

    The count comes from ``repr``, which keeps up to 17 significant digits,
    not a 14-digit cast. Inputs with more than 14 significant digits keep
    their extra fractional precision through the minute carry.
    """
    exponent = Decimal(repr(float(value))).as_tuple().exponent
    if not isinstance(exponent, int):
        return 0
    return max(0, -exponent)


def round_half_up(value: float, places: int = 0) -> float:
    """Round ``value`` to ``places`` decimals, ties away from zero.

    Works on the shortest text form of the float so that values such as
    ``1.7999999999999545`` round to ``1.8`` rather than drifting.
    """
    number = Decimal(repr(float(value)))
    if not number.is_finite():
        return float(value)
    exponent = number.as_tuple().exponent
    if isinstance(exponent, int) and exponent >= -places:
        return float(value)
    quantum = Decimal(1).scaleb(-places)
    return float(number.quantize(quantum, rounding=ROUND_HALF_UP))


def compact_number(value: int | float) -> int | float:
    """Return an int for whole floats, leave genuine fractions alone."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def number_to_string(value: int | float) -> str:
    """Render a number without a spurious ``.0`` (``30.0`` -> ``"30"``)."""
    return str(compact_number(value))


def zero_pad(text: str, width: int) -> str:
    """Zero-pad the integer part of a rendered number to ``width``."""
    whole, dot, fraction = text.partition(".")
    return whole.rjust(width, "0") + dot + fraction
