"""Duration value types.

``Duration`` is an immutable value built by pure parsing and normalization.
``TimeDuration`` wraps the same pipeline in a mutable object whose
``parse()`` resets and overwrites its state and whose ``humanize()``
consumes it.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from timeduration._constants import (
    DAY,
    DEFAULT_FORMAT_PATTERN,
    DEFAULT_HOURS_PER_DAY,
    HOUR,
    MINUTE,
    MINUTES_PER_HOUR,
    SECOND,
    SECONDS_PER_MINUTE,
)
from timeduration._errors import (
    ERR_MSG_INVALID_DURATION,
    ERR_MSG_INVALID_FORMAT_PATTERN,
    InvalidConfigurationError,
    InvalidDurationError,
)
from timeduration._formatter import (
    check_pattern,
    format_components,
    humanize_components,
)
from timeduration._normalizer import (
    ZERO,
    Components,
    normalize,
    validate_hours_per_day,
)
from timeduration._parser import DurationInput, parse_total_seconds
from timeduration._utils import compact_number, round_half_up

logger = logging.getLogger(__name__)


def validate_format_pattern(pattern: object) -> str:
    """Return ``pattern`` if it is a usable default format pattern."""
    if not isinstance(pattern, str):
        raise InvalidConfigurationError(
            ERR_MSG_INVALID_FORMAT_PATTERN,
            f"format_pattern must be a str, got {type(pattern).__name__}",
        )
    check_pattern(pattern)
    return pattern


def _to_record(
    components: Components, hours_per_day: int, pattern: str
) -> dict[str, Any]:
    return {
        "seconds": compact_number(components.total_seconds(hours_per_day)),
        "values": {
            "days": components.days,
            "hours": components.hours,
            "minutes": components.minutes,
            "seconds": compact_number(components.seconds),
        },
        "formatted": format_components(components, pattern, hours_per_day),
        "humanized": humanize_components(components),
    }


def _dump_json(record: dict[str, Any], **kwargs: Any) -> str:
    kwargs.setdefault("separators", (",", ":"))
    return json.dumps(record, **kwargs)


def _round_optional(value: float, precision: int | None) -> float:
    return value if precision is None else round_half_up(value, precision)


def _scalar_seconds(amount: object, unit: int, unit_name: str) -> float:
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise InvalidDurationError(
            ERR_MSG_INVALID_DURATION,
            f"{unit_name} must be a number, got {type(amount).__name__}",
        )
    try:
        return float(amount) * unit
    except OverflowError as exc:
        raise InvalidDurationError(
            ERR_MSG_INVALID_DURATION,
            f"{unit_name} value {amount!r} does not fit in a float",
            wrapped=exc,
        ) from exc


@dataclass(frozen=True)
class Duration:
    """Immutable, normalized elapsed-time span."""

    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: float = 0.0
    hours_per_day: int = DEFAULT_HOURS_PER_DAY
    format_pattern: str = DEFAULT_FORMAT_PATTERN

    def __post_init__(self) -> None:
        validate_hours_per_day(self.hours_per_day)
        validate_format_pattern(self.format_pattern)
        if min(self.days, self.hours, self.minutes, self.seconds) < 0:
            raise InvalidDurationError(
                ERR_MSG_INVALID_DURATION,
                f"negative component in {self.components}",
            )
        if (
            self.hours >= self.hours_per_day
            or self.minutes >= MINUTES_PER_HOUR
            or self.seconds >= SECONDS_PER_MINUTE
        ):
            raise InvalidDurationError(
                ERR_MSG_INVALID_DURATION,
                f"un-carried overflow in {self.components} "
                f"with {self.hours_per_day} hours per day",
            )
        object.__setattr__(self, "seconds", float(self.seconds))

    # -- construction --------------------------------------------------

    @classmethod
    def parse(
        cls,
        value: DurationInput,
        *,
        hours_per_day: int = DEFAULT_HOURS_PER_DAY,
        format_pattern: str = DEFAULT_FORMAT_PATTERN,
    ) -> Duration | None:
        """Parse numeric or textual input, returning None when unrecognized.

        Numbers are total seconds. Text may combine a day fragment
        (``2d``) with either a clock fragment (``10:29:30``) or unit
        fragments (``1h 30m 4.5s``).

        Raises:
            InvalidConfigurationError: If hours_per_day or format_pattern is invalid.
            ConflictingTokensError: If format_pattern mixes day and total-hour tokens.
        """
        validate_hours_per_day(hours_per_day)
        validate_format_pattern(format_pattern)
        total = parse_total_seconds(value)
        if total is None:
            return None
        return cls._from_components(
            normalize(total, hours_per_day, format_pattern),
            hours_per_day,
            format_pattern,
        )

    @classmethod
    def _from_components(
        cls, components: Components, hours_per_day: int, format_pattern: str
    ) -> Duration:
        return cls(
            days=components.days,
            hours=components.hours,
            minutes=components.minutes,
            seconds=components.seconds,
            hours_per_day=hours_per_day,
            format_pattern=format_pattern,
        )

    @classmethod
    def _strict(
        cls, value: DurationInput, hours_per_day: int, format_pattern: str
    ) -> Duration:
        duration = cls.parse(
            value, hours_per_day=hours_per_day, format_pattern=format_pattern
        )
        if duration is None:
            raise InvalidDurationError(
                ERR_MSG_INVALID_DURATION, f"cannot parse duration from {value!r}"
            )
        return duration

    @classmethod
    def from_seconds(
        cls,
        seconds: float,
        *,
        hours_per_day: int = DEFAULT_HOURS_PER_DAY,
        format_pattern: str = DEFAULT_FORMAT_PATTERN,
    ) -> Duration:
        return cls._strict(
            _scalar_seconds(seconds, SECOND, "seconds"), hours_per_day, format_pattern
        )

    @classmethod
    def from_minutes(
        cls,
        minutes: float,
        *,
        hours_per_day: int = DEFAULT_HOURS_PER_DAY,
        format_pattern: str = DEFAULT_FORMAT_PATTERN,
    ) -> Duration:
        return cls._strict(
            _scalar_seconds(minutes, MINUTE, "minutes"), hours_per_day, format_pattern
        )

    @classmethod
    def from_hours(
        cls,
        hours: float,
        *,
        hours_per_day: int = DEFAULT_HOURS_PER_DAY,
        format_pattern: str = DEFAULT_FORMAT_PATTERN,
    ) -> Duration:
        return cls._strict(
            _scalar_seconds(hours, HOUR, "hours"), hours_per_day, format_pattern
        )

    @classmethod
    def from_days(
        cls,
        days: float,
        *,
        hours_per_day: int = DEFAULT_HOURS_PER_DAY,
        format_pattern: str = DEFAULT_FORMAT_PATTERN,
    ) -> Duration:
        """Build from a day count.

        A day here is always 86400 seconds; ``hours_per_day`` only affects
        how the total is carried back into days.
        """
        return cls._strict(
            _scalar_seconds(days, DAY, "days"), hours_per_day, format_pattern
        )

    @classmethod
    def from_string(
        cls,
        text: str,
        *,
        hours_per_day: int = DEFAULT_HOURS_PER_DAY,
        format_pattern: str = DEFAULT_FORMAT_PATTERN,
    ) -> Duration:
        if not isinstance(text, str):
            raise InvalidDurationError(
                ERR_MSG_INVALID_DURATION,
                f"from_string expects a str, got {type(text).__name__}",
            )
        return cls._strict(text, hours_per_day, format_pattern)

    @classmethod
    def zero(
        cls,
        *,
        hours_per_day: int = DEFAULT_HOURS_PER_DAY,
        format_pattern: str = DEFAULT_FORMAT_PATTERN,
    ) -> Duration:
        return cls(hours_per_day=hours_per_day, format_pattern=format_pattern)

    # -- conversion ----------------------------------------------------

    @property
    def components(self) -> Components:
        return Components(self.days, self.hours, self.minutes, self.seconds)

    def to_seconds(self, precision: int | None = None) -> float:
        """Total seconds, optionally rounded to ``precision`` decimals."""
        return _round_optional(
            self.components.total_seconds(self.hours_per_day), precision
        )

    def to_minutes(self, precision: int | None = None) -> float:
        """Total minutes, optionally rounded to ``precision`` decimals."""
        return _round_optional(self.to_seconds() / SECONDS_PER_MINUTE, precision)

    def format(self, pattern: str | None = None) -> str:
        """Render the duration through a token pattern.

        Tokens: ``d``/``dd`` days, ``h``/``hh`` hours within the day,
        ``H``/``HH`` total hours, ``m``/``mm`` minutes, ``s``/``ss`` raw
        seconds, ``S``/``SS`` rounded seconds. Doubled tokens are
        zero-padded to two digits. Other characters pass through.

        Raises:
            ConflictingTokensError: If the pattern mixes ``d`` and ``H`` tokens.
        """
        if pattern is None:
            pattern = self.format_pattern
        return format_components(self.components, pattern, self.hours_per_day)

    def humanize(self) -> str:
        return humanize_components(self.components)

    def to_dict(self) -> dict[str, Any]:
        return _to_record(self.components, self.hours_per_day, self.format_pattern)

    to_array = to_dict

    def to_json(self, **kwargs: Any) -> str:
        return _dump_json(self.to_dict(), **kwargs)

    def __str__(self) -> str:
        return self.format()


class TimeDuration:
    """Mutable duration with in-place parsing.

    Every ``parse()`` resets all four components before reading the input,
    and ``humanize()`` clears them after rendering unless ``consume=False``.
    One instance per logical duration; instances are not safe to share
    across threads without external locking.
    """

    def __init__(
        self,
        value: DurationInput | None = None,
        hours_per_day: int = DEFAULT_HOURS_PER_DAY,
        format_pattern: str = DEFAULT_FORMAT_PATTERN,
    ) -> None:
        self._hours_per_day = validate_hours_per_day(hours_per_day)
        self._format_pattern = validate_format_pattern(format_pattern)
        self._components = ZERO
        if value is not None:
            self.parse(value)

    @property
    def hours_per_day(self) -> int:
        return self._hours_per_day

    @property
    def format_pattern(self) -> str:
        return self._format_pattern

    @property
    def days(self) -> int:
        return self._components.days

    @property
    def hours(self) -> int:
        return self._components.hours

    @property
    def minutes(self) -> int:
        return self._components.minutes

    @property
    def seconds(self) -> float:
        return self._components.seconds

    @property
    def components(self) -> Components:
        return self._components

    def reset(self) -> None:
        self._components = ZERO

    def parse(self, value: DurationInput) -> TimeDuration | None:
        """Parse ``value`` into this instance.

        Returns the instance on success and None on failure. The previous
        state is discarded either way.
        """
        self.reset()
        total = parse_total_seconds(value)
        if total is None:
            return None
        self._components = normalize(total, self._hours_per_day, self._format_pattern)
        return self

    @staticmethod
    def valid(value: Any) -> bool:
        """Check whether ``value`` parses, using a throwaway instance."""
        try:
            return TimeDuration().parse(value) is not None
        except Exception:
            logger.debug("validation of %r failed", value, exc_info=True)
            return False

    # -- factories -----------------------------------------------------

    @classmethod
    def from_duration(cls, duration: Duration) -> TimeDuration:
        instance = cls(
            hours_per_day=duration.hours_per_day,
            format_pattern=duration.format_pattern,
        )
        instance._components = duration.components
        return instance

    @classmethod
    def from_seconds(cls, seconds: float, **config: Any) -> TimeDuration:
        return cls.from_duration(Duration.from_seconds(seconds, **config))

    @classmethod
    def from_minutes(cls, minutes: float, **config: Any) -> TimeDuration:
        return cls.from_duration(Duration.from_minutes(minutes, **config))

    @classmethod
    def from_hours(cls, hours: float, **config: Any) -> TimeDuration:
        return cls.from_duration(Duration.from_hours(hours, **config))

    @classmethod
    def from_days(cls, days: float, **config: Any) -> TimeDuration:
        return cls.from_duration(Duration.from_days(days, **config))

    @classmethod
    def from_string(cls, text: str, **config: Any) -> TimeDuration:
        return cls.from_duration(Duration.from_string(text, **config))

    @classmethod
    def zero(cls, **config: Any) -> TimeDuration:
        return cls.from_duration(Duration.zero(**config))

    def to_duration(self) -> Duration:
        return Duration._from_components(
            self._components, self._hours_per_day, self._format_pattern
        )

    # -- conversion ----------------------------------------------------

    def to_seconds(
        self, value: DurationInput | None = None, precision: int | None = None
    ) -> float:
        """Total seconds; parses ``value`` into this instance first if given."""
        if value is not None:
            self.parse(value)
        return _round_optional(
            self._components.total_seconds(self._hours_per_day), precision
        )

    def to_minutes(
        self, value: DurationInput | None = None, precision: int | None = None
    ) -> float:
        """Total minutes; parses ``value`` into this instance first if given."""
        return _round_optional(self.to_seconds(value) / SECONDS_PER_MINUTE, precision)

    def format(self, pattern: str | None = None) -> str:
        if pattern is None:
            pattern = self._format_pattern
        return format_components(self._components, pattern, self._hours_per_day)

    def humanize(
        self, value: DurationInput | None = None, *, consume: bool = True
    ) -> str:
        """Render e.g. ``"1h 42m 30s"``; ``"0s"`` when empty.

        With ``consume=True`` (the default) the components are reset to
        zero afterwards, so re-parse before reading them again.
        """
        if value is not None:
            self.parse(value)
        text = humanize_components(self._components)
        if consume:
            self.reset()
        return text

    def to_dict(self) -> dict[str, Any]:
        """Serializable record; does not consume the instance."""
        return _to_record(self._components, self._hours_per_day, self._format_pattern)

    to_array = to_dict

    def to_json(self, **kwargs: Any) -> str:
        return _dump_json(self.to_dict(), **kwargs)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        c = self._components
        return (
            f"TimeDuration(days={c.days}, hours={c.hours}, minutes={c.minutes}, "
            f"seconds={c.seconds!r}, hours_per_day={self._hours_per_day}, "
            f"format_pattern={self._format_pattern!r})"
        )
