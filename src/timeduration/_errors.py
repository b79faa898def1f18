"""Exception hierarchy for duration parsing and formatting."""


class DurationError(Exception):
    """Base exception for duration errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for debugging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class ConflictingTokensError(DurationError, ValueError):
    """Raised when a format pattern mixes day tokens with total-hour tokens."""


class InvalidDurationError(DurationError, ValueError):
    """Raised when a strict factory receives input that cannot be parsed."""


class InvalidConfigurationError(DurationError, ValueError):
    """Raised when hours_per_day or format_pattern is invalid."""


# Sanitized user-facing error message constants
ERR_MSG_CONFLICTING_TOKENS = '"d" and "H" cannot be used together in a format pattern'
ERR_MSG_INVALID_DURATION = "invalid duration value"
ERR_MSG_INVALID_HOURS_PER_DAY = "hours per day must be a positive integer"
ERR_MSG_INVALID_FORMAT_PATTERN = "format pattern must be a string"
