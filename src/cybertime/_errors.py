"""Exception hierarchy for Cybertronian calendar operations."""


class CyberTimeError(Exception):
    """Base exception for calendar conversion errors.

    Provides dual messaging: a short user-facing message suitable for
    display and internal details for logging.
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


class ParseError(CyberTimeError):
    """Raised when Cybertronian date text is malformed."""


class InvalidDateError(CyberTimeError):
    """Raised when a CyberDate is constructed without any field."""


class InvalidDurationError(CyberTimeError):
    """Raised when a duration phrase is not a positive amount of time."""


class NegativeResultError(CyberTimeError):
    """Raised when a subtraction would land before the Cybertronian origin."""


class InvalidSecondsError(CyberTimeError):
    """Raised when an Earth seconds value is infinite or NaN."""


# User-facing error message constants
ERR_MSG_INVALID_DATE_FORMAT = "Invalid cybertronian date format."
ERR_MSG_EMPTY_DATE = "a Cybertronian date needs at least one field"
ERR_MSG_INVALID_ADD_DURATION = "Invalid or zero Earth time to add."
ERR_MSG_INVALID_SUBTRACT_DURATION = "Invalid or zero Earth time to subtract."
ERR_MSG_INPUT_TOO_LONG = "input too long"
ERR_MSG_BEFORE_ORIGIN = "Resulting date is before the start of Cybertronian time."
ERR_MSG_NON_FINITE_SECONDS = "Earth seconds must be a finite number."
