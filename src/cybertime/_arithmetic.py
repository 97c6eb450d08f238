"""Difference, addition and subtraction over Earth seconds."""

from __future__ import annotations

import logging
from fractions import Fraction

from cybertime._converter import from_seconds, to_exact_seconds
from cybertime._duration import parse_duration
from cybertime._errors import (
    ERR_MSG_BEFORE_ORIGIN,
    ERR_MSG_INVALID_ADD_DURATION,
    ERR_MSG_INVALID_SUBTRACT_DURATION,
    InvalidDurationError,
    NegativeResultError,
)
from cybertime.model import CyberDate, Difference

logger = logging.getLogger(__name__)


def exact_difference(first: CyberDate, second: CyberDate) -> Fraction:
    """Exact absolute distance between two dates in Earth seconds."""
    return abs(to_exact_seconds(second) - to_exact_seconds(first))


def difference(first: CyberDate, second: CyberDate) -> Difference:
    """Absolute distance between two dates, in seconds and as a CyberDate."""
    seconds = exact_difference(first, second)
    logger.debug("difference between %s and %s is %s s", first, second, seconds)
    return Difference(seconds=float(seconds), cyber_date=from_seconds(seconds))


def _positive_duration(duration_text: str, user_message: str) -> int:
    seconds = parse_duration(duration_text)
    if seconds <= 0:
        raise InvalidDurationError(
            user_message,
            f"duration {duration_text!r} parsed to {seconds} seconds",
        )
    return seconds


def add(date: CyberDate, duration_text: str) -> CyberDate:
    """Move ``date`` forward by an Earth duration such as ``"3 days"``.

    Raises:
        InvalidDurationError: If the duration is not positive.
    """
    seconds = _positive_duration(duration_text, ERR_MSG_INVALID_ADD_DURATION)
    result = to_exact_seconds(date) + seconds
    logger.debug("added %s s to %s: %s s", seconds, date, result)
    return from_seconds(result)


def subtract(date: CyberDate, duration_text: str) -> CyberDate:
    """Move ``date`` back by an Earth duration.

    Raises:
        InvalidDurationError: If the duration is not positive.
        NegativeResultError: If the result would precede the origin.
    """
    seconds = _positive_duration(duration_text, ERR_MSG_INVALID_SUBTRACT_DURATION)
    result = to_exact_seconds(date) - seconds
    if result < 0:
        raise NegativeResultError(
            ERR_MSG_BEFORE_ORIGIN,
            f"subtracting {seconds} s from {date} gives {float(result)} s",
        )
    logger.debug("subtracted %s s from %s: %s s", seconds, date, result)
    return from_seconds(result)
