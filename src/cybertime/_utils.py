"""Validation helpers and exact-number coercion."""

from __future__ import annotations

import math
from fractions import Fraction

from cybertime._constants import DEFAULT_MAX_INPUT_LENGTH
from cybertime._errors import (
    ERR_MSG_INPUT_TOO_LONG,
    ERR_MSG_NON_FINITE_SECONDS,
    CyberTimeError,
    InvalidSecondsError,
)


def validate_input_length(
    text: str,
    error_cls: type[CyberTimeError],
    max_length: int | None = None,
    context: str = "input",
) -> None:
    """Reject text longer than the configured limit."""
    limit = DEFAULT_MAX_INPUT_LENGTH if max_length is None else max_length
    if len(text) > limit:
        raise error_cls(
            ERR_MSG_INPUT_TOO_LONG,
            f"{context} length {len(text)} exceeds limit {limit}",
        )


def exact_seconds(value: int | float | Fraction) -> Fraction:
    """Convert a seconds value to an exact Fraction.

    Floats are read through their shortest decimal repr, so 315.576 becomes
    exactly 39447/125 rather than the nearest binary fraction.
    """
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidSecondsError(
                ERR_MSG_NON_FINITE_SECONDS,
                f"cannot convert {value!r} seconds to an exact value",
            )
        return Fraction(repr(value))
    return Fraction(value)
