"""Human time phrases: "2 years, 3 weeks" to seconds and back."""

from __future__ import annotations

import re
from fractions import Fraction

from cybertime._constants import EARTH_YEAR_DAYS, SECONDS_PER_DAY
from cybertime._errors import InvalidDurationError
from cybertime._utils import exact_seconds, validate_input_length

UNIT_SECONDS: dict[str, int] = {
    "year": int(EARTH_YEAR_DAYS * SECONDS_PER_DAY),
    "week": 7 * SECONDS_PER_DAY,
    "day": SECONDS_PER_DAY,
    "hour": 3600,
    "minute": 60,
    "second": 1,
}

_DURATION_RE = re.compile(
    r"(\d+)\s*(years?|weeks?|days?|hours?|minutes?|seconds?)", re.IGNORECASE
)


def parse_duration(text: str, *, max_length: int | None = None) -> int:
    """Total seconds named by every ``<number> <unit>`` pair in ``text``.

    Text around the pairs is ignored. Returns 0 when nothing matches; callers
    that need a positive duration must check for that themselves.

    Raises:
        InvalidDurationError: If the text exceeds ``max_length``.
    """
    validate_input_length(text, InvalidDurationError, max_length, "duration text")
    total = 0
    for m in _DURATION_RE.finditer(text):
        unit = m.group(2).lower().removesuffix("s")
        total += int(m.group(1)) * UNIT_SECONDS[unit]
    return total


def describe_duration(seconds: int | float | Fraction) -> str:
    """Break seconds down greedily into years, weeks, days, hours, minutes, seconds."""
    remaining = exact_seconds(seconds)
    parts = []
    for unit, unit_seconds in UNIT_SECONDS.items():
        count, remaining = divmod(remaining, unit_seconds)
        parts.append(f"{count} {unit}s")
    return ", ".join(parts)
