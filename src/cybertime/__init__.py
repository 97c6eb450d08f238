"""cybertime - Convert between Cybertronian calendar dates and Earth time."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("cybertime")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0.dev0"

from cybertime._arithmetic import add, difference, subtract
from cybertime._converter import from_seconds, to_seconds
from cybertime._duration import describe_duration, parse_duration
from cybertime._errors import (
    CyberTimeError,
    InvalidDateError,
    InvalidDurationError,
    InvalidSecondsError,
    NegativeResultError,
    ParseError,
)
from cybertime._formatter import INVALID_DATE, explain, format_date
from cybertime._parser import parse
from cybertime.model import CyberDate, Difference

__all__ = [
    "parse",
    "to_seconds",
    "from_seconds",
    "format_date",
    "explain",
    "parse_duration",
    "describe_duration",
    "difference",
    "add",
    "subtract",
    "CyberDate",
    "Difference",
    "INVALID_DATE",
    "CyberTimeError",
    "ParseError",
    "InvalidDateError",
    "InvalidDurationError",
    "InvalidSecondsError",
    "NegativeResultError",
]
