"""Conversion between CyberDate and Earth seconds since the origin."""

from __future__ import annotations

from fractions import Fraction

from cybertime._constants import (
    CHORD_DAYS,
    CYCLE_DAYS,
    KLIK_DAYS,
    SECONDS_PER_DAY,
    SOLAR_CYCLE_DAYS,
)
from cybertime._utils import exact_seconds
from cybertime.model import CyberDate

# (field, length in Earth days), largest first
_UNIT_DAYS: tuple[tuple[str, Fraction], ...] = (
    ("solar_cycle", SOLAR_CYCLE_DAYS),
    ("cycle", CYCLE_DAYS),
    ("chord", CHORD_DAYS),
    ("klik", KLIK_DAYS),
)


def to_exact_seconds(date: CyberDate) -> Fraction:
    """Exact Earth seconds for a date. Missing fields count as zero."""
    days = Fraction(0)
    for name, unit_days in _UNIT_DAYS:
        value = getattr(date, name)
        if value is not None:
            days += value * unit_days
    return days * SECONDS_PER_DAY


def to_seconds(date: CyberDate) -> float:
    """Earth seconds elapsed between the origin and ``date``."""
    return float(to_exact_seconds(date))


def from_seconds(seconds: int | float | Fraction) -> CyberDate:
    """Build a fully populated CyberDate from Earth seconds since the origin.

    Each unit is taken by floored division, largest first. Whatever is left
    below one klik is dropped.
    """
    days = exact_seconds(seconds) / SECONDS_PER_DAY
    solar_cycle, days = divmod(days, SOLAR_CYCLE_DAYS)
    cycle, days = divmod(days, CYCLE_DAYS)
    chord, days = divmod(days, CHORD_DAYS)
    klik = days // KLIK_DAYS
    return CyberDate(klik=klik, chord=chord, cycle=cycle, solar_cycle=solar_cycle)
