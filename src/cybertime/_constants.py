"""Calendar unit constants and input limits.

Every Cybertronian unit is an exact ratio of the Earth day, derived from two
facts: an Earth year is 365.25 days and a solar cycle is 10 Earth years.
"""

from fractions import Fraction

SECONDS_PER_DAY = 86400

EARTH_YEAR_DAYS = Fraction(1461, 4)
"""Length of an Earth year in days (365.25)."""

SOLAR_CYCLE_YEARS = 10

CYCLES_PER_SOLAR_CYCLE = 1000
CHORDS_PER_CYCLE = 10
KLIKS_PER_CYCLE = 1000

SOLAR_CYCLE_DAYS = SOLAR_CYCLE_YEARS * EARTH_YEAR_DAYS
"""3652.5 Earth days."""

CYCLE_DAYS = SOLAR_CYCLE_DAYS / CYCLES_PER_SOLAR_CYCLE
"""About 3.65 Earth days."""

CHORD_DAYS = CYCLE_DAYS / CHORDS_PER_CYCLE
"""About 8.76 Earth hours."""

KLIK_DAYS = CYCLE_DAYS / KLIKS_PER_CYCLE
"""About 5 Earth minutes."""

KLIK_SECONDS = KLIK_DAYS * SECONDS_PER_DAY
"""315.576 Earth seconds, the resolution of a CyberDate."""

DEFAULT_MAX_INPUT_LENGTH = 256
"""Maximum length of date or duration text (CWE-400 prevention)."""
