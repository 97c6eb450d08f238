"""Value types for Cybertronian dates."""

from __future__ import annotations

from dataclasses import dataclass, fields

from cybertime._errors import ERR_MSG_EMPTY_DATE, InvalidDateError


@dataclass(frozen=True)
class CyberDate:
    """A sparse Cybertronian date.

    Fields left as None were not given, which is distinct from an explicit
    zero when formatting. Conversion treats them as zero.
    """

    klik: int | None = None
    chord: int | None = None
    cycle: int | None = None
    solar_cycle: int | None = None

    def __post_init__(self) -> None:
        if not self.present_fields:
            raise InvalidDateError(
                ERR_MSG_EMPTY_DATE,
                "CyberDate constructed with klik, chord, cycle and solar_cycle all None",
            )

    @property
    def present_fields(self) -> frozenset[str]:
        """Names of the fields that are not None."""
        return frozenset(
            f.name for f in fields(self) if getattr(self, f.name) is not None
        )


@dataclass(frozen=True)
class Difference:
    """Absolute distance between two dates.

    ``cyber_date`` expresses the distance as a date measured from the origin.
    """

    seconds: float
    cyber_date: CyberDate
