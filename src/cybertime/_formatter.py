"""Rendering CyberDate values as notation and as plain-language explanations."""

from __future__ import annotations

from cybertime.model import CyberDate

INVALID_DATE = "Invalid date"

_ALL = frozenset({"klik", "chord", "cycle", "solar_cycle"})

# Exact set of populated fields -> notation template
_SHAPES: dict[frozenset[str], str] = {
    _ALL: "{klik} arc {chord} {cycle} arc {solar_cycle}",
    frozenset({"chord", "cycle", "solar_cycle"}): "{chord} {cycle} arc {solar_cycle}",
    frozenset({"klik", "chord"}): "{klik} arc {chord}",
    frozenset({"cycle"}): "{cycle}",
}

_EXPLANATIONS: tuple[tuple[str, str, str], ...] = (
    ("solar_cycle", "Solar Cycle", "Each solar cycle = 10 Earth years"),
    ("cycle", "Cycle", "Each cycle ≈ 3.65 Earth days"),
    ("chord", "Chord", "1/10 of a cycle ≈ 8.76 hours"),
    ("klik", "Klik", "1/1000 of a cycle ≈ 5 Earth minutes"),
)


def format_date(date: CyberDate) -> str:
    """Render a date in ``arc`` notation.

    Only the four shapes the parser produces are rendered. Any other
    combination of fields returns ``"Invalid date"``.
    """
    template = _SHAPES.get(date.present_fields)
    if template is None:
        return INVALID_DATE
    return template.format(
        klik=date.klik, chord=date.chord, cycle=date.cycle, solar_cycle=date.solar_cycle
    )


def explain(date: CyberDate) -> str:
    """One line per populated field, largest unit first."""
    lines = []
    for name, label, note in _EXPLANATIONS:
        value = getattr(date, name)
        if value is not None:
            lines.append(f"{label}: {value} ({note})")
    return "\n".join(lines)
