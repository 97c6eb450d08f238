"""Form handlers for the explain, compare, add, subtract and seconds views.

Each handler takes the raw strings a user typed and returns display text.
Engine errors are caught here and turned into ``"Error: ..."`` output.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from cybertime._arithmetic import add, difference, exact_difference, subtract
from cybertime._converter import from_seconds, to_seconds
from cybertime._duration import describe_duration
from cybertime._errors import CyberTimeError
from cybertime._formatter import explain, format_date
from cybertime._parser import parse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormResult:
    """Text to display for a submitted form."""

    output: str
    ok: bool = True

    def __str__(self) -> str:
        return self.output


def _run(form: str, render: Callable[[], str]) -> FormResult:
    try:
        return FormResult(render())
    except CyberTimeError as e:
        logger.debug("%s form failed: %s", form, e.internal())
        return FormResult(f"Error: {e}", ok=False)


def explain_form(date_text: str) -> FormResult:
    return _run("explain", lambda: explain(parse(date_text)))


def compare_form(first_text: str, second_text: str) -> FormResult:
    def render() -> str:
        first, second = parse(first_text), parse(second_text)
        elapsed = difference(first, second).cyber_date
        return (
            "Elapsed Cybertronian Time:\n"
            f"Klik: {elapsed.klik}, Chord: {elapsed.chord}, "
            f"Cycle: {elapsed.cycle}, Solar Cycle: {elapsed.solar_cycle}\n\n"
            "Elapsed Earth Time:\n"
            f"{describe_duration(exact_difference(first, second))}"
        )

    return _run("compare", render)


def add_form(date_text: str, duration_text: str) -> FormResult:
    def render() -> str:
        return f"New Cybertronian Date:\n{format_date(add(parse(date_text), duration_text))}"

    return _run("add", render)


def subtract_form(date_text: str, duration_text: str) -> FormResult:
    def render() -> str:
        result = subtract(parse(date_text), duration_text)
        return f"Cybertronian Date after subtracting time:\n{format_date(result)}"

    return _run("subtract", render)


def seconds_form(date_text: str) -> FormResult:
    return _run("seconds", lambda: f"{to_seconds(parse(date_text))}")


def from_seconds_form(seconds: float) -> FormResult:
    return _run("from-seconds", lambda: format_date(from_seconds(seconds)))
