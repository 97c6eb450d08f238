"""Cybertronian date parser - Lark grammar plus arity-based field mapping."""

from __future__ import annotations

import logging

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedInput
from lark.visitors import Interpreter

from cybertime._errors import ERR_MSG_INVALID_DATE_FORMAT, ParseError
from cybertime._utils import validate_input_length
from cybertime.model import CyberDate

logger = logging.getLogger(__name__)

_GRAMMAR = r"""
    start: segment (_ARC segment)*
    segment: INT+

    _ARC: "arc"
    // Whole signed integers only: "5-3" and "7+1" are one bad token, and
    // decimals such as "1.5" are rejected.
    INT: /[+-]?\d+(?![\d+-])/

    %import common.WS
    %ignore WS
"""

_parser = Lark(_GRAMMAR, parser="lalr")

# Number count -> field names, in input order. The rightmost number is always
# the most significant unit present. Other counts are rejected.
FIELDS_BY_ARITY: dict[int, tuple[str, ...]] = {
    4: ("klik", "chord", "cycle", "solar_cycle"),
    3: ("chord", "cycle", "solar_cycle"),
    2: ("klik", "chord"),
    1: ("cycle",),
}


class _NumberCollector(Interpreter):
    """Flattens the segments of a parsed date into one ordered number list."""

    def __init__(self) -> None:
        self.numbers: list[int] = []

    def segment(self, tree: Tree) -> None:
        for token in tree.children:
            if isinstance(token, Token):
                self.numbers.append(int(token))


def parse_numbers(text: str) -> list[int]:
    """Tokenize date text into its numbers, left to right."""
    normalized = text.strip().lower()
    try:
        tree = _parser.parse(normalized)
    except UnexpectedInput as e:
        raise ParseError(
            ERR_MSG_INVALID_DATE_FORMAT,
            f"cannot tokenize date {text!r}: {e}",
            wrapped=e,
        ) from e
    collector = _NumberCollector()
    collector.visit(tree)
    return collector.numbers


def parse(text: str, *, max_length: int | None = None) -> CyberDate:
    """Parse Cybertronian date text such as ``"54 arc 4 593 arc 129"``.

    Args:
        text: Date text. Numbers may be grouped with the ``arc`` separator.
        max_length: Maximum accepted text length. Defaults to 256.

    Returns:
        A CyberDate whose populated fields depend on how many numbers were given.

    Raises:
        ParseError: If a token is not an integer or the number count is not 1-4.
    """
    validate_input_length(text, ParseError, max_length, "date text")
    numbers = parse_numbers(text)
    names = FIELDS_BY_ARITY.get(len(numbers))
    if names is None:
        raise ParseError(
            ERR_MSG_INVALID_DATE_FORMAT,
            f"expected 1 to 4 numbers, got {len(numbers)} in {text!r}",
        )
    logger.debug("parsed %r as %s", text, dict(zip(names, numbers)))
    return CyberDate(**dict(zip(names, numbers)))
