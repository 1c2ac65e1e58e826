"""String-splitting dice notation parser."""

from __future__ import annotations

from dicespec.specification import InvalidSpecificationError, Specification, parse_u8

_ALPHABET = frozenset("0123456789d+")


def parse(notation: str) -> Specification:
    """Parse dice notation by splitting on ``+`` and then on ``d``.

    Surrounding whitespace is trimmed. A missing count defaults to 1 and a
    missing modifier to 0.

    Raises:
        InvalidSpecificationError: On empty input, foreign characters, or
            too many ``+``/``d`` separators.
        NumericFormatError: If a piece is empty or does not fit in 0-255.
    """
    text = notation.strip()
    if not text:
        raise InvalidSpecificationError("Empty dice notation", notation)
    if not _ALPHABET.issuperset(text):
        raise InvalidSpecificationError(f"Invalid dice notation: {notation!r}", notation)

    elements = text.split("+")
    if len(elements) > 2:
        raise InvalidSpecificationError(
            f"Only one modifier is allowed: {notation!r}", notation
        )

    dice = elements[0].split("d")
    if len(dice) > 2:
        raise InvalidSpecificationError(
            f"Only one 'd' separator is allowed: {notation!r}", notation
        )

    if len(dice) == 1:
        count = 1
        size = parse_u8(dice[0], notation)
    else:
        left, right = dice
        count = parse_u8(left, notation) if left else 1
        size = parse_u8(right, notation)

    modifier = parse_u8(elements[1], notation) if len(elements) == 2 else 0
    return Specification(count=count, size=size, modifier=modifier)
