"""Regular-expression dice notation parser.

Supports the full notation: XdY, XdY+Z, dY, Y, Y+Z.
"""

from __future__ import annotations

import re

from dicespec.specification import InvalidSpecificationError, Specification, parse_u8

_NOTATION_RE = re.compile(
    r"(?:(?P<count>[0-9]*)d(?P<size>[0-9]+)|(?P<single>[0-9]+))(?:\+(?P<modifier>[0-9]+))?"
)


def parse(notation: str) -> Specification:
    """Parse dice notation with a single anchored regular expression.

    Raises:
        InvalidSpecificationError: If the notation does not match the pattern.
        NumericFormatError: If a number does not fit in 0-255.
    """
    m = _NOTATION_RE.fullmatch(notation)
    if not m:
        raise InvalidSpecificationError(f"Invalid dice notation: {notation!r}", notation)

    single = m.group("single")
    if single is not None:
        count = 1
        size = parse_u8(single, notation)
    else:
        # "d6" matches the first branch with an empty count group.
        count = parse_u8(m.group("count"), notation) if m.group("count") else 1
        size = parse_u8(m.group("size"), notation)

    modifier = m.group("modifier")
    return Specification(
        count=count,
        size=size,
        modifier=parse_u8(modifier, notation) if modifier is not None else 0,
    )
