"""Dice notation grammar.

    start    := dice modifier?
    dice     := (count? "d")? size
    modifier := "+" DIGITS

The grammar is the reference for what counts as valid input; the split and
pattern parsers implement the same decision procedure by hand.
"""

from __future__ import annotations

from functools import lru_cache

from lark import Lark

DICE_GRAMMAR = r"""
start: dice modifier?

dice: count? "d" size
    | size

count: DIGITS
size: DIGITS
modifier: "+" DIGITS

DIGITS: /[0-9]+/
"""


@lru_cache(maxsize=1)
def get_parser() -> Lark:
    """Return the compiled LALR parser for ``DICE_GRAMMAR``."""
    return Lark(DICE_GRAMMAR, start="start", parser="lalr")
