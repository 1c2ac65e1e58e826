"""Grammar-driven dice notation parser.

Runs the notation through the compiled Lark parser and walks the resulting
tree. The expected tree shapes are::

    start
      dice
        size      DIGITS           "6"
      |
        count     DIGITS           "2d6"
        size      DIGITS
      |
        size      DIGITS           "d6"
      modifier    DIGITS           optional "+3"

Any other shape is a mismatch between this walker and the grammar, and raises
GrammarShapeError instead of guessing.
"""

from __future__ import annotations

from lark import Token, Tree
from lark.exceptions import UnexpectedInput

from dicespec.grammar import get_parser
from dicespec.specification import (
    GrammarShapeError,
    InvalidSpecificationError,
    Specification,
    parse_u8,
)


def _subtrees(node: Tree) -> list[Tree]:
    children = []
    for child in node.children:
        if not isinstance(child, Tree):
            raise GrammarShapeError(f"Unexpected token {child!r} under {node.data!r} node")
        children.append(child)
    return children


def _digits(node: Tree, kind: str) -> str:
    """Return the single DIGITS token wrapped by a ``count``/``size``/``modifier`` node."""
    if node.data != kind:
        raise GrammarShapeError(f"Expected {kind!r} node, found {node.data!r}")
    if len(node.children) != 1:
        raise GrammarShapeError(
            f"Expected one child under {kind!r} node, found {len(node.children)}"
        )
    token = node.children[0]
    if not isinstance(token, Token) or token.type != "DIGITS":
        raise GrammarShapeError(f"Expected DIGITS token under {kind!r} node, found {token!r}")
    return str(token)


def _dice(node: Tree) -> tuple[str | None, str]:
    if node.data != "dice":
        raise GrammarShapeError(f"Expected 'dice' node, found {node.data!r}")
    children = _subtrees(node)
    if len(children) == 1:
        return None, _digits(children[0], "size")
    if len(children) == 2:
        return _digits(children[0], "count"), _digits(children[1], "size")
    raise GrammarShapeError(f"Expected one or two children under 'dice' node, found {len(children)}")


def parse(notation: str) -> Specification:
    """Parse dice notation with the grammar-driven parser.

    Raises:
        InvalidSpecificationError: If the notation does not match the grammar.
        NumericFormatError: If a number does not fit in 0-255.
    """
    try:
        root = get_parser().parse(notation)
    except UnexpectedInput as exc:
        raise InvalidSpecificationError(
            f"Invalid dice notation: {notation!r}", notation
        ) from exc

    if root.data != "start":
        raise GrammarShapeError(f"Expected 'start' node, found {root.data!r}")
    elements = _subtrees(root)
    if not 1 <= len(elements) <= 2:
        raise GrammarShapeError(
            f"Expected one or two children under 'start' node, found {len(elements)}"
        )

    count_text, size_text = _dice(elements[0])
    count = 1 if count_text is None else parse_u8(count_text, notation)
    size = parse_u8(size_text, notation)
    modifier = 0
    if len(elements) == 2:
        modifier = parse_u8(_digits(elements[1], "modifier"), notation)

    return Specification(count=count, size=size, modifier=modifier)
