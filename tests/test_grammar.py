"""Tests for the Lark grammar and the tree walker's shape checks."""

from __future__ import annotations

import pytest
from lark import Token, Tree
from lark.exceptions import UnexpectedInput

from dicespec.grammar import get_parser
from dicespec.parsers import tree
from dicespec.specification import GrammarShapeError, Specification


def _digits(kind: str, text: str) -> Tree:
    return Tree(kind, [Token("DIGITS", text)])


class _FixedParser:
    def __init__(self, result: Tree) -> None:
        self.result = result

    def parse(self, text: str) -> Tree:
        return self.result


class TestGrammar:
    def test_parser_is_cached(self) -> None:
        assert get_parser() is get_parser()

    def test_full_tree(self) -> None:
        assert get_parser().parse("2d6+3") == Tree(
            "start",
            [
                Tree("dice", [_digits("count", "2"), _digits("size", "6")]),
                _digits("modifier", "3"),
            ],
        )

    def test_size_only_tree(self) -> None:
        assert get_parser().parse("17") == Tree("start", [Tree("dice", [_digits("size", "17")])])

    def test_bare_d_tree(self) -> None:
        assert get_parser().parse("d6") == Tree("start", [Tree("dice", [_digits("size", "6")])])

    @pytest.mark.parametrize("text", ["", "d", "1d2d3", "hello", "2d6+"])
    def test_rejects(self, text: str) -> None:
        with pytest.raises(UnexpectedInput):
            get_parser().parse(text)


class TestTreeShape:
    """The walker refuses trees the grammar should never produce."""

    @pytest.fixture
    def fake_tree(self, monkeypatch):
        def _install(result: Tree) -> None:
            monkeypatch.setattr(tree, "get_parser", lambda: _FixedParser(result))

        return _install

    def test_well_formed_fake_tree(self, fake_tree) -> None:
        fake_tree(Tree("start", [Tree("dice", [_digits("size", "8")]), _digits("modifier", "1")]))
        assert tree.parse("ignored") == Specification(1, 8, 1)

    def test_wrong_root(self, fake_tree) -> None:
        fake_tree(Tree("expr", [Tree("dice", [_digits("size", "6")])]))
        with pytest.raises(GrammarShapeError, match="'start'"):
            tree.parse("6")

    def test_empty_dice(self, fake_tree) -> None:
        fake_tree(Tree("start", [Tree("dice", [])]))
        with pytest.raises(GrammarShapeError, match="'dice'"):
            tree.parse("6")

    def test_swapped_children(self, fake_tree) -> None:
        fake_tree(Tree("start", [Tree("dice", [_digits("size", "6"), _digits("count", "2")])]))
        with pytest.raises(GrammarShapeError, match="'count'"):
            tree.parse("2d6")

    def test_extra_digits(self, fake_tree) -> None:
        bad_size = Tree("size", [Token("DIGITS", "6"), Token("DIGITS", "7")])
        fake_tree(Tree("start", [Tree("dice", [bad_size])]))
        with pytest.raises(GrammarShapeError, match="one child"):
            tree.parse("67")

    def test_wrong_token_type(self, fake_tree) -> None:
        fake_tree(Tree("start", [Tree("dice", [Tree("size", [Token("WORD", "six")])])]))
        with pytest.raises(GrammarShapeError, match="DIGITS"):
            tree.parse("six")

    def test_bare_token_under_dice(self, fake_tree) -> None:
        fake_tree(Tree("start", [Tree("dice", [Token("DIGITS", "6")])]))
        with pytest.raises(GrammarShapeError, match="Unexpected token"):
            tree.parse("6")

    def test_misplaced_modifier(self, fake_tree) -> None:
        fake_tree(Tree("start", [Tree("dice", [_digits("size", "6")]), _digits("count", "3")]))
        with pytest.raises(GrammarShapeError, match="'modifier'"):
            tree.parse("6+3")

    def test_too_many_elements(self, fake_tree) -> None:
        dice = Tree("dice", [_digits("size", "6")])
        fake_tree(Tree("start", [dice, _digits("modifier", "1"), _digits("modifier", "2")]))
        with pytest.raises(GrammarShapeError):
            tree.parse("6+1+2")
