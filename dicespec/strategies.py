"""Registry of the three parsing strategies.

Each parser module is free-standing; this module only maps strategy names
to their ``parse`` functions so callers can pick one or run all of them.
"""

from __future__ import annotations

import enum
from collections.abc import Callable

from dicespec.config import settings
from dicespec.parsers import pattern, split, tree
from dicespec.specification import Specification, SpecificationError


class Strategy(str, enum.Enum):
    SPLIT = "split"
    PATTERN = "pattern"
    GRAMMAR = "grammar"


PARSERS: dict[Strategy, Callable[[str], Specification]] = {
    Strategy.SPLIT: split.parse,
    Strategy.PATTERN: pattern.parse,
    Strategy.GRAMMAR: tree.parse,
}

Outcome = Specification | SpecificationError


def parse(notation: str, strategy: Strategy | str | None = None) -> Specification:
    """Parse ``notation`` with the named strategy, or the configured default.

    Raises:
        ValueError: If ``strategy`` is not a known strategy name.
        SpecificationError: If the notation cannot be parsed.
    """
    if strategy is None:
        strategy = settings.default_strategy
    return PARSERS[Strategy(strategy)](notation)


def compare(notation: str) -> dict[Strategy, Outcome]:
    """Run every strategy on ``notation`` and collect results or errors."""
    outcomes: dict[Strategy, Outcome] = {}
    for strategy, parser in PARSERS.items():
        try:
            outcomes[strategy] = parser(notation)
        except SpecificationError as exc:
            outcomes[strategy] = exc
    return outcomes


def _signature(outcome: Outcome) -> Specification | str:
    if isinstance(outcome, SpecificationError):
        return outcome.kind
    return outcome


def agree(outcomes: dict[Strategy, Outcome]) -> bool:
    """Return True if all outcomes are the same value or the same error kind."""
    return len({_signature(o) for o in outcomes.values()}) <= 1
