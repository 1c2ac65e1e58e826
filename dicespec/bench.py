"""Timing harness for the three parsing strategies.

Every strategy parses the same list of expressions repeatedly. Parse errors
are part of the workload: invalid samples such as ``"hello"`` time the
rejection path.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from dicespec.config import settings
from dicespec.specification import SpecificationError
from dicespec.strategies import PARSERS, Strategy

logger = logging.getLogger(__name__)

SAMPLE_EXPRESSIONS: tuple[str, ...] = ("2d6", "17", "1d2d3", "hello")


@dataclass(frozen=True)
class BenchmarkResult:
    strategy: Strategy
    iterations: int
    expressions: int
    seconds: float

    @property
    def calls(self) -> int:
        return self.iterations * self.expressions

    @property
    def per_call_ns(self) -> float:
        if not self.calls:
            return 0.0
        return self.seconds / self.calls * 1e9


def run_strategy(
    strategy: Strategy, expressions: Sequence[str], iterations: int
) -> BenchmarkResult:
    """Time ``iterations`` passes of ``strategy`` over ``expressions``."""
    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got {iterations}")
    parser = PARSERS[strategy]
    start = time.perf_counter()
    for _ in range(iterations):
        for expression in expressions:
            try:
                parser(expression)
            except SpecificationError:
                pass
    elapsed = time.perf_counter() - start
    return BenchmarkResult(
        strategy=strategy,
        iterations=iterations,
        expressions=len(expressions),
        seconds=elapsed,
    )


def run_benchmarks(
    expressions: Sequence[str] | None = None,
    iterations: int | None = None,
    strategies: Iterable[Strategy | str] | None = None,
) -> list[BenchmarkResult]:
    """Benchmark each strategy, falling back to settings for missing arguments."""
    if expressions is None:
        expressions = settings.bench_expressions or SAMPLE_EXPRESSIONS
    if iterations is None:
        iterations = settings.bench_iterations
    selected = [Strategy(s) for s in strategies] if strategies is not None else list(Strategy)

    results = []
    for strategy in selected:
        result = run_strategy(strategy, expressions, iterations)
        logger.info(
            "%s: %d calls in %.4fs (%.1f ns/call)",
            strategy.value,
            result.calls,
            result.seconds,
            result.per_call_ns,
        )
        results.append(result)
    return results
