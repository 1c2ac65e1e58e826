"""Command line entry point: parse, compare and benchmark dice notation."""

import logging
from typing import List, Optional

import typer

from dicespec.bench import SAMPLE_EXPRESSIONS, run_benchmarks
from dicespec.config import settings
from dicespec.specification import SpecificationError
from dicespec.strategies import Strategy, agree, compare, parse

__all__ = ["app", "run"]

logger = logging.getLogger(__name__)

app = typer.Typer(help="Parse dice notation with three interchangeable parsers", add_completion=False)


@app.callback()
def configure(
    log_level: str = typer.Option(settings.log_level, "--log-level", help="Logging level"),
) -> None:
    """Configure logging before any sub-command executes."""

    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


@app.command("parse")
def parse_command(
    notation: str = typer.Argument(..., help="Dice notation, e.g. 2d6+3"),
    strategy: Strategy = typer.Option(
        Strategy(settings.default_strategy), "--strategy", "-s", help="Parser to use"
    ),
) -> None:
    """Parse NOTATION and print count, size and modifier."""

    try:
        spec = parse(notation, strategy)
    except SpecificationError as exc:
        typer.echo(f"{exc.kind}: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"count={spec.count} size={spec.size} modifier={spec.modifier}")


@app.command("compare")
def compare_command(
    notation: str = typer.Argument(..., help="Dice notation, e.g. 2d6+3"),
) -> None:
    """Run all three parsers on NOTATION and report whether they agree."""

    outcomes = compare(notation)
    for strategy, outcome in outcomes.items():
        if isinstance(outcome, SpecificationError):
            typer.echo(f"{strategy.value:<8} {outcome.kind}: {outcome}")
        else:
            typer.echo(f"{strategy.value:<8} {outcome}")
    agreed = agree(outcomes)
    typer.echo("agree" if agreed else "DISAGREE")
    if not agreed:
        raise typer.Exit(code=1)


@app.command("bench")
def bench_command(
    iterations: int = typer.Option(
        settings.bench_iterations, "--iterations", "-n", min=0, help="Passes over the expressions"
    ),
    expressions: Optional[List[str]] = typer.Option(
        None, "--expression", "-e", help="Expression to time; repeatable (default: sample set)"
    ),
    strategies: Optional[List[Strategy]] = typer.Option(
        None, "--strategy", "-s", help="Strategy to time; repeatable (default: all)"
    ),
) -> None:
    """Time each parser over a fixed list of expressions."""

    samples = expressions or settings.bench_expressions or list(SAMPLE_EXPRESSIONS)
    logger.debug("Benchmarking %d expressions x %d iterations", len(samples), iterations)
    results = run_benchmarks(samples, iterations, strategies or None)
    typer.echo(f"{'strategy':<8} {'calls':>10} {'seconds':>10} {'ns/call':>10}")
    for result in results:
        typer.echo(
            f"{result.strategy.value:<8} {result.calls:>10} "
            f"{result.seconds:>10.4f} {result.per_call_ns:>10.1f}"
        )


def run() -> None:
    app()


if __name__ == "__main__":
    run()
