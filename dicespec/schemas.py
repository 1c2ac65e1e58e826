"""Pydantic response models for the HTTP routes."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from dicespec.specification import Specification, SpecificationError
from dicespec.strategies import Outcome, Strategy


class SpecificationResponse(BaseModel):
    strategy: Strategy
    count: int = Field(ge=0, le=255, description="Number of dice to roll.")
    size: int = Field(ge=0, le=255, description="Number of sides on each die.")
    modifier: int = Field(ge=0, le=255, description="Constant added to the total.")

    @classmethod
    def from_specification(cls, strategy: Strategy, spec: Specification) -> SpecificationResponse:
        return cls(strategy=strategy, count=spec.count, size=spec.size, modifier=spec.modifier)


class ParseErrorDetail(BaseModel):
    kind: Literal["invalid", "numeric_format"]
    message: str
    notation: str

    @classmethod
    def from_error(cls, notation: str, exc: SpecificationError) -> ParseErrorDetail:
        return cls(kind=exc.kind, message=str(exc), notation=notation)


class StrategyOutcome(BaseModel):
    strategy: Strategy
    specification: SpecificationResponse | None = None
    error: ParseErrorDetail | None = None


class ComparisonResponse(BaseModel):
    notation: str
    agree: bool
    outcomes: list[StrategyOutcome]

    @classmethod
    def from_outcomes(
        cls, notation: str, outcomes: dict[Strategy, Outcome], agree: bool
    ) -> ComparisonResponse:
        items = []
        for strategy, outcome in outcomes.items():
            if isinstance(outcome, SpecificationError):
                items.append(
                    StrategyOutcome(
                        strategy=strategy, error=ParseErrorDetail.from_error(notation, outcome)
                    )
                )
            else:
                items.append(
                    StrategyOutcome(
                        strategy=strategy,
                        specification=SpecificationResponse.from_specification(strategy, outcome),
                    )
                )
        return cls(notation=notation, agree=agree, outcomes=items)
