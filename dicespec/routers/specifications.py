"""Dice notation parsing routes: single strategy and three-way comparison."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query

from dicespec.schemas import ComparisonResponse, ParseErrorDetail, SpecificationResponse
from dicespec.specification import SpecificationError
from dicespec.strategies import Strategy, agree, compare, parse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/specifications", tags=["specifications"])


@router.get("", response_model=ComparisonResponse)
async def compare_strategies(notation: str = Query(...)) -> ComparisonResponse:
    outcomes = compare(notation)
    agreed = agree(outcomes)
    if not agreed:
        logger.info("Strategies disagree on %r", notation)
    return ComparisonResponse.from_outcomes(notation, outcomes, agreed)


@router.get("/{strategy}", response_model=SpecificationResponse)
async def parse_with_strategy(
    strategy: Strategy, notation: str = Query(...)
) -> SpecificationResponse:
    try:
        spec = parse(notation, strategy)
    except SpecificationError as exc:
        logger.debug("%s parser rejected %r: %s", strategy.value, notation, exc)
        raise HTTPException(
            status_code=422, detail=ParseErrorDetail.from_error(notation, exc).model_dump()
        ) from exc
    return SpecificationResponse.from_specification(strategy, spec)
