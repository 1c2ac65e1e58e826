from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from dicespec.config import settings
from dicespec.grammar import get_parser
from dicespec.routers import specifications

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # Compile the grammar up front so the first request does not pay for it.
    get_parser()
    logger.info("dicespec ready (default strategy=%s)", settings.default_strategy)
    yield


app = FastAPI(title="dicespec", lifespan=lifespan)

app.include_router(specifications.router)


@app.get("/")
async def index() -> dict[str, str]:
    return {"name": "dicespec", "default_strategy": settings.default_strategy}
