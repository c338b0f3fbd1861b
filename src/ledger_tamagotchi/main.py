"""Main FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI

from ledger_tamagotchi import __version__
from ledger_tamagotchi.api.routes import router
from ledger_tamagotchi.core.config import settings
from ledger_tamagotchi.core.database import close_database, create_tables

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager."""
    logger.info("Starting Ledger Tamagotchi", version=__version__)

    if settings.auto_create_tables:
        await create_tables()
        logger.info("Database tables created", database_url=settings.database_url)

    yield

    await close_database()
    logger.info("Ledger Tamagotchi shutdown complete")


app = FastAPI(
    title=settings.app_name,
    version=__version__,
    description="A virtual pet that gets hungry, sad and tired unless its owner looks after it",
    lifespan=lifespan,
)

app.include_router(router)


@app.get("/")
async def root() -> dict[str, str]:
    """Service index."""
    return {
        "name": settings.app_name,
        "version": __version__,
        "docs": "/docs",
    }


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(
        "ledger_tamagotchi.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
