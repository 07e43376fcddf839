"""FastAPI application factory and lifespan management."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from fastapi import FastAPI

from flightpath import __version__
from flightpath.api.middleware import RequestLoggingMiddleware
from flightpath.api.routes import router
from flightpath.config import settings
from flightpath.logging import setup_logging

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler; configures logging on startup.

    Args:
        app: The FastAPI application instance.
    """
    setup_logging(settings.log_level, json_logs=settings.log_json)
    logger.info("app_started", app=settings.app_name, version=__version__)
    yield
    logger.info("app_stopped", app=settings.app_name)


def create_app() -> FastAPI:
    """Build and return the configured FastAPI application.

    Returns:
        A fully wired :class:`FastAPI` instance.
    """
    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        description=(
            "Flightpath takes an unordered list of flight legs and "
            "returns the start and end of every itinerary they form."
        ),
        lifespan=lifespan,
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.include_router(router, tags=["Itineraries"])
    return app


app = create_app()
