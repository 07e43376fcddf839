"""Entry point for running the Flightpath API server via ``python main.py``."""

import os

import structlog
import uvicorn

from flightpath.config import settings
from flightpath.logging import setup_logging

logger = structlog.get_logger(__name__)

if __name__ == "__main__":
    setup_logging(settings.log_level, json_logs=settings.log_json)
    port = int(os.environ.get("PORT", settings.port))
    logger.info("server_starting", host=settings.host, port=port)
    uvicorn.run(
        "flightpath.api.app:app",
        host=settings.host,
        port=port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )
