"""FastAPI route definitions for the Flightpath API.

Provides two endpoints:

- ``POST /calculate``: resolve a list of flight legs into the
  ``[start, end]`` pair of every itinerary they form.
- ``GET /health``: liveness probe.
"""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Request, Response, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from flightpath import __version__
from flightpath.api.wire import decode_edges, encode_chains
from flightpath.core.errors import ChainResolutionError, MalformedRequestError
from flightpath.core.resolver import resolve

logger = structlog.get_logger(__name__)

router = APIRouter()


# ------------------------------------------------------------------
# Response schemas
# ------------------------------------------------------------------


class HealthResponse(BaseModel):
    """Response from the ``/health`` endpoint."""

    status: str = Field("ok", description="Liveness status.")
    version: str = Field(..., description="Running package version.")


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------


@router.post(
    "/calculate",
    status_code=status.HTTP_200_OK,
    summary="Resolve flight legs into itineraries",
    description=(
        "Accepts a JSON array of ``[source, destination]`` legs in any "
        "order and returns the ``[start, end]`` pair of every itinerary "
        "the legs form.  Malformed bodies are rejected with 400; legs "
        "that do not form clean itineraries are rejected with 500."
    ),
    responses={
        400: {"description": "Malformed request body.", "content": {"text/plain": {}}},
        500: {"description": "Legs could not be resolved.", "content": {"text/plain": {}}},
    },
)
async def calculate(request: Request) -> Response:
    """Decode, resolve and encode a single batch of legs.

    The body is read raw rather than through a pydantic request model so
    that decoding failures can be reported as plain text with the
    position or index of the offending value.

    Args:
        request: The incoming HTTP request.

    Returns:
        A JSON response with the resolved pairs, or a plain-text error.
    """
    try:
        edges = decode_edges(await request.body())
    except MalformedRequestError as exc:
        logger.warning("request_rejected", reason=str(exc))
        return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)

    try:
        chains = resolve(edges)
    except ChainResolutionError as exc:
        logger.warning("chain_resolution_failed", error=type(exc).__name__, legs=len(edges))
        return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    try:
        content = encode_chains(chains)
    except Exception:
        logger.exception("response_encoding_failed", chains=len(chains))
        return PlainTextResponse(
            "Internal Server Error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    logger.info("calculate_succeeded", legs=len(edges), chains=len(chains))
    return Response(content=content, media_type="application/json")


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Liveness probe",
)
async def health() -> HealthResponse:
    """Report that the service is up."""
    return HealthResponse(version=__version__)
