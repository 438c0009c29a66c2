"""
Health check endpoint.

Liveness probe only; the service keeps no database or cache to check.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from deckevaluator import __version__

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running.
    Does not call Scryfall or the deck-hosting services.
    """
    return HealthResponse(status="healthy", version=__version__)
