"""Health check."""

from __future__ import annotations

from fastapi import APIRouter

from listing_canvas import __version__
from listing_canvas.engine.registry import get_registry
from listing_canvas.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        templates_registered=get_registry().count,
    )
