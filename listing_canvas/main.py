"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from listing_canvas import __version__
from listing_canvas.config import settings
from listing_canvas.engine.errors import (
    DescriptorValidationError,
    MissingRequiredPhoto,
    RenderError,
    UnknownTemplate,
)
from listing_canvas.models.responses import ErrorResponse

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.listing_canvas_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)

# Everything else is a transient render failure the client may retry
_HTTP_STATUS = (
    (MissingRequiredPhoto, 422),
    (DescriptorValidationError, 422),
    (UnknownTemplate, 404),
)


def error_status(exc: RenderError) -> int:
    for cls, status in _HTTP_STATUS:
        if isinstance(exc, cls):
            return status
    return 503


async def render_error_handler(request: Request, exc: RenderError) -> JSONResponse:
    status = error_status(exc)
    if status >= 500:
        logger.error("Render failed for %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status,
        content=ErrorResponse(code=exc.code, message=str(exc), retry=status >= 500).model_dump(),
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Listing Canvas",
        description="Listing marketing-graphic composition engine — templates, photo slots, text layout, PNG output",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition", "X-Asset-Format", "X-Asset-Status"],
    )

    app.add_exception_handler(RenderError, render_error_handler)

    # Import template and draw-step modules so their registrations fire
    from listing_canvas.engine.registry import load_builtins

    load_builtins()

    from listing_canvas.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
