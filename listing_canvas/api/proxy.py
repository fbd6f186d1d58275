"""GET /api/proxy-image — same-origin pass-through for remote listing photos."""

from __future__ import annotations

import logging
from urllib.parse import urlparse

import httpx
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, Response

from listing_canvas.config import Settings
from listing_canvas.dependencies import get_settings
from listing_canvas.models.responses import ErrorResponse

router = APIRouter()
logger = logging.getLogger(__name__)


def _error(status: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content=ErrorResponse(code=code, message=message).model_dump())


@router.get("/proxy-image")
async def proxy_image(
    url: str = Query(..., description="Remote HTTPS image URL"),
    settings: Settings = Depends(get_settings),
) -> Response:
    if url.startswith("//"):
        url = "https:" + url
    if urlparse(url).scheme != "https":
        return _error(400, "invalid_url", "Only HTTPS image URLs can be proxied")

    try:
        async with httpx.AsyncClient(follow_redirects=True, timeout=settings.resource_timeout_s) as client:
            upstream = await client.get(url)
    except httpx.HTTPError as e:
        logger.warning("Proxy fetch failed for %s: %s", url, e)
        return _error(502, "upstream_failed", str(e))

    if upstream.status_code >= 400:
        return _error(502, "upstream_failed", f"Upstream returned {upstream.status_code}")

    content_type = upstream.headers.get("content-type", "").split(";")[0].strip()
    if not content_type.startswith("image/"):
        return _error(415, "not_an_image", f"Upstream content type '{content_type}' is not an image")
    if len(upstream.content) > settings.max_image_bytes:
        return _error(413, "too_large", "Image exceeds the size limit")

    return Response(
        content=upstream.content,
        media_type=content_type,
        headers={"Cache-Control": "public, max-age=86400"},
    )
