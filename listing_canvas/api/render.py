"""POST /api/render/preview, POST /api/render/download — one render path, two wrappers."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from listing_canvas.dependencies import get_coordinator
from listing_canvas.engine.coordinator import RenderCoordinator, RenderedAsset
from listing_canvas.engine.slots import assign_slots
from listing_canvas.models.requests import RenderRequest

router = APIRouter(prefix="/render")
logger = logging.getLogger(__name__)


async def _render(request: RenderRequest, coordinator: RenderCoordinator) -> RenderedAsset:
    descriptor = request.descriptor
    slots = None
    if request.manual_photos or request.uploaded_photos:
        template = coordinator.validate(descriptor)
        slots = assign_slots(request.manual_photos, request.uploaded_photos, template.capacity)
    return await coordinator.render(descriptor, slots=slots)


def _meta_headers(asset: RenderedAsset) -> dict[str, str]:
    headers = {
        "X-Asset-Format": asset.format,
        "X-Asset-Status": asset.status_label,
        "X-Asset-Width": str(asset.width),
        "X-Asset-Height": str(asset.height),
    }
    if asset.warnings:
        headers["X-Asset-Warnings"] = str(len(asset.warnings))
    return headers


@router.post("/preview")
async def preview(
    request: RenderRequest,
    coordinator: RenderCoordinator = Depends(get_coordinator),
) -> Response:
    asset = await _render(request, coordinator)
    return Response(content=asset.data, media_type=asset.content_type, headers=_meta_headers(asset))


@router.post("/download")
async def download(
    request: RenderRequest,
    coordinator: RenderCoordinator = Depends(get_coordinator),
) -> Response:
    asset = await _render(request, coordinator)
    headers = _meta_headers(asset)
    headers["Content-Disposition"] = f'attachment; filename="{asset.filename}"'
    logger.info("Download %s (%d bytes)", asset.filename, len(asset.data))
    return Response(content=asset.data, media_type=asset.content_type, headers=headers)
