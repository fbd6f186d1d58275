"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from listing_canvas.api import health, photos, proxy, render, templates

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(templates.router)
api_router.include_router(render.router)
api_router.include_router(photos.router)
api_router.include_router(proxy.router)
