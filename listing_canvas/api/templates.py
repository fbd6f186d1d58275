"""GET /api/templates, GET /api/statuses — read-only catalogue endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from listing_canvas.engine.registry import get_registry
from listing_canvas.models.responses import StatusInfo, TemplateInfo
from listing_canvas.models.status import STATUS_COLORS, STATUS_LABELS

router = APIRouter()


@router.get("/templates", response_model=list[TemplateInfo])
async def list_templates() -> list[TemplateInfo]:
    return [
        TemplateInfo(
            id=t.id,
            name=t.name,
            width=t.width,
            height=t.height,
            capacity=t.capacity,
            requires_agent=t.requires_agent,
        )
        for t in get_registry().all()
    ]


@router.get("/statuses", response_model=list[StatusInfo])
async def list_statuses() -> list[StatusInfo]:
    return [
        StatusInfo(value=status.value, label=label, color=STATUS_COLORS[status])
        for status, label in STATUS_LABELS.items()
    ]
