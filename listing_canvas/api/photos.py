"""POST /api/photos/assign, POST /api/photos/auto-select — slot planning without rendering."""

from __future__ import annotations

from fastapi import APIRouter

from listing_canvas.engine.registry import get_registry
from listing_canvas.engine.slots import PhotoSelection, PhotoSuggestion, assign_slots, rank_photos
from listing_canvas.models.requests import AssignPhotosRequest, AutoSelectRequest
from listing_canvas.models.responses import SlotAssignmentResponse

router = APIRouter(prefix="/photos")


@router.post("/assign", response_model=SlotAssignmentResponse)
async def assign(request: AssignPhotosRequest) -> SlotAssignmentResponse:
    template = get_registry().resolve(request.format)
    assignment = assign_slots(request.manual, request.uploads, template.capacity)
    return SlotAssignmentResponse(
        format=template.id,
        capacity=assignment.capacity,
        slots=list(assignment.slots),
    )


@router.post("/auto-select", response_model=SlotAssignmentResponse)
async def auto_select(request: AutoSelectRequest) -> SlotAssignmentResponse:
    template = get_registry().resolve(request.format)
    suggestions = [
        PhotoSuggestion(url=s.url, classification=s.classification, quality_score=s.quality_score)
        for s in request.suggestions
    ]

    reasons: dict[str, str] = {}
    if request.rank_locally:
        ranked = rank_photos(suggestions)
        by_url = {s.url: s for s in suggestions}
        suggestions = [by_url[r.url] for r in ranked]
        reasons = {r.url: r.reason for r in ranked}

    selection = PhotoSelection(capacity=template.capacity)
    selection.apply_auto_select(suggestions, request.local_photos)
    assignment = selection.assignment()
    return SlotAssignmentResponse(
        format=template.id,
        capacity=assignment.capacity,
        slots=list(assignment.slots),
        reasons=reasons,
    )
