"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from listing_canvas.models.descriptor import AssetDescriptor


class RenderRequest(BaseModel):
    descriptor: AssetDescriptor = Field(..., description="Listing content and chosen format")
    manual_photos: list[str] = Field(
        default_factory=list,
        description="Photos picked from the listing, in selection order (overrides descriptor.photoRefs)",
    )
    uploaded_photos: list[str] = Field(
        default_factory=list,
        description="User uploads, in upload order; fill slots after manual picks",
    )


class AssignPhotosRequest(BaseModel):
    format: str = Field(..., description="Template id; decides slot capacity")
    manual: list[str] = Field(default_factory=list)
    uploads: list[str] = Field(default_factory=list)


class SuggestionIn(BaseModel):
    url: str
    classification: str = ""
    quality_score: float = 50


class AutoSelectRequest(BaseModel):
    format: str = Field(..., description="Template id; decides slot capacity")
    suggestions: list[SuggestionIn] = Field(
        default_factory=list,
        description="Ranked photos from the analysis service (best first)",
    )
    local_photos: list[str] = Field(
        default_factory=list,
        description="Locally available photo URLs for the listing",
    )
    rank_locally: bool = Field(
        default=False,
        description="Re-rank suggestions by room type and quality before matching",
    )
