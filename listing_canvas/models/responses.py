"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    templates_registered: int = 0


class TemplateInfo(BaseModel):
    id: str
    name: str
    width: int
    height: int
    capacity: int
    requires_agent: bool = False


class StatusInfo(BaseModel):
    value: str
    label: str
    color: str


class SlotAssignmentResponse(BaseModel):
    format: str
    capacity: int
    slots: list[str | None] = Field(default_factory=list)
    reasons: dict[str, str] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    code: str
    message: str
    retry: bool = False
