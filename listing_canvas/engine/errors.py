"""Render error taxonomy.

Only MissingRequiredPhoto and UnknownTemplate abort a render. ResourceLoadFailure
is absorbed by the loader and degrades to a placeholder.
"""

from __future__ import annotations


class RenderError(Exception):
    """Base class for all engine errors."""

    code = "render_failed"


class MissingRequiredPhoto(RenderError):
    code = "photos_required"

    def __init__(self, message: str = "At least one photo is required") -> None:
        super().__init__(message)


class UnknownTemplate(RenderError, LookupError):
    code = "unknown_template"

    def __init__(self, format_id: str) -> None:
        super().__init__(f"No template registered for format '{format_id}'")
        self.format_id = format_id


class ResourceLoadFailure(RenderError):
    code = "resource_load_failed"

    def __init__(self, ref: str, reason: str) -> None:
        super().__init__(f"{short_ref(ref)}: {reason}")
        self.ref = ref
        self.reason = reason


class DescriptorValidationError(RenderError, ValueError):
    code = "invalid_descriptor"


def short_ref(ref: str, limit: int = 80) -> str:
    """Keep log lines readable when the ref is an inline data URI."""
    return ref if len(ref) <= limit else ref[: limit - 3] + "..."
