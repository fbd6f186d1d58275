"""Shared test fixtures."""

from __future__ import annotations

import base64
import io

import pytest
from PIL import Image

from listing_canvas.models.descriptor import AssetDescriptor


def png_bytes(width: int, height: int, color: str = "#ff0000") -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (width, height), color).save(buf, format="PNG")
    return buf.getvalue()


def data_uri(width: int = 64, height: int = 48, color: str = "#ff0000") -> str:
    payload = base64.b64encode(png_bytes(width, height, color)).decode("ascii")
    return f"data:image/png;base64,{payload}"


RED_PHOTO = data_uri(400, 300, "#ff0000")
BLUE_PHOTO = data_uri(300, 400, "#0000ff")
GREEN_PHOTO = data_uri(200, 200, "#00ff00")
AGENT_PHOTO = data_uri(120, 160, "#888888")
BROKEN_PHOTO = "data:image/png;base64,bm90IGFuIGltYWdl"  # "not an image"

DESCRIPTION = (
    "Sun-filled colonial on a quiet cul-de-sac. Chef's kitchen with quartz "
    "counters opens to a vaulted family room. Fenced yard, two-car garage and "
    "a finished basement with room for a home office."
)


def make_descriptor(**overrides) -> AssetDescriptor:
    fields = {
        "format": "social-portrait",
        "status": "just_listed",
        "price": "450000",
        "bedrooms": "4",
        "bathrooms": "2.5",
        "square_feet": "2350",
        "address": "123 Main St, Springfield, IL 62704",
        "description": DESCRIPTION,
        "headline": "Your dream home awaits",
        "photo_refs": (RED_PHOTO,),
        "agent": {"name": "jane doe", "phone": "5551234567", "photo_ref": AGENT_PHOTO},
    }
    fields.update(overrides)
    return AssetDescriptor(**fields)


@pytest.fixture
def descriptor() -> AssetDescriptor:
    return make_descriptor()


@pytest.fixture
def print_descriptor() -> AssetDescriptor:
    return make_descriptor(
        format="print-letter",
        photo_refs=(RED_PHOTO, BLUE_PHOTO, GREEN_PHOTO),
    )
