"""Tests for API endpoints (embedded photos only, no network)."""

from __future__ import annotations

import io

from fastapi.testclient import TestClient
from PIL import Image

from listing_canvas.main import app
from tests.conftest import AGENT_PHOTO, BLUE_PHOTO, GREEN_PHOTO, RED_PHOTO

client = TestClient(app)


def _descriptor(**overrides) -> dict:
    body = {
        "format": "social-portrait",
        "status": "just-listed",
        "price": "450000",
        "bedrooms": "3",
        "bathrooms": "2",
        "squareFeet": "1800",
        "address": "42 Elm Ave, Portland, OR 97201",
        "description": "Bright bungalow close to parks. Updated kitchen.",
        "photoRefs": [RED_PHOTO],
        "agent": {"name": "Jane Doe", "phone": "5551234567", "photoRef": AGENT_PHOTO},
    }
    body.update(overrides)
    return body


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["templates_registered"] == 4


def test_templates():
    response = client.get("/api/templates")
    assert response.status_code == 200
    by_id = {t["id"]: t for t in response.json()}
    assert by_id["print-letter"]["capacity"] == 3
    assert by_id["social-square"]["width"] == 1080


def test_statuses():
    response = client.get("/api/statuses")
    labels = {s["value"]: s["label"] for s in response.json()}
    assert labels["under_contract"] == "Under Contract"
    assert len(labels) == 8


def test_preview_returns_png():
    response = client.post("/api/render/preview", json={"descriptor": _descriptor()})
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.headers["x-asset-width"] == "1080"
    with Image.open(io.BytesIO(response.content)) as img:
        assert img.size == (1080, 1920)


def test_download_matches_preview():
    body = {"descriptor": _descriptor(format="social-landscape")}
    preview = client.post("/api/render/preview", json=body)
    download = client.post("/api/render/download", json=body)
    assert download.status_code == 200
    assert download.content == preview.content
    assert download.headers["content-disposition"] == (
        'attachment; filename="social-landscape-just-listed.png"'
    )
    assert download.headers["x-asset-status"] == "Just Listed"


def test_render_with_uploaded_photos():
    body = {
        "descriptor": _descriptor(format="print-letter", photoRefs=[RED_PHOTO]),
        "manual_photos": [],
        "uploaded_photos": [BLUE_PHOTO, GREEN_PHOTO],
    }
    response = client.post("/api/render/preview", json=body)
    assert response.status_code == 200
    assert response.headers["x-asset-height"] == "3300"


def test_render_with_only_uploaded_photos():
    body = {
        "descriptor": _descriptor(photoRefs=[]),
        "uploaded_photos": [BLUE_PHOTO],
    }
    response = client.post("/api/render/preview", json=body)
    assert response.status_code == 200
    assert response.headers["x-asset-width"] == "1080"


def test_no_photos():
    response = client.post("/api/render/preview", json={"descriptor": _descriptor(photoRefs=[])})
    assert response.status_code == 422
    assert response.json()["code"] == "photos_required"


def test_unknown_format():
    response = client.post("/api/render/preview", json={"descriptor": _descriptor(format="billboard")})
    assert response.status_code == 404
    assert response.json()["code"] == "unknown_template"


def test_print_without_agent():
    response = client.post(
        "/api/render/download",
        json={"descriptor": _descriptor(format="print-letter", agent=None)},
    )
    assert response.status_code == 422
    assert response.json()["code"] == "invalid_descriptor"


def test_headline_too_long():
    response = client.post(
        "/api/render/preview",
        json={"descriptor": _descriptor(headline="x" * 40)},
    )
    assert response.status_code == 422


def test_assign_photos():
    response = client.post(
        "/api/photos/assign",
        json={"format": "print-letter", "manual": ["a", "b"], "uploads": ["c", "d"]},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["capacity"] == 3
    assert data["slots"] == ["a", "b", "c"]


def test_auto_select_photos():
    response = client.post(
        "/api/photos/auto-select",
        json={
            "format": "print-letter",
            "suggestions": [
                {"url": "https://cdn/IMG-X1_2.jpg", "classification": "Bedroom", "quality_score": 90},
                {"url": "https://cdn/IMG-X1_1.jpg", "classification": "Exterior", "quality_score": 80},
            ],
            "local_photos": ["https://local/IMG-X1_1.jpg", "https://local/IMG-X1_2.jpg"],
            "rank_locally": True,
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["slots"] == ["https://local/IMG-X1_1.jpg", "https://local/IMG-X1_2.jpg", None]
    assert data["reasons"]["https://cdn/IMG-X1_1.jpg"].startswith("Hero")


def test_proxy_rejects_plain_http():
    response = client.get("/api/proxy-image", params={"url": "http://example.com/a.jpg"})
    assert response.status_code == 400
    assert response.json()["code"] == "invalid_url"
