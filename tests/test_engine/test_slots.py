"""Tests for photo slot assignment, interactive selection and auto-select."""

from listing_canvas.engine.slots import (
    PhotoSelection,
    PhotoSuggestion,
    SelectionOutcome,
    assign_slots,
    auto_select,
    extract_image_id,
    rank_photos,
)

LOCAL = [
    "https://storage.example.com/listings/42/IMG-ABC123_1.jpg",
    "https://storage.example.com/listings/42/IMG-ABC123_4.jpg",
    "https://storage.example.com/listings/42/IMG-ABC123_7.jpg",
]


def test_assign_manual_then_uploads():
    assignment = assign_slots(["m1", "m2"], ["u1"], 3)
    assert assignment.slots == ("m1", "m2", "u1")
    assert assignment.hero == "m1"


def test_assign_truncates_to_capacity():
    assignment = assign_slots(["m1", "m2"], ["u1", "u2"], 1)
    assert assignment.slots == ("m1",)
    assert len(assignment.slots) <= assignment.capacity


def test_assign_pads_with_none():
    assignment = assign_slots(["m1"], [], 3)
    assert assignment.slots == ("m1", None, None)
    assert assignment.filled == ("m1",)


def test_assign_empty():
    assignment = assign_slots([], [], 3)
    assert assignment.is_empty


def test_toggle_adds_and_removes():
    selection = PhotoSelection(capacity=3)
    assert selection.toggle("a") is SelectionOutcome.ADDED
    assert selection.toggle("a") is SelectionOutcome.REMOVED
    assert selection.manual == []


def test_toggle_rejects_when_full_without_evicting():
    selection = PhotoSelection(capacity=3)
    for ref in ("a", "b", "c"):
        selection.toggle(ref)
    assert selection.toggle("d") is SelectionOutcome.REJECTED
    assert selection.manual == ["a", "b", "c"]


def test_upload_when_full_replaces_everything():
    selection = PhotoSelection(capacity=3)
    for ref in ("a", "b", "c"):
        selection.toggle(ref)

    outcome = selection.add_uploads(["u1"])

    assert outcome.replaced
    assert selection.manual == []
    assert selection.assignment().slots == ("u1", None, None)


def test_upload_fills_only_free_slots():
    selection = PhotoSelection(capacity=3)
    selection.toggle("a")

    outcome = selection.add_uploads(["u1", "u2", "u3"])

    assert not outcome.replaced
    assert outcome.accepted == ("u1", "u2")
    assert selection.assignment().slots == ("a", "u1", "u2")


def test_capacity_one_uses_first_photo_only():
    selection = PhotoSelection(capacity=1)
    selection.toggle("a")
    assert selection.toggle("b") is SelectionOutcome.REJECTED
    assert selection.assignment().slots == ("a",)


def test_extract_image_id_token():
    url = "https://cdn.mls.example.com/photos/IMG-ABC123_4.jpg?w=800"
    assert extract_image_id(url) == "img-abc123_4.jpg"


def test_extract_image_id_falls_back_to_url():
    assert extract_image_id("https://Example.com/Photo.JPG") == "https://example.com/photo.jpg"


def test_auto_select_maps_remote_to_local():
    suggestions = [PhotoSuggestion(url="https://cdn.mls.example.com/p/IMG-ABC123_4.jpg")]
    assert auto_select(suggestions, LOCAL, 3) == [LOCAL[1]]


def test_auto_select_keeps_rank_order_and_caps():
    suggestions = [
        PhotoSuggestion(url="https://cdn/IMG-ABC123_7.jpg"),
        PhotoSuggestion(url="https://cdn/IMG-ZZZ999_1.jpg"),  # no local copy
        PhotoSuggestion(url="https://cdn/IMG-ABC123_1.jpg"),
        PhotoSuggestion(url="https://cdn/IMG-ABC123_7.jpg"),  # duplicate
        PhotoSuggestion(url="https://cdn/IMG-ABC123_4.jpg"),
    ]
    assert auto_select(suggestions, LOCAL, 2) == [LOCAL[2], LOCAL[0]]


def test_apply_auto_select_replaces_selection():
    selection = PhotoSelection(capacity=3)
    selection.toggle("manual")
    selection.add_uploads(["upload"])

    picked = selection.apply_auto_select(
        [PhotoSuggestion(url="https://cdn/IMG-ABC123_4.jpg")], LOCAL,
    )

    assert picked == [LOCAL[1]]
    assert selection.uploads == []
    assert selection.assignment().slots == (LOCAL[1], None, None)


def test_rank_photos_prefers_exterior_then_quality():
    photos = [
        PhotoSuggestion(url="bed", classification="Bedroom", quality_score=90),
        PhotoSuggestion(url="kitchen", classification="Kitchen", quality_score=70),
        PhotoSuggestion(url="front", classification="Exterior Front", quality_score=60),
        PhotoSuggestion(url="garage", classification="Garage", quality_score=99),
        PhotoSuggestion(url="living", classification="Living Room", quality_score=95),
    ]
    ranked = rank_photos(photos)
    assert [r.url for r in ranked] == ["front", "kitchen", "living", "bed", "garage"]
    assert ranked[0].reason.startswith("Hero")
