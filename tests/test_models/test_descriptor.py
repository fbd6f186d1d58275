"""Tests for the asset descriptor and the status table."""

import pytest
from pydantic import ValidationError

from listing_canvas.models.descriptor import HEADLINE_MAX_CHARS, AssetDescriptor, OpenHouse
from listing_canvas.models.status import STATUS_LABELS, ListingStatus, status_from_mls
from tests.conftest import make_descriptor


def test_camel_case_payload():
    d = AssetDescriptor.model_validate({
        "format": "Social-Square",
        "status": "for-sale",
        "price": "$1,200,000",
        "squareFeet": "3100",
        "photoRefs": ["https://cdn.example.com/a.jpg", "  "],
        "agent": {"name": "Sam", "phone": "555", "photoRef": "https://cdn.example.com/s.jpg"},
    })
    assert d.format == "social-square"
    assert d.status is ListingStatus.FOR_SALE
    assert d.square_feet == "3100"
    assert d.photo_refs == ("https://cdn.example.com/a.jpg",)
    assert d.agent.photo_ref == "https://cdn.example.com/s.jpg"


def test_price_required():
    with pytest.raises(ValidationError):
        make_descriptor(price="   ")


def test_headline_limit_is_rejected_not_truncated():
    ok = make_descriptor(headline="x" * HEADLINE_MAX_CHARS)
    assert len(ok.headline) == 39
    with pytest.raises(ValidationError):
        make_descriptor(headline="x" * (HEADLINE_MAX_CHARS + 1))


def test_unknown_status_rejected():
    with pytest.raises(ValidationError):
        make_descriptor(status="foreclosed")


def test_descriptor_is_frozen(descriptor):
    with pytest.raises(ValidationError):
        descriptor.price = "1"


def test_address_lines(descriptor):
    assert descriptor.street_line == "123 Main St"
    assert descriptor.locality_line == "Springfield, IL 62704"


def test_address_without_comma():
    d = make_descriptor(address="123 Main St")
    assert d.street_line == "123 Main St"
    assert d.locality_line == ""


def test_status_table_is_read_only():
    with pytest.raises(TypeError):
        STATUS_LABELS[ListingStatus.FOR_SALE] = "Sale"  # type: ignore[index]
    assert ListingStatus.UNDER_CONTRACT.label == "Under Contract"


@pytest.mark.parametrize("mls, expected", [
    ("Pending", ListingStatus.UNDER_CONTRACT),
    ("Active Under Contract", ListingStatus.UNDER_CONTRACT),
    ("Closed", ListingStatus.JUST_SOLD),
    ("For Lease", ListingStatus.FOR_LEASE),
    ("Coming Soon", ListingStatus.COMING_SOON),
    ("Active", ListingStatus.JUST_LISTED),
    (None, ListingStatus.JUST_LISTED),
])
def test_status_from_mls(mls, expected):
    assert status_from_mls(mls) is expected


def test_open_house_schedule():
    assert not OpenHouse(hours="1-3PM").is_scheduled
    oh = OpenHouse(day="Saturday", date="6/14", hours="1-3pm")
    assert oh.is_scheduled
    assert oh.display_text() == "SATURDAY 6/14  1-3PM"
