"""Listing status enum and the shared, read-only label/colour tables."""

from __future__ import annotations

import enum
from types import MappingProxyType


class ListingStatus(str, enum.Enum):
    FOR_SALE = "for_sale"
    JUST_LISTED = "just_listed"
    UNDER_CONTRACT = "under_contract"
    JUST_SOLD = "just_sold"
    FOR_LEASE = "for_lease"
    OPEN_HOUSE = "open_house"
    PRICE_IMPROVEMENT = "price_improvement"
    COMING_SOON = "coming_soon"

    @classmethod
    def parse(cls, value: str | ListingStatus) -> ListingStatus:
        """Accept ``for_sale``, ``for-sale`` and ``For Sale`` spellings."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("-", "_").replace(" ", "_")
        return cls(key)

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]

    @property
    def color(self) -> str:
        return STATUS_COLORS[self]


STATUS_LABELS: MappingProxyType[ListingStatus, str] = MappingProxyType({
    ListingStatus.FOR_SALE: "For Sale",
    ListingStatus.JUST_LISTED: "Just Listed",
    ListingStatus.UNDER_CONTRACT: "Under Contract",
    ListingStatus.JUST_SOLD: "Just Sold",
    ListingStatus.FOR_LEASE: "For Lease",
    ListingStatus.OPEN_HOUSE: "Open House",
    ListingStatus.PRICE_IMPROVEMENT: "Price Improvement",
    ListingStatus.COMING_SOON: "Coming Soon",
})

# Badge colours for templates that tint the badge by status
STATUS_COLORS: MappingProxyType[ListingStatus, str] = MappingProxyType({
    ListingStatus.FOR_SALE: "#f97316",
    ListingStatus.JUST_LISTED: "#f97316",
    ListingStatus.UNDER_CONTRACT: "#3b82f6",
    ListingStatus.JUST_SOLD: "#ef4444",
    ListingStatus.FOR_LEASE: "#06b6d4",
    ListingStatus.OPEN_HOUSE: "#f97316",
    ListingStatus.PRICE_IMPROVEMENT: "#8b5cf6",
    ListingStatus.COMING_SOON: "#14b8a6",
})


def status_from_mls(mls_status: str | None) -> ListingStatus:
    """Map a free-text MLS status onto the closest listing status."""
    if not mls_status:
        return ListingStatus.JUST_LISTED
    status = mls_status.lower()
    if "contract" in status or "pending" in status:
        return ListingStatus.UNDER_CONTRACT
    if "sold" in status or "closed" in status:
        return ListingStatus.JUST_SOLD
    if "lease" in status:
        return ListingStatus.FOR_LEASE
    if "coming" in status:
        return ListingStatus.COMING_SOON
    return ListingStatus.JUST_LISTED
