"""Photo Slot Manager — maps selections and uploads onto a template's photo slots.

Slot 0 is always the hero. Manual selections come first (in selection order),
uploads after them (in upload order). Nothing ever exceeds the capacity.
"""

from __future__ import annotations

import enum
import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

_IMAGE_ID = re.compile(r"IMG-[A-Z0-9]+_\d+\.[a-z]+", re.IGNORECASE)

DEFAULT_QUALITY = 50

# Keyword groups in hero preference order; earlier groups win
_HERO_PRIORITY: tuple[tuple[str, ...], ...] = (
    ("exterior", "front", "aerial", "drone"),
    ("kitchen", "breakfast"),
    ("living", "family", "bedroom", "master", "dining", "great room"),
)


@dataclass(frozen=True)
class PhotoSlotAssignment:
    slots: tuple[str | None, ...]
    capacity: int

    @property
    def hero(self) -> str | None:
        return self.slots[0] if self.slots else None

    @property
    def filled(self) -> tuple[str, ...]:
        return tuple(s for s in self.slots if s is not None)

    @property
    def is_empty(self) -> bool:
        return self.hero is None


def assign_slots(
    manual: Sequence[str],
    uploads: Sequence[str],
    capacity: int,
) -> PhotoSlotAssignment:
    """Manual selections then uploads, truncated to capacity, padded with None."""
    capacity = max(int(capacity), 0)
    chosen = [*manual, *uploads][:capacity]
    padded = tuple(chosen) + (None,) * (capacity - len(chosen))
    return PhotoSlotAssignment(slots=padded, capacity=capacity)


class SelectionOutcome(str, enum.Enum):
    ADDED = "added"
    REMOVED = "removed"
    REJECTED = "rejected"


@dataclass(frozen=True)
class UploadOutcome:
    accepted: tuple[str, ...]
    replaced: bool = False


@dataclass(frozen=True)
class PhotoSuggestion:
    """One ranked photo from the remote photo-analysis service."""

    url: str
    classification: str = ""
    quality_score: float = DEFAULT_QUALITY


@dataclass(frozen=True)
class RankedPhoto:
    url: str
    reason: str
    quality_score: float


@dataclass
class PhotoSelection:
    """Interactive selection state for one editing session."""

    capacity: int
    manual: list[str] = field(default_factory=list)
    uploads: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.manual) + len(self.uploads)

    @property
    def is_full(self) -> bool:
        return self.total >= self.capacity

    def toggle(self, ref: str) -> SelectionOutcome:
        """Select or deselect a listing photo. Never evicts to make room."""
        if ref in self.manual:
            self.manual.remove(ref)
            return SelectionOutcome.REMOVED
        if self.is_full:
            logger.debug("Selection full (%d); rejecting %s", self.capacity, ref)
            return SelectionOutcome.REJECTED
        self.manual.append(ref)
        return SelectionOutcome.ADDED

    def add_uploads(self, refs: Iterable[str]) -> UploadOutcome:
        """Add uploaded photos.

        When every slot is already taken the previous selection is discarded
        and the new uploads start over from slot 0. Otherwise only free slots
        are filled and the remainder is dropped.
        """
        refs = list(refs)
        if self.is_full:
            self.manual.clear()
            self.uploads = refs[: self.capacity]
            return UploadOutcome(accepted=tuple(self.uploads), replaced=True)

        free = self.capacity - self.total
        accepted = refs[:free]
        self.uploads.extend(accepted)
        return UploadOutcome(accepted=tuple(accepted))

    def apply_auto_select(
        self,
        suggestions: Sequence[PhotoSuggestion],
        local_photos: Sequence[str],
    ) -> list[str]:
        """Replace everything with the auto-selected photos."""
        picked = auto_select(suggestions, local_photos, self.capacity)
        self.manual = list(picked)
        self.uploads = []
        return picked

    def assignment(self) -> PhotoSlotAssignment:
        return assign_slots(self.manual, self.uploads, self.capacity)


def extract_image_id(url: str) -> str:
    """Stable photo identity shared by MLS CDN and local copies of a photo."""
    match = _IMAGE_ID.search(url)
    return match.group(0).lower() if match else url.lower()


def auto_select(
    suggestions: Sequence[PhotoSuggestion],
    local_photos: Sequence[str],
    capacity: int,
) -> list[str]:
    """Local URLs for the ranked suggestions, in ranked order, capped at capacity.

    Suggestions without a local counterpart are dropped.
    """
    by_id: dict[str, str] = {}
    for local in local_photos:
        by_id.setdefault(extract_image_id(local), local)

    picked: list[str] = []
    for suggestion in suggestions:
        local = by_id.get(extract_image_id(suggestion.url))
        if local is None:
            logger.debug("No local photo for suggestion %s", suggestion.url)
            continue
        if local in picked:
            continue
        picked.append(local)
        if len(picked) >= capacity:
            break
    return picked


def _priority(classification: str) -> int:
    text = classification.lower()
    for rank, keywords in enumerate(_HERO_PRIORITY):
        if any(k in text for k in keywords):
            return rank
    return len(_HERO_PRIORITY)


def rank_photos(photos: Sequence[PhotoSuggestion]) -> list[RankedPhoto]:
    """Order photos for marketing use when no remote ranking is available.

    Room type decides first (exterior, then kitchen, then main living spaces),
    quality score breaks ties.
    """
    ordered = sorted(
        photos,
        key=lambda p: (_priority(p.classification), -float(p.quality_score)),
    )
    ranked: list[RankedPhoto] = []
    for index, photo in enumerate(ordered):
        label = photo.classification or "photo"
        if index == 0:
            reason = f"Hero: {label} (quality {photo.quality_score:g})"
        elif _priority(photo.classification) < len(_HERO_PRIORITY):
            reason = f"Key room: {label}"
        else:
            reason = f"Supporting: {label}"
        ranked.append(RankedPhoto(url=photo.url, reason=reason, quality_score=photo.quality_score))
    return ranked
