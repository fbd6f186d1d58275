"""AssetDescriptor — the immutable input of one render request."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from listing_canvas.models.status import ListingStatus

# Headline fields are rejected, never display-truncated, past this length
HEADLINE_MAX_CHARS = 39

_FROZEN = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class AgentInfo(BaseModel):
    model_config = _FROZEN

    name: str = ""
    title: str = ""
    phone: str = ""
    photo_ref: str | None = None


class OpenHouse(BaseModel):
    model_config = _FROZEN

    day: str = ""
    date: str = ""
    hours: str = ""

    @property
    def is_scheduled(self) -> bool:
        return bool(self.day.strip() or self.date.strip())

    def display_text(self) -> str:
        when = " ".join(p.strip() for p in (self.day, self.date) if p.strip())
        if self.hours.strip():
            when = f"{when}  {self.hours.strip()}" if when else self.hours.strip()
        return when.upper()


class AssetDescriptor(BaseModel):
    """Everything the engine needs to render one marketing graphic."""

    model_config = _FROZEN

    format: str = Field(..., description="Template id, e.g. 'social-portrait'")
    status: ListingStatus = ListingStatus.JUST_LISTED
    price: str
    bedrooms: str = ""
    bathrooms: str = ""
    square_feet: str = ""
    address: str = ""
    description: str = ""
    headline: str = ""
    photo_refs: tuple[str, ...] = ()
    agent: AgentInfo | None = None
    open_house: OpenHouse | None = None
    logo_ref: str | None = None
    secondary_logo_ref: str | None = None

    @field_validator("format")
    @classmethod
    def _normalize_format(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, v: object) -> ListingStatus:
        return ListingStatus.parse(v)  # type: ignore[arg-type]

    @field_validator("price")
    @classmethod
    def _require_price(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Price is required")
        return v

    @field_validator("headline")
    @classmethod
    def _limit_headline(cls, v: str) -> str:
        v = v.strip()
        if len(v) > HEADLINE_MAX_CHARS:
            raise ValueError(f"Headline exceeds {HEADLINE_MAX_CHARS} characters")
        return v

    @field_validator("photo_refs", mode="before")
    @classmethod
    def _drop_blank_refs(cls, v: object) -> object:
        if isinstance(v, (list, tuple)):
            return tuple(r.strip() for r in v if isinstance(r, str) and r.strip())
        return v

    @property
    def street_line(self) -> str:
        """Address text before the first comma."""
        return self.address.split(",")[0].strip()

    @property
    def locality_line(self) -> str:
        """City/state/zip: everything after the first comma."""
        parts = self.address.split(",")
        return ", ".join(p.strip() for p in parts[1:] if p.strip())

    @property
    def status_label(self) -> str:
        return self.status.label
