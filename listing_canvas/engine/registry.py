"""Template + draw-step registries.

Every template is a frozen TemplateSpec registered from its own module;
every draw step is a plain function registered via decorator:

    @draw_step("stat_row", description="Beds / baths / area with glyphs")
    def stat_row(ctx: RenderContext) -> None:
        ...

Adding a format = creating one module under ``engine/templates``. Nothing
else branches on the format id.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable

from listing_canvas.engine.errors import RenderError, UnknownTemplate
from listing_canvas.engine.text_layout import TruncationMode
from listing_canvas.utils.formatting import AddressStyle

if TYPE_CHECKING:
    from listing_canvas.engine.context import RenderContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    w: int
    h: int

    @property
    def box(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.x + self.w, self.y + self.h)


@dataclass(frozen=True)
class Region:
    """A named area of the template.

    Text regions: ``(x, y)`` is the anchor point; ``x`` is the left edge, centre
    or right edge depending on ``align`` and ``y`` is the baseline (or the
    vertical centre when ``valign="middle"``). Box regions use ``x, y, w, h``
    as a rectangle. When ``flow_after`` names another region, ``y`` is an
    offset from where that region finished drawing.
    """

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0
    size: int = 24
    weight: str = "regular"
    color: str = "#ffffff"  # "status" = the listing status colour
    align: str = "left"
    valign: str = "baseline"
    fill: str | None = None
    stroke: int = 0
    line_height: int = 0
    max_lines: int | None = None
    flow_after: str | None = None
    direction: str = "row"
    icon: int = 0
    text: str = ""

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.w, self.h)


@dataclass(frozen=True)
class Gradient:
    """Vertical fade laid over the bottom ``height`` pixels of the hero slot."""

    height: int
    color: str
    alpha_top: float = 0.0
    alpha_bottom: float = 1.0


@dataclass(frozen=True)
class TemplateSpec:
    id: str
    name: str
    width: int
    height: int
    background: str
    photo_slots: tuple[Rect, ...]
    regions: Mapping[str, Region]
    draw_order: tuple[str, ...]
    address_style: AddressStyle = AddressStyle.PLAIN
    description_chars: int = 200
    truncation: TruncationMode = TruncationMode.WORD_BOUNDARY
    headline_max_chars: int = 39
    requires_agent: bool = False
    hero_gradient: Gradient | None = None
    status_label_suffix: str = ""

    def __post_init__(self) -> None:
        if not self.photo_slots:
            raise ValueError(f"Template {self.id} declares no photo slots")
        if not isinstance(self.regions, MappingProxyType):
            object.__setattr__(self, "regions", MappingProxyType(dict(self.regions)))

    @property
    def capacity(self) -> int:
        return len(self.photo_slots)

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)


class TemplateRegistry:
    """Registry of all output formats."""

    def __init__(self) -> None:
        self._templates: dict[str, TemplateSpec] = {}

    def register(self, spec: TemplateSpec) -> None:
        if spec.id in self._templates:
            raise ValueError(f"Duplicate template ID: {spec.id}")
        self._templates[spec.id] = spec
        logger.debug("Registered template %s (%dx%d)", spec.id, spec.width, spec.height)

    def resolve(self, format_id: str) -> TemplateSpec:
        spec = self._templates.get((format_id or "").strip().lower())
        if spec is None:
            raise UnknownTemplate(format_id)
        return spec

    def all(self) -> list[TemplateSpec]:
        return sorted(self._templates.values(), key=lambda s: s.id)

    @property
    def count(self) -> int:
        return len(self._templates)


@dataclass
class StepSpec:
    name: str
    fn: Callable[["RenderContext"], None]
    description: str = ""
    tags: set[str] = field(default_factory=set)


class StepRegistry:
    """Registry of draw steps, looked up by name from a template's draw order."""

    def __init__(self) -> None:
        self._steps: dict[str, StepSpec] = {}

    def register(self, spec: StepSpec) -> None:
        if spec.name in self._steps:
            raise ValueError(f"Duplicate draw step: {spec.name}")
        self._steps[spec.name] = spec
        logger.debug("Registered draw step %s", spec.name)

    def get(self, name: str) -> StepSpec:
        try:
            return self._steps[name]
        except KeyError:
            raise RenderError(f"Unknown draw step '{name}'") from None

    def all(self) -> list[StepSpec]:
        return sorted(self._steps.values(), key=lambda s: s.name)

    @property
    def count(self) -> int:
        return len(self._steps)


# Module-level singletons
_templates = TemplateRegistry()
_steps = StepRegistry()
_builtins_loaded = False


def _import_package(package_name: str) -> None:
    package = importlib.import_module(package_name)
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package_name}.{module_name}")


def load_builtins() -> None:
    """Import template and step modules so their registrations fire."""
    global _builtins_loaded
    if _builtins_loaded:
        return
    _builtins_loaded = True
    _import_package("listing_canvas.engine.steps")
    _import_package("listing_canvas.engine.templates")


def get_registry() -> TemplateRegistry:
    load_builtins()
    return _templates


def get_step_registry() -> StepRegistry:
    load_builtins()
    return _steps


def register_template(spec: TemplateSpec) -> TemplateSpec:
    _templates.register(spec)
    return spec


def draw_step(name: str, *, description: str = "", tags: set[str] | None = None):
    """Decorator to register a draw step function."""

    def decorator(fn: Callable[["RenderContext"], None]):
        _steps.register(StepSpec(name=name, fn=fn, description=description, tags=tags or set()))
        return fn

    return decorator
