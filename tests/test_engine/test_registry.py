"""Tests for the template and draw-step registries."""

import pytest

from listing_canvas.engine.errors import UnknownTemplate
from listing_canvas.engine.registry import (
    Rect,
    Region,
    StepRegistry,
    StepSpec,
    TemplateRegistry,
    TemplateSpec,
    get_registry,
    get_step_registry,
)


def _spec(id: str = "test-format") -> TemplateSpec:
    return TemplateSpec(
        id=id,
        name="Test",
        width=100,
        height=50,
        background="#000000",
        photo_slots=(Rect(0, 0, 100, 50),),
        regions={"price": Region(x=5, y=40)},
        draw_order=("background",),
    )


def test_builtin_templates():
    registry = get_registry()
    dims = {t.id: (t.width, t.height, t.capacity) for t in registry.all()}
    assert dims == {
        "print-letter": (2550, 3300, 3),
        "social-landscape": (1200, 630, 1),
        "social-portrait": (1080, 1920, 1),
        "social-square": (1080, 1080, 1),
    }


def test_print_letter_rules():
    spec = get_registry().resolve("print-letter")
    assert spec.requires_agent
    assert spec.description_chars == 115
    assert spec.headline_max_chars == 39
    assert spec.status_label_suffix == " AT"
    assert spec.regions["badge"].w == 420
    assert spec.regions["badge"].h == 140


def test_resolve_unknown_format():
    with pytest.raises(UnknownTemplate) as exc_info:
        get_registry().resolve("billboard")
    assert exc_info.value.format_id == "billboard"
    assert isinstance(exc_info.value, LookupError)


def test_duplicate_template_rejected():
    registry = TemplateRegistry()
    registry.register(_spec())
    with pytest.raises(ValueError, match="Duplicate"):
        registry.register(_spec())


def test_template_regions_are_read_only():
    spec = _spec()
    with pytest.raises(TypeError):
        spec.regions["price"] = Region()  # type: ignore[index]


def test_template_requires_photo_slot():
    with pytest.raises(ValueError):
        TemplateSpec(
            id="empty", name="Empty", width=1, height=1, background="#000",
            photo_slots=(), regions={}, draw_order=(),
        )


def test_every_draw_order_step_is_registered():
    steps = {s.name for s in get_step_registry().all()}
    for template in get_registry().all():
        assert set(template.draw_order) <= steps, template.id


def test_step_registry_duplicate():
    registry = StepRegistry()
    registry.register(StepSpec(name="noop", fn=lambda ctx: None))
    with pytest.raises(ValueError):
        registry.register(StepSpec(name="noop", fn=lambda ctx: None))
    assert registry.count == 1
