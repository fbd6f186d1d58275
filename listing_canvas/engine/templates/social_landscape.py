"""social-landscape — 1200x630 link-preview format with header and info bars."""

from listing_canvas.engine.registry import Rect, Region, TemplateSpec, register_template

W, H = 1200, 630

SOCIAL_LANDSCAPE = register_template(TemplateSpec(
    id="social-landscape",
    name="Social Share (Landscape)",
    width=W,
    height=H,
    background="#1a1a1a",
    photo_slots=(Rect(0, 70, W, 460),),
    description_chars=0,
    regions={
        "header_bar": Region(x=0, y=0, w=W, h=70, fill="#2a2a2a"),
        "logo": Region(x=30, y=10, h=50),
        "info_bar": Region(x=0, y=H - 100, w=W, h=100, fill="#000000e6"),
        "status_label": Region(x=30, y=H - 62, size=24, weight="bold", color="status"),
        "price": Region(x=30, y=H - 24, size=28, weight="bold", color="#ffffff"),
        "street": Region(x=320, y=H - 62, w=520, size=18, weight="bold", color="#ffffff"),
        "locality": Region(x=320, y=H - 32, size=16, color="#cccccc"),
        "agent_photo": Region(x=W - 100, y=H - 85, w=70, color="#ffffff", stroke=2),
        "agent_name": Region(
            x=W - 115, y=H - 56, size=20, weight="bold", color="#ffffff", align="right",
        ),
        "agent_phone": Region(x=W - 115, y=H - 28, size=16, color="#cccccc", align="right"),
        "open_house": Region(
            x=0, y=85, w=420, h=44, fill="#f97316",
            size=20, weight="bold", color="#ffffff",
        ),
    },
    draw_order=(
        "background",
        "photo_grid",
        "header",
        "badge",
        "address",
        "agent",
        "open_house",
    ),
))
