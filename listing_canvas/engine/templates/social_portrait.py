"""social-portrait — 1080x1920 story format, dark background, hero on top."""

from listing_canvas.engine.registry import Gradient, Rect, Region, TemplateSpec, register_template
from listing_canvas.engine.text_layout import TruncationMode

W, H = 1080, 1920
BG = "#1a1a2e"

SOCIAL_PORTRAIT = register_template(TemplateSpec(
    id="social-portrait",
    name="Social Story (Portrait)",
    width=W,
    height=H,
    background=BG,
    photo_slots=(Rect(0, 0, W, 900),),
    hero_gradient=Gradient(height=200, color=BG, alpha_top=0.0, alpha_bottom=1.0),
    description_chars=200,
    truncation=TruncationMode.WORD_BOUNDARY,
    regions={
        "status_label": Region(x=60, y=980, size=48, weight="bold", color="#d97706"),
        "price": Region(x=60, y=1040, size=36, weight="bold", color="#ffffff"),
        "street": Region(x=60, y=1100, w=960, size=32, color="#ffffff"),
        "locality": Region(x=60, y=45, size=32, color="#cccccc", flow_after="street"),
        "stats": Region(x=60, y=55, size=28, color="#a0a0a0", icon=28, flow_after="locality"),
        "description": Region(
            x=60, y=70, w=960, size=24, color="#cccccc",
            line_height=34, max_lines=6, flow_after="stats",
        ),
        "agent_photo": Region(x=60, y=H - 240, w=100, color="#ffffff", stroke=3),
        "agent_name": Region(x=60, y=H - 120, size=28, weight="bold", color="#ffffff"),
        "agent_phone": Region(x=60, y=H - 80, size=24, color="#cccccc"),
        "logo": Region(x=W - 60, y=H - 140, h=80, align="right"),
        "open_house": Region(
            x=0, y=60, w=600, h=72, fill="#d97706",
            size=32, weight="bold", color="#ffffff",
        ),
    },
    draw_order=(
        "background",
        "photo_grid",
        "badge",
        "address",
        "stat_row",
        "copy",
        "agent",
        "header",
        "open_house",
    ),
))
