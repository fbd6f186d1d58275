"""social-square — 1080x1080 feed post, full-bleed hero under a white brand banner."""

from listing_canvas.engine.registry import Gradient, Rect, Region, TemplateSpec, register_template

W, H = 1080, 1080

SOCIAL_SQUARE = register_template(TemplateSpec(
    id="social-square",
    name="Social Post (Square)",
    width=W,
    height=H,
    background="#000000",
    photo_slots=(Rect(0, 0, W, H),),
    hero_gradient=Gradient(height=300, color="#000000", alpha_top=0.0, alpha_bottom=0.85),
    description_chars=0,
    regions={
        "banner": Region(x=0, y=0, w=W, h=90, fill="#ffffffeb"),
        "logo": Region(x=25, y=20, h=50),
        "secondary_logo": Region(x=W - 25, y=20, h=50, align="right"),
        "badge": Region(x=60, y=H - 300, w=300, h=48, fill="status"),
        "status_label": Region(
            x=210, y=H - 276, size=24, weight="bold", color="#ffffff",
            align="center", valign="middle",
        ),
        "price": Region(x=60, y=H - 180, size=48, weight="bold", color="#ffffff"),
        "street": Region(x=60, y=H - 130, w=820, size=36, weight="bold", color="#ffffff"),
        "locality": Region(x=60, y=H - 95, size=24, color="#dddddd"),
        "agent_photo": Region(x=W - 130, y=H - 130, w=70, color="#ffffff", stroke=2),
        "agent_name": Region(
            x=W - 150, y=H - 100, size=22, weight="bold", color="#ffffff", align="right",
        ),
        "agent_phone": Region(x=W - 150, y=H - 70, size=18, color="#dddddd", align="right"),
        "open_house": Region(
            x=0, y=110, w=520, h=56, fill="#f97316",
            size=26, weight="bold", color="#ffffff",
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
