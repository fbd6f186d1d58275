"""print-letter — 2550x3300 (8.5x11in at 300dpi) flyer.

Logo panel and gold price badge on top, token-spaced street address bar,
hero plus two secondary tiles, then stats / copy / agent columns and a gold
footer.
"""

from listing_canvas.engine.registry import Rect, Region, TemplateSpec, register_template
from listing_canvas.engine.text_layout import TruncationMode
from listing_canvas.utils.formatting import AddressStyle

W, H = 2550, 3300
GOLD = "#c4a962"

MARGIN = 60
INFO_Y = 2130
BADGE = Rect(W - 500, 55, 420, 140)
AGENT_X = 2290  # agent column centre

PRINT_LETTER = register_template(TemplateSpec(
    id="print-letter",
    name="Print Flyer (Letter)",
    width=W,
    height=H,
    background="#ffffff",
    photo_slots=(
        Rect(MARGIN, 380, W - 2 * MARGIN, 1100),
        Rect(MARGIN, 1500, 1205, 550),
        Rect(MARGIN + 1205 + 20, 1500, 1205, 550),
    ),
    address_style=AddressStyle.TOKEN_SPACED,
    description_chars=115,
    truncation=TruncationMode.SENTENCE,
    requires_agent=True,
    status_label_suffix=" AT",
    regions={
        "logo_panel": Region(x=MARGIN, y=50, w=420, h=150, fill="#1a1a1a"),
        "logo": Region(x=80, y=65, h=120),
        "tagline": Region(x=1275, y=110, size=40, color="#666666", align="center", text="Leading"),
        "tagline_sub": Region(
            x=1275, y=160, size=24, color="#666666", align="center",
            text="REAL ESTATE COMPANIES OF THE WORLD",
        ),
        "badge": Region(x=BADGE.x, y=BADGE.y, w=BADGE.w, h=BADGE.h, fill=GOLD),
        "status_label": Region(
            x=BADGE.x + BADGE.w // 2, y=BADGE.y + 50, size=22, color="#ffffff", align="center",
        ),
        "price": Region(
            x=BADGE.x + BADGE.w // 2, y=BADGE.y + 110, size=52, weight="bold",
            color="#ffffff", align="center",
        ),
        "address_bar": Region(x=0, y=250, w=W, h=100, fill="#f5f5f5"),
        "street": Region(x=W // 2, y=315, w=W - 2 * MARGIN, size=40, color="#333333", align="center"),
        "stats": Region(
            x=100, y=INFO_Y + 60, size=38, weight="semibold", color="#333333",
            direction="column", line_height=60, icon=36,
        ),
        "headline": Region(
            x=1275, y=INFO_Y + 50, w=1100, size=34, weight="bold",
            color="#1a1a1a", align="center", line_height=44, max_lines=1,
        ),
        "description": Region(
            x=1275, y=60, w=900, size=30, color="#444444", align="center",
            line_height=45, max_lines=4, flow_after="headline",
        ),
        "agent_photo": Region(x=AGENT_X - 100, y=INFO_Y + 20, w=200, color=GOLD, stroke=4),
        "agent_name": Region(
            x=AGENT_X, y=INFO_Y + 290, size=44, weight="bold", color="#1a1a1a", align="center",
        ),
        "agent_title": Region(x=AGENT_X, y=INFO_Y + 330, size=26, color="#666666", align="center"),
        "agent_phone": Region(x=AGENT_X, y=INFO_Y + 375, size=30, color="#333333", align="center"),
        "agent_logo": Region(x=AGENT_X, y=INFO_Y + 410, h=50, align="center"),
        "open_house": Region(
            x=MARGIN, y=420, w=900, h=90, fill=GOLD,
            size=40, weight="bold", color="#ffffff",
        ),
        "footer": Region(x=0, y=H - 40, w=W, h=40, fill=GOLD),
    },
    draw_order=(
        "background",
        "header",
        "badge",
        "address",
        "photo_grid",
        "stat_row",
        "copy",
        "agent",
        "open_house",
        "footer",
    ),
))
