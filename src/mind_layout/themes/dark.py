"""Dark canvas theme (the default)."""

from mind_layout.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#1e1f24",
    card_fill="#2a2c33",
    card_stroke_width=1.5,
    label_color="#e6e6e6",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=13.0,
    title_color="#ffffff",
    title_font_size=22.0,
    hierarchy_edge_color="rgba(255, 255, 255, 0.35)",
    blocks_edge_color="#e5484d",
    edge_width=1.5,
    type_accents={
        "root": "#7c8cff",
        "domain": "#4fb3ff",
        "goal": "#f5a524",
        "feature": "#45c486",
        "task": "#9aa0a6",
    },
)
