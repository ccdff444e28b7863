"""Light theme."""

from mind_layout.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="none",
    card_fill="#ffffff",
    card_stroke_width=1.5,
    label_color="#222222",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=13.0,
    title_color="#111111",
    title_font_size=22.0,
    hierarchy_edge_color="rgba(0, 0, 0, 0.3)",
    blocks_edge_color="#d93036",
    edge_width=1.5,
    type_accents={
        "root": "#4b5bdc",
        "domain": "#1c7ed6",
        "goal": "#d9822b",
        "feature": "#2f9e44",
        "task": "#868e96",
    },
)
