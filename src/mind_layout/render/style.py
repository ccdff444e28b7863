"""Theme and style constants for layout previews."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Theme:
    """Visual theme for a mind map preview."""

    name: str
    background_color: str
    card_fill: str
    card_stroke_width: float
    label_color: str
    label_font_family: str
    label_font_size: float
    title_color: str
    title_font_size: float
    hierarchy_edge_color: str
    blocks_edge_color: str
    edge_width: float
    # Accent stroke per node type; unknown types use fallback_accent
    type_accents: dict[str, str] = field(default_factory=dict)
    fallback_accent: str = "#888888"
    corner_radius: float = 10.0

    def accent(self, node_type: str) -> str:
        return self.type_accents.get(node_type, self.fallback_accent)
