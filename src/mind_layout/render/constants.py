"""Render constants used across render modules.

Theme-dependent values remain in style.py.
"""

CANVAS_PADDING: float = 60.0
"""Default padding around the entire SVG canvas."""

TITLE_HEIGHT: float = 40.0
"""Vertical space reserved above the content for the project title."""

LABEL_INSET: float = 10.0
"""Horizontal inset of card labels from the card edge."""

LABEL_CHAR_WIDTH_RATIO: float = 0.55
"""Approximate character width as a fraction of the font size."""

BLOCKS_DASH: str = "6,4"
"""Dash pattern of dependency edges."""
