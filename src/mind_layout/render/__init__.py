"""Preview renderers: SVG via drawsvg and a terminal tree view."""

from mind_layout.render.svg import render_svg
from mind_layout.render.tree import render_tree

__all__ = ["render_svg", "render_tree"]
