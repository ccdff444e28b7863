"""SVG preview of a laid-out mind map using drawsvg.

The preview draws every card as a rounded rectangle of its layout size,
which makes overlaps and crowding easy to spot.  It is a debugging view, not
a reproduction of the canvas.
"""

from __future__ import annotations

import drawsvg as draw

from mind_layout.layout.dims import node_dims
from mind_layout.layout.geometry import center_of
from mind_layout.parser.model import Dims, MindGraph, Node
from mind_layout.render.constants import (
    BLOCKS_DASH,
    CANVAS_PADDING,
    LABEL_CHAR_WIDTH_RATIO,
    LABEL_INSET,
    TITLE_HEIGHT,
)
from mind_layout.render.style import Theme


def render_svg(
    graph: MindGraph,
    theme: Theme,
    width: int | None = None,
    height: int | None = None,
    padding: float = CANVAS_PADDING,
) -> str:
    """Render a mind map graph to an SVG string."""
    if not graph.nodes:
        return '<svg xmlns="http://www.w3.org/2000/svg"></svg>'

    dims = {nid: node_dims(n) for nid, n in graph.nodes.items()}

    min_x = min(n.x for n in graph.nodes.values())
    min_y = min(n.y for n in graph.nodes.values())
    max_x = max(n.x + dims[nid].w for nid, n in graph.nodes.items())
    max_y = max(n.y + dims[nid].h for nid, n in graph.nodes.items())

    title_space = TITLE_HEIGHT if graph.name else 0.0
    offset_x = padding - min_x
    offset_y = padding + title_space - min_y

    svg_width = width or int(max_x - min_x + padding * 2)
    svg_height = height or int(max_y - min_y + padding * 2 + title_space)

    d = draw.Drawing(svg_width, svg_height)
    d.append(draw.Rectangle(0, 0, svg_width, svg_height, fill=theme.background_color))

    if graph.name:
        d.append(draw.Text(
            graph.name,
            theme.title_font_size,
            padding, padding * 0.5 + theme.title_font_size / 2,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
        ))

    group = draw.Group(transform=f"translate({offset_x:.2f},{offset_y:.2f})")
    _render_edges(group, graph, dims, theme)
    for nid, node in graph.nodes.items():
        _render_card(group, node, dims[nid], theme)
    d.append(group)

    return d.as_svg()


def _render_edges(
    group: draw.Group,
    graph: MindGraph,
    dims: dict[str, Dims],
    theme: Theme,
) -> None:
    """Draw edges center to center, behind the cards."""
    for edge in graph.edges:
        source = graph.nodes.get(edge.source)
        target = graph.nodes.get(edge.target)
        if source is None or target is None:
            continue

        start = center_of(source.position, dims[source.id])
        end = center_of(target.position, dims[target.id])
        if edge.is_hierarchy:
            group.append(draw.Line(
                start.x, start.y, end.x, end.y,
                stroke=theme.hierarchy_edge_color,
                stroke_width=theme.edge_width,
            ))
        else:
            group.append(draw.Line(
                start.x, start.y, end.x, end.y,
                stroke=theme.blocks_edge_color,
                stroke_width=theme.edge_width,
                stroke_dasharray=BLOCKS_DASH,
            ))


def _render_card(group: draw.Group, node: Node, dims: Dims, theme: Theme) -> None:
    group.append(draw.Rectangle(
        node.x, node.y, dims.w, dims.h,
        rx=theme.corner_radius, ry=theme.corner_radius,
        fill=theme.card_fill,
        stroke=theme.accent(node.type),
        stroke_width=theme.card_stroke_width,
    ))

    label = _fit_label(node.label or node.id, dims.w, theme.label_font_size)
    group.append(draw.Text(
        label,
        theme.label_font_size,
        node.x + dims.w / 2, node.y + dims.h / 2,
        fill=theme.label_color,
        font_family=theme.label_font_family,
        font_weight="bold" if node.type == "root" else "normal",
        text_anchor="middle",
        dominant_baseline="central",
    ))


def _fit_label(text: str, width: float, font_size: float) -> str:
    """Truncate text with an ellipsis so it fits on one line of the card."""
    max_chars = max(4, int((width - 2 * LABEL_INSET) / (font_size * LABEL_CHAR_WIDTH_RATIO)))
    if len(text) <= max_chars:
        return text
    return text[: max_chars - 1] + "…"
