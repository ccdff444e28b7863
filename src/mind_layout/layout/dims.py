"""Card size estimation from node type and label text.

Two sizes exist per node.  The *visual* size approximates what the canvas
draws and is what collisions are resolved against.  The *layout* size is
the visual width softened above a cap; the radial placer budgets arcs with
it so a single long title cannot inflate an entire ring.
"""

from __future__ import annotations

__all__ = ["estimate_dims", "layout_dims", "node_dims"]

import math

from mind_layout.layout.config import LayoutConfig
from mind_layout.layout.constants import UNTITLED_LABEL
from mind_layout.parser.model import Dims, Node

_DEFAULT_CONFIG = LayoutConfig()


def estimate_dims(
    node_type: str,
    label: str,
    config: LayoutConfig = _DEFAULT_CONFIG,
) -> Dims:
    """Estimate the drawn size of a card from its type and label."""
    text = label.strip() or UNTITLED_LABEL
    default_w, default_h = config.dims_for(node_type)

    if node_type in config.card_types:
        raw_width = max(config.card_min_text_width, len(text) * config.card_char_width)
        inner_width = min(
            config.card_inner_max_width,
            max(config.card_inner_min_width, raw_width),
        )
        lines = max(1, math.ceil(raw_width / inner_width))
        return Dims(
            min(config.card_max_width, max(default_w, inner_width + config.card_chrome_width)),
            min(config.card_max_height, default_h + (lines - 1) * config.card_line_height),
        )

    char_width = config.label_char_width.get(node_type, config.default_char_width)
    extra_chars = max(0, len(text) - config.label_free_chars)
    return Dims(
        min(default_w + extra_chars * char_width, config.max_label_width),
        default_h,
    )


def _usable(measured: float | None) -> bool:
    return measured is not None and math.isfinite(measured) and measured > 0


def node_dims(node: Node, config: LayoutConfig = _DEFAULT_CONFIG) -> Dims:
    """Return a node's visual size, preferring measured values per axis.

    A measurement that is not a positive finite number is ignored.
    """
    estimate = estimate_dims(node.type, node.label, config)
    return Dims(
        node.measured_w if _usable(node.measured_w) else estimate.w,
        node.measured_h if _usable(node.measured_h) else estimate.h,
    )


def layout_dims(dims: Dims, config: LayoutConfig = _DEFAULT_CONFIG) -> Dims:
    """Soften a visual size into the size the radial placer budgets for."""
    w = dims.w
    if w > config.soft_width_cap:
        w = config.soft_width_cap + (w - config.soft_width_cap) * config.soft_width_falloff
    return Dims(min(w, config.max_layout_width), dims.h)
