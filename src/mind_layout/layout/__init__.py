"""Radial layout engine: full relayout and incremental child placement."""

from mind_layout.layout.config import LayoutConfig
from mind_layout.layout.engine import LayoutStages, compute_layout, compute_layout_stages
from mind_layout.layout.incremental import ChildPlacement, place_child

__all__ = [
    "ChildPlacement",
    "LayoutConfig",
    "LayoutStages",
    "compute_layout",
    "compute_layout_stages",
    "place_child",
]
