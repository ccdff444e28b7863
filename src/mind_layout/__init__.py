"""mind-layout: radial tree layout for mind map projects."""

__version__ = "0.1.0"

from mind_layout.ids import CounterIds, uuid_ids  # noqa: E402
from mind_layout.layout import (  # noqa: E402
    ChildPlacement,
    LayoutConfig,
    compute_layout,
    place_child,
)
from mind_layout.parser import MindGraph, dump_project, parse_project  # noqa: E402

__all__ = [
    "ChildPlacement",
    "CounterIds",
    "LayoutConfig",
    "MindGraph",
    "__version__",
    "compute_layout",
    "dump_project",
    "parse_project",
    "place_child",
    "uuid_ids",
]
