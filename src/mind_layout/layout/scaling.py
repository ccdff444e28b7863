"""Global compactness: pull an oversized tree uniformly toward its root."""

from __future__ import annotations

__all__ = ["max_root_distance", "scale_to_target", "target_max_radius"]

import logging
import math
from collections.abc import Mapping

from mind_layout.layout.config import LayoutConfig
from mind_layout.parser.model import Point

logger = logging.getLogger(__name__)


def target_max_radius(node_count: int, root_branches: int, config: LayoutConfig) -> float:
    """Largest center distance from the root a tree of this size may span."""
    budget = (
        config.target_radius_base
        + math.sqrt(node_count) * config.target_radius_per_sqrt_node
        + max(0, root_branches - config.free_root_branches)
        * config.target_radius_per_extra_root_branch
    )
    return budget * config.spacing


def max_root_distance(centers: Mapping[str, Point], root: str) -> float:
    origin = centers[root]
    return max(
        (math.hypot(p.x - origin.x, p.y - origin.y) for nid, p in centers.items() if nid != root),
        default=0.0,
    )


def scale_to_target(
    centers: Mapping[str, Point],
    root: str,
    target: float,
) -> dict[str, Point]:
    """Return centers scaled toward the root so none lies beyond ``target``.

    Centers already within the budget are returned as they are.
    """
    current = max_root_distance(centers, root)
    if current <= target or current <= 0:
        return dict(centers)

    scale = target / current
    logger.debug("Scaling layout by %.3f (span %.1f > budget %.1f)", scale, current, target)
    origin = centers[root]
    return {
        nid: p if nid == root else Point(
            origin.x + (p.x - origin.x) * scale,
            origin.y + (p.y - origin.y) * scale,
        )
        for nid, p in centers.items()
    }
