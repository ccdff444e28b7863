"""Collision relaxation around radial anchors.

Cards have label-driven sizes, so the pure radial placement leaves some
bounding boxes overlapping.  Relaxation pushes overlapping pairs apart along
their axis of least overlap, springs nodes back toward their anchors, and
clamps each node into a radial shell around its anchor distance so branches
keep their direction and depth ordering.  The root never moves.
"""

from __future__ import annotations

__all__ = ["relax_collisions"]

import logging
import math
from collections.abc import Mapping, Sequence

from mind_layout.layout.config import LayoutConfig
from mind_layout.layout.constants import FALLBACK_TYPE
from mind_layout.layout.hierarchy import Hierarchy
from mind_layout.parser.model import Dims, Point

logger = logging.getLogger(__name__)


def relax_collisions(
    anchors: Mapping[str, Point],
    dims: Mapping[str, Dims],
    hierarchy: Hierarchy,
    node_types: Mapping[str, str],
    config: LayoutConfig,
    order: Sequence[str] | None = None,
) -> dict[str, Point]:
    """Resolve overlaps between visual boxes and return the new centers.

    ``anchors`` are the scaled radial centers; ``order`` fixes the pair
    sweep order (defaults to the anchors' order).
    """
    ids = list(order) if order is not None else list(anchors)
    root = hierarchy.root
    pos = {nid: [p.x, p.y] for nid, p in anchors.items()}

    passes = 0
    for _ in range(config.collision_iters):
        passes += 1
        moved = _separate_pairs(ids, pos, dims, root, config)
        for nid in ids:
            if nid == root:
                continue
            current = pos[nid]
            anchor = anchors[nid]
            current[0] += (anchor.x - current[0]) * config.spring_back
            current[1] += (anchor.y - current[1]) * config.spring_back
            _clamp_to_shell(nid, pos, anchors, dims, hierarchy, node_types, config, 0.0)
        if moved < config.move_epsilon:
            break

    # Finishing pass: no spring-back, slightly looser shells
    for _ in range(config.finish_iters):
        passes += 1
        moved = _separate_pairs(ids, pos, dims, root, config)
        for nid in ids:
            if nid == root:
                continue
            _clamp_to_shell(
                nid, pos, anchors, dims, hierarchy, node_types, config,
                config.finish_extra_drift,
            )
        if moved < config.move_epsilon:
            break

    logger.debug("Collision relaxation finished after %d passes", passes)
    return {nid: Point(p[0], p[1]) for nid, p in pos.items()}


def _separate_pairs(
    ids: Sequence[str],
    pos: dict[str, list[float]],
    dims: Mapping[str, Dims],
    root: str,
    config: LayoutConfig,
) -> float:
    """One pairwise sweep; returns the total overlap resolved."""
    moved = 0.0
    for i in range(len(ids)):
        id_a = ids[i]
        a = pos[id_a]
        da = dims[id_a]
        for j in range(i + 1, len(ids)):
            id_b = ids[j]
            b = pos[id_b]
            db = dims[id_b]

            dx = b[0] - a[0]
            dy = b[1] - a[1]
            overlap_x = (da.w + db.w) / 2 + config.collision_pad_x - abs(dx)
            overlap_y = (da.h + db.h) / 2 + config.collision_pad_y - abs(dy)
            if overlap_x <= 0 or overlap_y <= 0:
                continue

            if overlap_x < overlap_y:
                axis, overlap = 0, overlap_x
                direction = math.copysign(1.0, dx) if dx else (1.0 if i % 2 == 0 else -1.0)
            else:
                axis, overlap = 1, overlap_y
                direction = math.copysign(1.0, dy) if dy else (1.0 if j % 2 == 0 else -1.0)

            push = overlap / 2 + config.push_epsilon
            if id_a != root:
                a[axis] -= direction * push
            if id_b != root:
                b[axis] += direction * push
            moved += overlap
    return moved


def _clamp_to_shell(
    nid: str,
    pos: dict[str, list[float]],
    anchors: Mapping[str, Point],
    dims: Mapping[str, Dims],
    hierarchy: Hierarchy,
    node_types: Mapping[str, str],
    config: LayoutConfig,
    extra_drift: float,
) -> None:
    """Rescale a node along its ray from the root into its anchor shell."""
    origin = anchors[hierarchy.root]
    current = pos[nid]
    anchor = anchors[nid]

    anchor_dx = anchor.x - origin.x
    anchor_dy = anchor.y - origin.y
    current_dx = current[0] - origin.x
    current_dy = current[1] - origin.y
    anchor_radius = math.hypot(anchor_dx, anchor_dy)
    current_radius = math.hypot(current_dx, current_dy)

    # Children stay strictly outward of their parent
    branch_floor = 0.0
    parent_id = hierarchy.parent.get(nid)
    if parent_id is not None:
        parent = pos[parent_id]
        parent_radius = math.hypot(parent[0] - origin.x, parent[1] - origin.y)
        branch_floor = parent_radius + config.outward_gap(node_types.get(nid, FALLBACK_TYPE))

    # Deep cards stay out of the root's inner core
    core_floor = 0.0
    depth = hierarchy.depth.get(nid, 1)
    if depth >= 2:
        d = dims[nid]
        angle = math.atan2(
            current_dy if abs(current_dy) > 0.001 else anchor_dy,
            current_dx if abs(current_dx) > 0.001 else anchor_dx,
        )
        radial_half_extent = abs(math.cos(angle)) * d.w / 2 + abs(math.sin(angle)) * d.h / 2
        core_floor = (
            config.inner_core_radius
            + (depth - 2) * config.inner_core_depth_step
            + radial_half_extent
        )

    min_radius = max(0.0, anchor_radius - config.min_radial_drift, branch_floor, core_floor)
    max_radius = max(
        anchor_radius + config.max_radial_drift + extra_drift,
        min_radius + config.min_shell_width,
    )

    if current_radius <= 0:
        return
    if current_radius > max_radius:
        scale = max_radius / current_radius
    elif current_radius < min_radius:
        scale = min_radius / current_radius
    else:
        return
    current[0] = origin.x + current_dx * scale
    current[1] = origin.y + current_dy * scale
