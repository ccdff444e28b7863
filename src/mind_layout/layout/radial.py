"""Radial placement: concentric rings of children around each parent.

Each parent places its children on a ring whose radius is large enough for
their padded widths to fit along the parent's angular slice, but bounded so
one dense branch cannot push its ring arbitrarily far out.  The slice is then
shared between the children by a blend of even, demand-weighted and
width-weighted splits, with every child guaranteed a floor wide enough for
its own card.
"""

from __future__ import annotations

__all__ = ["RingAllocation", "allocate_ring", "enforce_sweep_floors", "place_radial"]

import logging
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from mind_layout.layout.config import LayoutConfig
from mind_layout.layout.constants import FALLBACK_TYPE
from mind_layout.layout.geometry import TAU
from mind_layout.layout.hierarchy import Hierarchy
from mind_layout.parser.model import Dims, Point

logger = logging.getLogger(__name__)


@dataclass
class RingAllocation:
    """Ring radius and per-child angular slices for one parent."""

    ring_radius: float
    gap_angle: float
    usable_sweep: float
    sweeps: list[float]


def enforce_sweep_floors(
    desired: Sequence[float],
    floors: Sequence[float],
    total: float,
) -> list[float]:
    """Raise every sweep to its floor and renormalize to ``total``.

    Shortfalls are paid for by the children above their floor, in
    proportion to their surplus.  If the floors alone exceed ``total``
    they are scaled down together.
    """
    if not desired:
        return []

    total_floor = sum(floors)
    if total_floor >= total:
        if total_floor <= 0:
            return [total / len(desired)] * len(desired)
        return [f / total_floor * total for f in floors]

    sweeps = list(desired)
    deficit = 0.0
    for i, floor in enumerate(floors):
        if sweeps[i] < floor:
            deficit += floor - sweeps[i]
            sweeps[i] = floor

    if deficit > 0:
        spare = [max(0.0, s - f) for s, f in zip(sweeps, floors)]
        donor_total = sum(spare)
        if donor_total > 0:
            sweeps = [s - sp / donor_total * deficit for s, sp in zip(sweeps, spare)]

    normalized = sum(sweeps)
    if normalized <= 0:
        return [total / len(sweeps)] * len(sweeps)
    return [s / normalized * total for s in sweeps]


def allocate_ring(
    child_ids: Sequence[str],
    child_type: str,
    parent_dims: Dims,
    parent_ring_radius: float,
    sweep: float,
    dims: Mapping[str, Dims],
    demand: Mapping[str, float],
    config: LayoutConfig,
) -> RingAllocation:
    """Choose the ring radius and angular slices for a parent's children."""
    n = len(child_ids)
    base_gap = config.ring_gap(child_type)

    # Radius at which the padded widths fit along the arc
    total_arc = sum(dims[cid].w + config.node_pad for cid in child_ids)
    min_radius = total_arc / max(sweep * config.arc_slack, config.min_arc_sweep)

    branch_demand = [demand.get(cid, 1.0) for cid in child_ids]
    total_demand = sum(branch_demand)
    avg_demand = total_demand / max(1, n)
    sample_w = dims[child_ids[0]].w if child_ids else parent_dims.w
    demand_scale = avg_demand / max(1.0, sample_w)
    demand_boost = min(
        base_gap * config.demand_boost_cap,
        math.log2(1 + demand_scale) * config.demand_boost_scale,
    )
    max_radius = (
        parent_ring_radius
        + base_gap * config.max_ring_gap_factor
        + demand_boost
        + n * config.per_child_radius
    )
    ring_radius = min(max(parent_ring_radius + base_gap, min_radius), max_radius)

    gap_angle = min(config.sibling_gap_angle, config.sibling_gap_arc / max(1.0, ring_radius))
    total_gap = gap_angle * max(0, n - 1)
    usable = max(sweep - total_gap, sweep * config.min_usable_sweep)

    min_angles = []
    for cid in child_ids:
        ratio = min((dims[cid].w + config.node_pad) / (2 * max(ring_radius, 1e-9)), 1.0)
        min_angles.append(2 * math.asin(ratio))
    total_min_angle = sum(min_angles)

    desired = []
    for i in range(n):
        even = 1 / n
        by_demand = branch_demand[i] / total_demand if total_demand > 0 else even
        by_width = min_angles[i] / total_min_angle if total_min_angle > 0 else even
        weight = (
            config.even_weight * even
            + config.demand_weight * by_demand
            + config.width_weight * by_width
        )
        desired.append(weight * usable)

    floors = [a * config.sweep_floor_factor for a in min_angles]
    sweeps = enforce_sweep_floors(desired, floors, usable)
    return RingAllocation(ring_radius, gap_angle, usable, sweeps)


def place_radial(
    hierarchy: Hierarchy,
    node_types: Mapping[str, str],
    dims: Mapping[str, Dims],
    demand: Mapping[str, float],
    config: LayoutConfig,
) -> dict[str, Point]:
    """Return the center of every node, with the root at the origin.

    ``dims`` are layout dims.  Parents are processed before children with
    an explicit stack of (node, center, parent ring radius, start, sweep).
    """
    centers: dict[str, Point] = {}
    stack = [(hierarchy.root, 0.0, 0.0, 0.0, config.root_start_angle, TAU)]

    while stack:
        node_id, cx, cy, parent_radius, start, sweep = stack.pop()
        centers[node_id] = Point(cx, cy)

        kids = hierarchy.kids(node_id)
        if not kids:
            continue

        child_type = node_types.get(kids[0], FALLBACK_TYPE)
        ring = allocate_ring(
            kids, child_type, dims[node_id], parent_radius, sweep, dims, demand, config
        )
        logger.debug(
            "Ring of %s: %d children at r=%.1f", node_id, len(kids), ring.ring_radius
        )

        frames = []
        cursor = start
        for kid, kid_sweep in zip(kids, ring.sweeps):
            angle = cursor + kid_sweep / 2
            frames.append((
                kid,
                cx + ring.ring_radius * math.cos(angle),
                cy + ring.ring_radius * math.sin(angle),
                ring.ring_radius,
                cursor,
                kid_sweep,
            ))
            cursor += kid_sweep + ring.gap_angle
        stack.extend(reversed(frames))

    return centers
