"""Incremental placement of one new child next to a laid-out parent.

Rather than relaying out the whole tree, candidate positions on a small
grid of angles and distances around the parent are scored against the
existing cards, and the best one is taken.  The rest of the tree is never
moved.
"""

from __future__ import annotations

__all__ = ["ChildPlacement", "place_child", "preferred_angle"]

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass

from mind_layout.ids import IdFactory
from mind_layout.layout.config import LayoutConfig
from mind_layout.layout.constants import CHILD_TYPE, FALLBACK_TYPE
from mind_layout.layout.dims import estimate_dims, node_dims
from mind_layout.layout.geometry import (
    angle_distance,
    center_of,
    largest_gap_mid_angle,
    rect_clearance,
    top_left_of,
)
from mind_layout.layout.hierarchy import component_root
from mind_layout.parser.model import HIERARCHY, Edge, MindGraph, Node, Point

logger = logging.getLogger(__name__)

_MAX_ID_ATTEMPTS = 1000


@dataclass
class ChildPlacement:
    """A new child node, its hierarchy edge, and how it was placed.

    ``clear`` is False when no candidate kept the required clearance from
    every existing card; the host may prefer a full relayout then.
    """

    node: Node
    edge: Edge
    angle: float
    distance: float
    clear: bool

    def added_to(self, graph: MindGraph) -> MindGraph:
        """Return a copy of graph with the new node and edge appended."""
        nodes = dict(graph.nodes)
        nodes[self.node.id] = self.node
        return MindGraph(
            id=graph.id, name=graph.name, nodes=nodes, edges=[*graph.edges, self.edge]
        )


@dataclass
class _Candidate:
    score: float
    angle: float
    distance: float
    center: Point
    violations: int


def preferred_angle(
    parent_id: str,
    centers: Mapping[str, Point],
    parent_of: Mapping[str, str],
    children: Mapping[str, list[str]],
    config: LayoutConfig,
) -> float:
    """Direction in which a new child of parent_id should ideally go.

    Under the root: the middle of the widest gap between existing
    children.  Elsewhere: straight outward along root -> parent, or along
    grandparent -> parent when the parent sits on the root.
    """
    parent_center = centers[parent_id]
    root_id = component_root(parent_of, parent_id)

    if root_id == parent_id:
        kid_angles = [
            math.atan2(centers[k].y - parent_center.y, centers[k].x - parent_center.x)
            for k in children.get(parent_id, [])
        ]
        gap_mid = largest_gap_mid_angle(kid_angles)
        return config.root_start_angle if gap_mid is None else gap_mid

    for origin_id in (root_id, parent_of.get(parent_id)):
        if origin_id is None:
            continue
        origin = centers[origin_id]
        dx = parent_center.x - origin.x
        dy = parent_center.y - origin.y
        if math.hypot(dx, dy) >= 1:
            return math.atan2(dy, dx)
    return config.fallback_angle


def place_child(
    graph: MindGraph,
    parent_id: str,
    next_id: IdFactory,
    label: str = "",
    node_type: str | None = None,
    config: LayoutConfig | None = None,
) -> ChildPlacement | None:
    """Place a new child of parent_id without moving any existing node.

    Returns None when the parent does not exist.
    """
    config = config or LayoutConfig()
    parent = graph.nodes.get(parent_id)
    if parent is None:
        logger.warning("Cannot add child: unknown parent '%s'", parent_id)
        return None

    child_type = node_type or CHILD_TYPE.get(parent.type, FALLBACK_TYPE)
    child_dims = estimate_dims(child_type, label, config)

    dims = {nid: node_dims(n, config) for nid, n in graph.nodes.items()}
    centers = {nid: center_of(n.position, dims[nid]) for nid, n in graph.nodes.items()}

    parent_of: dict[str, str] = {}
    children: dict[str, list[str]] = {}
    for edge in graph.hierarchy_edges():
        parent_of[edge.target] = edge.source
        children.setdefault(edge.source, []).append(edge.target)

    preferred = preferred_angle(parent_id, centers, parent_of, children, config)
    base_distance = config.child_distance(parent.type)
    parent_center = centers[parent_id]
    sibling_angles = [
        math.atan2(centers[k].y - parent_center.y, centers[k].x - parent_center.x)
        for k in children.get(parent_id, [])
    ]

    def evaluate(offset: float, distance: float) -> _Candidate:
        angle = preferred + offset
        center = Point(
            parent_center.x + math.cos(angle) * distance,
            parent_center.y + math.sin(angle) * distance,
        )
        violations = 0
        min_clearance = config.clearance_reward_cap
        for nid, other in centers.items():
            clearance = rect_clearance(center, child_dims, other, dims[nid])
            if clearance < config.placement_clearance:
                violations += 1
            min_clearance = min(min_clearance, clearance)
        crowding = sum(
            max(0.0, config.sibling_spread - angle_distance(angle, s))
            for s in sibling_angles
        )
        score = (
            violations * config.violation_penalty
            - min_clearance * config.clearance_weight
            + crowding * config.sibling_weight
            + distance * config.distance_weight
            + abs(offset) * config.offset_weight
        )
        return _Candidate(score, angle, distance, center, violations)

    best: _Candidate | None = None
    for factor in config.candidate_distance_factors:
        distance = base_distance * factor
        for offset in config.candidate_angle_offsets:
            candidate = evaluate(offset, distance)
            if best is None or candidate.score < best.score:
                best = candidate
        if best is not None and best.violations == 0:
            break

    fallback = evaluate(0.0, base_distance)
    if best is None or (best.violations > 0 and best.violations >= fallback.violations):
        best = fallback
    clear = best.violations == 0
    if not clear:
        logger.info(
            "No clear spot for a child of '%s'; placing with %d overlaps",
            parent_id, best.violations,
        )

    new_id = _fresh_id(graph, next_id)
    x, y = top_left_of(best.center, child_dims)
    node = Node(
        id=new_id,
        type=child_type,
        label=label,
        x=x,
        y=y,
        data={"status": "pending"} if child_type in config.card_types else {},
    )
    edge = Edge(id=f"e-{parent_id}-{new_id}", source=parent_id, target=new_id, kind=HIERARCHY)
    return ChildPlacement(node=node, edge=edge, angle=best.angle, distance=best.distance, clear=clear)


def _fresh_id(graph: MindGraph, next_id: IdFactory) -> str:
    for _ in range(_MAX_ID_ATTEMPTS):
        candidate = next_id()
        if candidate not in graph.nodes:
            return candidate
    raise ValueError("Id factory keeps returning ids already in the graph")
