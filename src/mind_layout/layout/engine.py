"""Layout coordinator: runs the full radial layout pipeline.

Dimension estimation -> subtree demand -> radial placement -> global
scaling -> collision relaxation.  The input graph is never modified; a new
graph with positioned nodes is returned.
"""

from __future__ import annotations

__all__ = ["LayoutStages", "compute_layout", "compute_layout_stages"]

import logging
from dataclasses import dataclass, replace

from mind_layout.layout.collision import relax_collisions
from mind_layout.layout.config import LayoutConfig
from mind_layout.layout.demand import subtree_demand
from mind_layout.layout.dims import layout_dims, node_dims
from mind_layout.layout.geometry import top_left_of
from mind_layout.layout.hierarchy import Hierarchy, build_hierarchy
from mind_layout.layout.radial import place_radial
from mind_layout.layout.scaling import scale_to_target, target_max_radius
from mind_layout.parser.model import Dims, MindGraph, Point

logger = logging.getLogger(__name__)


@dataclass
class LayoutStages:
    """Intermediate results of one full layout run, all keyed by node id."""

    hierarchy: Hierarchy
    visual_dims: dict[str, Dims]
    layout_dims: dict[str, Dims]
    demand: dict[str, float]
    radial: dict[str, Point]
    target_radius: float
    anchors: dict[str, Point]
    centers: dict[str, Point]


def compute_layout_stages(
    graph: MindGraph,
    config: LayoutConfig | None = None,
) -> LayoutStages | None:
    """Run every pipeline stage, or return None if the graph cannot be laid out."""
    config = config or LayoutConfig()
    if not graph.nodes:
        return None

    hierarchy = build_hierarchy(graph)
    if hierarchy is None:
        return None

    node_types = {nid: n.type for nid, n in graph.nodes.items()}
    visual = {nid: node_dims(n, config) for nid, n in graph.nodes.items()}
    budget_dims = {nid: layout_dims(d, config) for nid, d in visual.items()}

    demand = subtree_demand(hierarchy.root, hierarchy.children, budget_dims, config.node_pad)
    radial = place_radial(hierarchy, node_types, budget_dims, demand, config)

    target = target_max_radius(len(graph.nodes), len(hierarchy.kids(hierarchy.root)), config)
    anchors = scale_to_target(radial, hierarchy.root, target)

    centers = relax_collisions(
        anchors, visual, hierarchy, node_types, config, order=list(graph.nodes)
    )
    logger.debug(
        "Laid out %d nodes around '%s' (budget radius %.1f)",
        len(graph.nodes), hierarchy.root, target,
    )
    return LayoutStages(
        hierarchy=hierarchy,
        visual_dims=visual,
        layout_dims=budget_dims,
        demand=demand,
        radial=radial,
        target_radius=target,
        anchors=anchors,
        centers=centers,
    )


def compute_layout(graph: MindGraph, config: LayoutConfig | None = None) -> MindGraph:
    """Return a copy of the graph with every node positioned radially.

    The root's center lands on the origin.  Graphs that are empty or whose
    hierarchy is not a single rooted tree are returned unchanged.
    """
    stages = compute_layout_stages(graph, config)
    if stages is None:
        return graph

    root_center = stages.centers[stages.hierarchy.root]
    nodes = {}
    for nid, node in graph.nodes.items():
        c = stages.centers[nid]
        x, y = top_left_of(
            Point(c.x - root_center.x, c.y - root_center.y), stages.visual_dims[nid]
        )
        nodes[nid] = replace(node, x=x, y=y, data=dict(node.data))

    return MindGraph(id=graph.id, name=graph.name, nodes=nodes, edges=list(graph.edges))
