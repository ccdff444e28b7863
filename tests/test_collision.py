"""Tests for collision relaxation."""

import math

from layout_validator import boxes_overlap
from tree_builders import make_edge, make_graph, make_node

from mind_layout.layout.collision import relax_collisions
from mind_layout.layout.config import LayoutConfig
from mind_layout.layout.hierarchy import build_hierarchy
from mind_layout.parser.model import Dims, Point


def _setup(extra_depth=False):
    nodes = [make_node("r", "root"), make_node("a", "domain"), make_node("b", "domain")]
    edges = [make_edge("r", "a"), make_edge("r", "b")]
    if extra_depth:
        nodes.append(make_node("a1", "feature"))
        edges.append(make_edge("a", "a1"))
    graph = make_graph(nodes, edges)
    hierarchy = build_hierarchy(graph)
    types = {nid: n.type for nid, n in graph.nodes.items()}
    dims = {
        "r": Dims(160, 56),
        "a": Dims(170, 50),
        "b": Dims(170, 50),
        "a1": Dims(180, 70),
    }
    return hierarchy, types, dims


def test_overlapping_siblings_separated():
    hierarchy, types, dims = _setup()
    anchors = {"r": Point(0, 0), "a": Point(0, -200), "b": Point(10, -205)}
    result = relax_collisions(anchors, dims, hierarchy, types, LayoutConfig())
    assert not boxes_overlap(result["a"], dims["a"], result["b"], dims["b"], 4, 4)


def test_root_never_moves():
    hierarchy, types, dims = _setup()
    # Both children start on top of the root
    anchors = {"r": Point(0, 0), "a": Point(5, -3), "b": Point(-4, 6)}
    result = relax_collisions(anchors, dims, hierarchy, types, LayoutConfig())
    assert result["r"] == Point(0, 0)


def test_no_overlap_leaves_anchors():
    hierarchy, types, dims = _setup()
    anchors = {"r": Point(0, 0), "a": Point(0, -300), "b": Point(0, 300)}
    result = relax_collisions(anchors, dims, hierarchy, types, LayoutConfig())
    assert result == anchors


def test_child_kept_outward_of_parent():
    hierarchy, types, dims = _setup(extra_depth=True)
    # The feature anchor sits inside its parent's radius
    anchors = {
        "r": Point(0, 0),
        "a": Point(0, -300),
        "b": Point(0, 300),
        "a1": Point(200, -100),
    }
    config = LayoutConfig()
    result = relax_collisions(anchors, dims, hierarchy, types, config)
    parent_radius = math.hypot(*result["a"])
    assert math.hypot(*result["a1"]) >= parent_radius + config.outward_gap("feature") - 1e-6


def test_deep_card_kept_out_of_core():
    hierarchy, types, dims = _setup(extra_depth=True)
    anchors = {
        "r": Point(0, 0),
        "a": Point(0, -60),
        "b": Point(0, 300),
        "a1": Point(20, -20),
    }
    result = relax_collisions(anchors, dims, hierarchy, types, LayoutConfig())
    p = result["a1"]
    d = dims["a1"]
    closest_x = max(p.x - d.w / 2, min(0.0, p.x + d.w / 2))
    closest_y = max(p.y - d.h / 2, min(0.0, p.y + d.h / 2))
    assert math.hypot(closest_x, closest_y) >= 52.0 - 1e-6


def test_relaxation_is_deterministic():
    hierarchy, types, dims = _setup()
    anchors = {"r": Point(0, 0), "a": Point(0, -200), "b": Point(10, -205)}
    first = relax_collisions(anchors, dims, hierarchy, types, LayoutConfig())
    second = relax_collisions(anchors, dims, hierarchy, types, LayoutConfig())
    assert first == second
