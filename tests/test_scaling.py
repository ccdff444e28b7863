"""Tests for global compactness scaling."""

import math

import pytest
from tree_builders import build_tree

from mind_layout.layout.config import LayoutConfig
from mind_layout.layout.engine import compute_layout_stages
from mind_layout.layout.scaling import max_root_distance, scale_to_target, target_max_radius
from mind_layout.parser.model import Point


def test_target_radius_formula():
    config = LayoutConfig()
    assert target_max_radius(1, 0, config) == pytest.approx(260.0 + 104.0)
    assert target_max_radius(100, 6, config) == pytest.approx(260.0 + 1040.0)
    assert target_max_radius(100, 9, config) == pytest.approx(260.0 + 1040.0 + 3 * 18.0)


def test_target_radius_follows_density():
    compact = target_max_radius(50, 4, LayoutConfig.for_density("compact"))
    balanced = target_max_radius(50, 4, LayoutConfig.for_density("balanced"))
    assert compact == pytest.approx(balanced * 0.85)


def test_within_budget_unchanged():
    centers = {"r": Point(0, 0), "a": Point(100, 0), "b": Point(0, -200)}
    assert scale_to_target(centers, "r", 500.0) == centers


def test_oversized_pulled_in_uniformly():
    centers = {"r": Point(10, 10), "a": Point(1010, 10), "b": Point(10, -490)}
    scaled = scale_to_target(centers, "r", 500.0)
    assert scaled["r"] == Point(10, 10)
    assert scaled["a"] == pytest.approx((510.0, 10.0))
    assert scaled["b"] == pytest.approx((10.0, -240.0))
    assert max_root_distance(scaled, "r") == pytest.approx(500.0)


def test_lone_root():
    centers = {"r": Point(0, 0)}
    assert max_root_distance(centers, "r") == 0.0
    assert scale_to_target(centers, "r", 10.0) == centers


def test_large_tree_anchors_within_budget():
    graph = build_tree([4, 3, 3], label_width=28)
    assert len(graph.nodes) == 53

    stages = compute_layout_stages(graph)
    root = stages.hierarchy.root
    assert stages.target_radius == pytest.approx(target_max_radius(53, 4, LayoutConfig()))
    for nid, p in stages.anchors.items():
        assert math.hypot(p.x - stages.anchors[root].x, p.y - stages.anchors[root].y) <= (
            stages.target_radius + 1e-6
        ), nid
