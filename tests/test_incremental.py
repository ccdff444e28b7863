"""Tests for incremental child placement."""

import math

import pytest
from layout_validator import overlapping_pairs
from tree_builders import build_tree, make_edge, make_graph, make_node

from mind_layout.ids import CounterIds, uuid_ids
from mind_layout.layout.config import LayoutConfig
from mind_layout.layout.dims import node_dims
from mind_layout.layout.engine import compute_layout
from mind_layout.layout.geometry import center_of
from mind_layout.layout.incremental import place_child, preferred_angle
from mind_layout.parser.model import HIERARCHY, Point


def _root_only():
    # Root card centered on the origin
    root = make_node("r", "root", "Plan")
    root.x, root.y = -80.0, -28.0
    return make_graph([root], [])


def _center(graph, nid):
    node = graph.nodes[nid]
    return center_of(node.position, node_dims(node))


def test_first_child_of_root_goes_up():
    graph = _root_only()
    placement = place_child(graph, "r", CounterIds())
    assert placement.clear
    assert placement.node.type == "domain"
    assert placement.angle == pytest.approx(-math.pi / 2)
    assert placement.distance == pytest.approx(240.0)

    graph = placement.added_to(graph)
    c = _center(graph, placement.node.id)
    assert c.x == pytest.approx(0.0, abs=1e-6)
    assert c.y == pytest.approx(-240.0)


def test_seven_children_of_root_do_not_overlap():
    graph = _root_only()
    ids = CounterIds()
    for i in range(7):
        placement = place_child(graph, "r", ids, label=f"Area {i}")
        assert placement is not None
        assert placement.clear, f"child {i} had no clear spot"
        graph = placement.added_to(graph)

    assert len(graph.nodes) == 8
    assert overlapping_pairs(graph, pad=4.0) == []


def test_existing_nodes_never_move():
    graph = compute_layout(build_tree([3, 2]))
    before = {nid: n.position for nid, n in graph.nodes.items()}
    placement = place_child(graph, "n1", CounterIds(taken=graph.nodes))
    after = placement.added_to(graph)
    for nid, pos in before.items():
        assert after.nodes[nid].position == pos
    assert graph.nodes.keys() == before.keys()


def test_grandchild_placed_outward():
    graph = _root_only()
    ids = CounterIds()
    domain = place_child(graph, "r", ids, label="Product")
    graph = domain.added_to(graph)

    feature = place_child(graph, domain.node.id, ids, label="Search")
    assert feature.node.type == "feature"
    assert feature.angle == pytest.approx(-math.pi / 2)
    graph = feature.added_to(graph)

    parent_radius = math.hypot(*_center(graph, domain.node.id))
    child_radius = math.hypot(*_center(graph, feature.node.id))
    assert child_radius > parent_radius


def test_new_edge_and_card_defaults():
    graph = _root_only()
    domain = place_child(graph, "r", CounterIds(prefix="n"))
    assert domain.node.id == "n-1"
    assert domain.node.data == {}
    assert domain.edge.id == "e-r-n-1"
    assert domain.edge.source == "r"
    assert domain.edge.target == "n-1"
    assert domain.edge.kind == HIERARCHY

    graph = domain.added_to(graph)
    task = place_child(graph, "n-1", CounterIds(prefix="n", start=2), node_type="task")
    assert task.node.type == "task"
    assert task.node.data == {"status": "pending"}


def test_unknown_parent_returns_none():
    assert place_child(_root_only(), "missing", CounterIds()) is None


def test_crowded_falls_back_to_preferred_spot():
    graph = _root_only()
    config = LayoutConfig().with_overrides({"placement_clearance": 100000.0})
    placement = place_child(graph, "r", CounterIds(), config=config)
    assert not placement.clear
    assert placement.angle == pytest.approx(-math.pi / 2)
    assert placement.distance == pytest.approx(240.0)


def test_taken_ids_skipped():
    graph = _root_only()
    ids = CounterIds(prefix="r", start=0, taken=["r-0"])
    assert ids() == "r-1"

    # A factory that first returns an existing id is asked again
    answers = iter(["r", "fresh"])
    placement = place_child(graph, "r", lambda: next(answers))
    assert placement.node.id == "fresh"


def test_factory_that_never_yields_fresh_id():
    graph = _root_only()
    with pytest.raises(ValueError):
        place_child(graph, "r", lambda: "r")


def test_uuid_ids_unique():
    next_id = uuid_ids("card")
    ids = {next_id() for _ in range(50)}
    assert len(ids) == 50
    assert all(i.startswith("card-") for i in ids)


def test_density_scales_distance():
    graph = _root_only()
    placement = place_child(graph, "r", CounterIds(), config=LayoutConfig.for_density("spacious"))
    assert placement.distance == pytest.approx(240.0 * 1.2)


# --- Preferred angle ---


def test_preferred_angle_fills_widest_gap():
    centers = {
        "r": Point(0, 0),
        "a": Point(100, 0),
        "b": Point(0, 100),
    }
    children = {"r": ["a", "b"]}
    parent_of = {"a": "r", "b": "r"}
    angle = preferred_angle("r", centers, parent_of, children, LayoutConfig())
    # Gap from 90 deg to 360 deg; its middle is 225 deg
    assert angle == pytest.approx(math.radians(225))


def test_preferred_angle_of_lone_child_is_opposite():
    centers = {"r": Point(0, 0), "a": Point(0, -100)}
    angle = preferred_angle("r", centers, {"a": "r"}, {"r": ["a"]}, LayoutConfig())
    assert angle == pytest.approx(math.pi / 2)


def test_preferred_angle_outward_from_root():
    centers = {"r": Point(0, 0), "a": Point(100, 100), "b": Point(300, 100)}
    parent_of = {"a": "r", "b": "a"}
    angle = preferred_angle("b", centers, parent_of, {"r": ["a"], "a": ["b"]}, LayoutConfig())
    assert angle == pytest.approx(math.atan2(100, 300))


def test_preferred_angle_parent_on_root_uses_grandparent():
    centers = {"r": Point(0, 0), "a": Point(100, 0), "b": Point(0.2, 0.2)}
    parent_of = {"a": "r", "b": "a"}
    angle = preferred_angle("b", centers, parent_of, {"r": ["a"], "a": ["b"]}, LayoutConfig())
    assert angle == pytest.approx(math.atan2(0.2, 0.2 - 100))


def test_preferred_angle_fallback_straight_down():
    centers = {"r": Point(0, 0), "a": Point(0, 0)}
    angle = preferred_angle("a", centers, {"a": "r"}, {"r": ["a"]}, LayoutConfig())
    assert angle == pytest.approx(math.pi / 2)


def test_sibling_of_disconnected_parent():
    # Parent with no hierarchy edges at all acts as its own root
    graph = make_graph([make_node("lonely", "feature")], [])
    placement = place_child(graph, "lonely", CounterIds())
    assert placement.node.type == "task"
    assert placement.angle == pytest.approx(-math.pi / 2)


def test_added_to_keeps_original_graph():
    graph = _root_only()
    placement = place_child(graph, "r", CounterIds())
    bigger = placement.added_to(graph)
    assert len(graph.nodes) == 1 and graph.edges == []
    assert len(bigger.nodes) == 2 and bigger.edges == [placement.edge]
    assert bigger.hierarchy_edges() == [make_edge("r", placement.node.id)]
