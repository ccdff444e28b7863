"""Tests for the project file reader and writer."""

import json
from pathlib import Path

import pytest

from mind_layout.parser import BLOCKS, HIERARCHY, dump_project, parse_project

FIXTURES = Path(__file__).parent / "fixtures"
LAUNCH_PLAN = FIXTURES / "projects" / "launch_plan.json"


def test_parse_project_header():
    graph = parse_project(LAUNCH_PLAN.read_text())
    assert graph.id == "launch-plan"
    assert graph.name == "Launch Plan"
    assert len(graph.nodes) == 15
    assert len(graph.edges) == 15


def test_parse_node_fields():
    graph = parse_project(LAUNCH_PLAN.read_text())
    node = graph.nodes["index"]
    assert node.type == "task"
    assert node.label == "Build the search index"
    assert node.data == {"status": "in_progress", "assignee": "sam"}
    assert node.measured_w is None


def test_parse_measured_size():
    graph = parse_project(LAUNCH_PLAN.read_text())
    node = graph.nodes["search"]
    assert node.measured_w == 204.0
    assert node.measured_h == 82.0


def test_parse_edge_kinds():
    graph = parse_project(LAUNCH_PLAN.read_text())
    kinds = {e.id: e.kind for e in graph.edges}
    assert kinds["e-root-product"] == HIERARCHY
    assert kinds["e-index-copy"] == BLOCKS
    assert len(graph.hierarchy_edges()) == 14


def test_minimal_document():
    graph = parse_project(
        '{"nodes": [{"id": "a"}], "edges": [{"source": "a", "target": "b"}]}'
    )
    node = graph.nodes["a"]
    assert node.type == "task"
    assert node.label == ""
    assert (node.x, node.y) == (0.0, 0.0)
    edge = graph.edges[0]
    assert edge.id == "e-a-b"
    # Edges without an edgeType are not hierarchy edges
    assert edge.kind == ""
    assert not edge.is_hierarchy
    assert graph.dangling_edges() == [edge]


def test_type_from_data_wins():
    graph = parse_project('{"nodes": [{"id": "a", "type": "task", "data": {"type": "goal"}}]}')
    assert graph.nodes["a"].type == "goal"


def test_unmeasured_sizes_ignored():
    graph = parse_project(
        '{"nodes": [{"id": "a", "measured": {"width": 0, "height": -1}}]}'
    )
    assert graph.nodes["a"].measured_w is None
    assert graph.nodes["a"].measured_h is None


def test_non_finite_sizes_ignored():
    graph = parse_project(
        '{"nodes": [{"id": "a", "measured": {"width": Infinity, "height": NaN}}]}'
    )
    assert graph.nodes["a"].measured_w is None
    assert graph.nodes["a"].measured_h is None


@pytest.mark.parametrize(
    "text, message",
    [
        ("not json", "not valid JSON"),
        ("[1, 2]", "JSON object"),
        ('{"nodes": {}}', "must be a list"),
        ('{"nodes": [{"label": "x"}]}', "string 'id'"),
        ('{"nodes": [{"id": "a"}, {"id": "a"}]}', "Duplicate node id"),
        ('{"edges": [{"source": "a"}]}', "'source' and 'target'"),
        ('{"nodes": [{"id": "a", "position": {"x": "1"}}]}', "non-numeric"),
        ('{"nodes": [{"id": "a", "position": {"y": -Infinity}}]}', "non-finite position.y"),
    ],
)
def test_parse_errors(text, message):
    with pytest.raises(ValueError, match=message):
        parse_project(text)


def test_dump_round_trip_keeps_data():
    graph = parse_project(LAUNCH_PLAN.read_text())
    graph.nodes["index"].x = 12.3456
    again = parse_project(dump_project(graph))

    assert list(again.nodes) == list(graph.nodes)
    assert again.nodes["index"].x == 12.35
    assert again.nodes["index"].data == graph.nodes["index"].data
    assert again.nodes["search"].measured_w == 204.0
    assert [(e.source, e.target, e.kind) for e in again.edges] == [
        (e.source, e.target, e.kind) for e in graph.edges
    ]


def test_dump_format():
    graph = parse_project(LAUNCH_PLAN.read_text())
    doc = json.loads(dump_project(graph))
    node = doc["nodes"][0]
    assert node["data"]["label"] == "Launch Plan"
    assert node["data"]["type"] == "root"
    assert "measured" not in node
    assert doc["edges"][0]["data"] == {"edgeType": "hierarchy"}
