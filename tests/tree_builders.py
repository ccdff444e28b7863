"""Helpers that build mind map graphs for tests."""

from __future__ import annotations

from mind_layout.parser.model import HIERARCHY, Edge, MindGraph, Node

LEVEL_TYPES = ("root", "domain", "feature", "task")


def make_node(node_id: str, node_type: str, label: str | None = None) -> Node:
    return Node(id=node_id, type=node_type, label=node_id if label is None else label)


def make_edge(source: str, target: str, kind: str = HIERARCHY) -> Edge:
    return Edge(id=f"e-{source}-{target}", source=source, target=target, kind=kind)


def make_graph(nodes: list[Node], edges: list[Edge]) -> MindGraph:
    graph = MindGraph(id="test", name="Test")
    for node in nodes:
        graph.add_node(node)
    for edge in edges:
        graph.add_edge(edge)
    return graph


def build_tree(branching: list[int], label_width: int = 0) -> MindGraph:
    """Build a balanced tree: the root has branching[0] children, each of
    those branching[1], and so on.  Node types follow LEVEL_TYPES.

    ``label_width`` pads labels so cards get wider.
    """
    root = make_node("root", "root", "Root")
    nodes = [root]
    edges = []
    level = [root.id]
    for depth, fanout in enumerate(branching, start=1):
        node_type = LEVEL_TYPES[min(depth, len(LEVEL_TYPES) - 1)]
        next_level = []
        for parent_id in level:
            for k in range(fanout):
                nid = f"{parent_id}.{k}" if parent_id != "root" else f"n{k}"
                label = f"{node_type} {nid}".ljust(label_width, "x")
                nodes.append(make_node(nid, node_type, label))
                edges.append(make_edge(parent_id, nid))
                next_level.append(nid)
        level = next_level
    return make_graph(nodes, edges)
