"""Data model for mind map projects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, NamedTuple

HIERARCHY = "hierarchy"
"""Edge kind of structural parent-child edges, the only kind layout reads."""

BLOCKS = "blocks"
"""Edge kind of dependency edges between nodes."""


class Point(NamedTuple):
    x: float
    y: float


class Dims(NamedTuple):
    w: float
    h: float


@dataclass
class Node:
    """A card in the mind map."""

    id: str
    type: str = "task"
    label: str = ""
    # Top-left corner, populated by layout
    x: float = 0.0
    y: float = 0.0
    # Size reported by a renderer that has already drawn the card
    measured_w: float | None = None
    measured_h: float | None = None
    # Remaining card fields (status, description, ...) carried through untouched
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)


@dataclass
class Edge:
    """A directed edge between two nodes."""

    id: str
    source: str
    target: str
    kind: str = HIERARCHY

    @property
    def is_hierarchy(self) -> bool:
        return self.kind == HIERARCHY


@dataclass
class MindGraph:
    """Complete mind map project."""

    id: str = ""
    name: str = ""
    nodes: dict[str, Node] = field(default_factory=dict)
    edges: list[Edge] = field(default_factory=list)

    def add_node(self, node: Node) -> None:
        self.nodes[node.id] = node

    def add_edge(self, edge: Edge) -> None:
        self.edges.append(edge)

    def hierarchy_edges(self) -> list[Edge]:
        """Return hierarchy edges whose endpoints both exist, in order."""
        return [
            e
            for e in self.edges
            if e.is_hierarchy and e.source in self.nodes and e.target in self.nodes
        ]

    def dangling_edges(self) -> list[Edge]:
        """Return edges referencing a node id that is not in the graph."""
        return [
            e
            for e in self.edges
            if e.source not in self.nodes or e.target not in self.nodes
        ]
