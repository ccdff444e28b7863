"""Tree structure derived from hierarchy edges.

Builds a directed graph of the hierarchy edges and checks that it is a
single rooted tree (an arborescence) spanning every node.  Layout only
proceeds on such trees; anything else is reported, never repaired.
"""

from __future__ import annotations

__all__ = [
    "Hierarchy",
    "build_hierarchy",
    "component_root",
    "diagnose_hierarchy",
    "hierarchy_graph",
]

import logging
from dataclasses import dataclass

import networkx as nx

from mind_layout.parser.model import MindGraph

logger = logging.getLogger(__name__)


@dataclass
class Hierarchy:
    """Parent/child/depth maps of a rooted tree."""

    root: str
    children: dict[str, list[str]]
    parent: dict[str, str]
    depth: dict[str, int]

    def kids(self, node_id: str) -> list[str]:
        return self.children.get(node_id, [])


def hierarchy_graph(graph: MindGraph) -> nx.DiGraph:
    """Return a DiGraph with every node and every usable hierarchy edge.

    Edges that reference unknown node ids are skipped.  Successor order
    follows edge order in the project, which fixes sibling order.
    """
    G = nx.DiGraph()
    G.add_nodes_from(graph.nodes)
    for edge in graph.edges:
        if not edge.is_hierarchy:
            continue
        if edge.source not in graph.nodes or edge.target not in graph.nodes:
            logger.debug("Skipping edge %s: unknown endpoint", edge.id)
            continue
        G.add_edge(edge.source, edge.target)
    return G


def build_hierarchy(graph: MindGraph) -> Hierarchy | None:
    """Derive the tree maps, or None if the hierarchy is not a single tree."""
    if not graph.nodes:
        return None

    G = hierarchy_graph(graph)
    if not nx.is_arborescence(G):
        logger.warning(
            "Hierarchy of '%s' is not a single rooted tree: %s",
            graph.id or graph.name,
            "; ".join(diagnose_hierarchy(graph)) or "unknown defect",
        )
        return None

    root = next(n for n in G.nodes if G.in_degree(n) == 0)
    children = {n: list(G.successors(n)) for n in G.nodes if G.out_degree(n)}
    parent = {v: u for u, v in G.edges}
    depth = dict(nx.shortest_path_length(G, source=root))
    return Hierarchy(root=root, children=children, parent=parent, depth=depth)


def diagnose_hierarchy(graph: MindGraph) -> list[str]:
    """Describe every reason the hierarchy is not a single rooted tree."""
    problems: list[str] = []

    for edge in graph.dangling_edges():
        problems.append(
            f"Edge '{edge.id}' references unknown node "
            f"'{edge.source if edge.source not in graph.nodes else edge.target}'"
        )

    if not graph.nodes:
        problems.append("Project has no nodes")
        return problems

    G = hierarchy_graph(graph)

    for node_id in G.nodes:
        if G.in_degree(node_id) > 1:
            parents = ", ".join(sorted(G.predecessors(node_id)))
            problems.append(f"Node '{node_id}' has several parents: {parents}")

    roots = [n for n in G.nodes if G.in_degree(n) == 0]
    if not roots:
        problems.append("No root: every node has a parent")
    elif len(roots) > 1:
        problems.append(f"Several roots: {', '.join(roots)}")

    for cycle in nx.simple_cycles(G):
        problems.append(f"Cycle: {' -> '.join(cycle + cycle[:1])}")

    if len(roots) == 1:
        reachable = nx.descendants(G, roots[0]) | {roots[0]}
        unreachable = [n for n in G.nodes if n not in reachable]
        if unreachable:
            problems.append(
                f"Nodes not reachable from root '{roots[0]}': {', '.join(unreachable)}"
            )

    return problems


def component_root(parent: dict[str, str], node_id: str) -> str:
    """Follow parents upward from node_id to the top of its component.

    Stops at the first repeated node when the parents form a cycle.
    """
    seen = {node_id}
    current = node_id
    while current in parent:
        nxt = parent[current]
        if nxt in seen:
            break
        seen.add(nxt)
        current = nxt
    return current
