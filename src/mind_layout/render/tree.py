"""Terminal tree view of a mind map project.

Prints the hierarchy with box-drawing connectors, a shape per node type
and status, and dependency (``blocks``) edges as "blocked by" notes.
"""

from __future__ import annotations

import click

from mind_layout.parser.model import BLOCKS, MindGraph, Node

BRANCH = "├─"
LAST_BRANCH = "└─"
VERTICAL = "│ "
SPACE = "  "

MAX_LABEL = 60

STATUS_COLORS = {
    "done": "green",
    "in_progress": "blue",
    "blocked": "red",
}


def render_tree(graph: MindGraph, color: bool = True) -> str:
    """Render the project hierarchy as text, one node per line."""
    children: dict[str, list[str]] = {}
    has_parent: set[str] = set()
    blockers: dict[str, list[str]] = {}
    for edge in graph.edges:
        if edge.source not in graph.nodes or edge.target not in graph.nodes:
            continue
        if edge.is_hierarchy:
            children.setdefault(edge.source, []).append(edge.target)
            has_parent.add(edge.target)
        elif edge.kind == BLOCKS:
            source = graph.nodes[edge.source]
            blockers.setdefault(edge.target, []).append(source.label or source.id)

    roots = [nid for nid in graph.nodes if nid not in has_parent]
    lines: list[str] = []

    if len(roots) == 1:
        root = graph.nodes[roots[0]]
        lines.append(click.style(root.label or graph.name, bold=True))
        top = _visible(graph, children.get(root.id, []))
        seen = {root.id}
    else:
        lines.append(click.style(graph.name or graph.id, bold=True))
        top = _visible(graph, roots)
        seen = set()

    stack = [(nid, "", i == len(top) - 1) for i, nid in reversed(list(enumerate(top)))]
    while stack:
        nid, prefix, is_last = stack.pop()
        if nid in seen:
            continue
        seen.add(nid)
        node = graph.nodes[nid]
        lines.append(_node_line(node, prefix, is_last, blockers.get(nid, [])))

        kids = _visible(graph, children.get(nid, []))
        child_prefix = prefix + (SPACE if is_last else VERTICAL)
        stack.extend(
            (kid, child_prefix, i == len(kids) - 1)
            for i, kid in reversed(list(enumerate(kids)))
        )

    text = "\n".join(lines) + "\n"
    return text if color else click.unstyle(text)


def _visible(graph: MindGraph, ids: list[str]) -> list[str]:
    # Empty labels are drafts that have not been named yet
    return [nid for nid in ids if graph.nodes[nid].label]


def _node_line(node: Node, prefix: str, is_last: bool, blocked_by: list[str]) -> str:
    status = str(node.data.get("status", ""))
    shape, shape_color = _shape(node.type, status)
    connector = LAST_BRANCH if is_last else BRANCH

    label = node.label
    if len(label) > MAX_LABEL:
        label = label[: MAX_LABEL - 3] + "..."
    label_style = {"fg": "bright_black"} if status == "done" else {"fg": "white"}

    parts = [
        click.style(prefix + connector, fg="bright_black")
        + click.style(shape, fg=shape_color)
        + " "
        + click.style(label, **label_style)
    ]

    description = node.data.get("description")
    if node.type in ("domain", "goal") and description:
        parts[0] += click.style(f" - {description}", dim=True)

    meta = []
    if status and status != "pending":
        meta.append(click.style(status, fg=STATUS_COLORS.get(status, "bright_black")))
    assignee = node.data.get("assignee")
    if assignee:
        meta.append(click.style(f"@{assignee}", fg="cyan"))
    if blocked_by:
        meta.append(click.style(f"blocked by: {', '.join(blocked_by)}", fg="red"))

    return "  ".join(parts + meta)


def _shape(node_type: str, status: str) -> tuple[str, str]:
    """Return the shape glyph and its color for a node."""
    filled = status in ("in_progress", "done")
    if node_type == "root":
        return ("■" if filled else "□"), "blue"
    if node_type == "domain":
        return "◆", "blue"
    if status == "blocked":
        color = "red"
    elif status == "in_progress":
        color = "blue"
    else:
        color = "bright_black"
    if node_type == "goal":
        return ("■" if filled else "□"), color
    return ("●" if filled else "○"), color
