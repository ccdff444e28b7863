"""Reader and writer for mind map project files.

Project files are JSON documents shaped the way the canvas stores them::

    {"id": ..., "name": ...,
     "nodes": [{"id", "type", "position": {"x", "y"},
                "measured": {"width", "height"}, "data": {"label", ...}}],
     "edges": [{"id", "source", "target", "data": {"edgeType"}}]}

Fields of ``data`` the layout does not understand are kept on
``Node.data`` and written back unchanged.
"""

from __future__ import annotations

import json
import math
from typing import Any

from mind_layout.parser.model import Edge, MindGraph, Node


def parse_project(text: str) -> MindGraph:
    """Parse a project JSON document into a MindGraph."""
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Project file is not valid JSON: {e}") from e

    if not isinstance(doc, dict):
        raise ValueError("Project file must contain a JSON object")

    graph = MindGraph(id=str(doc.get("id", "")), name=str(doc.get("name", "")))

    for i, raw in enumerate(_list_field(doc, "nodes")):
        node = _parse_node(raw, i)
        if node.id in graph.nodes:
            raise ValueError(f"Duplicate node id '{node.id}'")
        graph.add_node(node)

    for i, raw in enumerate(_list_field(doc, "edges")):
        graph.add_edge(_parse_edge(raw, i))

    return graph


def dump_project(graph: MindGraph, indent: int | None = 2) -> str:
    """Serialize a MindGraph back to project JSON."""
    doc = {
        "id": graph.id,
        "name": graph.name,
        "nodes": [_dump_node(n) for n in graph.nodes.values()],
        "edges": [_dump_edge(e) for e in graph.edges],
    }
    return json.dumps(doc, indent=indent, ensure_ascii=False) + "\n"


def _list_field(doc: dict[str, Any], key: str) -> list[Any]:
    value = doc.get(key, [])
    if not isinstance(value, list):
        raise ValueError(f"Project field '{key}' must be a list")
    return value


def _parse_node(raw: Any, index: int) -> Node:
    if not isinstance(raw, dict) or not isinstance(raw.get("id"), str):
        raise ValueError(f"Node #{index} must be an object with a string 'id'")

    data = dict(raw.get("data") or {})
    label = data.pop("label", "") or ""
    node_type = data.pop("type", None) or raw.get("type") or "task"

    position = raw.get("position") or {}
    measured = raw.get("measured") or {}

    return Node(
        id=raw["id"],
        type=str(node_type),
        label=str(label),
        x=_coordinate(position.get("x", 0.0), raw["id"], "position.x"),
        y=_coordinate(position.get("y", 0.0), raw["id"], "position.y"),
        measured_w=_optional_size(measured.get("width"), raw["id"], "width"),
        measured_h=_optional_size(measured.get("height"), raw["id"], "height"),
        data=data,
    )


def _parse_edge(raw: Any, index: int) -> Edge:
    if not isinstance(raw, dict):
        raise ValueError(f"Edge #{index} must be an object")
    source = raw.get("source")
    target = raw.get("target")
    if not isinstance(source, str) or not isinstance(target, str):
        raise ValueError(f"Edge #{index} needs string 'source' and 'target'")

    data = raw.get("data") or {}
    return Edge(
        id=str(raw.get("id") or f"e-{source}-{target}"),
        source=source,
        target=target,
        kind=str(data.get("edgeType", "")),
    )


def _number(value: Any, node_id: str, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Node '{node_id}' has a non-numeric {name}")
    return float(value)


def _coordinate(value: Any, node_id: str, name: str) -> float:
    number = _number(value, node_id, name)
    if not math.isfinite(number):
        raise ValueError(f"Node '{node_id}' has a non-finite {name}")
    return number


def _optional_size(value: Any, node_id: str, name: str) -> float | None:
    if value is None:
        return None
    size = _number(value, node_id, f"measured.{name}")
    # Zero, negative, infinite or NaN: the card was never drawn
    return size if math.isfinite(size) and size > 0 else None


def _dump_node(node: Node) -> dict[str, Any]:
    out: dict[str, Any] = {
        "id": node.id,
        "type": node.type,
        "position": {"x": round(node.x, 2), "y": round(node.y, 2)},
        "data": {"label": node.label, "type": node.type, **node.data},
    }
    measured = {}
    if node.measured_w is not None:
        measured["width"] = node.measured_w
    if node.measured_h is not None:
        measured["height"] = node.measured_h
    if measured:
        out["measured"] = measured
    return out


def _dump_edge(edge: Edge) -> dict[str, Any]:
    return {
        "id": edge.id,
        "source": edge.source,
        "target": edge.target,
        "data": {"edgeType": edge.kind},
    }
