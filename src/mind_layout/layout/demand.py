"""Subtree demand: the angular weight each branch asks of its parent's ring.

A node demands at least its own padded width; a node with children demands
the larger of that and the sum of its children's demands.  Dense branches
therefore claim proportionally more sweep than sparse siblings.
"""

from __future__ import annotations

__all__ = ["subtree_demand"]

from collections.abc import Mapping

from mind_layout.parser.model import Dims


def subtree_demand(
    root: str,
    children: Mapping[str, list[str]],
    dims: Mapping[str, Dims],
    node_pad: float,
) -> dict[str, float]:
    """Compute demand for every node under root.

    Iterative post-order: a node is expanded once, then finalized after
    all of its children have been.  Safe on arbitrarily deep trees.
    """
    demand: dict[str, float] = {}
    entered: set[str] = set()
    stack: list[tuple[str, bool]] = [(root, False)]

    while stack:
        node_id, expanded = stack.pop()
        if node_id in demand:
            continue

        kids = children.get(node_id, [])
        if not expanded and kids:
            if node_id in entered:
                # Reached again through a cycle
                continue
            entered.add(node_id)
            stack.append((node_id, True))
            stack.extend((kid, False) for kid in reversed(kids) if kid not in demand)
            continue

        own = dims[node_id].w + node_pad
        if not kids:
            demand[node_id] = own
        else:
            demand[node_id] = max(own, sum(demand.get(kid, 0.0) for kid in kids))

    return demand
