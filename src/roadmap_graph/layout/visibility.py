"""Collapse/expand filtering of a roadmap before layout."""

from __future__ import annotations

__all__ = ["child_counts", "visible_nodes"]

from collections import defaultdict
from collections.abc import Collection, Sequence

from roadmap_graph.layout.ranks import date_order
from roadmap_graph.parser.model import Node


def visible_nodes(
    nodes: Sequence[Node],
    collapsed: Collection[str] = (),
) -> list[Node]:
    """Drop the nodes hidden under collapsed branches.

    A node is visible if it is a root, or if at least one of its parents is
    visible and not collapsed. Nodes are visited oldest first, so a parent
    dated after its child does not make the child visible.

    Returns the visible nodes in their original order.
    """
    collapsed = set(collapsed)
    visible: set[str] = set()
    for node in date_order(nodes):
        if not node.parent_ids:
            visible.add(node.id)
        elif any(pid in visible and pid not in collapsed for pid in node.parent_ids):
            visible.add(node.id)
    return [node for node in nodes if node.id in visible]


def child_counts(nodes: Sequence[Node]) -> dict[str, int]:
    """Number of nodes listing each id as a parent."""
    counts: dict[str, int] = defaultdict(int)
    for node in nodes:
        for pid in node.parent_ids:
            counts[pid] += 1
    return dict(counts)
