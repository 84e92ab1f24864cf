"""Rank assignment for roadmap layout (depth along the flow axis).

Ranks follow longest-path layering: a node sits one rank below its deepest
parent. Instead of a topological sort, ranks are propagated in date order
and re-propagated until nothing changes, so cyclic or partial input still
terminates and every node ends up with a rank.
"""

from __future__ import annotations

__all__ = ["assign_ranks", "date_key", "date_order", "present_parents"]

import logging
from collections.abc import Sequence
from datetime import timezone

from roadmap_graph.parser.model import Node

logger = logging.getLogger(__name__)


def date_key(node: Node) -> float:
    """Sort key for a node's date; naive dates count as UTC."""
    date = node.date
    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)
    return date.timestamp()


def date_order(nodes: Sequence[Node]) -> list[Node]:
    """Return nodes sorted by date, oldest first (stable for equal dates)."""
    return sorted(nodes, key=date_key)


def present_parents(node: Node, ids: set[str]) -> list[str]:
    """Parent ids of *node* that refer to other nodes in *ids*, in listed order."""
    return [pid for pid in node.parent_ids if pid in ids and pid != node.id]


def assign_ranks(nodes: Sequence[Node]) -> dict[str, int]:
    """Assign each node a rank (0-based generation number).

    Roots, and nodes whose parents are all missing from *nodes* (or are the
    node itself), get rank 0.
    Every other node gets 1 + the highest rank among its ranked parents,
    iterated to a fixpoint over at most ``len(nodes) + 2`` passes. Nodes
    still unranked after that (parent cycles) fall back to their index in
    date order.

    Returns a dict mapping node id -> rank.
    """
    ordered = date_order(nodes)
    ids = {node.id for node in ordered}
    parents = {node.id: present_parents(node, ids) for node in ordered}

    ranks: dict[str, int] = {}
    for node in ordered:
        if not parents[node.id]:
            ranks[node.id] = 0

    max_passes = len(ordered) + 2
    passes = 0
    changed = True
    while changed and passes < max_passes:
        changed = False
        passes += 1
        for node in ordered:
            ranked = [ranks[pid] for pid in parents[node.id] if pid in ranks]
            if not ranked:
                continue
            candidate = max(ranked) + 1
            if candidate > ranks.get(node.id, -1):
                ranks[node.id] = candidate
                changed = True

    if changed:
        logger.debug("Rank propagation hit the %d pass limit", max_passes)
    else:
        logger.debug("Rank propagation converged after %d passes", passes)

    for index, node in enumerate(ordered):
        if node.id not in ranks:
            logger.debug("Node %r has no reachable root; using rank %d", node.id, index)
            ranks[node.id] = index

    return ranks
