"""Structural checks for roadmap node lists.

The layout engine tolerates every problem reported here; these checks exist
so a user can find out why a roadmap looks odd (a node stuck on its own
rank, a missing connector) and repair the file.
"""

from __future__ import annotations

__all__ = ["find_problems"]

from collections import Counter
from collections.abc import Sequence

import networkx as nx

from roadmap_graph.parser.model import Node


def find_problems(nodes: Sequence[Node]) -> list[str]:
    """Return human-readable descriptions of structural problems."""
    problems: list[str] = []

    id_counts = Counter(node.id for node in nodes)
    for node_id, count in id_counts.items():
        if count > 1:
            problems.append(f"Duplicate node id '{node_id}' ({count} nodes)")

    G = nx.DiGraph()
    for node in nodes:
        G.add_node(node.id)

    for node in nodes:
        seen: set[str] = set()
        for pid in node.parent_ids:
            if pid == node.id:
                problems.append(f"Node '{node.id}' lists itself as a parent")
                continue
            if pid in seen:
                problems.append(f"Node '{node.id}' lists parent '{pid}' more than once")
                continue
            seen.add(pid)
            if pid not in id_counts:
                problems.append(f"Node '{node.id}' references unknown parent '{pid}'")
                continue
            G.add_edge(pid, node.id)

    for cycle in sorted(sorted(c) for c in nx.simple_cycles(G)):
        problems.append(f"Parent cycle between: {', '.join(cycle)}")

    return problems
