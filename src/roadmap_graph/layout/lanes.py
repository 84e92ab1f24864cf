"""Lane assignment: git-graph style parallel tracks.

Nodes are visited rank by rank (oldest first within a rank). A node keeps
drawing its first parent's branch straight down the same lane as long as
no sibling got there first; otherwise it opens the lowest unclaimed lane.
This is a greedy single pass: it keeps primary branches straight but does
not try to minimize crossings, and merges always follow the first parent.
"""

from __future__ import annotations

__all__ = ["LaneTable", "assign_lanes", "lane_order"]

from collections.abc import Sequence

from roadmap_graph.layout.ranks import date_order
from roadmap_graph.parser.model import Node


class LaneTable:
    """Current claimant of each lane index."""

    def __init__(self) -> None:
        self._claims: list[str | None] = []

    def claimant(self, lane: int) -> str | None:
        if 0 <= lane < len(self._claims):
            return self._claims[lane]
        return None

    def first_free(self) -> int:
        """Lowest lane index with no claimant."""
        for lane, owner in enumerate(self._claims):
            if owner is None:
                return lane
        return len(self._claims)

    def claim(self, lane: int, node_id: str) -> None:
        while len(self._claims) <= lane:
            self._claims.append(None)
        self._claims[lane] = node_id


def lane_order(nodes: Sequence[Node], ranks: dict[str, int]) -> list[Node]:
    """Processing order for lane packing: rank ascending, then date."""
    return sorted(date_order(nodes), key=lambda n: ranks.get(n.id, 0))


def assign_lanes(
    nodes: Sequence[Node],
    ranks: dict[str, int],
) -> tuple[list[Node], dict[str, int]]:
    """Assign each node a lane index.

    Args:
        nodes: The nodes to place.
        ranks: Rank assignment from assign_ranks().

    Returns (order, lanes): the nodes in the order they were placed, and a
    dict mapping node id -> lane.
    """
    order = lane_order(nodes, ranks)
    table = LaneTable()
    lanes: dict[str, int] = {}

    for node in order:
        lane = None
        if node.parent_ids:
            first_parent = node.parent_ids[0]
            parent_lane = lanes.get(first_parent)
            if parent_lane is not None and table.claimant(parent_lane) == first_parent:
                lane = parent_lane
        if lane is None:
            lane = table.first_free()
        table.claim(lane, node.id)
        lanes[node.id] = lane

    return order, lanes
