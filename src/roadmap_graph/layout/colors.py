"""Color resolution for nodes and edges."""

from __future__ import annotations

__all__ = ["edge_color", "node_color"]

from roadmap_graph.layout.constants import (
    ABANDONED_COLOR,
    ABANDONED_EDGE_COLOR,
    PALETTE,
    STANDBY_COLOR,
    STANDBY_EDGE_COLOR,
)
from roadmap_graph.parser.model import NodeStatus


def node_color(status: NodeStatus, lane: int) -> str:
    """Lane color from the palette; abandoned and standby override it."""
    if status is NodeStatus.ABANDONED:
        return ABANDONED_COLOR
    if status is NodeStatus.STANDBY:
        return STANDBY_COLOR
    return PALETTE[lane % len(PALETTE)]


def edge_color(parent_color: str, child_status: NodeStatus) -> str:
    """Edges take the parent's color, dimmed when the child is parked."""
    if child_status is NodeStatus.ABANDONED:
        return ABANDONED_EDGE_COLOR
    if child_status is NodeStatus.STANDBY:
        return STANDBY_EDGE_COLOR
    return parent_color
