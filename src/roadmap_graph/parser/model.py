"""Data model for roadmap graphs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class NodeStatus(Enum):
    """Lifecycle state of a roadmap node."""

    ACTIVE = "active"
    COMPLETED = "completed"
    ABANDONED = "abandoned"
    STANDBY = "standby"


class Orientation(Enum):
    """Flow direction of a graph view.

    TIMELINE is the chronological list view and never reaches the
    layout engine.
    """

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    TIMELINE = "timeline"


@dataclass
class Node:
    """A work item in the roadmap."""

    id: str
    date: datetime
    title: str = "New Task"
    description: str = ""
    status: NodeStatus = NodeStatus.ACTIVE
    # Order matters: the first parent is the lane the node tries to continue.
    parent_ids: list[str] = field(default_factory=list)


@dataclass
class Sheet:
    """A named roadmap: one independent collection of nodes."""

    id: str
    name: str
    nodes: list[Node] = field(default_factory=list)


@dataclass
class Workbook:
    """All sheets of a roadmap file, in display order."""

    sheets: list[Sheet] = field(default_factory=list)

    def sheet(self, key: str | None = None) -> Sheet:
        """Return the sheet whose id or name is *key*, or the first sheet."""
        if not self.sheets:
            raise ValueError("Workbook has no sheets")
        if key is None:
            return self.sheets[0]
        for sheet in self.sheets:
            if sheet.id == key:
                return sheet
        for sheet in self.sheets:
            if sheet.name == key:
                return sheet
        raise ValueError(f"No sheet with id or name '{key}'")


@dataclass
class RenderedNode:
    """A node with its resolved position and color (populated by layout)."""

    node: Node
    rank: int
    lane: int
    x: float
    y: float
    color: str

    @property
    def id(self) -> str:
        return self.node.id

    @property
    def status(self) -> NodeStatus:
        return self.node.status


@dataclass
class RenderedEdge:
    """A parent -> child connector between two rendered nodes.

    Source and target coordinates are the top-left corners of the
    endpoint nodes; ``path`` holds the derived Bezier curve.
    """

    id: str
    source: str
    target: str
    source_x: float
    source_y: float
    target_x: float
    target_y: float
    color: str
    status: NodeStatus
    path: str = ""

    @property
    def dashed(self) -> bool:
        return self.status in (NodeStatus.ABANDONED, NodeStatus.STANDBY)


@dataclass
class GraphLayout:
    """Complete layout result for one call of the engine."""

    orientation: Orientation
    nodes: list[RenderedNode] = field(default_factory=list)
    edges: list[RenderedEdge] = field(default_factory=list)
    width: float = 0.0
    height: float = 0.0

    def node(self, node_id: str) -> RenderedNode | None:
        for rendered in self.nodes:
            if rendered.id == node_id:
                return rendered
        return None
