"""Layout coordinator: combines rank assignment, lane packing, colors and
coordinate mapping into a renderable graph.

The engine is a pure function of the node list and orientation. It never
raises on malformed node data (cycles, dangling or duplicate ids); the
caller is expected to hand it whatever the editor currently holds.
"""

from __future__ import annotations

__all__ = ["compute_layout", "node_size"]

import logging
from collections.abc import Sequence

from roadmap_graph.layout.colors import edge_color, node_color
from roadmap_graph.layout.constants import (
    CANVAS_PADDING,
    GAP_X,
    GAP_Y,
    H_GAP_X,
    H_GAP_Y,
    H_NODE_HEIGHT,
    H_NODE_WIDTH,
    MARGIN,
    NODE_HEIGHT,
    NODE_WIDTH,
    VIEWPORT_HEIGHT,
    VIEWPORT_WIDTH,
)
from roadmap_graph.layout.lanes import assign_lanes
from roadmap_graph.layout.paths import edge_path
from roadmap_graph.layout.ranks import assign_ranks
from roadmap_graph.parser.model import (
    GraphLayout,
    Node,
    Orientation,
    RenderedEdge,
    RenderedNode,
)

logger = logging.getLogger(__name__)


def _coerce_orientation(orientation: Orientation | str) -> Orientation:
    orientation = Orientation(orientation)
    if orientation is Orientation.TIMELINE:
        raise ValueError("The timeline view is a list, not a graph layout")
    return orientation


def node_size(orientation: Orientation) -> tuple[float, float]:
    """(width, height) of a node card in the given orientation."""
    if orientation is Orientation.VERTICAL:
        return NODE_WIDTH, NODE_HEIGHT
    return H_NODE_WIDTH, H_NODE_HEIGHT


def _position(
    rank: int,
    lane: int,
    orientation: Orientation,
    margin: float,
) -> tuple[float, float]:
    if orientation is Orientation.VERTICAL:
        x = lane * (NODE_WIDTH + GAP_X) + margin
        y = rank * (NODE_HEIGHT + GAP_Y) + margin
    else:
        x = rank * H_GAP_X + margin
        y = lane * (H_NODE_HEIGHT + H_GAP_Y) + margin
    return x, y


def compute_layout(
    nodes: Sequence[Node],
    orientation: Orientation | str = Orientation.VERTICAL,
    viewport_width: float = VIEWPORT_WIDTH,
    viewport_height: float = VIEWPORT_HEIGHT,
    margin: float = MARGIN,
    canvas_padding: float = CANVAS_PADDING,
) -> GraphLayout:
    """Compute positions, colors and connectors for a set of nodes.

    Args:
        nodes: The visible nodes. May be any subset of a roadmap; parent
            ids that point outside it are ignored.
        orientation: ``vertical`` (ranks flow down) or ``horizontal``
            (ranks flow right).
        viewport_width: Minimum canvas width.
        viewport_height: Minimum canvas height.
        margin: Offset of rank 0 / lane 0 from the canvas origin.
        canvas_padding: Space kept after the farthest node.

    Returns a GraphLayout with one rendered node per input node (in lane
    processing order) and one edge per distinct parent -> child pair.
    """
    orientation = _coerce_orientation(orientation)

    ranks = assign_ranks(nodes)
    order, lanes = assign_lanes(nodes, ranks)

    rendered: list[RenderedNode] = []
    by_id: dict[str, RenderedNode] = {}
    for node in order:
        rank = ranks[node.id]
        lane = lanes[node.id]
        x, y = _position(rank, lane, orientation, margin)
        placed = RenderedNode(
            node=node,
            rank=rank,
            lane=lane,
            x=x,
            y=y,
            color=node_color(node.status, lane),
        )
        rendered.append(placed)
        by_id[node.id] = placed

    edges: list[RenderedEdge] = []
    seen: set[tuple[str, str]] = set()
    for child in rendered:
        for parent_id in child.node.parent_ids:
            parent = by_id.get(parent_id)
            if parent is None or parent_id == child.id:
                continue
            if (parent_id, child.id) in seen:
                continue
            seen.add((parent_id, child.id))
            edge = RenderedEdge(
                id=f"{parent_id}-{child.id}",
                source=parent_id,
                target=child.id,
                source_x=parent.x,
                source_y=parent.y,
                target_x=child.x,
                target_y=child.y,
                color=edge_color(parent.color, child.status),
                status=child.status,
            )
            edge.path = edge_path(edge, orientation)
            edges.append(edge)

    width, height = viewport_width, viewport_height
    if rendered:
        node_w, node_h = node_size(orientation)
        width = max(max(n.x for n in rendered) + node_w + canvas_padding, width)
        height = max(max(n.y for n in rendered) + node_h + canvas_padding, height)

    logger.debug(
        "Laid out %d nodes, %d edges on %d lanes (%s, %gx%g)",
        len(rendered), len(edges), len(set(lanes.values())),
        orientation.value, width, height,
    )

    return GraphLayout(
        orientation=orientation,
        nodes=rendered,
        edges=edges,
        width=width,
        height=height,
    )
