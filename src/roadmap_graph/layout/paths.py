"""Edge path derivation.

Every edge is a single cubic Bezier S-curve. Both control points sit at the
midpoint of the travel along the flow axis, so the curve leaves the parent
and enters the child perpendicular to the node edge whatever the lane
offset between them.
"""

from __future__ import annotations

__all__ = ["BezierCurve", "edge_curve", "edge_path", "format_path"]

from dataclasses import dataclass

from roadmap_graph.layout.constants import (
    CURVE_TENSION,
    H_NODE_HEIGHT,
    H_NODE_WIDTH,
    NODE_HEIGHT,
    NODE_WIDTH,
)
from roadmap_graph.parser.model import Orientation, RenderedEdge

Point = tuple[float, float]


@dataclass
class BezierCurve:
    """Start, two control points and end of a cubic Bezier."""

    start: Point
    control1: Point
    control2: Point
    end: Point


def edge_curve(
    source_x: float,
    source_y: float,
    target_x: float,
    target_y: float,
    orientation: Orientation,
    tension: float = CURVE_TENSION,
) -> BezierCurve:
    """Compute the connector curve between two node top-left corners.

    Vertical: parent bottom-center to child top-center.
    Horizontal: parent right-edge-center to child left-edge-center.
    """
    if orientation is Orientation.VERTICAL:
        start = (source_x + NODE_WIDTH / 2, source_y + NODE_HEIGHT)
        end = (target_x + NODE_WIDTH / 2, target_y)
        dist = end[1] - start[1]
        return BezierCurve(
            start=start,
            control1=(start[0], start[1] + dist * tension),
            control2=(end[0], end[1] - dist * tension),
            end=end,
        )

    start = (source_x + H_NODE_WIDTH, source_y + H_NODE_HEIGHT / 2)
    end = (target_x, target_y + H_NODE_HEIGHT / 2)
    dist = end[0] - start[0]
    return BezierCurve(
        start=start,
        control1=(start[0] + dist * tension, start[1]),
        control2=(end[0] - dist * tension, end[1]),
        end=end,
    )


def _num(value: float) -> str:
    value = float(round(value, 3))
    if value.is_integer():
        return str(int(value))
    return str(value)


def format_path(curve: BezierCurve) -> str:
    """Format a curve as SVG path data (``M x y C c1, c2, end``)."""
    (sx, sy), (c1x, c1y), (c2x, c2y), (ex, ey) = (
        curve.start,
        curve.control1,
        curve.control2,
        curve.end,
    )
    return (
        f"M {_num(sx)} {_num(sy)} "
        f"C {_num(c1x)} {_num(c1y)}, {_num(c2x)} {_num(c2y)}, {_num(ex)} {_num(ey)}"
    )


def edge_path(edge: RenderedEdge, orientation: Orientation) -> str:
    """SVG path data for a rendered edge."""
    return format_path(edge_curve(
        edge.source_x, edge.source_y,
        edge.target_x, edge.target_y,
        orientation,
    ))
