"""SVG generation for roadmap graphs using drawsvg."""

from __future__ import annotations

from collections.abc import Collection

import drawsvg as draw

from roadmap_graph.layout.engine import node_size
from roadmap_graph.parser.model import (
    GraphLayout,
    NodeStatus,
    Orientation,
    RenderedNode,
)
from roadmap_graph.render.constants import (
    ABANDONED_BADGE,
    CARD_PADDING,
    CHAR_WIDTH_RATIO,
    DATE_LINE_OFFSET,
    DESCRIPTION_LINE_HEIGHT,
    ELLIPSIS,
    MARKER_FILL,
    MARKER_RADIUS,
    MARKER_TEXT_COLOR,
    NO_DESCRIPTION,
    STANDBY_BADGE,
    TITLE_LINE_OFFSET,
)
from roadmap_graph.render.style import Theme


def render_svg(
    layout: GraphLayout,
    theme: Theme,
    collapsed: Collection[str] = (),
    child_counts: dict[str, int] | None = None,
) -> str:
    """Render a computed layout to an SVG string.

    *collapsed* and *child_counts* only affect decoration: collapsed nodes
    are drawn as a dashed stack with a marker showing how many children
    they hide.
    """
    width = int(layout.width)
    height = int(layout.height)
    d = draw.Drawing(width, height)

    d.append(draw.Rectangle(0, 0, width, height, fill=theme.background_color))

    _render_edges(d, layout, theme)

    collapsed = set(collapsed)
    counts = child_counts or {}
    for node in layout.nodes:
        _render_node(
            d,
            node,
            layout.orientation,
            theme,
            is_collapsed=node.id in collapsed,
            hidden_children=counts.get(node.id, 0),
        )

    return d.as_svg()


def _render_edges(d: draw.Drawing, layout: GraphLayout, theme: Theme) -> None:
    """Render edges as Bezier S-curves behind the nodes."""
    for edge in layout.edges:
        extra = {"stroke_dasharray": theme.dash_array} if edge.dashed else {}
        path = draw.Path(
            d=edge.path,
            stroke=edge.color,
            stroke_width=theme.edge_width,
            fill="none",
            **extra,
        )
        d.append(path)


def _card_style(node: RenderedNode, theme: Theme) -> tuple[str, str]:
    """(fill, stroke) of a node card by status."""
    status = node.status
    if status is NodeStatus.ABANDONED:
        return theme.abandoned_fill, theme.abandoned_stroke
    if status is NodeStatus.COMPLETED:
        return theme.completed_fill, theme.completed_stroke
    if status is NodeStatus.STANDBY:
        return theme.standby_fill, theme.standby_stroke
    # Active nodes are outlined in their lane color
    return theme.node_fill, node.color


def _truncate(text: str, width: float, font_size: float) -> str:
    max_chars = max(int(width / (font_size * CHAR_WIDTH_RATIO)), 1)
    if len(text) <= max_chars:
        return text
    return text[: max_chars - 1].rstrip() + ELLIPSIS


def _render_node(
    d: draw.Drawing,
    node: RenderedNode,
    orientation: Orientation,
    theme: Theme,
    is_collapsed: bool = False,
    hidden_children: int = 0,
) -> None:
    """Render a node card with date, badge, title and description."""
    w, h = node_size(orientation)
    fill, stroke = _card_style(node, theme)
    dashed = is_collapsed or node.status is NodeStatus.STANDBY
    extra = {"stroke_dasharray": theme.dash_array} if dashed else {}
    r = theme.node_corner_radius

    if is_collapsed:
        off = theme.stack_offset
        d.append(draw.Rectangle(
            node.x + off, node.y + off, w, h,
            rx=r, ry=r,
            fill=fill,
            stroke=stroke,
            stroke_width=theme.node_stroke_width,
            opacity=theme.stack_opacity,
        ))

    d.append(draw.Rectangle(
        node.x, node.y, w, h,
        rx=r, ry=r,
        fill=fill,
        stroke=stroke,
        stroke_width=theme.node_stroke_width,
        **extra,
    ))

    # Connector dot where incoming edges land
    if node.node.parent_ids:
        if orientation is Orientation.VERTICAL:
            cx, cy = node.x + w / 2, node.y
        else:
            cx, cy = node.x, node.y + h / 2
        d.append(draw.Circle(
            cx, cy, theme.dot_radius,
            fill=node.color,
            stroke=theme.dot_stroke,
            stroke_width=2,
        ))

    inner_w = w - 2 * CARD_PADDING
    left = node.x + CARD_PADDING
    date = node.node.date

    d.append(draw.Text(
        f"{date:%b} {date.day}",
        theme.date_font_size,
        left, node.y + DATE_LINE_OFFSET,
        fill=theme.muted_text_color,
        font_family="ui-monospace, monospace",
    ))

    badge = None
    if node.status is NodeStatus.ABANDONED:
        badge = (ABANDONED_BADGE, theme.abandoned_badge_color)
    elif node.status is NodeStatus.STANDBY:
        badge = (STANDBY_BADGE, theme.standby_badge_color)
    if badge:
        d.append(draw.Text(
            badge[0],
            theme.badge_font_size,
            node.x + w - CARD_PADDING, node.y + DATE_LINE_OFFSET,
            fill=badge[1],
            font_family=theme.font_family,
            font_weight="bold",
            text_anchor="end",
        ))

    d.append(draw.Text(
        _truncate(node.node.title, inner_w, theme.title_font_size),
        theme.title_font_size,
        left, node.y + TITLE_LINE_OFFSET,
        fill=theme.title_color,
        font_family=theme.font_family,
        font_weight="bold",
    ))

    # One description line, if the card is tall enough
    desc_y = node.y + TITLE_LINE_OFFSET + DESCRIPTION_LINE_HEIGHT
    if desc_y <= node.y + h - CARD_PADDING / 2:
        d.append(draw.Text(
            _truncate(node.node.description or NO_DESCRIPTION, inner_w, theme.text_font_size),
            theme.text_font_size,
            left, desc_y,
            fill=theme.text_color,
            font_family=theme.font_family,
        ))

    if is_collapsed and hidden_children:
        if orientation is Orientation.VERTICAL:
            mx, my = node.x + w / 2, node.y + h
        else:
            mx, my = node.x + w, node.y + h / 2
        d.append(draw.Circle(mx, my, MARKER_RADIUS, fill=MARKER_FILL))
        d.append(draw.Text(
            f"+{hidden_children}",
            theme.badge_font_size,
            mx, my,
            fill=MARKER_TEXT_COLOR,
            font_family=theme.font_family,
            font_weight="bold",
            text_anchor="middle",
            dominant_baseline="central",
        ))
