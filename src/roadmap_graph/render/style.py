"""Theme and style constants for roadmap rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a roadmap diagram."""

    name: str
    background_color: str
    node_fill: str
    completed_fill: str
    completed_stroke: str
    abandoned_fill: str
    abandoned_stroke: str
    standby_fill: str
    standby_stroke: str
    title_color: str
    text_color: str
    muted_text_color: str
    font_family: str
    title_font_size: float
    text_font_size: float
    date_font_size: float
    badge_font_size: float
    edge_width: float = 2.0
    node_stroke_width: float = 2.0
    node_corner_radius: float = 8.0
    dot_radius: float = 6.0
    dot_stroke: str = "#ffffff"
    dash_array: str = "5,5"
    abandoned_badge_color: str = "#64748b"
    standby_badge_color: str = "#f59e0b"
    # Collapsed nodes get a stacked card behind them
    stack_offset: float = 6.0
    stack_opacity: float = 0.6
