"""Rendering of roadmap layouts."""

from roadmap_graph.render.svg import render_svg
from roadmap_graph.render.timeline import format_timeline, timeline_entries

__all__ = ["format_timeline", "render_svg", "timeline_entries"]
