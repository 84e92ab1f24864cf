"""Roadmap layout: ranks, lanes, coordinates and connector paths."""

from roadmap_graph.layout.engine import compute_layout
from roadmap_graph.layout.visibility import child_counts, visible_nodes

__all__ = ["child_counts", "compute_layout", "visible_nodes"]
