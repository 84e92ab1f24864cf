"""Layout constants used across layout modules.

Centralizes the node geometry, spacing and palette shared by engine.py,
paths.py and colors.py.
"""

# ---------------------------------------------------------------------------
# Vertical orientation geometry
# ---------------------------------------------------------------------------
NODE_WIDTH: float = 180.0
"""Width of a node card in the vertical layout."""

NODE_HEIGHT: float = 80.0
"""Height of a node card in the vertical layout."""

GAP_X: float = 50.0
"""Horizontal spacing between lanes (vertical layout)."""

GAP_Y: float = 120.0
"""Vertical spacing between ranks (vertical layout)."""

# ---------------------------------------------------------------------------
# Horizontal orientation geometry
# ---------------------------------------------------------------------------
H_NODE_WIDTH: float = 200.0
"""Width of a node card in the horizontal layout."""

H_NODE_HEIGHT: float = 100.0
"""Height of a node card in the horizontal layout."""

H_GAP_X: float = 250.0
"""Distance between rank columns (horizontal layout).

This is a pitch, not a gap: the node width is not added to it.
"""

H_GAP_Y: float = 80.0
"""Vertical spacing between lanes (horizontal layout)."""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
MARGIN: float = 50.0
"""Offset from the canvas origin to rank 0 / lane 0."""

CANVAS_PADDING: float = 100.0
"""Space left after the farthest node when sizing the canvas."""

VIEWPORT_WIDTH: float = 1280.0
"""Default viewport width; the canvas never shrinks below it."""

VIEWPORT_HEIGHT: float = 800.0
"""Default viewport height; the canvas never shrinks below it."""

# ---------------------------------------------------------------------------
# Edges
# ---------------------------------------------------------------------------
CURVE_TENSION: float = 0.5
"""Fraction of the primary-axis travel at which Bezier control points sit."""

# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------
PALETTE: tuple[str, ...] = (
    "#3b82f6",  # blue
    "#10b981",  # emerald
    "#8b5cf6",  # violet
    "#f59e0b",  # amber
    "#ec4899",  # pink
    "#06b6d4",  # cyan
    "#f43f5e",  # rose
)
"""Lane colors, indexed by ``lane % len(PALETTE)``."""

ABANDONED_COLOR: str = "#64748b"
"""Node color forced for abandoned nodes."""

STANDBY_COLOR: str = "#f59e0b"
"""Node color forced for standby nodes."""

ABANDONED_EDGE_COLOR: str = "#94a3b8"
"""Edge color for edges leading into an abandoned node."""

STANDBY_EDGE_COLOR: str = "#fbbf24"
"""Edge color for edges leading into a standby node."""
