"""Render constants used across render modules.

Centralizes magic numbers from svg.py and timeline.py.
Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Node cards
# ---------------------------------------------------------------------------
CARD_PADDING: float = 12.0
"""Inner padding of a node card."""

DATE_LINE_OFFSET: float = 16.0
"""Baseline of the date line, from the card top."""

TITLE_LINE_OFFSET: float = 36.0
"""Baseline of the title line, from the card top."""

DESCRIPTION_LINE_HEIGHT: float = 16.0
"""Distance between description baselines."""

CHAR_WIDTH_RATIO: float = 0.55
"""Approximate glyph width as a fraction of font size (for truncation)."""

ELLIPSIS: str = "…"
"""Appended to truncated text."""

NO_DESCRIPTION: str = "No description"
"""Placeholder shown for nodes without a description."""

# ---------------------------------------------------------------------------
# Collapse marker
# ---------------------------------------------------------------------------
MARKER_RADIUS: float = 10.0
"""Radius of the hidden-children marker under a collapsed node."""

MARKER_FILL: str = "#2563eb"
"""Fill of the hidden-children marker."""

MARKER_TEXT_COLOR: str = "#ffffff"
"""Text color of the hidden-children marker."""

# ---------------------------------------------------------------------------
# Status badges
# ---------------------------------------------------------------------------
ABANDONED_BADGE: str = "DEAD END"
"""Badge text for abandoned nodes."""

STANDBY_BADGE: str = "STANDBY"
"""Badge text for standby nodes."""

# ---------------------------------------------------------------------------
# Timeline
# ---------------------------------------------------------------------------
TIMELINE_HIDDEN_MESSAGE: str = "All events are currently hidden in collapsed branches."
"""Shown when a roadmap has nodes but none are visible."""

TIMELINE_EMPTY_MESSAGE: str = "No events found. Start by adding a new event."
"""Shown when a roadmap has no nodes at all."""

TIMELINE_DATE_FORMAT: str = "%a, %B %d, %Y"
"""strftime format for timeline dates."""

TIMELINE_NO_DESCRIPTION: str = "No description provided."
"""Placeholder for timeline events without a description."""
