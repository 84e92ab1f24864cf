"""Theme definitions for roadmap diagrams."""

from roadmap_graph.themes.dark import DARK_THEME
from roadmap_graph.themes.light import LIGHT_THEME

THEMES = {
    "light": LIGHT_THEME,
    "dark": DARK_THEME,
}

__all__ = ["THEMES", "DARK_THEME", "LIGHT_THEME"]
