"""Dark theme."""

from roadmap_graph.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#0b0b0c",
    node_fill="rgba(15, 23, 42, 0.9)",
    completed_fill="rgba(20, 83, 45, 0.1)",
    completed_stroke="rgba(34, 197, 94, 0.5)",
    abandoned_fill="rgba(30, 41, 59, 0.5)",
    abandoned_stroke="#334155",
    standby_fill="rgba(120, 53, 15, 0.1)",
    standby_stroke="#d97706",
    title_color="#f1f5f9",
    text_color="#cbd5e1",
    muted_text_color="#94a3b8",
    font_family="ui-sans-serif, system-ui, 'Helvetica Neue', Arial, sans-serif",
    title_font_size=14.0,
    text_font_size=12.0,
    date_font_size=11.0,
    badge_font_size=10.0,
    dot_stroke="#0f172a",
)
