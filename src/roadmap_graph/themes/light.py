"""Light theme."""

from roadmap_graph.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="#f8fafc",
    node_fill="rgba(255, 255, 255, 0.9)",
    completed_fill="rgba(240, 253, 244, 0.8)",
    completed_stroke="rgba(34, 197, 94, 0.5)",
    abandoned_fill="rgba(241, 245, 249, 0.5)",
    abandoned_stroke="#cbd5e1",
    standby_fill="#fffbeb",
    standby_stroke="#fbbf24",
    title_color="#0f172a",
    text_color="#334155",
    muted_text_color="#64748b",
    font_family="ui-sans-serif, system-ui, 'Helvetica Neue', Arial, sans-serif",
    title_font_size=14.0,
    text_font_size=12.0,
    date_font_size=11.0,
    badge_font_size=10.0,
)
