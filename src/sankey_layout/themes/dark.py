"""Dark grey theme."""

from sankey_layout.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    node_palette=["#4e79a7", "#f28e2b", "#e15759", "#76b7b2", "#59a14f", "#edc948"],
    node_stroke="#1e1e1e",
    node_stroke_width=1.0,
    label_color="#e0e0e0",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=13.0,
    title_color="#ffffff",
    title_font_size=22.0,
)
