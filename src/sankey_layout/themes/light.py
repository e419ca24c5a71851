"""Light theme."""

from sankey_layout.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="none",
    node_palette=["#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd", "#8c564b"],
    node_stroke="#333333",
    node_stroke_width=1.0,
    label_color="#333333",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=14.0,
    title_color="#111111",
    title_font_size=24.0,
    link_opacity=0.4,
    selection_stroke="#111111",
)
