"""SVG rendering of laid-out Sankey graphs."""

from sankey_layout.render.labels import LabelPosition
from sankey_layout.render.style import Theme
from sankey_layout.render.svg import render_svg

__all__ = ["LabelPosition", "Theme", "render_svg"]
