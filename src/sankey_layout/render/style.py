"""Theme and colour helpers for Sankey rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a Sankey diagram."""

    name: str
    background_color: str
    node_palette: list[str]
    node_stroke: str
    node_stroke_width: float
    label_color: str
    label_font_family: str
    label_font_size: float
    title_color: str
    title_font_size: float
    link_opacity: float = 0.5
    link_highlight_opacity: float = 0.9
    selection_stroke: str = "#ffd600"
    selection_stroke_width: float = 4.0
    show_values: bool = True
    # Fallback when a colour cannot be blended (named colours, rgba())
    link_color: str = "#9e9e9e"

    def node_color(self, column: int) -> str:
        """Palette colour for a column, cycling when columns outnumber colours."""
        return self.node_palette[column % len(self.node_palette)]


def _parse_hex(color: str) -> tuple[int, int, int] | None:
    value = color.strip().lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) != 6:
        return None
    try:
        return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))
    except ValueError:
        return None


def blend_colors(a: str, b: str, fallback: str) -> str:
    """Return the midpoint of two hex colours, or ``fallback`` if either isn't hex."""
    rgb_a = _parse_hex(a)
    rgb_b = _parse_hex(b)
    if rgb_a is None or rgb_b is None:
        return fallback
    mixed = [round((x + y) / 2) for x, y in zip(rgb_a, rgb_b)]
    return "#" + "".join(f"{c:02x}" for c in mixed)
