"""Label placement for node names.

Labels are positioned relative to their node rectangle. Text is not
measured; its box is estimated from the character count and font size.
"""

from __future__ import annotations

__all__ = [
    "LabelPlacement",
    "LabelPosition",
    "is_visible_in_canvas",
    "label_offset",
    "place_labels",
]

from dataclasses import dataclass
from enum import Enum

from sankey_layout.parser.model import Node, SankeyGraph
from sankey_layout.render.constants import (
    CHAR_WIDTH_RATIO,
    LABEL_MARGIN,
    LINE_HEIGHT_RATIO,
)


class LabelPosition(Enum):
    """Where a label sits relative to its node."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    CENTER = "center"
    INSIDE = "inside"
    AUTO = "auto"  # right if it fits the canvas, else left


@dataclass
class LabelPlacement:
    """Placement information for a node label (top-left corner + size)."""

    node_id: object
    text: str
    x: float
    y: float
    width: float
    height: float


def label_offset(
    node: Node,
    size: tuple[float, float],
    canvas: tuple[float, float],
    position: LabelPosition = LabelPosition.AUTO,
    margin: float = LABEL_MARGIN,
) -> tuple[float, float]:
    """Return the top-left corner of a label of ``size`` next to ``node``."""
    width, height = size
    cx = (node.x0 + node.x1) / 2
    cy = (node.y0 + node.y1) / 2

    if position is LabelPosition.LEFT:
        return (node.x0 - width - margin, cy - height / 2)
    if position is LabelPosition.RIGHT:
        return (node.x1 + margin, cy - height / 2)
    if position is LabelPosition.TOP:
        return (cx - width / 2, node.y0 - height - margin)
    if position is LabelPosition.BOTTOM:
        return (cx - width / 2, node.y1 + margin)
    if position in (LabelPosition.CENTER, LabelPosition.INSIDE):
        return (cx - width / 2, cy - height / 2)

    right = (node.x1 + margin, cy - height / 2)
    if right[0] + width <= canvas[0]:
        return right
    left = (node.x0 - width - margin, cy - height / 2)
    if left[0] >= 0:
        return left
    return right


def is_visible_in_canvas(
    node: Node,
    size: tuple[float, float],
    canvas: tuple[float, float],
    position: LabelPosition = LabelPosition.AUTO,
    margin: float = LABEL_MARGIN,
) -> bool:
    """Whether the label would lie entirely inside the canvas."""
    x, y = label_offset(node, size, canvas, position, margin)
    return x >= 0 and y >= 0 and x + size[0] <= canvas[0] and y + size[1] <= canvas[1]


def label_text(node: Node, show_values: bool = True) -> str:
    if show_values:
        return f"{node.display_label} ({node.value:g})"
    return node.display_label


def estimate_size(text: str, font_size: float) -> tuple[float, float]:
    """Approximate (width, height) of a single line of text."""
    return (len(text) * font_size * CHAR_WIDTH_RATIO, font_size * LINE_HEIGHT_RATIO)


def place_labels(
    graph: SankeyGraph,
    canvas: tuple[float, float],
    font_size: float,
    position: LabelPosition = LabelPosition.AUTO,
    show_values: bool = True,
) -> list[LabelPlacement]:
    """Place one label per node."""
    placements = []
    for node in graph.nodes:
        text = label_text(node, show_values)
        size = estimate_size(text, font_size)
        x, y = label_offset(node, size, canvas, position)
        placements.append(
            LabelPlacement(
                node_id=node.id, text=text, x=x, y=y, width=size[0], height=size[1]
            )
        )
    return placements
