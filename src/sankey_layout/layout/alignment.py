"""Column alignment strategies.

Each strategy maps a node's depth (distance from the sources) and height
(distance from the sinks) to the column it is drawn in.
"""

from __future__ import annotations

__all__ = ["Alignment", "center_align", "justify_align", "left_align", "right_align"]

import math
from enum import Enum
from typing import Callable

from sankey_layout.parser.model import Node, SankeyGraph


def left_align(node: Node, graph: SankeyGraph, max_depth: int) -> int:
    """Every node sits at its depth."""
    return node.depth


def right_align(node: Node, graph: SankeyGraph, max_depth: int) -> int:
    """Every node sits as far right as its height allows."""
    return max_depth - node.height


def justify_align(node: Node, graph: SankeyGraph, max_depth: int) -> int:
    """Spread interior nodes proportionally along their longest path.

    The column is ``max_depth * depth / (depth + height)`` rounded half up,
    which puts sources on column 0, sinks on ``max_depth`` and keeps every
    link pointing at least one column to the right. Isolated nodes have
    depth and height 0 and are pinned to column 0.
    """
    span = node.depth + node.height
    if span == 0:
        return 0
    return math.floor(max_depth * node.depth / span + 0.5)


def center_align(node: Node, graph: SankeyGraph, max_depth: int) -> int:
    """Like left, but pull pure sources next to their nearest target."""
    if node.target_links:
        return node.depth
    if node.source_links:
        return min(graph.target(link).depth for link in graph.outgoing(node)) - 1
    return 0


class Alignment(Enum):
    """Node alignment strategy."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    JUSTIFY = "justify"

    def resolve(self, node: Node, graph: SankeyGraph, max_depth: int) -> int:
        """Return the column for a node."""
        return _RESOLVERS[self](node, graph, max_depth)


_RESOLVERS: dict[Alignment, Callable[[Node, SankeyGraph, int], int]] = {
    Alignment.LEFT: left_align,
    Alignment.RIGHT: right_align,
    Alignment.CENTER: center_align,
    Alignment.JUSTIFY: justify_align,
}
