"""Horizontal positioning of node columns."""

from __future__ import annotations

__all__ = ["position_columns"]

from logging import getLogger

from sankey_layout.parser.model import SankeyGraph

logger = getLogger(__name__)


def position_columns(
    graph: SankeyGraph, n_columns: int, width: float, node_thickness: float
) -> float:
    """Set ``x0``/``x1`` for every node and return the gap between columns.

    Columns share the width evenly: the first column starts at 0 and the
    last one ends at ``width``.
    """
    gap = (width - n_columns * node_thickness) / (n_columns - 1) if n_columns > 1 else 0.0
    if gap < 0:
        logger.warning(
            "%d columns of thickness %g do not fit in width %g; columns overlap",
            n_columns,
            node_thickness,
            width,
        )
    step = node_thickness + gap
    for node in graph.nodes:
        node.x0 = node.column * step
        node.x1 = node.x0 + node_thickness
    return gap
