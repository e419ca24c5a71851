"""Layout coordinator: runs the layout phases in order on a graph.

Phase 1: Wiring (resolve link references, fill node link lists)
Phase 2: Node values
Phase 3: Depth and height (breadth-first, forward and reverse)
Phase 4: Columns (alignment strategy + horizontal positions)
Phase 5: Vertical relaxation and collision resolution
Phase 6: Link band geometry
"""

from __future__ import annotations

__all__ = ["compute_layout", "overflowing_nodes"]

import math
from logging import getLogger
from typing import Any

from sankey_layout.errors import InvalidConfigurationError
from sankey_layout.layout.config import LayoutConfig
from sankey_layout.layout.columns import position_columns
from sankey_layout.layout.layers import (
    assign_columns,
    assign_depths,
    assign_heights,
    build_digraph,
)
from sankey_layout.layout.links import compute_link_breadths
from sankey_layout.layout.relaxation import compute_node_breadths
from sankey_layout.layout.values import compute_node_values
from sankey_layout.layout.wiring import reset_layout, wire_graph
from sankey_layout.parser.model import Node, SankeyGraph

logger = getLogger(__name__)


def compute_layout(
    graph: SankeyGraph,
    config: LayoutConfig | None = None,
    **options: Any,
) -> LayoutConfig:
    """Compute node rectangles and link bands for all of the graph.

    Either pass a ``LayoutConfig`` or its fields as keyword options
    (``width``, ``height``, ``node_thickness``, ``node_padding``,
    ``iterations``, ``alignment``, ``node_sort``). Every derived field is
    reset first, so the same graph can be laid out again after its inputs
    change. Returns the validated configuration.
    """
    if config is None:
        config = LayoutConfig(**options)
    elif options:
        raise TypeError("Pass either a LayoutConfig or keyword options, not both")
    config.validate()
    _validate_values(graph)

    reset_layout(graph)

    # Phase 1-2: wiring and values
    wire_graph(graph)
    compute_node_values(graph)
    if not graph.nodes:
        return config

    # Phase 3: depth/height
    G = build_digraph(graph)
    max_depth = assign_depths(graph, G)
    assign_heights(graph, G)

    # Phase 4: columns
    n_columns = assign_columns(graph, config.alignment, max_depth)
    position_columns(graph, n_columns, config.width, config.node_thickness)

    # Phase 5: vertical placement
    compute_node_breadths(graph, n_columns, config)

    # Phase 6: link bands
    compute_link_breadths(graph)

    logger.debug(
        "Laid out %d nodes and %d links in %d columns (alignment=%s)",
        len(graph.nodes),
        len(graph.links),
        n_columns,
        config.alignment.value,
    )
    return config


def overflowing_nodes(graph: SankeyGraph, height: float, tolerance: float = 1e-6) -> list[Node]:
    """Return nodes that extend past the top or bottom of the canvas."""
    return [
        node
        for node in graph.nodes
        if node.y0 < -tolerance or node.y1 > height + tolerance
    ]


def _validate_values(graph: SankeyGraph) -> None:
    for i, link in enumerate(graph.links):
        if not _is_finite_number(link.value) or link.value < 0:
            raise InvalidConfigurationError(
                f"Link {i} has invalid value {link.value!r}; "
                "values must be finite and non-negative"
            )
    for node in graph.nodes:
        if node.fixed_value is None:
            continue
        if not _is_finite_number(node.fixed_value) or node.fixed_value < 0:
            raise InvalidConfigurationError(
                f"Node {node.id!r} has invalid value {node.fixed_value!r}"
            )


def _is_finite_number(value: object) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )
