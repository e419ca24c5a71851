"""Vertical node placement: stacking, iterative relaxation, collisions.

Nodes in a column are stacked top to bottom with a fixed padding and a
height proportional to their value. Relaxation then alternates two sweeps:
one pulls every node toward the position where its outgoing links would be
horizontal, the other does the same for incoming links. Each column is
de-overlapped after it moves, preserving its vertical order.
"""

from __future__ import annotations

__all__ = [
    "compute_node_breadths",
    "effective_padding",
    "initial_order",
    "resolve_collisions",
    "value_scale",
]

from functools import cmp_to_key
from logging import getLogger

from sankey_layout.layout.config import LayoutConfig, NodeComparator
from sankey_layout.layout.constants import (
    ALPHA_DECAY,
    COLLISION_EPSILON,
    MAX_PADDING_SHARE,
)
from sankey_layout.layout.links import link_offset, reorder_links, reorder_neighbour_links
from sankey_layout.parser.model import Node, SankeyGraph

logger = getLogger(__name__)


def compute_node_breadths(
    graph: SankeyGraph, n_columns: int, config: LayoutConfig
) -> list[list[Node]]:
    """Set ``y0``/``y1`` on nodes, ``width`` on links and ``graph.value_scale``.

    Returns the columns in their final top-to-bottom order.
    """
    columns: list[list[Node]] = [[] for _ in range(n_columns)]
    for node in graph.nodes:
        columns[node.column].append(node)

    initial_order(graph, columns, config.node_sort)
    padding = effective_padding(columns, config.height, config.node_padding)
    ky = value_scale(columns, config.height, padding)
    graph.value_scale = ky
    logger.debug("value scale %g, padding %g, %d columns", ky, padding, n_columns)

    for link in graph.links:
        link.width = link.value * ky
    _stack_columns(columns, ky, config.height, padding)
    reorder_links(graph)

    keep_order = config.node_sort is not None
    for i in range(config.iterations):
        alpha = ALPHA_DECAY**i
        _relax_toward_targets(graph, columns, alpha, config.height, padding, keep_order)
        _relax_toward_sources(graph, columns, alpha, config.height, padding, keep_order)

    return columns


def effective_padding(columns: list[list[Node]], height: float, node_padding: float) -> float:
    """Return ``node_padding`` unless its gaps alone fill the fullest column.

    In that case the gaps are shrunk to ``MAX_PADDING_SHARE`` of the height
    so nodes keep a visible size.
    """
    longest = max((len(column) for column in columns), default=0)
    if longest <= 1 or (longest - 1) * node_padding < height:
        return node_padding
    return height * MAX_PADDING_SHARE / (longest - 1)


def value_scale(columns: list[list[Node]], height: float, padding: float) -> float:
    """Return the value-to-height factor shared by the whole diagram.

    It is set by the column that binds: the one whose padding leaves the
    least room per unit of value.
    """
    scales = []
    for column in columns:
        total = sum(node.value for node in column)
        if total > 0:
            scales.append((height - (len(column) - 1) * padding) / total)
    return min(scales, default=0.0)


def initial_order(
    graph: SankeyGraph,
    columns: list[list[Node]],
    node_sort: NodeComparator | None = None,
) -> None:
    """Order each column before stacking.

    With a comparator the columns are simply sorted by it. Otherwise columns
    are visited left to right and each node is keyed on the value-weighted
    mean rank of its sources; nodes without sources keep their own position.
    Ties fall back to input order.
    """
    if node_sort is not None:
        for column in columns:
            column.sort(key=cmp_to_key(node_sort))
        return

    rank: dict[int, int] = {}
    for column in columns:
        keys: dict[int, float] = {}
        for pos, node in enumerate(column):
            total = 0.0
            weight = 0.0
            for link in graph.incoming(node):
                total += rank[link.source] * link.value
                weight += link.value
            keys[node.index] = total / weight if weight > 0 else float(pos)
        column.sort(key=lambda n: (keys[n.index], n.index))
        for pos, node in enumerate(column):
            rank[node.index] = pos


def resolve_collisions(column: list[Node], height: float, padding: float) -> None:
    """Push overlapping nodes apart, keeping their order.

    The column is swept downward from the canvas top. If that leaves the
    last node below the canvas, it is swept upward from the canvas bottom.
    If the stack is taller than the canvas, a final downward sweep anchors
    it at the top and lets it overflow past the bottom edge.
    """
    if not column:
        return
    _push_down(column, 0.0, padding)
    if column[-1].y1 - height > COLLISION_EPSILON:
        _push_up(column, height, padding)
        if column[0].y0 < -COLLISION_EPSILON:
            _push_down(column, 0.0, padding)
            logger.debug(
                "column %d overflows the canvas by %g",
                column[0].column,
                column[-1].y1 - height,
            )


def _push_down(column: list[Node], y: float, padding: float) -> None:
    for node in column:
        dy = y - node.y0
        if dy > COLLISION_EPSILON:
            _shift(node, dy)
        y = node.y1 + padding


def _push_up(column: list[Node], y: float, padding: float) -> None:
    for node in reversed(column):
        dy = node.y1 - y
        if dy > COLLISION_EPSILON:
            _shift(node, -dy)
        y = node.y0 - padding


def _shift(node: Node, dy: float) -> None:
    node.y0 += dy
    node.y1 += dy


def _stack_columns(
    columns: list[list[Node]], ky: float, height: float, padding: float
) -> None:
    for column in columns:
        y = 0.0
        for node in column:
            node.y0 = y
            node.y1 = y + node.value * ky
            y = node.y1 + padding
        # Spread the leftover space evenly around the nodes
        spare = (height - y + padding) / (len(column) + 1)
        if spare > 0:
            for i, node in enumerate(column):
                _shift(node, spare * (i + 1))


def _relax_toward_targets(
    graph: SankeyGraph,
    columns: list[list[Node]],
    alpha: float,
    height: float,
    padding: float,
    keep_order: bool,
) -> None:
    for column in reversed(columns[:-1]):
        for node in column:
            y = 0.0
            w = 0.0
            for link in graph.outgoing(node):
                target = graph.target(link)
                v = link.value * (target.column - node.column)
                # source.y0 at which this link would leave and arrive level
                ideal = (
                    target.y0
                    + link_offset(graph, target.target_links, link.index)
                    - link_offset(graph, node.source_links, link.index)
                )
                y += ideal * v
                w += v
            if not w > 0:
                continue
            _shift(node, (y / w - node.y0) * alpha)
            reorder_neighbour_links(graph, node)
        _settle(column, height, padding, keep_order)


def _relax_toward_sources(
    graph: SankeyGraph,
    columns: list[list[Node]],
    alpha: float,
    height: float,
    padding: float,
    keep_order: bool,
) -> None:
    for column in columns[1:]:
        for node in column:
            y = 0.0
            w = 0.0
            for link in graph.incoming(node):
                source = graph.source(link)
                v = link.value * (node.column - source.column)
                ideal = (
                    source.y0
                    + link_offset(graph, source.source_links, link.index)
                    - link_offset(graph, node.target_links, link.index)
                )
                y += ideal * v
                w += v
            if not w > 0:
                continue
            _shift(node, (y / w - node.y0) * alpha)
            reorder_neighbour_links(graph, node)
        _settle(column, height, padding, keep_order)


def _settle(column: list[Node], height: float, padding: float, keep_order: bool) -> None:
    if not keep_order:
        column.sort(key=lambda n: (n.y0, n.index))
    resolve_collisions(column, height, padding)
