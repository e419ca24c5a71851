"""Link band geometry.

Each node's outgoing links are stacked down its right edge in the order of
their targets' vertical positions, and incoming links down its left edge
in the order of their sources. A link's ``y0``/``y1`` are the centres of
its band at the source and the target.
"""

from __future__ import annotations

__all__ = [
    "LinkPath",
    "compute_link_breadths",
    "link_horizontal",
    "link_offset",
    "reorder_links",
    "reorder_neighbour_links",
]

from dataclasses import dataclass

from sankey_layout.parser.model import Link, Node, SankeyGraph


@dataclass
class LinkPath:
    """A horizontal cubic Bezier between two attachment points."""

    x0: float
    y0: float
    x1: float
    y1: float
    width: float

    @property
    def control_points(self) -> tuple[tuple[float, float], tuple[float, float]]:
        x_mid = (self.x0 + self.x1) / 2
        return (x_mid, self.y0), (x_mid, self.y1)

    def to_svg_path(self) -> str:
        """Return SVG path data for the band's centre line."""
        (c1x, c1y), (c2x, c2y) = self.control_points
        return (
            f"M{self.x0:g},{self.y0:g}"
            f"C{c1x:g},{c1y:g} {c2x:g},{c2y:g} {self.x1:g},{self.y1:g}"
        )


def link_horizontal(graph: SankeyGraph, link: Link) -> LinkPath:
    """Return the band path from the source's right edge to the target's left edge."""
    return LinkPath(
        x0=graph.source(link).x1,
        y0=link.y0,
        x1=graph.target(link).x0,
        y1=link.y1,
        width=link.width,
    )


def link_offset(graph: SankeyGraph, link_indices: list[int], link_index: int) -> float:
    """Total width of the links stacked before ``link_index`` on one node edge."""
    offset = 0.0
    for i in link_indices:
        if i == link_index:
            break
        offset += graph.links[i].width
    return offset


def _sort_outgoing(graph: SankeyGraph, node: Node) -> None:
    node.source_links.sort(key=lambda i: (graph.target(graph.links[i]).y0, i))


def _sort_incoming(graph: SankeyGraph, node: Node) -> None:
    node.target_links.sort(key=lambda i: (graph.source(graph.links[i]).y0, i))


def reorder_links(graph: SankeyGraph) -> None:
    """Sort every node's link lists by the position of the node at the other end."""
    for node in graph.nodes:
        _sort_outgoing(graph, node)
        _sort_incoming(graph, node)


def reorder_neighbour_links(graph: SankeyGraph, node: Node) -> None:
    """Re-sort the link lists that depend on ``node``'s position."""
    for link in graph.incoming(node):
        _sort_outgoing(graph, graph.source(link))
    for link in graph.outgoing(node):
        _sort_incoming(graph, graph.target(link))


def compute_link_breadths(graph: SankeyGraph) -> None:
    """Stack link bands along both edges of every node."""
    reorder_links(graph)
    for node in graph.nodes:
        y0 = node.y0
        y1 = node.y0
        for link in graph.outgoing(node):
            link.y0 = y0 + link.width / 2
            y0 += link.width
        for link in graph.incoming(node):
            link.y1 = y1 + link.width / 2
            y1 += link.width
