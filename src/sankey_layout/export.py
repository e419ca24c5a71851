"""Export a laid-out graph as a JSON-ready document."""

from __future__ import annotations

from typing import Any

from sankey_layout.layout.links import link_horizontal
from sankey_layout.parser.model import SankeyGraph


def graph_to_dict(graph: SankeyGraph) -> dict[str, Any]:
    """Return the layout output of every node and link.

    Links refer to their nodes by id. Each link also carries its band path
    as SVG path data so a renderer can draw it without further geometry.
    """
    nodes = [
        {
            "id": node.id,
            "label": node.display_label,
            "value": node.value,
            "depth": node.depth,
            "height": node.height,
            "column": node.column,
            "x0": node.x0,
            "x1": node.x1,
            "y0": node.y0,
            "y1": node.y1,
        }
        for node in graph.nodes
    ]
    links = [
        {
            "source": graph.source(link).id,
            "target": graph.target(link).id,
            "value": link.value,
            "width": link.width,
            "y0": link.y0,
            "y1": link.y1,
            "path": link_horizontal(graph, link).to_svg_path(),
        }
        for link in graph.links
    ]
    return {
        "title": graph.title,
        "value_scale": graph.value_scale,
        "nodes": nodes,
        "links": links,
    }
