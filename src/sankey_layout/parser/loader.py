"""Build graphs from JSON-style documents and files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from sankey_layout.parser.mermaid import parse_sankey_mermaid
from sankey_layout.parser.model import SankeyGraph


def graph_from_dict(data: dict[str, Any]) -> SankeyGraph:
    """Build a graph from ``{"title", "nodes": [...], "links": [...]}``.

    Nodes are ``{"id", "label"?, "value"?, "color"?}``; links are
    ``{"source", "target", "value"}`` with source/target given by node id.
    When the document has no "nodes" list, nodes are created from the links
    in order of first appearance; otherwise links must reference listed ids.
    """
    if not isinstance(data, dict):
        raise ValueError("Sankey document must be a JSON object")

    graph = SankeyGraph(title=str(data.get("title", "")))
    for i, spec in enumerate(data.get("nodes", [])):
        if not isinstance(spec, dict) or "id" not in spec:
            raise ValueError(f"Node {i} must be an object with an 'id'")
        graph.add_node(spec["id"], label=spec.get("label"), value=spec.get("value"))
        if spec.get("color"):
            graph.colors[spec["id"]] = spec["color"]

    derive_nodes = "nodes" not in data
    known = {node.id for node in graph.nodes}
    for i, spec in enumerate(data.get("links", [])):
        try:
            source, target, value = spec["source"], spec["target"], spec["value"]
        except (KeyError, TypeError):
            raise ValueError(
                f"Link {i} must be an object with 'source', 'target' and 'value'"
            ) from None
        for node_id in (source, target):
            if derive_nodes and node_id not in known:
                graph.add_node(node_id)
                known.add(node_id)
        graph.add_link(source, target, value)
    return graph


def load_graph(path: Path) -> SankeyGraph:
    """Load a graph from a ``.json`` document or a Mermaid-style text file."""
    text = Path(path).read_text()
    if Path(path).suffix.lower() == ".json":
        return graph_from_dict(json.loads(text))
    return parse_sankey_mermaid(text)
