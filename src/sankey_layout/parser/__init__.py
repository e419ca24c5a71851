"""Sankey graph model and input parsers."""

from sankey_layout.parser.loader import graph_from_dict, load_graph
from sankey_layout.parser.mermaid import parse_sankey_mermaid
from sankey_layout.parser.model import (
    ById,
    ByReference,
    Link,
    Node,
    NodeRef,
    SankeyGraph,
)

__all__ = [
    "ById",
    "ByReference",
    "Link",
    "Node",
    "NodeRef",
    "SankeyGraph",
    "graph_from_dict",
    "load_graph",
    "parse_sankey_mermaid",
]
