"""Depth, height and column assignment (X-coordinate layering).

Depth is found by breadth-first propagation from every node along outgoing
links: a node keeps the number of the last pass that reached it, so it ends
at 1 + the maximum depth of its predecessors. Height is the mirror image
along incoming links. Both passes are capped at the node count, which is
only exceeded when the graph has a cycle.
"""

from __future__ import annotations

__all__ = ["assign_columns", "assign_depths", "assign_heights", "build_digraph"]

import networkx as nx

from sankey_layout.errors import CyclicGraphError
from sankey_layout.layout.alignment import Alignment
from sankey_layout.parser.model import SankeyGraph


def build_digraph(graph: SankeyGraph) -> nx.DiGraph:
    """Build a networkx view of a wired graph, keyed by node index."""
    G = nx.DiGraph()
    G.add_nodes_from(range(len(graph.nodes)))
    for link in graph.links:
        G.add_edge(link.source, link.target)
    return G


def assign_depths(graph: SankeyGraph, G: nx.DiGraph | None = None) -> int:
    """Assign ``node.depth`` for every node. Returns the maximum depth."""
    G = G if G is not None else build_digraph(graph)
    layers = _propagate(graph, G, G.successors, "depth")
    for idx, layer in layers.items():
        graph.nodes[idx].depth = layer
    return max(layers.values(), default=0)


def assign_heights(graph: SankeyGraph, G: nx.DiGraph | None = None) -> int:
    """Assign ``node.height`` for every node. Returns the maximum height."""
    G = G if G is not None else build_digraph(graph)
    layers = _propagate(graph, G, G.predecessors, "height")
    for idx, layer in layers.items():
        graph.nodes[idx].height = layer
    return max(layers.values(), default=0)


def assign_columns(graph: SankeyGraph, alignment: Alignment, max_depth: int) -> int:
    """Assign ``node.column`` from the alignment strategy. Returns the column count."""
    for node in graph.nodes:
        node.column = max(0, alignment.resolve(node, graph, max_depth))
    return max((node.column for node in graph.nodes), default=0) + 1


def _propagate(graph: SankeyGraph, G: nx.DiGraph, step, what: str) -> dict[int, int]:
    n = len(graph.nodes)
    layers = {idx: 0 for idx in G}
    current = list(G)
    layer = 0
    while current:
        following: dict[int, None] = {}
        for idx in current:
            layers[idx] = layer
            for neighbour in step(idx):
                following[neighbour] = None
        layer += 1
        if layer > n:
            cycle = _find_cycle(graph, G)
            path = " -> ".join(repr(node_id) for node_id in cycle)
            raise CyclicGraphError(
                f"Circular link detected while assigning {what}: {path}", cycle
            )
        current = list(following)
    return layers


def _find_cycle(graph: SankeyGraph, G: nx.DiGraph) -> list:
    try:
        edges = nx.find_cycle(G)
    except nx.NetworkXNoCycle:
        return []
    cycle = [graph.nodes[u].id for u, _ in edges]
    cycle.append(graph.nodes[edges[-1][1]].id)
    return cycle
