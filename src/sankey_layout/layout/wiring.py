"""Graph wiring: resolve link references and populate node link lists."""

from __future__ import annotations

__all__ = ["reset_layout", "wire_graph"]

from sankey_layout.errors import GraphIntegrityError
from sankey_layout.parser.model import ById, NodeId, NodeRef, SankeyGraph


def reset_layout(graph: SankeyGraph) -> None:
    """Clear every field the layout engine writes."""
    for node in graph.nodes:
        node.reset()
    for link in graph.links:
        link.reset()
    graph.value_scale = 0.0


def wire_graph(graph: SankeyGraph) -> None:
    """Resolve each link's source/target to node indices.

    Outgoing and incoming link lists are filled in link input order.
    Raises GraphIntegrityError for duplicate node ids and for links that
    reference a node outside the graph.
    """
    index_by_id: dict[NodeId, int] = {}
    for i, node in enumerate(graph.nodes):
        if node.id in index_by_id:
            raise GraphIntegrityError(f"Duplicate node id {node.id!r}")
        index_by_id[node.id] = i
        node.index = i

    for i, link in enumerate(graph.links):
        link.index = i
        link.source = _resolve(graph, index_by_id, link.source_ref, i, "source")
        link.target = _resolve(graph, index_by_id, link.target_ref, i, "target")
        graph.nodes[link.source].source_links.append(i)
        graph.nodes[link.target].target_links.append(i)


def _resolve(
    graph: SankeyGraph,
    index_by_id: dict[NodeId, int],
    ref: NodeRef,
    link_index: int,
    end: str,
) -> int:
    if isinstance(ref, ById):
        if ref.id not in index_by_id:
            raise GraphIntegrityError(
                f"Link {link_index} {end} references unknown node {ref.id!r}"
            )
        return index_by_id[ref.id]

    idx = index_by_id.get(ref.node.id)
    if idx is None or graph.nodes[idx] is not ref.node:
        raise GraphIntegrityError(
            f"Link {link_index} {end} references node {ref.node.id!r} "
            "which is not part of this graph"
        )
    return idx
