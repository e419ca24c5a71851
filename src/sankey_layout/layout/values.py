"""Node value computation."""

from __future__ import annotations

__all__ = ["compute_node_values"]

from logging import getLogger

from sankey_layout.parser.model import SankeyGraph

logger = getLogger(__name__)


def compute_node_values(graph: SankeyGraph) -> None:
    """Set each node's value from its links.

    Nodes without an explicit value take the larger of their outgoing and
    incoming totals (0 for unlinked nodes). Explicit values below that total
    are raised to it so every link band fits on its node.
    """
    for node in graph.nodes:
        out_sum = sum(graph.links[i].value for i in node.source_links)
        in_sum = sum(graph.links[i].value for i in node.target_links)
        link_total = max(out_sum, in_sum)
        if node.fixed_value is None:
            node.value = link_total
        elif node.fixed_value < link_total:
            logger.warning(
                "Node %r: explicit value %g is below its link total %g; using %g",
                node.id,
                node.fixed_value,
                link_total,
                link_total,
            )
            node.value = link_total
        else:
            node.value = node.fixed_value
