"""Parser for Mermaid-flavoured Sankey definitions with %%sankey directives.

Uses a simple line-by-line approach rather than a full grammar parser.
Two styles are accepted and may be mixed:

    %%sankey title: Energy
    %%sankey node: coal | Coal | 40
    %%sankey color: coal | #444444
    coal[Coal]
    coal -->|25| power

and Mermaid's own ``sankey-beta`` block of ``source,target,value`` rows.
"""

from __future__ import annotations

import csv
import re

from sankey_layout.parser.model import NodeId, SankeyGraph

# Node pattern: node_id[label]
_NODE_PATTERN = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)\s*\[(.+?)\]$")

# Link pattern: source -->|value| target
_LINK_PATTERN = re.compile(
    r"^([a-zA-Z_][a-zA-Z0-9_]*)\s*"  # source
    r"-->\s*\|([^|]*)\|\s*"  # |value|
    r"([a-zA-Z_][a-zA-Z0-9_]*)$"  # target
)


def parse_sankey_mermaid(text: str) -> SankeyGraph:
    """Parse a Sankey definition into a graph ready for layout."""
    graph = SankeyGraph()
    in_csv_block = False

    for lineno, line in enumerate(text.strip().split("\n"), start=1):
        stripped = line.strip()
        if not stripped:
            continue

        # Metro-style directives
        if stripped.startswith("%%sankey"):
            _parse_directive(stripped, graph, lineno)
            continue

        # Skip regular comments
        if stripped.startswith("%%"):
            continue

        if stripped == "sankey-beta":
            in_csv_block = True
            continue

        link_m = _LINK_PATTERN.match(stripped)
        if link_m:
            source, value, target = link_m.groups()
            _add_link(graph, source, target, value, lineno)
            continue

        node_m = _NODE_PATTERN.match(stripped)
        if node_m:
            node_id, label = node_m.groups()
            node = _ensure_node(graph, node_id)
            node.label = label.strip()
            continue

        if in_csv_block:
            _parse_csv_row(stripped, graph, lineno)
            continue

        raise ValueError(f"Line {lineno}: cannot parse {stripped!r}")

    return graph


def _parse_directive(line: str, graph: SankeyGraph, lineno: int) -> None:
    """Parse a %%sankey directive line."""
    content = line[len("%%sankey") :].strip()

    if content.startswith("title:"):
        graph.title = content[len("title:") :].strip()
    elif content.startswith("node:"):
        parts = [p.strip() for p in content[len("node:") :].split("|")]
        node = _ensure_node(graph, parts[0])
        if len(parts) >= 2 and parts[1]:
            node.label = parts[1]
        if len(parts) >= 3 and parts[2]:
            node.fixed_value = _parse_value(parts[2], lineno)
    elif content.startswith("color:"):
        parts = [p.strip() for p in content[len("color:") :].split("|")]
        if len(parts) >= 2 and parts[0] and parts[1]:
            graph.colors[parts[0]] = parts[1]


def _parse_csv_row(line: str, graph: SankeyGraph, lineno: int) -> None:
    row = next(csv.reader([line]))
    if len(row) != 3:
        raise ValueError(
            f"Line {lineno}: expected 'source,target,value', got {line!r}"
        )
    source, target, value = (cell.strip() for cell in row)
    _add_link(graph, source, target, value, lineno)


def _add_link(
    graph: SankeyGraph, source: str, target: str, value: str, lineno: int
) -> None:
    _ensure_node(graph, source)
    _ensure_node(graph, target)
    graph.add_link(source, target, _parse_value(value, lineno))


def _ensure_node(graph: SankeyGraph, node_id: NodeId):
    node = graph.get_node(node_id)
    if node is None:
        node = graph.add_node(node_id)
    return node


def _parse_value(text: str, lineno: int) -> float:
    try:
        return float(text.strip().replace(",", ""))
    except ValueError:
        raise ValueError(f"Line {lineno}: invalid flow value {text.strip()!r}") from None
