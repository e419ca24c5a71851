"""Layout validator: programmatic checks for layout defects.

Runs a suite of checks against a laid-out SankeyGraph and returns
a list of Violation objects describing any problems found.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from sankey_layout.parser.model import SankeyGraph

EPSILON = 1e-5


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class Violation:
    check: str
    severity: Severity
    message: str
    context: dict = field(default_factory=dict)


def validate_layout(
    graph: SankeyGraph, node_thickness: float, padding: float, height: float
) -> list[Violation]:
    """Run all layout checks and return violations."""
    violations: list[Violation] = []
    violations.extend(check_coordinate_sanity(graph))
    violations.extend(check_node_thickness(graph, node_thickness))
    violations.extend(check_node_size(graph))
    violations.extend(check_link_widths(graph))
    violations.extend(check_link_partition(graph))
    violations.extend(check_column_overlap(graph, padding))
    violations.extend(check_forward_links(graph))
    violations.extend(check_canvas_bounds(graph, height))
    return violations


def check_coordinate_sanity(graph: SankeyGraph) -> list[Violation]:
    """Check that no coordinate is NaN or infinite."""
    violations: list[Violation] = []
    for node in graph.nodes:
        coords = (node.x0, node.x1, node.y0, node.y1)
        if not all(math.isfinite(c) for c in coords):
            violations.append(
                Violation(
                    check="coordinate_sanity",
                    severity=Severity.ERROR,
                    message=f"Node '{node.id}' has non-finite coordinates {coords}",
                    context={"node": node.id},
                )
            )
    for link in graph.links:
        if not all(math.isfinite(c) for c in (link.y0, link.y1, link.width)):
            violations.append(
                Violation(
                    check="coordinate_sanity",
                    severity=Severity.ERROR,
                    message=f"Link {link.index} has non-finite geometry",
                    context={"link": link.index},
                )
            )
    return violations


def check_node_thickness(graph: SankeyGraph, node_thickness: float) -> list[Violation]:
    """Check that every node is exactly node_thickness wide."""
    return [
        Violation(
            check="node_thickness",
            severity=Severity.ERROR,
            message=(
                f"Node '{node.id}' is {node.x1 - node.x0:.3f} wide, "
                f"expected {node_thickness:.3f}"
            ),
            context={"node": node.id},
        )
        for node in graph.nodes
        if abs((node.x1 - node.x0) - node_thickness) > EPSILON
    ]


def check_node_size(graph: SankeyGraph) -> list[Violation]:
    """Check that node heights are value * value_scale."""
    violations: list[Violation] = []
    for node in graph.nodes:
        expected = node.value * graph.value_scale
        actual = node.y1 - node.y0
        if actual < -EPSILON or abs(actual - expected) > EPSILON * max(1.0, expected):
            violations.append(
                Violation(
                    check="node_size",
                    severity=Severity.ERROR,
                    message=(
                        f"Node '{node.id}' height {actual:.3f} does not match "
                        f"value {node.value:g} * scale {graph.value_scale:.4f}"
                    ),
                    context={"node": node.id},
                )
            )
    return violations


def check_link_widths(graph: SankeyGraph) -> list[Violation]:
    """Check that every link width uses the same value scale."""
    return [
        Violation(
            check="link_width",
            severity=Severity.ERROR,
            message=(
                f"Link {link.index} width {link.width:.3f} != "
                f"{link.value:g} * {graph.value_scale:.4f}"
            ),
            context={"link": link.index},
        )
        for link in graph.links
        if abs(link.width - link.value * graph.value_scale) > EPSILON * max(1.0, link.width)
    ]


def check_link_partition(graph: SankeyGraph) -> list[Violation]:
    """Check that link bands tile each node edge from the top without overlap."""
    violations: list[Violation] = []
    for node in graph.nodes:
        for side, links, attr in (
            ("right", graph.outgoing(node), "y0"),
            ("left", graph.incoming(node), "y1"),
        ):
            if not links:
                continue
            # Links are kept in stacking order, so walk them as stored
            bands = [
                (getattr(lk, attr) - lk.width / 2, getattr(lk, attr) + lk.width / 2)
                for lk in links
            ]
            y = node.y0
            for top, bottom in bands:
                if abs(top - y) > EPSILON * max(1.0, abs(y)):
                    violations.append(
                        Violation(
                            check="link_partition",
                            severity=Severity.ERROR,
                            message=(
                                f"Node '{node.id}' {side} edge: band starts at "
                                f"{top:.3f}, expected {y:.3f}"
                            ),
                            context={"node": node.id, "side": side},
                        )
                    )
                    break
                y = bottom
            if y > node.y1 + EPSILON * max(1.0, abs(node.y1)):
                violations.append(
                    Violation(
                        check="link_partition",
                        severity=Severity.ERROR,
                        message=(
                            f"Node '{node.id}' {side} edge: bands end at {y:.3f}, "
                            f"past node bottom {node.y1:.3f}"
                        ),
                        context={"node": node.id, "side": side},
                    )
                )
    return violations


def check_column_overlap(graph: SankeyGraph, padding: float) -> list[Violation]:
    """Check that nodes in a column keep at least `padding` between them."""
    violations: list[Violation] = []
    for column in graph.columns():
        for upper, lower in zip(column, column[1:]):
            gap = lower.y0 - upper.y1
            if gap < padding - EPSILON:
                violations.append(
                    Violation(
                        check="column_overlap",
                        severity=Severity.ERROR,
                        message=(
                            f"Nodes '{upper.id}' and '{lower.id}' in column "
                            f"{upper.column} are {gap:.3f} apart (padding {padding:g})"
                        ),
                        context={"upper": upper.id, "lower": lower.id},
                    )
                )
    return violations


def check_forward_links(graph: SankeyGraph) -> list[Violation]:
    """Check that every link goes from a lower column to a higher one."""
    return [
        Violation(
            check="forward_links",
            severity=Severity.ERROR,
            message=(
                f"Link '{graph.source(link).id}' -> '{graph.target(link).id}' "
                f"does not point right"
            ),
            context={"link": link.index},
        )
        for link in graph.links
        if graph.source(link).column >= graph.target(link).column
    ]


def check_canvas_bounds(graph: SankeyGraph, height: float) -> list[Violation]:
    """Warn about nodes that overflow the canvas vertically."""
    return [
        Violation(
            check="canvas_bounds",
            severity=Severity.WARNING,
            message=f"Node '{node.id}' spans {node.y0:.1f}..{node.y1:.1f} outside 0..{height:g}",
            context={"node": node.id},
        )
        for node in graph.nodes
        if node.y0 < -EPSILON or node.y1 > height + EPSILON
    ]
