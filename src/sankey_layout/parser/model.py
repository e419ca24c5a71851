"""Data model for Sankey flow graphs.

The graph is an arena: nodes and links live in flat lists and refer to each
other by integer index. Links are built with a tagged reference (``ById`` or
``ByReference``) that the layout engine resolves once while wiring.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

NodeId = Union[int, str]


@dataclass(frozen=True)
class ById:
    """Reference to a node by its id."""

    id: NodeId


@dataclass(frozen=True)
class ByReference:
    """Reference to a node object that must belong to the same graph."""

    node: Node


NodeRef = Union[ById, ByReference]


def node_ref(target: NodeRef | Node | NodeId) -> NodeRef:
    """Wrap a node, an id or an existing reference as a ``NodeRef``."""
    if isinstance(target, (ById, ByReference)):
        return target
    if isinstance(target, Node):
        return ByReference(target)
    return ById(target)


@dataclass(eq=False)
class Node:
    """A node in the flow graph."""

    id: NodeId
    label: str | None = None
    fixed_value: float | None = None
    # Populated by layout engine
    index: int = -1
    value: float = 0.0
    depth: int = 0
    height: int = 0
    column: int = 0
    x0: float = 0.0
    x1: float = 0.0
    y0: float = 0.0
    y1: float = 0.0
    source_links: list[int] = field(default_factory=list)  # outgoing
    target_links: list[int] = field(default_factory=list)  # incoming

    @property
    def display_label(self) -> str:
        return self.label if self.label is not None else str(self.id)

    def reset(self) -> None:
        self.index = -1
        self.value = 0.0
        self.depth = 0
        self.height = 0
        self.column = 0
        self.x0 = self.x1 = self.y0 = self.y1 = 0.0
        self.source_links = []
        self.target_links = []


@dataclass(eq=False)
class Link:
    """A weighted directed edge between two nodes."""

    source_ref: NodeRef
    target_ref: NodeRef
    value: float
    # Populated by layout engine
    index: int = -1
    source: int = -1
    target: int = -1
    width: float = 0.0
    y0: float = 0.0
    y1: float = 0.0

    def reset(self) -> None:
        self.index = -1
        self.source = -1
        self.target = -1
        self.width = 0.0
        self.y0 = self.y1 = 0.0


@dataclass
class SankeyGraph:
    """Complete Sankey graph definition plus the results of the last layout."""

    title: str = ""
    nodes: list[Node] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    # Node id -> colour, consumed by renderers only
    colors: dict[NodeId, str] = field(default_factory=dict)
    # Populated by layout engine
    value_scale: float = 0.0

    def add_node(
        self,
        node_id: NodeId,
        label: str | None = None,
        value: float | None = None,
    ) -> Node:
        node = Node(id=node_id, label=label, fixed_value=value)
        self.nodes.append(node)
        return node

    def add_link(
        self,
        source: NodeRef | Node | NodeId,
        target: NodeRef | Node | NodeId,
        value: float,
    ) -> Link:
        link = Link(source_ref=node_ref(source), target_ref=node_ref(target), value=value)
        self.links.append(link)
        return link

    def get_node(self, node_id: NodeId) -> Node | None:
        """Return the first node with the given id, or None."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def source(self, link: Link) -> Node:
        """Return the resolved source node of a wired link."""
        return self.nodes[link.source]

    def target(self, link: Link) -> Node:
        """Return the resolved target node of a wired link."""
        return self.nodes[link.target]

    def outgoing(self, node: Node) -> list[Link]:
        return [self.links[i] for i in node.source_links]

    def incoming(self, node: Node) -> list[Link]:
        return [self.links[i] for i in node.target_links]

    def columns(self) -> list[list[Node]]:
        """Return nodes grouped by column, each column ordered top to bottom."""
        if not self.nodes:
            return []
        n_columns = max(node.column for node in self.nodes) + 1
        columns: list[list[Node]] = [[] for _ in range(n_columns)]
        for node in self.nodes:
            columns[node.column].append(node)
        for column in columns:
            column.sort(key=lambda n: (n.y0, n.index))
        return columns

    def total_value(self) -> float:
        """Total flow leaving the source nodes."""
        return sum(node.value for node in self.nodes if not node.target_links)
