"""sankey-layout: deterministic Sankey diagram layout."""

from sankey_layout.errors import (
    CyclicGraphError,
    GraphIntegrityError,
    InvalidConfigurationError,
    SankeyError,
)
from sankey_layout.layout import Alignment, LayoutConfig, compute_layout
from sankey_layout.parser import ById, ByReference, Link, Node, SankeyGraph

__version__ = "0.1.0"

__all__ = [
    "Alignment",
    "ById",
    "ByReference",
    "CyclicGraphError",
    "GraphIntegrityError",
    "InvalidConfigurationError",
    "LayoutConfig",
    "Link",
    "Node",
    "SankeyError",
    "SankeyGraph",
    "compute_layout",
]
