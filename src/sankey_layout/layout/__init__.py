"""Sankey layout engine."""

from sankey_layout.layout.alignment import Alignment
from sankey_layout.layout.config import LayoutConfig
from sankey_layout.layout.engine import compute_layout, overflowing_nodes
from sankey_layout.layout.links import LinkPath, link_horizontal

__all__ = [
    "Alignment",
    "LayoutConfig",
    "LinkPath",
    "compute_layout",
    "link_horizontal",
    "overflowing_nodes",
]
