"""Exceptions raised by the layout engine.

All of them are deterministic input-validation failures: nothing is
retried and no partial layout is left behind for the caller to use.
"""

from __future__ import annotations

__all__ = [
    "CyclicGraphError",
    "GraphIntegrityError",
    "InvalidConfigurationError",
    "SankeyError",
]


class SankeyError(ValueError):
    """Base class for all sankey-layout errors."""


class GraphIntegrityError(SankeyError):
    """A link references an unknown node, or a node id is duplicated."""


class CyclicGraphError(SankeyError):
    """Depth or height propagation did not settle within the node count."""

    def __init__(self, message: str, cycle: list | None = None) -> None:
        super().__init__(message)
        self.cycle = cycle or []


class InvalidConfigurationError(SankeyError):
    """Layout options or input values are out of range."""
