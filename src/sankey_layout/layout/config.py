"""Layout configuration."""

from __future__ import annotations

__all__ = ["LayoutConfig", "NodeComparator"]

import math
from dataclasses import dataclass
from typing import Callable

from sankey_layout.errors import InvalidConfigurationError
from sankey_layout.layout.alignment import Alignment
from sankey_layout.layout.constants import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    DEFAULT_ALIGNMENT,
    ITERATIONS,
    NODE_PADDING,
    NODE_THICKNESS,
)
from sankey_layout.parser.model import Node

NodeComparator = Callable[[Node, Node], int]


@dataclass
class LayoutConfig:
    """Options for a single layout run.

    ``alignment`` accepts an ``Alignment`` or its string value. ``node_sort``
    is a ``cmp``-style comparator; when given it fixes the order of nodes
    within each column and relaxation no longer re-sorts them.
    """

    width: float = CANVAS_WIDTH
    height: float = CANVAS_HEIGHT
    node_thickness: float = NODE_THICKNESS
    node_padding: float = NODE_PADDING
    iterations: int = ITERATIONS
    alignment: Alignment | str = DEFAULT_ALIGNMENT
    node_sort: NodeComparator | None = None

    def validate(self) -> None:
        """Normalize ``alignment`` and reject out-of-range options."""
        for name in ("width", "height", "node_thickness"):
            value = getattr(self, name)
            if not _is_number(value) or not math.isfinite(value) or value <= 0:
                raise InvalidConfigurationError(
                    f"{name} must be a positive number, got {value!r}"
                )
        if not _is_number(self.node_padding) or not self.node_padding >= 0:
            raise InvalidConfigurationError(
                f"node_padding must be non-negative, got {self.node_padding!r}"
            )
        if (
            isinstance(self.iterations, bool)
            or not isinstance(self.iterations, int)
            or self.iterations < 0
        ):
            raise InvalidConfigurationError(
                f"iterations must be a non-negative integer, got {self.iterations!r}"
            )
        if not isinstance(self.alignment, Alignment):
            try:
                self.alignment = Alignment(str(self.alignment).lower())
            except ValueError:
                choices = ", ".join(a.value for a in Alignment)
                raise InvalidConfigurationError(
                    f"Unknown alignment {self.alignment!r} (expected one of: {choices})"
                ) from None
        if self.node_sort is not None and not callable(self.node_sort):
            raise InvalidConfigurationError("node_sort must be callable")


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
