"""Layout constants used across layout modules.

Centralizes defaults for the configuration surface and the numeric
tolerances of the relaxation phases.
"""

# ---------------------------------------------------------------------------
# Canvas defaults (used as LayoutConfig defaults)
# ---------------------------------------------------------------------------
CANVAS_WIDTH: float = 960.0
"""Default horizontal extent of the layout."""

CANVAS_HEIGHT: float = 500.0
"""Default vertical extent of the layout."""

# ---------------------------------------------------------------------------
# Node sizing
# ---------------------------------------------------------------------------
NODE_THICKNESS: float = 24.0
"""Horizontal thickness of every node rectangle."""

NODE_PADDING: float = 8.0
"""Vertical gap between stacked nodes in a column."""

# ---------------------------------------------------------------------------
# Relaxation
# ---------------------------------------------------------------------------
ITERATIONS: int = 6
"""Number of relaxation rounds (each round is two sweeps)."""

ALPHA_DECAY: float = 0.99
"""Per-round decay of the relaxation step: alpha = ALPHA_DECAY ** round."""

COLLISION_EPSILON: float = 1e-6
"""Shifts smaller than this are ignored during collision resolution."""

MAX_PADDING_SHARE: float = 0.5
"""Share of the canvas height given to gaps when the configured padding cannot fit."""

DEFAULT_ALIGNMENT: str = "justify"
"""Alignment strategy used when none is given."""
