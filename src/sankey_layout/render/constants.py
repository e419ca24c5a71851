"""Render constants used across render modules.

Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
CANVAS_PADDING: float = 40.0
"""Default padding around the laid-out diagram."""

TITLE_HEIGHT: float = 40.0
"""Vertical space reserved above the diagram when a title is present."""

TITLE_BASELINE: float = 28.0
"""Y position of the title baseline."""

# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------
LABEL_MARGIN: float = 6.0
"""Distance between a node edge and its label."""

CHAR_WIDTH_RATIO: float = 0.55
"""Approximate character width as a fraction of the font size."""

LINE_HEIGHT_RATIO: float = 1.2
"""Label box height as a multiple of the font size."""
