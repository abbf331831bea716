"""Shared constants for room geometry synthesis.

All lengths are world units (meters).
"""

# Walls or segments shorter than this are drawing noise and never emitted
LENGTH_TOLERANCE = 0.01

# Minimum gap between two parametric breakpoints on an edge
PARAMETRIC_EPSILON = 0.001

# Squared length below which an edge is treated as degenerate
DEGENERATE_LENGTH_SQ = 1e-4

WORLD_UP = (0.0, 1.0, 0.0)

# Wall defaults
DEFAULT_WALL_HEIGHT = 2.0
DEFAULT_WALL_THICKNESS = 0.15

# Grid texture / drawing canvas defaults
DEFAULT_GRID_SIZE = 20
DEFAULT_DRAWING_WIDTH = 400.0
DEFAULT_DRAWING_HEIGHT = 400.0
DEFAULT_CANVAS_SIZE = 400.0
DEFAULT_WORLD_SCALE = 0.05  # drawing px -> world units

# Room label plane
LABEL_HEIGHT_OFFSET = 0.1
LABEL_WIDTH = 2.0
LABEL_HEIGHT = 0.5
