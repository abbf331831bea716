"""Synthesizer configuration."""

import os
from dataclasses import dataclass

from .constants import (
    DEFAULT_CANVAS_SIZE,
    DEFAULT_GRID_SIZE,
    DEFAULT_WALL_HEIGHT,
    DEFAULT_WALL_THICKNESS,
    DEFAULT_WORLD_SCALE,
    LENGTH_TOLERANCE,
)


@dataclass
class SynthesizerConfig:
    """Configuration options for room synthesis."""

    # Wall settings
    wall_height: float = DEFAULT_WALL_HEIGHT
    wall_thickness: float = DEFAULT_WALL_THICKNESS

    # Floor slab uses the wall thickness unless overridden
    floor_thickness: float = DEFAULT_WALL_THICKNESS

    # Grid texture defaults, used when a request does not carry them
    grid_size: int = DEFAULT_GRID_SIZE
    world_scale: float = DEFAULT_WORLD_SCALE

    # Drawing canvas (square, px) for drawing-space input
    canvas_size: float = DEFAULT_CANVAS_SIZE

    tolerance: float = LENGTH_TOLERANCE

    # Generation options
    build_interior_walls: bool = True
    build_label: bool = True

    @classmethod
    def from_env(cls) -> "SynthesizerConfig":
        """Load configuration from environment variables."""
        wall_thickness = float(os.getenv("ROOM_WALL_THICKNESS", DEFAULT_WALL_THICKNESS))
        return cls(
            wall_height=float(os.getenv("ROOM_WALL_HEIGHT", DEFAULT_WALL_HEIGHT)),
            wall_thickness=wall_thickness,
            floor_thickness=float(os.getenv("ROOM_FLOOR_THICKNESS", wall_thickness)),
            grid_size=int(os.getenv("ROOM_GRID_SIZE", DEFAULT_GRID_SIZE)),
            world_scale=float(os.getenv("ROOM_WORLD_SCALE", DEFAULT_WORLD_SCALE)),
            canvas_size=float(os.getenv("ROOM_CANVAS_SIZE", DEFAULT_CANVAS_SIZE)),
            tolerance=float(os.getenv("ROOM_TOLERANCE", LENGTH_TOLERANCE)),
        )
