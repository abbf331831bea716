"""Conversion from drawing-canvas coordinates to world space.

The drawing canvas has its origin at the top-left corner with +y pointing
down. World space is centered on the canvas, scaled by world_scale, and the
vertical axis is flipped so drawing "up" becomes world +z.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from .constants import DEFAULT_CANVAS_SIZE, DEFAULT_WORLD_SCALE
from .types import DrawingBounds, Opening, RoomRequest, Segment
from .vectors import Point2D


@dataclass(frozen=True)
class DrawingTransform:
    """Maps canvas pixels onto the world floor plane."""

    canvas_size: float = DEFAULT_CANVAS_SIZE
    world_scale: float = DEFAULT_WORLD_SCALE

    def to_world(self, point: Sequence[float]) -> Point2D:
        half = self.canvas_size / 2
        return (
            (float(point[0]) - half) * self.world_scale,
            (half - float(point[1])) * self.world_scale,
        )

    def to_drawing(self, point: Sequence[float]) -> Point2D:
        half = self.canvas_size / 2
        return (
            float(point[0]) / self.world_scale + half,
            half - float(point[1]) / self.world_scale,
        )


def _xy(point: Any) -> Point2D:
    """Accept {"x": .., "y": ..} dicts as well as [x, y] pairs."""
    if isinstance(point, dict):
        return (float(point["x"]), float(point["y"]))
    return (float(point[0]), float(point[1]))


def room_request_from_drawing(
    payload: Dict[str, Any], transform: Optional[DrawingTransform] = None
) -> RoomRequest:
    """
    Build a world-space RoomRequest from a drawing-space payload.

    Args:
        payload: Dict with 'points', optional 'openings' ({start, end}),
                 'all_segments' ({start, end, is_opening}), 'name',
                 'grid_size' and 'drawing_bounds' ({width, height})
        transform: Canvas transform; defaults to a 400px canvas at 0.05 scale

    Returns:
        RoomRequest in world coordinates
    """
    transform = transform or DrawingTransform()

    polygon = [transform.to_world(_xy(p)) for p in payload.get("points", [])]

    openings = [
        Opening(
            start=transform.to_world(_xy(o["start"])),
            end=transform.to_world(_xy(o["end"])),
        )
        for o in payload.get("openings") or []
    ]

    segments = [
        Segment(
            start=transform.to_world(_xy(s["start"])),
            end=transform.to_world(_xy(s["end"])),
            is_opening=bool(s.get("is_opening", False)),
        )
        for s in payload.get("all_segments") or []
    ]

    bounds = payload.get("drawing_bounds")
    drawing_bounds = (
        DrawingBounds(width=float(bounds["width"]), height=float(bounds["height"]))
        if bounds
        else None
    )

    return RoomRequest(
        polygon=polygon,
        openings=openings,
        segments=segments,
        name=payload.get("name"),
        grid_size=payload.get("grid_size"),
        drawing_bounds=drawing_bounds,
        world_scale=transform.world_scale,
    )
