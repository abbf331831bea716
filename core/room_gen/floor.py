"""Floor slab, grid texture alignment and room metadata."""

import math
from typing import List, Optional, Tuple

from .constants import LABEL_HEIGHT, LABEL_HEIGHT_OFFSET, LABEL_WIDTH
from .orientation import polygon_area, polygon_centroid
from .types import DrawingBounds, FloorSlab, GridInfo, LabelAnchor, RoomMetadata
from .vectors import Point2D


def grid_uv_scale(
    floor_width: float,
    floor_depth: float,
    drawing_width: float,
    drawing_height: float,
    world_scale: float,
) -> Tuple[float, float]:
    """UV repeat factors that keep grid cells a constant world size.

    The grid texture spans the whole drawing canvas, so a floor covering a
    fraction of the canvas only samples that fraction of the texture.
    """
    world_width = drawing_width * world_scale
    world_height = drawing_height * world_scale
    if world_width <= 0 or world_height <= 0:
        return (1.0, 1.0)
    return (floor_width / world_width, floor_depth / world_height)


class FloorComposer:
    """Builds the floor slab and the plain-data metadata bundle for a room."""

    def __init__(self, floor_thickness: float):
        self.floor_thickness = floor_thickness

    def build_floor(self, polygon: List[Point2D]) -> FloorSlab:
        """Extrude the full polygon downward so the top face sits at y = 0."""
        xs = [p[0] for p in polygon]
        zs = [p[1] for p in polygon]

        return FloorSlab(
            polygon=list(polygon),
            top_y=0.0,
            bottom_y=-self.floor_thickness,
            area=polygon_area(polygon),
            bounds=(min(xs), min(zs), max(xs), max(zs)),
        )

    def grid_info(
        self,
        grid_size: int,
        world_scale: float,
        drawing_bounds: Optional[DrawingBounds],
    ) -> GridInfo:
        return GridInfo(
            grid_size=grid_size,
            world_scale=world_scale,
            drawing_bounds=drawing_bounds or DrawingBounds(),
        )

    def uv_scale(self, floor: FloorSlab, grid: GridInfo) -> Tuple[float, float]:
        return grid_uv_scale(
            floor.width,
            floor.depth,
            grid.drawing_bounds.width,
            grid.drawing_bounds.height,
            grid.world_scale,
        )

    def label_anchor(self, polygon: List[Point2D], name: Optional[str]) -> Optional[LabelAnchor]:
        """Label position for a named room: polygon centroid, lying flat."""
        if not name:
            return None

        cx, cz = polygon_centroid(polygon)
        return LabelAnchor(
            text=name,
            position=(cx, LABEL_HEIGHT_OFFSET, cz),
            rotation_x=-math.pi / 2,
            width=LABEL_WIDTH,
            height=LABEL_HEIGHT,
        )

    def metadata(
        self, polygon: List[Point2D], grid: GridInfo, name: Optional[str]
    ) -> RoomMetadata:
        return RoomMetadata(
            floor_polygon=[(p[0], p[1]) for p in polygon],
            grid_info=grid,
            room_name=name,
        )
