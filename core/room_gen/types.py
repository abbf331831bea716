"""Data types for room geometry synthesis.

Everything here is plain data: the synthesizer fills these records and the
mesh adapter (or any other host) reads them. Nothing is mutated after a
RoomGeometry is returned.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .constants import (
    DEFAULT_DRAWING_HEIGHT,
    DEFAULT_DRAWING_WIDTH,
    DEFAULT_GRID_SIZE,
    DEFAULT_WORLD_SCALE,
)
from .vectors import Point2D, Point3D


class ConnectionKind(Enum):
    """Kind of snapping anchor on the room surface."""
    EDGE = "edge"
    CORNER = "corner"
    FACE = "face"


@dataclass(frozen=True)
class Opening:
    """A door/window gap, given as a segment lying on a perimeter edge."""

    start: Point2D
    end: Point2D


@dataclass(frozen=True)
class Segment:
    """A line drawn by the user; openings are flagged and never become walls."""

    start: Point2D
    end: Point2D
    is_opening: bool = False


@dataclass(frozen=True)
class EdgeInterval:
    """Parametric sub-interval [t_start, t_end] of one polygon edge."""

    t_start: float
    t_end: float
    is_opening: bool = False

    @property
    def span(self) -> float:
        return self.t_end - self.t_start


@dataclass
class WallSegment:
    """One straight wall box, positioned and oriented in world space."""

    id: str
    start: Point3D
    end: Point3D
    length: float
    direction: Point3D
    outward_normal: Point3D
    center: Point3D  # box center: offset outward by thickness/2, y = height/2
    rotation_y: float  # radians about the vertical axis
    height: float
    thickness: float
    source_edge_index: int
    segment_index: int = 0
    is_interior: bool = False

    @property
    def midpoint(self) -> Point3D:
        return (
            (self.start[0] + self.end[0]) / 2,
            (self.start[1] + self.end[1]) / 2,
            (self.start[2] + self.end[2]) / 2,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "start": list(self.start),
            "end": list(self.end),
            "length": self.length,
            "direction": list(self.direction),
            "outward_normal": list(self.outward_normal),
            "center": list(self.center),
            "rotation_y": self.rotation_y,
            "height": self.height,
            "thickness": self.thickness,
            "source_edge_index": self.source_edge_index,
            "segment_index": self.segment_index,
            "is_interior": self.is_interior,
        }


@dataclass(frozen=True)
class ConnectionPoint:
    """Named anchor used by other objects to snap onto the room."""

    id: str
    position: Point3D
    normal: Point3D  # unit vector pointing away from the solid
    kind: ConnectionKind = ConnectionKind.EDGE

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "position": list(self.position),
            "normal": list(self.normal),
            "kind": self.kind.value,
        }


@dataclass(frozen=True)
class DrawingBounds:
    """Size of the canvas the room was drawn on, in drawing units."""

    width: float = DEFAULT_DRAWING_WIDTH
    height: float = DEFAULT_DRAWING_HEIGHT

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class GridInfo:
    """Grid texture parameters carried along with the room."""

    grid_size: int = DEFAULT_GRID_SIZE
    world_scale: float = DEFAULT_WORLD_SCALE
    drawing_bounds: DrawingBounds = field(default_factory=DrawingBounds)

    def to_dict(self) -> dict:
        return {
            "grid_size": self.grid_size,
            "world_scale": self.world_scale,
            "drawing_bounds": self.drawing_bounds.to_dict(),
        }


@dataclass
class FloorSlab:
    """Floor extruded from the whole room polygon; top face at y = 0."""

    polygon: List[Point2D]
    top_y: float
    bottom_y: float
    area: float
    bounds: Tuple[float, float, float, float]  # min_x, min_z, max_x, max_z

    @property
    def thickness(self) -> float:
        return self.top_y - self.bottom_y

    @property
    def width(self) -> float:
        return self.bounds[2] - self.bounds[0]

    @property
    def depth(self) -> float:
        return self.bounds[3] - self.bounds[1]

    def to_dict(self) -> dict:
        return {
            "polygon": [list(p) for p in self.polygon],
            "top_y": self.top_y,
            "bottom_y": self.bottom_y,
            "area": self.area,
            "bounds": list(self.bounds),
        }


@dataclass(frozen=True)
class LabelAnchor:
    """Where the host should place a room name label (horizontal, facing up)."""

    text: str
    position: Point3D
    rotation_x: float
    normal: Point3D = (0.0, 1.0, 0.0)
    width: float = 2.0
    height: float = 0.5

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "position": list(self.position),
            "rotation_x": self.rotation_x,
            "normal": list(self.normal),
            "width": self.width,
            "height": self.height,
        }


@dataclass
class RoomMetadata:
    """Metadata consumed later by collision, snapping and AI subsystems."""

    floor_polygon: List[Tuple[float, float]]  # (x, z) pairs on the floor plane
    grid_info: GridInfo
    room_name: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "floor_polygon": [{"x": x, "z": z} for x, z in self.floor_polygon],
            "grid_info": self.grid_info.to_dict(),
        }
        if self.room_name:
            data["room_name"] = self.room_name
        return data


@dataclass
class RoomRequest:
    """World-space input for a single room."""

    polygon: List[Point2D]
    openings: List[Opening] = field(default_factory=list)
    segments: List[Segment] = field(default_factory=list)
    name: Optional[str] = None
    grid_size: Optional[int] = None
    drawing_bounds: Optional[DrawingBounds] = None
    world_scale: Optional[float] = None


@dataclass
class RoomGeometry:
    """Complete synthesized room."""

    floor_polygon: List[Point2D]
    floor: FloorSlab
    perimeter_walls: List[WallSegment]
    interior_walls: List[WallSegment]
    connection_points: List[ConnectionPoint]
    grid_info: GridInfo
    uv_scale: Tuple[float, float]
    metadata: RoomMetadata
    orientation_sign: int
    label: Optional[LabelAnchor] = None
    name: Optional[str] = None

    @property
    def all_walls(self) -> List[WallSegment]:
        return self.perimeter_walls + self.interior_walls

    def get_wall(self, wall_id: str) -> Optional[WallSegment]:
        """Look up a wall by its external id ("2-0", "interior-5", ...)."""
        for wall in self.all_walls:
            if wall.id == wall_id:
                return wall
        return None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "floor_polygon": [list(p) for p in self.floor_polygon],
            "floor": self.floor.to_dict(),
            "perimeter_walls": [w.to_dict() for w in self.perimeter_walls],
            "interior_walls": [w.to_dict() for w in self.interior_walls],
            "connection_points": [cp.to_dict() for cp in self.connection_points],
            "grid_info": self.grid_info.to_dict(),
            "uv_scale": list(self.uv_scale),
            "metadata": self.metadata.to_dict(),
            "orientation_sign": self.orientation_sign,
            "label": self.label.to_dict() if self.label else None,
        }
