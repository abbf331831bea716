"""Default snapping anchors derived from the room's composite silhouette."""

import math
from typing import List, Sequence, Tuple

import numpy as np

from .errors import GeometryError
from .types import ConnectionKind, ConnectionPoint, FloorSlab, WallSegment

Bounds3D = Tuple[Tuple[float, float, float], Tuple[float, float, float]]


def wall_footprint(wall: WallSegment) -> np.ndarray:
    """Eight corners of a wall box in world space."""
    center = np.array(wall.center)
    along = np.array(wall.direction) * (wall.length / 2)
    across = np.array(wall.outward_normal) * (wall.thickness / 2)
    up = np.array([0.0, wall.height / 2, 0.0])

    corners = []
    for sa in (-1, 1):
        for sc in (-1, 1):
            for su in (-1, 1):
                corners.append(center + along * sa + across * sc + up * su)
    return np.array(corners)


def composite_bounds(floor: FloorSlab, walls: Sequence[WallSegment]) -> Bounds3D:
    """Axis-aligned bounds of the floor slab together with every wall box."""
    min_x, min_z, max_x, max_z = floor.bounds
    points = [
        np.array([min_x, floor.bottom_y, min_z]),
        np.array([max_x, floor.top_y, max_z]),
    ]
    for wall in walls:
        points.extend(wall_footprint(wall))

    stacked = np.vstack(points)
    lo = stacked.min(axis=0)
    hi = stacked.max(axis=0)
    return (
        (float(lo[0]), float(lo[1]), float(lo[2])),
        (float(hi[0]), float(hi[1]), float(hi[2])),
    )


def default_connection_points(bounds: Bounds3D) -> List[ConnectionPoint]:
    """Face centers and top corners of the bounding box."""
    (x0, y0, z0), (x1, y1, z1) = bounds
    cx, cy, cz = (x0 + x1) / 2, (y0 + y1) / 2, (z0 + z1) / 2

    points = [
        ConnectionPoint("face-+x", (x1, cy, cz), (1.0, 0.0, 0.0), ConnectionKind.FACE),
        ConnectionPoint("face--x", (x0, cy, cz), (-1.0, 0.0, 0.0), ConnectionKind.FACE),
        ConnectionPoint("face-+z", (cx, cy, z1), (0.0, 0.0, 1.0), ConnectionKind.FACE),
        ConnectionPoint("face--z", (cx, cy, z0), (0.0, 0.0, -1.0), ConnectionKind.FACE),
        ConnectionPoint("face-+y", (cx, y1, cz), (0.0, 1.0, 0.0), ConnectionKind.FACE),
        ConnectionPoint("face--y", (cx, y0, cz), (0.0, -1.0, 0.0), ConnectionKind.FACE),
    ]

    diag = 1 / math.sqrt(3)
    for sx, x in (("+", x1), ("-", x0)):
        for sz, z in (("+", z1), ("-", z0)):
            nx = diag if sx == "+" else -diag
            nz = diag if sz == "+" else -diag
            points.append(
                ConnectionPoint(
                    f"corner-{sx}x{sz}z",
                    (x, y1, z),
                    (nx, diag, nz),
                    ConnectionKind.CORNER,
                )
            )

    return points


def merge_connection_points(*groups: Sequence[ConnectionPoint]) -> List[ConnectionPoint]:
    """Concatenate point groups, refusing duplicate ids."""
    merged = []
    seen = set()
    for group in groups:
        for cp in group:
            if cp.id in seen:
                raise GeometryError(f"Duplicate connection point id: {cp.id}")
            seen.add(cp.id)
            merged.append(cp)
    return merged
