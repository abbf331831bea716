"""Wall segment construction from solid edge intervals."""

import logging
import math
from typing import Optional

import numpy as np

from .constants import (
    DEFAULT_WALL_HEIGHT,
    DEFAULT_WALL_THICKNESS,
    LENGTH_TOLERANCE,
    WORLD_UP,
)
from .types import ConnectionKind, ConnectionPoint, WallSegment
from .vectors import as_tuple, lerp, normalize

logger = logging.getLogger(__name__)


class WallSegmentBuilder:
    """Turns parametric edge intervals into positioned wall boxes."""

    def __init__(
        self,
        wall_height: float = DEFAULT_WALL_HEIGHT,
        wall_thickness: float = DEFAULT_WALL_THICKNESS,
        tolerance: float = LENGTH_TOLERANCE,
    ):
        self.wall_height = wall_height
        self.wall_thickness = wall_thickness
        self.tolerance = tolerance
        self._up = np.array(WORLD_UP)

    def build(
        self,
        edge_start: np.ndarray,
        edge_end: np.ndarray,
        t_start: float,
        t_end: float,
        orientation_sign: int,
        edge_index: int,
        segment_index: int,
    ) -> Optional[WallSegment]:
        """Build the perimeter wall covering [t_start, t_end] of an edge.

        The box sits entirely outside the floor polygon: its inner face lies
        on the edge and it is pushed out by half the thickness.

        Returns:
            WallSegment, or None if the interval is shorter than tolerance
        """
        start = lerp(edge_start, edge_end, t_start)
        end = lerp(edge_start, edge_end, t_end)

        length = float(np.linalg.norm(end - start))
        if length < self.tolerance:
            logger.debug(f"Dropping wall {edge_index}-{segment_index}: length {length:.4f}")
            return None

        direction = normalize(end - start)
        outward = normalize(np.cross(self._up, direction)) * orientation_sign

        center = lerp(start, end, 0.5) + outward * (self.wall_thickness / 2)
        center[1] = self.wall_height / 2

        return WallSegment(
            id=f"{edge_index}-{segment_index}",
            start=as_tuple(start),
            end=as_tuple(end),
            length=length,
            direction=as_tuple(direction),
            outward_normal=as_tuple(outward),
            center=as_tuple(center),
            rotation_y=self._rotation_y(direction),
            height=self.wall_height,
            thickness=self.wall_thickness,
            source_edge_index=edge_index,
            segment_index=segment_index,
        )

    def build_unoriented(
        self, start: np.ndarray, end: np.ndarray, index: int
    ) -> Optional[WallSegment]:
        """Build a partition wall centered on its line.

        Partitions have no inside/outside, so the reported normal is the
        left-hand perpendicular of the drawn direction.
        """
        length = float(np.linalg.norm(end - start))
        if length < self.tolerance:
            logger.debug(f"Dropping interior wall {index}: length {length:.4f}")
            return None

        direction = normalize(end - start)
        normal = normalize(np.cross(self._up, direction))

        center = lerp(start, end, 0.5)
        center[1] = self.wall_height / 2

        return WallSegment(
            id=f"interior-{index}",
            start=as_tuple(start),
            end=as_tuple(end),
            length=length,
            direction=as_tuple(direction),
            outward_normal=as_tuple(normal),
            center=as_tuple(center),
            rotation_y=self._rotation_y(direction),
            height=self.wall_height,
            thickness=self.wall_thickness,
            source_edge_index=index,
            is_interior=True,
        )

    def top_connection_point(self, wall: WallSegment) -> ConnectionPoint:
        """Snapping anchor on the top-center of a perimeter wall."""
        mx, _, mz = wall.midpoint
        return ConnectionPoint(
            id=f"wall-top-{wall.source_edge_index}-{wall.segment_index}",
            position=(mx, self.wall_height, mz),
            normal=(0.0, 1.0, 0.0),
            kind=ConnectionKind.EDGE,
        )

    @staticmethod
    def _rotation_y(direction: np.ndarray) -> float:
        # Box long axis is +x; rotate it onto the wall direction
        return -math.atan2(float(direction[2]), float(direction[0]))
