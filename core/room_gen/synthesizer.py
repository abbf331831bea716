"""Main room synthesizer that orchestrates the geometry pipeline."""

import logging
from typing import Iterable, List, Optional

from .config import SynthesizerConfig
from .connection_points import (
    composite_bounds,
    default_connection_points,
    merge_connection_points,
)
from .errors import InvalidRoomInput
from .floor import FloorComposer
from .interior import InteriorWallDeduplicator
from .openings import OpeningResolver
from .orientation import orientation_sign
from .types import ConnectionPoint, RoomGeometry, RoomRequest, WallSegment
from .vectors import to_vec3
from .walls import WallSegmentBuilder

logger = logging.getLogger(__name__)


class RoomSynthesizer:
    """
    Synthesizes room geometry from a floor-plan polygon.

    Pipeline:
    1. Determine polygon winding so wall normals face outward
    2. Split each perimeter edge around openings
    3. Build a wall segment (and a wall-top anchor) per solid interval
    4. Build partition walls not already on the perimeter
    5. Compose floor slab, grid alignment, anchors and metadata

    Each call is independent: the synthesizer keeps no state between rooms.
    """

    def __init__(self, config: Optional[SynthesizerConfig] = None):
        self.config = config or SynthesizerConfig()

        self.opening_resolver = OpeningResolver(tolerance=self.config.tolerance)
        self.wall_builder = WallSegmentBuilder(
            wall_height=self.config.wall_height,
            wall_thickness=self.config.wall_thickness,
            tolerance=self.config.tolerance,
        )
        self.interior_builder = InteriorWallDeduplicator(
            self.wall_builder, tolerance=self.config.tolerance
        )
        self.floor_composer = FloorComposer(floor_thickness=self.config.floor_thickness)

    def synthesize(self, request: RoomRequest) -> RoomGeometry:
        """
        Build the complete geometry for one room.

        Args:
            request: World-space polygon, openings and optional partitions

        Returns:
            RoomGeometry with floor, walls, connection points and metadata

        Raises:
            InvalidRoomInput: if the polygon has fewer than three vertices
        """
        polygon = [(float(p[0]), float(p[1])) for p in request.polygon]
        if len(polygon) < 3:
            raise InvalidRoomInput(
                f"Room polygon needs at least 3 vertices, got {len(polygon)}"
            )

        sign = orientation_sign(polygon)

        # 1-3. Perimeter walls
        perimeter_walls, wall_top_points = self._build_perimeter(polygon, request, sign)

        # 4. Partitions
        interior_walls: List[WallSegment] = []
        if self.config.build_interior_walls and request.segments:
            interior_walls = self.interior_builder.build(polygon, request.segments)

        # 5. Floor and metadata
        floor = self.floor_composer.build_floor(polygon)
        grid = self.floor_composer.grid_info(
            grid_size=request.grid_size or self.config.grid_size,
            world_scale=request.world_scale or self.config.world_scale,
            drawing_bounds=request.drawing_bounds,
        )

        bounds = composite_bounds(floor, perimeter_walls + interior_walls)
        connection_points = merge_connection_points(
            default_connection_points(bounds), wall_top_points
        )

        label = None
        if self.config.build_label:
            label = self.floor_composer.label_anchor(polygon, request.name)

        logger.info(
            f"Synthesized room {request.name or '<unnamed>'}: "
            f"{len(perimeter_walls)} perimeter wall(s), {len(interior_walls)} interior, "
            f"{len(connection_points)} connection point(s)"
        )

        return RoomGeometry(
            floor_polygon=polygon,
            floor=floor,
            perimeter_walls=perimeter_walls,
            interior_walls=interior_walls,
            connection_points=connection_points,
            grid_info=grid,
            uv_scale=self.floor_composer.uv_scale(floor, grid),
            metadata=self.floor_composer.metadata(polygon, grid, request.name),
            orientation_sign=sign,
            label=label,
            name=request.name,
        )

    def synthesize_many(self, requests: Iterable[RoomRequest]) -> List[RoomGeometry]:
        """Synthesize several rooms; each one is built independently."""
        return [self.synthesize(request) for request in requests]

    def _build_perimeter(
        self, polygon, request: RoomRequest, sign: int
    ) -> tuple:
        """Walls and wall-top anchors for every perimeter edge."""
        walls: List[WallSegment] = []
        anchors: List[ConnectionPoint] = []
        n = len(polygon)

        for i in range(n):
            p1 = to_vec3(polygon[i])
            p2 = to_vec3(polygon[(i + 1) % n])

            solid = self.opening_resolver.solid_intervals(p1, p2, request.openings)
            if not solid:
                continue

            # Segment index is the position among solid intervals, dropped
            # pieces included, so ids stay tied to the breakpoint layout
            for seg_idx, interval in enumerate(solid):
                wall = self.wall_builder.build(
                    p1, p2, interval.t_start, interval.t_end, sign, i, seg_idx
                )
                if wall is None:
                    continue
                walls.append(wall)
                anchors.append(self.wall_builder.top_connection_point(wall))

        return walls, anchors
