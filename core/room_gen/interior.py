"""Interior partition walls that do not duplicate the perimeter."""

import logging
from typing import List, Sequence, Set

from .constants import LENGTH_TOLERANCE
from .types import Segment, WallSegment
from .vectors import Point2D, points_match, to_vec3
from .walls import WallSegmentBuilder

logger = logging.getLogger(__name__)


class InteriorWallDeduplicator:
    """Builds walls for drawn segments that are not perimeter edges.

    The drawing's segment list usually repeats the outer boundary; those
    segments are recognized by endpoint match (either direction) and skipped.
    Partitions are not cut by openings.
    """

    def __init__(self, builder: WallSegmentBuilder, tolerance: float = LENGTH_TOLERANCE):
        self.builder = builder
        self.tolerance = tolerance

    def perimeter_matches(
        self, polygon: Sequence[Point2D], segments: Sequence[Segment]
    ) -> Set[int]:
        """Indices of segments that coincide with a perimeter edge."""
        matched = set()
        n = len(polygon)

        for i in range(n):
            p1 = polygon[i]
            p2 = polygon[(i + 1) % n]

            for idx, segment in enumerate(segments):
                forward = points_match(p1, segment.start, self.tolerance) and points_match(
                    p2, segment.end, self.tolerance
                )
                reverse = points_match(p1, segment.end, self.tolerance) and points_match(
                    p2, segment.start, self.tolerance
                )
                if forward or reverse:
                    matched.add(idx)

        return matched

    def build(
        self, polygon: Sequence[Point2D], segments: Sequence[Segment]
    ) -> List[WallSegment]:
        """Build walls for every non-opening segment not on the perimeter.

        Wall ids use the segment's index in the wall-only list, so they stay
        stable for a given drawing.
        """
        wall_segments = [s for s in segments if not s.is_opening]
        skip = self.perimeter_matches(polygon, wall_segments)

        walls = []
        for idx, segment in enumerate(wall_segments):
            if idx in skip:
                continue

            wall = self.builder.build_unoriented(
                to_vec3(segment.start), to_vec3(segment.end), idx
            )
            if wall is not None:
                walls.append(wall)

        if walls:
            logger.debug(f"Built {len(walls)} interior wall(s), skipped {len(skip)} perimeter duplicate(s)")
        return walls
