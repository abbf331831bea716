"""Splitting perimeter edges around door/window openings."""

import logging
from typing import List, Sequence

import numpy as np

from .constants import DEGENERATE_LENGTH_SQ, LENGTH_TOLERANCE, PARAMETRIC_EPSILON
from .types import EdgeInterval, Opening
from .vectors import is_point_on_segment, lerp, parametric_position, to_vec3

logger = logging.getLogger(__name__)


class OpeningResolver:
    """Computes which parts of an edge are solid wall and which are gaps.

    Openings are given in the same world coordinates as the polygon and are
    not pre-assigned to edges; each edge picks out the openings whose
    endpoints project onto it.
    """

    def __init__(
        self,
        tolerance: float = LENGTH_TOLERANCE,
        parametric_epsilon: float = PARAMETRIC_EPSILON,
    ):
        self.tolerance = tolerance
        self.parametric_epsilon = parametric_epsilon

    def breakpoints(
        self, p1: np.ndarray, p2: np.ndarray, openings: Sequence[Opening]
    ) -> List[float]:
        """Sorted parametric cut positions along the edge, including 0 and 1."""
        ts = [0.0, 1.0]

        for opening in openings:
            t1 = parametric_position(p1, p2, to_vec3(opening.start))
            t2 = parametric_position(p1, p2, to_vec3(opening.end))

            t1_in = 0 <= t1 <= 1
            t2_in = 0 <= t2 <= 1

            # Openings fully outside the edge belong to some other edge
            if not (t1_in or t2_in or (t1 < 0 and t2 > 1)):
                continue

            if t1_in:
                ts.append(t1)
            if t2_in:
                ts.append(t2)

        ts.sort()
        return ts

    def resolve(
        self, p1: np.ndarray, p2: np.ndarray, openings: Sequence[Opening]
    ) -> List[EdgeInterval]:
        """Split the edge into ordered solid and opening intervals.

        Args:
            p1: Edge start in world space (x, 0, z)
            p2: Edge end in world space
            openings: All openings of the room

        Returns:
            Intervals in ascending t order. Empty for a degenerate edge.
        """
        edge = p2 - p1
        if float(np.dot(edge, edge)) < DEGENERATE_LENGTH_SQ:
            return []

        opening_lines = [(to_vec3(o.start), to_vec3(o.end)) for o in openings]
        ts = self.breakpoints(p1, p2, openings)

        intervals = []
        for t_start, t_end in zip(ts, ts[1:]):
            if abs(t_end - t_start) < self.parametric_epsilon:
                continue

            mid = lerp(p1, p2, (t_start + t_end) / 2)
            in_opening = any(
                is_point_on_segment(mid, start, end, self.tolerance)
                for start, end in opening_lines
            )
            intervals.append(EdgeInterval(t_start, t_end, is_opening=in_opening))

        return intervals

    def solid_intervals(
        self, p1: np.ndarray, p2: np.ndarray, openings: Sequence[Opening]
    ) -> List[EdgeInterval]:
        """Only the intervals that should become wall."""
        intervals = self.resolve(p1, p2, openings)
        gaps = sum(1 for iv in intervals if iv.is_opening)
        if gaps:
            logger.debug(f"Edge split into {len(intervals)} intervals, {gaps} opening(s)")
        return [iv for iv in intervals if not iv.is_opening]
