"""Vector helpers shared by the room geometry stages.

Points enter and leave as plain tuples; arithmetic happens on numpy arrays.
World space is y-up: a 2D drawing point (x, y) lies on the floor plane at
(x, 0, y).
"""

from typing import Sequence, Tuple

import numpy as np

from .constants import DEGENERATE_LENGTH_SQ, LENGTH_TOLERANCE

Point2D = Tuple[float, float]
Point3D = Tuple[float, float, float]


def to_vec3(point: Sequence[float], y: float = 0.0) -> np.ndarray:
    """Lift a floor-plane point to world space."""
    return np.array([float(point[0]), y, float(point[1])])


def as_tuple(v: np.ndarray) -> Point3D:
    return (float(v[0]), float(v[1]), float(v[2]))


def lerp(a: np.ndarray, b: np.ndarray, t: float) -> np.ndarray:
    return a + (b - a) * t


def normalize(v: np.ndarray) -> np.ndarray:
    """Return v scaled to unit length, or a zero vector if v has no length."""
    length = np.linalg.norm(v)
    if length < 1e-12:
        return np.zeros_like(v, dtype=float)
    return v / length


def parametric_position(
    line_start: np.ndarray, line_end: np.ndarray, point: np.ndarray
) -> float:
    """Project point onto the line and return its parameter t.

    t is 0 at line_start and 1 at line_end; values outside [0, 1] lie beyond
    the segment. A degenerate line returns 0.
    """
    line_dir = line_end - line_start
    length_sq = float(np.dot(line_dir, line_dir))
    if length_sq < DEGENERATE_LENGTH_SQ:
        return 0.0

    return float(np.dot(point - line_start, line_dir) / length_sq)


def is_point_on_segment(
    point: np.ndarray,
    seg_start: np.ndarray,
    seg_end: np.ndarray,
    tolerance: float = LENGTH_TOLERANCE,
) -> bool:
    """Check whether point lies on the segment within tolerance."""
    t = parametric_position(seg_start, seg_end, point)
    if t < 0 or t > 1:
        return False

    projected = lerp(seg_start, seg_end, t)
    return float(np.linalg.norm(point - projected)) < tolerance


def points_match(a: Point2D, b: Point2D, tolerance: float = LENGTH_TOLERANCE) -> bool:
    """Per-axis comparison of two 2D points."""
    return abs(a[0] - b[0]) < tolerance and abs(a[1] - b[1]) < tolerance
