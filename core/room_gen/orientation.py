"""Polygon orientation and area helpers.

The winding sign decides which side of each edge is "outside". It is taken
from the shoelace sum rather than a centroid test, which breaks on concave
rooms.
"""

from typing import List

from shapely.geometry import Polygon as ShapelyPolygon

from .vectors import Point2D


def signed_area(polygon: List[Point2D]) -> float:
    """Shoelace sum over the closed polygon (twice the signed area).

    Positive for counter-clockwise winding, negative for clockwise.
    """
    n = len(polygon)
    total = 0.0
    for i in range(n):
        x1, y1 = polygon[i]
        x2, y2 = polygon[(i + 1) % n]
        total += x1 * y2 - x2 * y1
    return total


def orientation_sign(polygon: List[Point2D]) -> int:
    """+1 for counter-clockwise (or zero-area) polygons, -1 for clockwise."""
    return 1 if signed_area(polygon) >= 0 else -1


def polygon_area(polygon: List[Point2D]) -> float:
    """Absolute polygon area."""
    if len(polygon) < 3:
        return 0.0
    return abs(ShapelyPolygon(polygon).area)


def polygon_centroid(polygon: List[Point2D]) -> Point2D:
    """Area centroid, falling back to the vertex mean for zero-area input."""
    if not polygon:
        return (0.0, 0.0)

    if len(polygon) >= 3:
        poly = ShapelyPolygon(polygon)
        if poly.area > 1e-9:
            c = poly.centroid
            return (c.x, c.y)

    cx = sum(p[0] for p in polygon) / len(polygon)
    cy = sum(p[1] for p in polygon) / len(polygon)
    return (cx, cy)
