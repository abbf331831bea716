"""Mesh extrusion for synthesized walls and floor slabs."""

import logging
from typing import List, Optional

import numpy as np
import shapely
import trimesh
from scipy.spatial import Delaunay, QhullError
from shapely.geometry import Polygon as ShapelyPolygon

from .mesh_types import Mesh3D
from .types import FloorSlab, WallSegment
from .vectors import Point2D

logger = logging.getLogger(__name__)


class WallBoxExtruder:
    """Creates box meshes for wall segments."""

    def extrude(self, wall: WallSegment, mesh_id: str) -> Mesh3D:
        """Box of (length, height, thickness) rotated onto the wall direction."""
        box = trimesh.creation.box(extents=[wall.length, wall.height, wall.thickness])

        # Rotate about the vertical axis
        if wall.rotation_y != 0:
            rotation = trimesh.transformations.rotation_matrix(wall.rotation_y, [0, 1, 0])
            box.apply_transform(rotation)

        box.apply_translation(wall.center)

        element_type = "interior_walls" if wall.is_interior else "walls"
        return Mesh3D.from_trimesh(
            box, mesh_id=mesh_id, element_type=element_type, source_id=wall.id
        )


class FloorSlabExtruder:
    """Extrudes the room polygon into a closed floor slab."""

    def extrude(self, floor: FloorSlab, mesh_id: str) -> Optional[Mesh3D]:
        """Create a slab between floor.bottom_y and floor.top_y."""
        polygon = _dedupe_consecutive(floor.polygon)
        n = len(polygon)
        if n < 3:
            return None

        poly_2d = np.array(polygon)
        tri_faces = self._triangulate(polygon)
        if len(tri_faces) == 0:
            logger.debug(f"Floor {mesh_id} has no area, skipping mesh")
            return None

        # Floor plane is x/z; drawing y maps to world z
        vertices_bottom = np.column_stack([poly_2d[:, 0], np.full(n, floor.bottom_y), poly_2d[:, 1]])
        vertices_top = np.column_stack([poly_2d[:, 0], np.full(n, floor.top_y), poly_2d[:, 1]])
        vertices = np.vstack([vertices_bottom, vertices_top])

        faces = []

        # Top face
        for f in tri_faces:
            faces.append([f[0] + n, f[1] + n, f[2] + n])

        # Bottom face (flip winding for correct normals)
        for f in tri_faces:
            faces.append([f[0], f[2], f[1]])

        # Side faces
        for i in range(n):
            i_next = (i + 1) % n
            faces.append([i, i_next + n, i_next])
            faces.append([i, i + n, i_next + n])

        mesh = trimesh.Trimesh(vertices=vertices, faces=np.array(faces))
        mesh.fix_normals()

        return Mesh3D.from_trimesh(mesh, mesh_id=mesh_id, element_type="floors", source_id="floor")

    def _triangulate(self, polygon: List[Point2D]) -> np.ndarray:
        """Triangles of the polygon, wound so their normals face +y.

        Delaunay over the outline vertices is exact for convex floors;
        concave floors need a triangulation constrained to the outline.
        """
        shape = ShapelyPolygon(polygon)
        if shape.area < 1e-9:
            return np.zeros((0, 3), dtype=int)

        poly_2d = np.array(polygon)
        if shape.convex_hull.area - shape.area < 1e-9:
            try:
                candidates = Delaunay(poly_2d).simplices
            except (QhullError, ValueError):
                # Degenerate outline: fan triangulation
                candidates = np.array([[0, i, i + 1] for i in range(1, len(polygon) - 1)])
        else:
            candidates = self._constrained_triangles(shape, polygon)

        faces = []
        for tri in candidates:
            a, b, c = poly_2d[tri[0]], poly_2d[tri[1]], poly_2d[tri[2]]

            # 2D cross product in (x, z): negative means the 3D normal is +y
            cross = (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])
            if abs(cross) < 1e-12:
                continue
            if cross > 0:
                faces.append([tri[0], tri[2], tri[1]])
            else:
                faces.append([tri[0], tri[1], tri[2]])

        return np.array(faces, dtype=int).reshape(-1, 3)

    @staticmethod
    def _constrained_triangles(shape: ShapelyPolygon, polygon: List[Point2D]) -> List[List[int]]:
        """Constrained Delaunay triangles mapped back to outline vertex indices."""
        index = {(float(x), float(y)): i for i, (x, y) in enumerate(polygon)}
        triangles = []
        for tri in shapely.constrained_delaunay_triangles(shape).geoms:
            coords = list(tri.exterior.coords)[:3]
            key = [(float(x), float(y)) for x, y in coords]
            if all(k in index for k in key):
                triangles.append([index[k] for k in key])
            else:
                logger.warning("Triangulation produced a vertex off the outline, skipping triangle")
        return triangles


def _dedupe_consecutive(polygon: List[Point2D], tolerance: float = 1e-9) -> List[Point2D]:
    """Drop repeated consecutive vertices (including last == first)."""
    result: List[Point2D] = []
    for p in polygon:
        if result and abs(p[0] - result[-1][0]) < tolerance and abs(p[1] - result[-1][1]) < tolerance:
            continue
        result.append(p)
    if len(result) > 1 and abs(result[0][0] - result[-1][0]) < tolerance and abs(result[0][1] - result[-1][1]) < tolerance:
        result.pop()
    return result
