"""Mesh containers produced by the rendering adapter."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import numpy as np
import trimesh

from .vectors import Point3D


@dataclass
class Mesh3D:
    """Individual mesh with vertices, faces, and metadata."""

    id: str
    vertices: np.ndarray = field(default_factory=lambda: np.zeros((0, 3)))
    faces: np.ndarray = field(default_factory=lambda: np.zeros((0, 3), dtype=int))
    element_type: str = "generic"  # floors, walls, interior_walls
    source_id: str = ""  # Wall id ("0-1", "interior-4") or "floor"

    def to_trimesh(self) -> trimesh.Trimesh:
        """Convert to trimesh object."""
        if self.vertices.size == 0 or self.faces.size == 0:
            return trimesh.Trimesh()
        mesh = trimesh.Trimesh(vertices=self.vertices, faces=self.faces, process=False)
        mesh.metadata["element_type"] = self.element_type
        mesh.metadata["source_id"] = self.source_id
        return mesh

    @classmethod
    def from_trimesh(
        cls,
        mesh: trimesh.Trimesh,
        mesh_id: str,
        element_type: str = "generic",
        source_id: str = "",
    ) -> "Mesh3D":
        """Create Mesh3D from trimesh object."""
        return cls(
            id=mesh_id,
            vertices=np.array(mesh.vertices),
            faces=np.array(mesh.faces),
            element_type=element_type,
            source_id=source_id,
        )


@dataclass
class Scene3D:
    """A synthesized room as meshes grouped by element type."""

    name: str = "room"
    meshes: Dict[str, List[Mesh3D]] = field(default_factory=dict)
    metadata: dict = field(default_factory=dict)

    def add_mesh(self, mesh: Mesh3D) -> None:
        """Add a mesh to the scene, grouped by element_type."""
        self.meshes.setdefault(mesh.element_type, []).append(mesh)

    @property
    def bounds(self) -> Tuple[Point3D, Point3D]:
        """Bounding box over all mesh vertices."""
        all_vertices = [m.vertices for m in self.get_all_meshes() if m.vertices.size > 0]
        if not all_vertices:
            return ((0.0, 0.0, 0.0), (0.0, 0.0, 0.0))

        combined = np.vstack(all_vertices)
        lo = combined.min(axis=0)
        hi = combined.max(axis=0)
        return (
            (float(lo[0]), float(lo[1]), float(lo[2])),
            (float(hi[0]), float(hi[1]), float(hi[2])),
        )

    def get_by_type(self, element_type: str) -> List[Mesh3D]:
        """Get all meshes of a specific element type."""
        return self.meshes.get(element_type, [])

    def get_by_source(self, source_id: str) -> List[Mesh3D]:
        return [m for m in self.get_all_meshes() if m.source_id == source_id]

    def get_all_meshes(self) -> List[Mesh3D]:
        """Get flat list of all meshes."""
        result = []
        for mesh_list in self.meshes.values():
            result.extend(mesh_list)
        return result

    def to_trimesh_scene(self) -> trimesh.Scene:
        """Convert to trimesh Scene; every mesh keeps its own node."""
        scene = trimesh.Scene()
        for mesh in self.get_all_meshes():
            if mesh.vertices.size == 0:
                continue
            scene.add_geometry(mesh.to_trimesh(), node_name=mesh.id, geom_name=mesh.id)
        return scene

    def export_gltf(self, path: str, binary: bool = True) -> None:
        """Export scene to glTF/GLB format."""
        scene = self.to_trimesh_scene()
        file_type = "glb" if binary else "gltf"
        scene.export(path, file_type=file_type)

    def export_obj(self, path: str) -> None:
        """Export scene to OBJ format."""
        trimeshes = [m.to_trimesh() for m in self.get_all_meshes() if m.vertices.size > 0]
        if trimeshes:
            combined = trimesh.util.concatenate(trimeshes)
            combined.export(path, file_type="obj")
