"""Builds renderable meshes from synthesized room geometry."""

import logging
from typing import Optional

from .extruder import FloorSlabExtruder, WallBoxExtruder
from .mesh_types import Scene3D
from .types import RoomGeometry

logger = logging.getLogger(__name__)


class RoomSceneBuilder:
    """Turns a RoomGeometry into a Scene3D (floor slab plus one box per wall).

    The geometry record is only read; mesh ids are derived from room_id and
    the wall ids so individual segments can be found in the exported file.
    """

    def __init__(self):
        self.wall_extruder = WallBoxExtruder()
        self.floor_extruder = FloorSlabExtruder()

    def build(self, geometry: RoomGeometry, room_id: Optional[str] = None) -> Scene3D:
        room_id = room_id or geometry.name or "room"
        scene = Scene3D(name=room_id, metadata=geometry.metadata.to_dict())

        floor = self.floor_extruder.extrude(geometry.floor, f"{room_id}-floor")
        if floor is not None:
            scene.add_mesh(floor)

        for wall in geometry.perimeter_walls:
            scene.add_mesh(self.wall_extruder.extrude(wall, f"{room_id}-wall-{wall.id}"))

        for wall in geometry.interior_walls:
            scene.add_mesh(self.wall_extruder.extrude(wall, f"{room_id}-interior-wall-{wall.source_edge_index}"))

        logger.debug(f"Built scene {room_id} with {len(scene.get_all_meshes())} meshes")
        return scene

    def export_gltf(self, geometry: RoomGeometry, output_path: str, room_id: Optional[str] = None) -> None:
        """Export the room to a glTF/GLB file."""
        self.build(geometry, room_id).export_gltf(output_path)
