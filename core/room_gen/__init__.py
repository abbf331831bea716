"""Procedural room geometry synthesis.

This module converts a drawn floor-plan polygon (with optional door/window
openings and interior partition lines) into plain-data room geometry: a
floor slab, perimeter walls cut at openings, interior walls, connection
points for snapping, and metadata. A separate adapter turns that data into
trimesh meshes for export.

Usage:
    from core.room_gen import RoomRequest, RoomSynthesizer, RoomSceneBuilder

    geometry = RoomSynthesizer().synthesize(
        RoomRequest(polygon=[(0, 0), (4, 0), (4, 3), (0, 3)])
    )
    RoomSceneBuilder().export_gltf(geometry, "output/room.glb")
"""

from .config import SynthesizerConfig
from .drawing import DrawingTransform, room_request_from_drawing
from .errors import GeometryError, InvalidRoomInput, RoomGenError
from .extruder import FloorSlabExtruder, WallBoxExtruder
from .interior import InteriorWallDeduplicator
from .mesh_types import Mesh3D, Scene3D
from .openings import OpeningResolver
from .scene_builder import RoomSceneBuilder
from .synthesizer import RoomSynthesizer
from .types import (
    ConnectionKind,
    ConnectionPoint,
    DrawingBounds,
    GridInfo,
    Opening,
    RoomGeometry,
    RoomRequest,
    Segment,
    WallSegment,
)
from .walls import WallSegmentBuilder

__all__ = [
    # Main API
    "RoomSynthesizer",
    "SynthesizerConfig",
    "RoomRequest",
    "RoomGeometry",
    # Input records
    "Opening",
    "Segment",
    "DrawingBounds",
    "DrawingTransform",
    "room_request_from_drawing",
    # Output records
    "WallSegment",
    "ConnectionPoint",
    "ConnectionKind",
    "GridInfo",
    # Errors
    "RoomGenError",
    "InvalidRoomInput",
    "GeometryError",
    # Pipeline stages (for advanced usage)
    "OpeningResolver",
    "WallSegmentBuilder",
    "InteriorWallDeduplicator",
    # Mesh adapter
    "RoomSceneBuilder",
    "WallBoxExtruder",
    "FloorSlabExtruder",
    "Scene3D",
    "Mesh3D",
]
