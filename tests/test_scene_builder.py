"""Tests for the trimesh mesh adapter."""

import os
import tempfile

import numpy as np
import pytest
import trimesh

from core.room_gen import (
    FloorSlabExtruder,
    Mesh3D,
    Opening,
    RoomRequest,
    RoomSceneBuilder,
    RoomSynthesizer,
    Scene3D,
    Segment,
    WallBoxExtruder,
)
from core.room_gen.types import FloorSlab

RECT = [(0.0, 0.0), (4.0, 0.0), (4.0, 3.0), (0.0, 3.0)]


@pytest.fixture
def geometry():
    request = RoomRequest(
        polygon=RECT,
        openings=[Opening(start=(1.6, 0.0), end=(2.4, 0.0))],
        segments=[Segment(start=(2.0, 1.0), end=(2.0, 3.0))],
        name="Office",
    )
    return RoomSynthesizer().synthesize(request)


# ============================================================================
# Extruder Tests
# ============================================================================


class TestWallBoxExtruder:
    """Tests for wall box meshes."""

    def test_wall_box_bounds(self, geometry):
        wall = geometry.get_wall("1-0")  # east wall, (4,0) -> (4,3)
        mesh = WallBoxExtruder().extrude(wall, "east").to_trimesh()

        lo, hi = mesh.bounds
        assert lo == pytest.approx([4.0, 0.0, 0.0], abs=1e-9)
        assert hi == pytest.approx([4.15, 2.0, 3.0], abs=1e-9)

    def test_wall_metadata(self, geometry):
        mesh = WallBoxExtruder().extrude(geometry.get_wall("0-1"), "m")

        assert mesh.element_type == "walls"
        assert mesh.source_id == "0-1"

    def test_interior_wall_type(self, geometry):
        mesh = WallBoxExtruder().extrude(geometry.interior_walls[0], "m")
        assert mesh.element_type == "interior_walls"


class TestFloorSlabExtruder:
    """Tests for floor slab meshes."""

    def test_rectangle_slab(self, geometry):
        mesh = FloorSlabExtruder().extrude(geometry.floor, "floor").to_trimesh()

        assert mesh.is_watertight
        assert abs(mesh.volume) == pytest.approx(12.0 * 0.15)
        lo, hi = mesh.bounds
        assert lo[1] == pytest.approx(-0.15)
        assert hi[1] == pytest.approx(0.0)

    def test_concave_slab_keeps_notch_open(self):
        l_shape = [(0, 0), (4, 0), (4, 2), (2, 2), (2, 4), (0, 4)]
        floor = FloorSlab(polygon=l_shape, top_y=0.0, bottom_y=-0.1, area=12.0, bounds=(0, 0, 4, 4))
        mesh = FloorSlabExtruder().extrude(floor, "floor").to_trimesh()

        assert abs(mesh.volume) == pytest.approx(12.0 * 0.1)

    def test_top_faces_point_up(self, geometry):
        mesh = FloorSlabExtruder().extrude(geometry.floor, "floor").to_trimesh()
        top = mesh.face_normals[mesh.triangles_center[:, 1] > -1e-9]
        assert np.all(top[:, 1] > 0.99)

    def test_zero_area_floor(self):
        floor = FloorSlab(polygon=[(0, 0), (1, 0), (2, 0)], top_y=0.0, bottom_y=-0.1, area=0.0, bounds=(0, 0, 2, 0))
        assert FloorSlabExtruder().extrude(floor, "floor") is None


# ============================================================================
# Scene Tests
# ============================================================================


class TestRoomSceneBuilder:
    """Tests for RoomSceneBuilder."""

    def test_scene_groups(self, geometry):
        scene = RoomSceneBuilder().build(geometry, "room-1")

        assert isinstance(scene, Scene3D)
        assert len(scene.get_by_type("floors")) == 1
        assert len(scene.get_by_type("walls")) == 7
        assert len(scene.get_by_type("interior_walls")) == 1

    def test_mesh_ids_follow_wall_ids(self, geometry):
        scene = RoomSceneBuilder().build(geometry, "room-1")
        ids = {m.id for m in scene.get_all_meshes()}

        assert "room-1-floor" in ids
        assert "room-1-wall-0-1" in ids
        assert "room-1-interior-wall-0" in ids

    def test_lookup_by_wall_id(self, geometry):
        scene = RoomSceneBuilder().build(geometry, "room-1")

        [mesh] = scene.get_by_source("0-1")
        assert mesh.id == "room-1-wall-0-1"
        assert scene.get_by_source("missing") == []

    def test_scene_bounds(self, geometry):
        lo, hi = RoomSceneBuilder().build(geometry).bounds

        assert lo == pytest.approx((-0.15, -0.15, -0.15))
        assert hi == pytest.approx((4.15, 2.0, 3.15))

    def test_metadata_is_plain_dict(self, geometry):
        scene = RoomSceneBuilder().build(geometry)
        assert scene.metadata["room_name"] == "Office"
        assert scene.name == "Office"

    def test_geometry_not_mutated(self, geometry):
        before = geometry.to_dict()
        RoomSceneBuilder().build(geometry)
        assert geometry.to_dict() == before

    def test_export_gltf(self, geometry):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "room.glb")
            RoomSceneBuilder().export_gltf(geometry, path, room_id="room-1")

            assert os.path.exists(path)
            loaded = trimesh.load(path)
            assert len(loaded.geometry) == 9

    def test_export_obj(self, geometry):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "room.obj")
            RoomSceneBuilder().build(geometry).export_obj(path)
            assert os.path.getsize(path) > 0


class TestMesh3D:
    """Tests for the Mesh3D container."""

    def test_empty_mesh(self):
        assert Mesh3D(id="empty").to_trimesh().vertices.shape[0] == 0

    def test_round_trip_metadata(self):
        box = trimesh.creation.box(extents=[1, 1, 1])
        mesh = Mesh3D.from_trimesh(box, mesh_id="b", element_type="walls", source_id="0-0")
        tm = mesh.to_trimesh()

        assert tm.metadata["element_type"] == "walls"
        assert len(tm.faces) == 12
