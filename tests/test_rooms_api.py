"""Tests for the room synthesis API."""

import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from api.main import app
from api.routes import rooms

RECT = [[0, 0], [4, 0], [4, 3], [0, 3]]


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def clear_jobs():
    """Clear the in-memory job store between tests."""
    rooms.jobs.clear()
    yield
    rooms.jobs.clear()


@pytest.fixture
def output_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(rooms, "OUTPUT_DIR", tmp_path)
    return tmp_path


class TestSynthesize:
    """Tests for POST /api/rooms/synthesize."""

    def test_rectangle(self, client):
        response = client.post("/api/rooms/synthesize", json={"polygon": RECT})

        assert response.status_code == 200
        data = response.json()
        assert data["room_id"].startswith("custom-room-")
        assert len(data["geometry"]["perimeter_walls"]) == 4
        assert data["geometry"]["floor"]["area"] == pytest.approx(12.0)

    def test_door_splits_wall(self, client):
        response = client.post(
            "/api/rooms/synthesize",
            json={
                "polygon": RECT,
                "openings": [{"start": [1.6, 0], "end": [2.4, 0]}],
                "name": "Office",
            },
        )

        data = response.json()["geometry"]
        ids = [w["id"] for w in data["perimeter_walls"]]
        assert ids[:2] == ["0-0", "0-1"]
        assert data["label"]["text"] == "Office"

    def test_too_few_vertices_rejected(self, client):
        response = client.post("/api/rooms/synthesize", json={"polygon": [[0, 0], [1, 0]]})
        assert response.status_code == 422

    def test_missing_polygon_rejected(self, client):
        response = client.post("/api/rooms/synthesize", json={"name": "Nothing"})
        assert response.status_code == 422


class TestFromDrawing:
    """Tests for POST /api/rooms/from-drawing."""

    def test_canvas_rectangle(self, client):
        response = client.post(
            "/api/rooms/from-drawing",
            json={
                "points": [
                    {"x": 100, "y": 200},
                    {"x": 180, "y": 200},
                    {"x": 180, "y": 140},
                    {"x": 100, "y": 140},
                ],
                "name": "Studio",
            },
        )

        assert response.status_code == 200
        geometry = response.json()["geometry"]
        assert geometry["floor"]["area"] == pytest.approx(12.0)
        assert geometry["metadata"]["room_name"] == "Studio"

    def test_malformed_points(self, client):
        response = client.post(
            "/api/rooms/from-drawing",
            json={"points": [{"x": 1}, {"x": 2}, {"x": 3}]},
        )
        assert response.status_code == 400


class TestBatch:
    """Tests for POST /api/rooms/batch."""

    def test_ids_are_unique(self, client):
        response = client.post(
            "/api/rooms/batch",
            json={"rooms": [{"polygon": RECT, "name": f"Room {i}"} for i in range(5)]},
        )

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 5
        assert len({r["room_id"] for r in data}) == 5
        assert [r["geometry"]["name"] for r in data] == [f"Room {i}" for i in range(5)]


class TestExportJobs:
    """Tests for the glTF export job flow."""

    def test_export_completes(self, client, output_dir):
        response = client.post("/api/rooms/export", json={"room": {"polygon": RECT}})

        assert response.status_code == 200
        job_id = response.json()["job_id"]
        assert response.json()["status"] == "PENDING"

        # TestClient runs background tasks before returning
        status = client.get(f"/api/rooms/jobs/{job_id}").json()
        assert status["status"] == "COMPLETED"
        path = status["outputs"]["model_path"]
        assert path.endswith(".glb")
        assert (output_dir / f"{status['room_id']}.glb").exists()

    def test_unknown_job(self, client):
        response = client.get("/api/rooms/jobs/does-not-exist")
        assert response.status_code == 404


@pytest.mark.asyncio
async def test_synthesize_async_client():
    """Endpoints work through an async transport."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        response = await ac.post("/api/rooms/synthesize", json={"polygon": RECT})

    assert response.status_code == 200
    assert len(response.json()["geometry"]["connection_points"]) == 14
