"""Concurrent access tests for RoomSynth."""

from concurrent.futures import ThreadPoolExecutor, as_completed

import pytest
from fastapi.testclient import TestClient

from api.main import app
from core.room_gen import Opening, RoomRequest, RoomSynthesizer

RECT = [(0.0, 0.0), (4.0, 0.0), (4.0, 3.0), (0.0, 3.0)]


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


class TestConcurrentSynthesis:
    """A shared synthesizer is safe to call from several threads."""

    def test_shared_synthesizer_is_deterministic(self):
        synthesizer = RoomSynthesizer()
        request = RoomRequest(
            polygon=RECT,
            openings=[Opening(start=(1.6, 0.0), end=(2.4, 0.0))],
            name="Shared",
        )
        expected = synthesizer.synthesize(request).to_dict()

        with ThreadPoolExecutor(max_workers=8) as executor:
            futures = [executor.submit(synthesizer.synthesize, request) for _ in range(16)]
            results = [f.result().to_dict() for f in as_completed(futures)]

        assert all(r == expected for r in results)


class TestConcurrentRoomCreation:
    """Test concurrent room creation through the API."""

    def test_concurrent_room_ids_unique(self, client):
        """Rooms created at the same time never share an id."""

        def create_room(i):
            return client.post(
                "/api/rooms/synthesize",
                json={"polygon": [list(p) for p in RECT], "name": f"Concurrent Room {i}"},
            )

        with ThreadPoolExecutor(max_workers=10) as executor:
            futures = [executor.submit(create_room, i) for i in range(10)]
            results = [f.result() for f in as_completed(futures)]

        assert all(r.status_code == 200 for r in results)

        ids = [r.json()["room_id"] for r in results]
        assert len(ids) == len(set(ids)), "Room IDs should be unique"
