"""Room synthesis API endpoints."""

import logging
import uuid
from pathlib import Path
from typing import Any, Optional

from fastapi import APIRouter, BackgroundTasks, HTTPException
from pydantic import BaseModel, field_validator

from core.room_gen import (
    DrawingBounds,
    DrawingTransform,
    InvalidRoomInput,
    Opening,
    RoomGeometry,
    RoomRequest,
    RoomSceneBuilder,
    RoomSynthesizer,
    Segment,
    SynthesizerConfig,
    room_request_from_drawing,
)

logger = logging.getLogger(__name__)

router = APIRouter()

OUTPUT_DIR = Path("output")

# In-memory export job storage (replace with Redis in production)
jobs: dict[str, dict[str, Any]] = {}

_config = SynthesizerConfig.from_env()
synthesizer = RoomSynthesizer(_config)


class RoomIdAllocator:
    """Hands out unique room identifiers.

    Ids are random, so rooms created in the same request never collide and
    no delay between creations is needed.
    """

    def __init__(self, prefix: str = "custom-room"):
        self.prefix = prefix

    def allocate(self) -> str:
        return f"{self.prefix}-{uuid.uuid4().hex[:12]}"


room_ids = RoomIdAllocator()


# ============================================================================
# Request / response models
# ============================================================================


class OpeningModel(BaseModel):
    start: tuple[float, float]
    end: tuple[float, float]


class SegmentModel(BaseModel):
    start: tuple[float, float]
    end: tuple[float, float]
    is_opening: bool = False


class DrawingBoundsModel(BaseModel):
    width: float = 400.0
    height: float = 400.0


class RoomRequestModel(BaseModel):
    """World-space room description."""

    polygon: list[tuple[float, float]]
    openings: list[OpeningModel] = []
    segments: list[SegmentModel] = []
    name: Optional[str] = None
    grid_size: Optional[int] = None
    drawing_bounds: Optional[DrawingBoundsModel] = None

    @field_validator("polygon")
    @classmethod
    def polygon_must_have_three_vertices(cls, v: list) -> list:
        """A room outline needs at least three vertices."""
        if len(v) < 3:
            raise ValueError("Polygon must have at least 3 vertices")
        return v

    def to_room_request(self) -> RoomRequest:
        return RoomRequest(
            polygon=list(self.polygon),
            openings=[Opening(start=o.start, end=o.end) for o in self.openings],
            segments=[
                Segment(start=s.start, end=s.end, is_opening=s.is_opening)
                for s in self.segments
            ],
            name=self.name,
            grid_size=self.grid_size,
            drawing_bounds=(
                DrawingBounds(self.drawing_bounds.width, self.drawing_bounds.height)
                if self.drawing_bounds
                else None
            ),
        )


class DrawingRoomModel(BaseModel):
    """Room as drawn on the canvas: pixel coordinates, +y down."""

    points: list[dict[str, float]]
    openings: list[dict[str, dict[str, float]]] = []
    all_segments: list[dict[str, Any]] = []
    name: Optional[str] = None
    grid_size: Optional[int] = None
    drawing_bounds: Optional[DrawingBoundsModel] = None


class BatchRoomsRequest(BaseModel):
    rooms: list[RoomRequestModel]


class ExportRequest(BaseModel):
    room: RoomRequestModel
    binary: bool = True


class RoomResponse(BaseModel):
    room_id: str
    geometry: dict[str, Any]


class JobResponse(BaseModel):
    job_id: str
    status: str


class JobStatusResponse(BaseModel):
    job_id: str
    status: str
    room_id: str
    outputs: Optional[dict[str, Any]] = None
    error: Optional[str] = None


# ============================================================================
# Endpoints
# ============================================================================


def _synthesize(request: RoomRequest) -> RoomGeometry:
    try:
        return synthesizer.synthesize(request)
    except InvalidRoomInput as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/synthesize", response_model=RoomResponse)
async def synthesize_room(request: RoomRequestModel) -> RoomResponse:
    """Synthesize one room from world-space input."""
    geometry = _synthesize(request.to_room_request())
    return RoomResponse(room_id=room_ids.allocate(), geometry=geometry.to_dict())


@router.post("/from-drawing", response_model=RoomResponse)
async def synthesize_from_drawing(request: DrawingRoomModel) -> RoomResponse:
    """Synthesize one room from canvas coordinates."""
    transform = DrawingTransform(
        canvas_size=_config.canvas_size, world_scale=_config.world_scale
    )
    payload = request.model_dump()
    try:
        room_request = room_request_from_drawing(payload, transform)
    except (KeyError, TypeError, ValueError) as e:
        raise HTTPException(status_code=400, detail=f"Malformed drawing: {e}")

    geometry = _synthesize(room_request)
    return RoomResponse(room_id=room_ids.allocate(), geometry=geometry.to_dict())


@router.post("/batch", response_model=list[RoomResponse])
async def synthesize_rooms(request: BatchRoomsRequest) -> list[RoomResponse]:
    """Synthesize several rooms in one call; each gets its own id."""
    geometries = [_synthesize(room.to_room_request()) for room in request.rooms]
    logger.info(f"Synthesized batch of {len(geometries)} rooms")
    return [
        RoomResponse(room_id=room_ids.allocate(), geometry=g.to_dict())
        for g in geometries
    ]


@router.post("/export", response_model=JobResponse)
async def export_room(
    request: ExportRequest, background_tasks: BackgroundTasks
) -> JobResponse:
    """Synthesize a room and export its meshes to glTF in the background."""
    geometry = _synthesize(request.room.to_room_request())

    job_id = str(uuid.uuid4())
    room_id = room_ids.allocate()
    jobs[job_id] = {"status": "PENDING", "room_id": room_id}

    background_tasks.add_task(_export_room, job_id, room_id, geometry, request.binary)

    return JobResponse(job_id=job_id, status="PENDING")


@router.get("/jobs/{job_id}", response_model=JobStatusResponse)
async def get_job_status(job_id: str) -> JobStatusResponse:
    """
    Get status of an export job.

    Raises:
        HTTPException: 404 if job not found
    """
    if job_id not in jobs:
        raise HTTPException(status_code=404, detail="Job not found")

    job = jobs[job_id]
    return JobStatusResponse(
        job_id=job_id,
        status=job["status"],
        room_id=job["room_id"],
        outputs=job.get("outputs"),
        error=job.get("error"),
    )


def _export_room(job_id: str, room_id: str, geometry: RoomGeometry, binary: bool) -> None:
    """Background task: build meshes and write the glTF file."""
    try:
        OUTPUT_DIR.mkdir(exist_ok=True)
        suffix = "glb" if binary else "gltf"
        output_path = OUTPUT_DIR / f"{room_id}.{suffix}"

        scene = RoomSceneBuilder().build(geometry, room_id)
        scene.export_gltf(str(output_path), binary=binary)

        jobs[job_id]["status"] = "COMPLETED"
        jobs[job_id]["outputs"] = {"model_path": str(output_path)}
    except Exception as e:
        logger.error(f"Export job {job_id} failed: {e}")
        jobs[job_id]["status"] = "FAILED"
        jobs[job_id]["error"] = str(e)
