"""Health check routes."""

from fastapi import APIRouter

from core.room_gen import SynthesizerConfig

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@router.get("/health/config")
async def config_status():
    """Report the active synthesis defaults."""
    config = SynthesizerConfig.from_env()
    return {
        "wall_height": config.wall_height,
        "wall_thickness": config.wall_thickness,
        "grid_size": config.grid_size,
        "world_scale": config.world_scale,
        "canvas_size": config.canvas_size,
    }
