from datetime import datetime, timezone

from fastapi import APIRouter

from weather_tracker import __version__
from weather_tracker.config.config import load_config

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", summary="API Health Check")
async def get_health():
    """Basic health check endpoint. Reports whether the provider key is set, never its value."""

    return {
        "message": "Weather Tracker API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
        "api_key_configured": bool(load_config().openweather_api_key),
    }
