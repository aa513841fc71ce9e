from fastapi import APIRouter

from weather_tracker.api.v1.weather import weather_router

# Create main router
router = APIRouter(prefix="/api/v1")

router.include_router(weather_router)
