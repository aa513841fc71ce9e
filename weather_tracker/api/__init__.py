from weather_tracker.api.health import health_router
from weather_tracker.api.v1 import router as v1_router

__all__ = ["health_router", "v1_router"]
