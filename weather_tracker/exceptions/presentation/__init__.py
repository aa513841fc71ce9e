from weather_tracker.exceptions.presentation.geolocation_error import GeolocationError
from weather_tracker.exceptions.presentation.presentation_error import PresentationError

__all__ = ["GeolocationError", "PresentationError"]
