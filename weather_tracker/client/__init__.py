from weather_tracker.client.geolocation import GeolocationProvider, StaticGeolocation
from weather_tracker.client.presentation_client import PresentationClient

__all__ = ["GeolocationProvider", "PresentationClient", "StaticGeolocation"]
