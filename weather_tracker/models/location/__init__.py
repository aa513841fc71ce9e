from weather_tracker.models.location.location_query import LocationQuery

__all__ = ["LocationQuery"]
