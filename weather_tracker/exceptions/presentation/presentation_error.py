from weather_tracker.exceptions.base import WeatherTrackerError


class PresentationError(WeatherTrackerError):
    """Base exception for presentation client errors."""

    pass
