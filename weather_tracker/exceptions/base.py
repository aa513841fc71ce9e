class WeatherTrackerError(Exception):
    """Base exception for all weather tracker errors."""

    pass
