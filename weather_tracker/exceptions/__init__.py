from weather_tracker.exceptions.base import WeatherTrackerError
from weather_tracker.exceptions.presentation import GeolocationError, PresentationError
from weather_tracker.exceptions.weather import (
    APIRequestError,
    CityNotFoundError,
    ConfigurationMissingError,
    InvalidQueryError,
    WeatherAPIKeyError,
    WeatherServiceError,
    WeatherTransportError,
)

__all__ = [
    "APIRequestError",
    "CityNotFoundError",
    "ConfigurationMissingError",
    "GeolocationError",
    "InvalidQueryError",
    "PresentationError",
    "WeatherAPIKeyError",
    "WeatherServiceError",
    "WeatherTrackerError",
    "WeatherTransportError",
]
