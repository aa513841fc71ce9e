from weather_tracker.exceptions.weather.weather_service_error import WeatherServiceError


class APIRequestError(WeatherServiceError):
    """Exception for non-2xx provider responses, keeping the upstream status."""

    pass
