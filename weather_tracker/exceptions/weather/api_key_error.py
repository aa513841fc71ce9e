from weather_tracker.exceptions.weather.weather_service_error import WeatherServiceError


class WeatherAPIKeyError(WeatherServiceError):
    """Exception for a credential rejected by the provider."""

    status_code = 401
