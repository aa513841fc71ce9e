from weather_tracker.exceptions.weather.weather_service_error import WeatherServiceError


class WeatherTransportError(WeatherServiceError):
    """Exception for lookups that produced no usable response."""

    status_code = 500
