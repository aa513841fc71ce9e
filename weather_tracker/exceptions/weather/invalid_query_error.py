from weather_tracker.exceptions.weather.weather_service_error import WeatherServiceError


class InvalidQueryError(WeatherServiceError):
    """Exception for a lookup with neither a city name nor coordinates."""

    status_code = 400
