from weather_tracker.exceptions.weather.weather_service_error import WeatherServiceError


class CityNotFoundError(WeatherServiceError):
    """Exception for locations the provider has no data for."""

    status_code = 404
