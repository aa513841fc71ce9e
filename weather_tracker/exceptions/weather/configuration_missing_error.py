from weather_tracker.exceptions.weather.weather_service_error import WeatherServiceError


class ConfigurationMissingError(WeatherServiceError):
    """Exception for a provider credential that is not configured."""

    status_code = 500
