from weather_tracker.exceptions.weather.api_key_error import WeatherAPIKeyError
from weather_tracker.exceptions.weather.api_request_error import APIRequestError
from weather_tracker.exceptions.weather.city_not_found_error import CityNotFoundError
from weather_tracker.exceptions.weather.configuration_missing_error import ConfigurationMissingError
from weather_tracker.exceptions.weather.invalid_query_error import InvalidQueryError
from weather_tracker.exceptions.weather.transport_error import WeatherTransportError
from weather_tracker.exceptions.weather.weather_service_error import WeatherServiceError

__all__ = [
    "APIRequestError",
    "CityNotFoundError",
    "ConfigurationMissingError",
    "InvalidQueryError",
    "WeatherAPIKeyError",
    "WeatherServiceError",
    "WeatherTransportError",
]
