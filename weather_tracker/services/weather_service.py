from typing import Any, Dict

import httpx
import structlog

from weather_tracker.config.config import load_config
from weather_tracker.exceptions.weather import (
    APIRequestError,
    CityNotFoundError,
    ConfigurationMissingError,
    InvalidQueryError,
    WeatherAPIKeyError,
    WeatherTransportError,
)
from weather_tracker.models.location.location_query import LocationQuery

logger = structlog.get_logger(__name__)

CONFIGURATION_MISSING_MESSAGE = (
    "API Key is not configured on the server. Please check environment variables."
)
INVALID_QUERY_MESSAGE = "Please provide either a city name or coordinates"
CITY_NOT_FOUND_MESSAGE = "City not found. Please try another search."
INVALID_API_KEY_MESSAGE = "API Key invalid. Please check your API key."
FETCH_FAILED_MESSAGE = "Failed to fetch weather data"


class WeatherService:
    """
    Gateway to the OpenWeatherMap current weather API.

    Each lookup validates the query, issues exactly one upstream request and
    either returns the upstream body untouched or raises a
    WeatherServiceError subclass carrying the status to respond with.
    Nothing is retried and no state is shared between lookups.
    """

    async def lookup(self, query: LocationQuery) -> Dict[str, Any]:
        """
        Get current weather for a city name or coordinate pair.

        Args:
            query: Location to look up; a city name wins over coordinates

        Returns:
            The upstream JSON body, unchanged

        Raises:
            ConfigurationMissingError: If no API key is configured
            InvalidQueryError: If neither a city nor both coordinates are given
            CityNotFoundError: If the provider answers 404
            WeatherAPIKeyError: If the provider answers 401
            APIRequestError: For any other non-2xx answer
            WeatherTransportError: If no usable response was obtained
        """
        # Settings are re-read per call; the key may be injected after startup
        settings = load_config()
        if not settings.openweather_api_key:
            logger.error("Weather lookup refused, API key not configured")
            raise ConfigurationMissingError(CONFIGURATION_MISSING_MESSAGE)

        if not query.is_valid:
            logger.warning(
                "Weather lookup rejected, no location given",
                city=query.city,
                lat=query.lat,
                lon=query.lon,
            )
            raise InvalidQueryError(INVALID_QUERY_MESSAGE)

        params = query.to_upstream_params()
        logger.info("Fetching current weather", **params)

        params["appid"] = settings.openweather_api_key
        params["units"] = settings.openweather_units
        params["lang"] = settings.openweather_lang

        data = await self._make_request(settings.openweather_base_url, params)

        logger.info("Successfully fetched current weather", **query.to_upstream_params())
        return data

    async def _make_request(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Make a single HTTP request to the OpenWeatherMap API.

        Args:
            url: Endpoint URL
            params: Query parameters, including the API key

        Returns:
            Parsed JSON response from the API
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(url, params=params)

        except httpx.HTTPError as e:
            logger.warning("Weather request failed", error=str(e))
            raise WeatherTransportError(str(e) or FETCH_FAILED_MESSAGE) from e

        if response.is_success:
            try:
                return response.json()
            except ValueError as e:
                logger.warning("Failed to parse weather data", error=str(e))
                raise WeatherTransportError(str(e) or FETCH_FAILED_MESSAGE) from e

        if response.status_code == 404:
            logger.info("City not found upstream", status_code=response.status_code)
            raise CityNotFoundError(CITY_NOT_FOUND_MESSAGE)
        elif response.status_code == 401:
            logger.error("Weather API key rejected", status_code=response.status_code)
            raise WeatherAPIKeyError(INVALID_API_KEY_MESSAGE)

        logger.warning(
            "API request failed",
            status_code=response.status_code,
            response_text=response.text,
        )
        raise APIRequestError(
            f"API Error: {response.status_code} {response.reason_phrase}",
            status_code=response.status_code,
        )


weather_service = WeatherService()
