import json

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from weather_tracker.api.auth import verify_token
from weather_tracker.config.config import load_config
from weather_tracker.exceptions.weather import ConfigurationMissingError, WeatherServiceError
from weather_tracker.models.errors.error_response import ErrorResponse
from weather_tracker.models.location.location_query import LocationQuery
from weather_tracker.services.weather_service import CONFIGURATION_MISSING_MESSAGE, weather_service

logger = structlog.get_logger(__name__)

# Create router
router = APIRouter(prefix="/weather", tags=["Weather"])


async def read_location_query(request: Request) -> LocationQuery:
    """
    Parse the request body into a LocationQuery.

    Malformed bodies become an empty query, so the service decides the
    outcome (configuration errors take precedence over input errors).
    """
    try:
        body = await request.json()
        return LocationQuery.model_validate(body)
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
        logger.info("Unreadable weather lookup body", error=str(e))
        return LocationQuery()


async def require_provider_key() -> None:
    """
    Refuse lookups when the provider key is missing.

    Runs ahead of token verification and body parsing, so a misconfigured
    server answers 500 regardless of the request.
    """
    if not load_config().openweather_api_key:
        logger.error("Weather lookup refused: provider API key not configured")
        raise ConfigurationMissingError(CONFIGURATION_MISSING_MESSAGE)


@router.post(
    "",
    summary="Look Up Current Weather",
    dependencies=[Depends(require_provider_key)],
    responses={
        400: {"model": ErrorResponse, "description": "Neither city nor coordinates given"},
        401: {"model": ErrorResponse, "description": "Provider rejected the API key"},
        404: {"model": ErrorResponse, "description": "City not found"},
        500: {"model": ErrorResponse, "description": "Server misconfigured or provider unreachable"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": LocationQuery.model_json_schema()}},
        }
    },
)
async def lookup_weather(
    query: LocationQuery = Depends(read_location_query),
    authenticated: bool = Depends(verify_token),
):
    """
    Get current weather for a city name or a coordinate pair.

    The body is ``{"city": ...}`` or ``{"lat": ..., "lon": ...}``; a city name
    wins when both are present. On success the provider's response is
    returned verbatim.

    Args:
        query: Location to look up.
        authenticated: Dependency that enforces optional token verification.

    Returns:
        The OpenWeatherMap current weather payload.

    Errors:
        ``{"error": message}`` with 400, 401, 404, 500 or the provider's status.
    """
    logger.info(
        "API request: Look up weather",
        city=query.city,
        lat=query.lat,
        lon=query.lon,
        authenticated=authenticated,
    )
    try:
        data = await weather_service.lookup(query)
        return JSONResponse(content=data)

    except WeatherServiceError as e:
        logger.warning(
            "Weather lookup failed",
            status_code=e.status_code,
            error=e.message,
        )
        return JSONResponse(
            status_code=e.status_code,
            content=ErrorResponse(error=e.message).model_dump(),
        )
