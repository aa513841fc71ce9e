import asyncio
from datetime import tzinfo
from typing import Optional

import httpx
import structlog
from pydantic import ValidationError

from weather_tracker.client.geolocation import GeolocationProvider
from weather_tracker.config.config import load_config
from weather_tracker.exceptions.presentation import GeolocationError
from weather_tracker.models.location.location_query import LocationQuery
from weather_tracker.models.view.view_state import ViewState
from weather_tracker.models.view.weather_view import WeatherView
from weather_tracker.models.weather.weather import WeatherReport
from weather_tracker.services.image_search_service import ImageSearch
from weather_tracker.utils.background import background_for_condition

logger = structlog.get_logger(__name__)

EMPTY_SEARCH_MESSAGE = "Please enter a city name"
FETCH_FAILED_MESSAGE = "Failed to fetch weather data"
NETWORK_ERROR_MESSAGE = "Network error"
INVALID_REPORT_MESSAGE = "Invalid weather data received"
GEOLOCATION_UNSUPPORTED_MESSAGE = "Geolocation is not supported by this client"


class PresentationClient:
    """
    Client side of the weather tracker.

    Sends one lookup per user action to the gateway, keeps the page's
    ViewState and turns it into a WeatherView for rendering. The background
    image search and geolocation are optional capabilities. The image search
    runs as a background task after a successful lookup, so the weather
    result never waits on it; `wait_for_background` awaits it when needed.
    """

    def __init__(
        self,
        gateway_url: Optional[str] = None,
        image_search: Optional[ImageSearch] = None,
        geolocation: Optional[GeolocationProvider] = None,
        state: Optional[ViewState] = None,
        api_token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = load_config()
        self.gateway_url = gateway_url or settings.weather_gateway_url
        self.api_token = api_token if api_token is not None else settings.api_token
        self.image_search = image_search
        self.geolocation = geolocation
        self._state = state or ViewState()
        self._transport = transport
        self._background_task: Optional[asyncio.Task] = None

    @property
    def state(self) -> ViewState:
        return self._state

    async def search(self, text: str) -> ViewState:
        """Look up weather for a typed city name."""
        city = text.strip()
        self._state = self._state.start_loading()
        if not city:
            self._state = self._state.fail(self._state.request_seq, EMPTY_SEARCH_MESSAGE)
            return self._state

        return await self._fetch(self._state.request_seq, LocationQuery.by_name(city))

    async def locate(self) -> ViewState:
        """Look up weather for the position reported by the geolocation capability."""
        self._state = self._state.start_loading()
        seq = self._state.request_seq

        if self.geolocation is None:
            self._state = self._state.fail(seq, GEOLOCATION_UNSUPPORTED_MESSAGE)
            return self._state

        try:
            lat, lon = await self.geolocation.current_position()
        except GeolocationError as e:
            logger.info("Geolocation failed", error=str(e))
            self._state = self._state.fail(seq, f"Geolocation error: {e}")
            return self._state

        return await self._fetch(seq, LocationQuery.by_coordinates(lat, lon))

    async def submit(self, query: LocationQuery) -> ViewState:
        """Send an arbitrary location query to the gateway."""
        self._state = self._state.start_loading()
        return await self._fetch(self._state.request_seq, query)

    def set_units(self, is_celsius: bool) -> ViewState:
        self._state = self._state.set_units(is_celsius)
        return self._state

    def toggle_theme(self) -> ViewState:
        self._state = self._state.toggle_theme()
        return self._state

    def render(self, tz: Optional[tzinfo] = None) -> WeatherView:
        return WeatherView.from_state(self._state, tz)

    async def _fetch(self, seq: int, query: LocationQuery) -> ViewState:
        headers = {}
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    self.gateway_url,
                    json=query.model_dump(exclude_none=True),
                    headers=headers,
                )
        except httpx.HTTPError as e:
            logger.warning("Gateway request failed", error=str(e))
            self._state = self._state.fail(seq, str(e) or NETWORK_ERROR_MESSAGE)
            return self._state

        if not response.is_success:
            message = _error_message(response)
            logger.info("Weather lookup failed", status_code=response.status_code, error=message)
            self._state = self._state.fail(seq, message)
            return self._state

        try:
            report = WeatherReport.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning("Failed to parse weather report", error=str(e))
            self._state = self._state.fail(seq, INVALID_REPORT_MESSAGE)
            return self._state

        category = background_for_condition(report.primary_condition.id)
        self._state = self._state.succeed(seq, report, category)

        if self.image_search is not None:
            self._start_background(seq, report.name)

        return self._state

    async def wait_for_background(self) -> ViewState:
        """Wait for the pending background image lookup, if any, and return the state."""
        task = self._background_task
        if task is not None and not task.done():
            try:
                await task
            except asyncio.CancelledError:
                if not task.cancelled():
                    raise
        return self._state

    def _start_background(self, seq: int, city: str) -> None:
        # Only the latest lookup may set the image
        if self._background_task is not None and not self._background_task.done():
            self._background_task.cancel()
        self._background_task = asyncio.create_task(self._load_background(seq, city))

    async def _load_background(self, seq: int, city: str) -> None:
        image_url = await self._find_background(city)
        self._state = self._state.with_background(seq, image_url)

    async def _find_background(self, city: str) -> Optional[str]:
        try:
            return await self.image_search.find_background(city)
        except Exception as e:
            # Decorative only; never let it break the weather result
            logger.info("Background image lookup failed", city=city, error=str(e))
            return None


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return FETCH_FAILED_MESSAGE
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return FETCH_FAILED_MESSAGE
