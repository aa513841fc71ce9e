from typing import Optional, Protocol

import httpx
import structlog

from weather_tracker.config.config import load_config

logger = structlog.get_logger(__name__)


class ImageSearch(Protocol):
    """Capability for finding a decorative background image for a city."""

    async def find_background(self, city: str) -> Optional[str]:
        ...


class UnsplashImageSearch:
    """
    Background image lookup backed by the Unsplash photo search API.

    The lookup is purely decorative: a missing access key disables it, and
    any failure is logged and reported as "no image" instead of raised.
    """

    def __init__(
        self,
        access_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = 10.0,
    ):
        settings = load_config()
        self.access_key = access_key if access_key is not None else settings.unsplash_access_key
        self.base_url = base_url or settings.unsplash_base_url
        self.timeout = httpx.Timeout(timeout)

    @property
    def enabled(self) -> bool:
        return bool(self.access_key)

    async def find_background(self, city: str) -> Optional[str]:
        """
        Find a landscape photo of a city.

        Args:
            city: City name as reported by the weather provider

        Returns:
            URL of the first matching photo, or None
        """
        if not self.enabled:
            logger.debug("Image search disabled, no access key configured")
            return None

        params = {
            "query": f"{city} city landscape",
            "per_page": 1,
            "order_by": "relevant",
            "client_id": self.access_key,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.base_url, params=params)

            if not response.is_success:
                logger.info(
                    "Could not fetch city image",
                    city=city,
                    status_code=response.status_code,
                )
                return None

            results = response.json().get("results") or []
            if not results:
                return None
            return results[0]["urls"]["regular"]

        except (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.info("Could not fetch city image", city=city, error=str(e))
            return None
