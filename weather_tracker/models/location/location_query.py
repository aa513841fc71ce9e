from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class LocationQuery(BaseModel):
    """
    A weather lookup target: either a city name or a coordinate pair.

    Both forms may be supplied; the city name takes precedence.
    """

    city: Optional[str] = Field(None, description="Free-text city name")
    lat: Optional[float] = Field(None, description="Latitude in decimal degrees")
    lon: Optional[float] = Field(None, description="Longitude in decimal degrees")

    @property
    def city_name(self) -> Optional[str]:
        """The stripped city name, or None when it is missing or blank.

        Only used to decide whether a city was given; the raw value is what
        gets sent upstream.
        """
        if self.city is None:
            return None
        return self.city.strip() or None

    @property
    def has_coordinates(self) -> bool:
        return self.lat is not None and self.lon is not None

    @property
    def is_valid(self) -> bool:
        return self.city_name is not None or self.has_coordinates

    def to_upstream_params(self) -> Dict[str, Any]:
        """
        Build the location part of the upstream query.

        Returns:
            ``{"q": city}`` when a city is present, otherwise ``{"lat", "lon"}``.
        """
        if self.city_name is not None:
            return {"q": self.city}
        return {"lat": self.lat, "lon": self.lon}

    @classmethod
    def by_name(cls, city: str) -> "LocationQuery":
        return cls(city=city)

    @classmethod
    def by_coordinates(cls, lat: float, lon: float) -> "LocationQuery":
        return cls(lat=lat, lon=lon)
