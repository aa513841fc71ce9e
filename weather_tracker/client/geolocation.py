from typing import Protocol, Tuple

from weather_tracker.exceptions.presentation import GeolocationError


class GeolocationProvider(Protocol):
    """Capability returning the device's current position."""

    async def current_position(self) -> Tuple[float, float]:
        """
        Returns:
            (latitude, longitude) in decimal degrees

        Raises:
            GeolocationError: If the position cannot be determined
        """
        ...


class StaticGeolocation:
    """Geolocation provider that always reports a fixed position."""

    def __init__(self, lat: float, lon: float):
        if not -90 <= lat <= 90 or not -180 <= lon <= 180:
            raise GeolocationError(f"Position out of range: {lat}, {lon}")
        self.lat = lat
        self.lon = lon

    async def current_position(self) -> Tuple[float, float]:
        return self.lat, self.lon
