from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class WeatherCondition(BaseModel):
    """Weather condition details."""

    id: int = Field(..., description="Weather condition ID")
    main: str = Field(..., description="Main weather condition (e.g., Rain, Snow, Clear)")
    description: str = Field(..., description="Detailed weather description")
    icon: str = Field(..., description="Weather icon code")


class MainWeatherData(BaseModel):
    """Main weather measurements."""

    temp: float = Field(..., description="Current temperature")
    feels_like: float = Field(..., description="Human perception of temperature")
    temp_min: float = Field(..., description="Minimum temperature")
    temp_max: float = Field(..., description="Maximum temperature")
    pressure: int = Field(..., description="Atmospheric pressure in hPa")
    humidity: int = Field(..., ge=0, le=100, description="Humidity percentage")


class WindData(BaseModel):
    """Wind information."""

    speed: float = Field(..., ge=0, description="Wind speed in m/s")
    deg: float = Field(0, description="Wind direction in degrees")
    gust: Optional[float] = Field(None, ge=0, description="Wind gust speed in m/s")


class PrecipitationData(BaseModel):
    """Rain or snow accumulation."""

    one_hour: Optional[float] = Field(
        None, alias="1h", description="Volume for last hour in mm"
    )
    three_hours: Optional[float] = Field(
        None, alias="3h", description="Volume for last 3 hours in mm"
    )


class SystemData(BaseModel):
    """System information from API response."""

    country: str = Field("", description="Country code (e.g., US, GB)")
    sunrise: int = Field(..., description="Sunrise time in Unix timestamp")
    sunset: int = Field(..., description="Sunset time in Unix timestamp")


class Coordinates(BaseModel):
    """Geographic coordinates."""

    lat: float = Field(..., description="Latitude")
    lon: float = Field(..., description="Longitude")


class WeatherReport(BaseModel):
    """
    Current weather report as returned by OpenWeatherMap.

    The gateway forwards the upstream body untouched; this model is the typed
    view used by the presentation client. Unknown fields are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    coord: Optional[Coordinates] = Field(None, description="Geographic coordinates")
    weather: List[WeatherCondition] = Field(..., min_length=1, description="Weather conditions")
    main: MainWeatherData = Field(..., description="Main weather data")
    visibility: int = Field(0, description="Visibility in meters")
    wind: WindData = Field(..., description="Wind information")
    rain: Optional[PrecipitationData] = Field(None, description="Rain information")
    snow: Optional[PrecipitationData] = Field(None, description="Snow information")
    dt: int = Field(..., description="Data calculation time in Unix timestamp")
    sys: SystemData = Field(..., description="System information")
    timezone: Optional[int] = Field(None, description="Shift in seconds from UTC")
    name: str = Field(..., description="City name")

    @property
    def primary_condition(self) -> WeatherCondition:
        return self.weather[0]
