from datetime import tzinfo
from typing import List, Optional

from pydantic import BaseModel, Field

from weather_tracker.models.view.view_state import ViewState, ViewStatus
from weather_tracker.models.weather.weather import WeatherReport
from weather_tracker.utils import conversions

ICON_URL_TEMPLATE = "https://openweathermap.org/img/wn/{icon}@4x.png"


class ConditionsView(BaseModel):
    """Display-ready strings for a weather report."""

    location: str = Field(..., description="City and country heading")
    observed_at: str = Field(..., description="Observation time")
    icon_url: str = Field(..., description="Condition icon URL")
    description: str = Field(..., description="Condition description")
    temperature: str = Field(..., description="Current temperature with unit")
    feels_like: str = Field(..., description="Feels-like temperature with unit")
    high: str = Field(..., description="Maximum temperature")
    low: str = Field(..., description="Minimum temperature")
    wind_speed: str = Field(..., description="Wind speed in km/h")
    wind_gust: str = Field(..., description="Gust speed in km/h or N/A")
    wind_direction: str = Field(..., description="Bearing and compass sector")
    humidity: str = Field(..., description="Relative humidity")
    pressure: str = Field(..., description="Atmospheric pressure")
    visibility: str = Field(..., description="Visibility in km")
    precipitation: str = Field(..., description="Rain/snow in the last hour")
    sunrise: str = Field(..., description="Sunrise time")
    sunset: str = Field(..., description="Sunset time")

    @classmethod
    def from_report(
        cls, report: WeatherReport, is_celsius: bool = True, tz: Optional[tzinfo] = None
    ) -> "ConditionsView":
        """
        Create a ConditionsView from a weather report.

        Args:
            report: Parsed upstream report (metric units)
            is_celsius: Temperature unit preference
            tz: Time zone for timestamps; host local time when omitted

        Returns:
            ConditionsView: Formatted values
        """
        condition = report.primary_condition
        symbol = conversions.unit_symbol(is_celsius)

        def temperature(value: float) -> int:
            return conversions.display_temperature(value, is_celsius)

        if report.wind.gust:
            wind_gust = f"{conversions.wind_speed_kmh(report.wind.gust):.1f} km/h"
        else:
            wind_gust = "N/A"

        return cls(
            location=f"{report.name}, {report.sys.country}",
            observed_at=conversions.format_date_time(report.dt, tz),
            icon_url=ICON_URL_TEMPLATE.format(icon=condition.icon),
            description=condition.description,
            temperature=f"{temperature(report.main.temp)}{symbol}",
            feels_like=f"Feels like {temperature(report.main.feels_like)}{symbol}",
            high=f"{temperature(report.main.temp_max)}°",
            low=f"{temperature(report.main.temp_min)}°",
            wind_speed=f"{conversions.wind_speed_kmh(report.wind.speed):.1f} km/h",
            wind_gust=wind_gust,
            wind_direction=(
                f"{report.wind.deg:g}° ({conversions.wind_direction(report.wind.deg)})"
            ),
            humidity=f"{report.main.humidity}%",
            pressure=f"{report.main.pressure} hPa",
            visibility=f"{conversions.visibility_km(report.visibility):.1f} km",
            precipitation=_precipitation_text(report),
            sunrise=conversions.format_time(report.sys.sunrise, tz),
            sunset=conversions.format_time(report.sys.sunset, tz),
        )


def _precipitation_text(report: WeatherReport) -> str:
    parts: List[str] = []
    if report.rain and report.rain.one_hour:
        parts.append(f"Rain: {report.rain.one_hour:g} mm")
    if report.snow and report.snow.one_hour:
        parts.append(f"Snow: {report.snow.one_hour:g} mm")
    return " | ".join(parts) if parts else "No precipitation"


class WeatherView(BaseModel):
    """Everything a page needs to render the current view state."""

    status: ViewStatus = Field(..., description="Current lookup phase")
    loading: bool = Field(..., description="Whether a spinner should be shown")
    error: str = Field("", description="Error message, empty when none")
    unit_symbol: str = Field(..., description="Active temperature unit")
    dark_mode: bool = Field(..., description="Theme preference")
    body_class: str = Field("", description="CSS classes for theme and condition")
    background_image: Optional[str] = Field(None, description="Decorative image URL")
    conditions: Optional[ConditionsView] = Field(None, description="Formatted report")

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to show yet (no report, error or spinner)."""
        return self.conditions is None and not self.loading and not self.error

    @classmethod
    def from_state(cls, state: ViewState, tz: Optional[tzinfo] = None) -> "WeatherView":
        classes = []
        if state.dark_mode:
            classes.append("dark")
        if state.background_category.css_class:
            classes.append(state.background_category.css_class)

        conditions = None
        if state.report is not None and not state.is_loading:
            conditions = ConditionsView.from_report(state.report, state.is_celsius, tz)

        return cls(
            status=state.status,
            loading=state.is_loading,
            error=state.error,
            unit_symbol=conversions.unit_symbol(state.is_celsius),
            dark_mode=state.dark_mode,
            body_class=" ".join(classes),
            background_image=state.background_image,
            conditions=conditions,
        )
