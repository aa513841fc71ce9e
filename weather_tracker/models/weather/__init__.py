from weather_tracker.models.weather.weather import (
    Coordinates,
    MainWeatherData,
    PrecipitationData,
    SystemData,
    WeatherCondition,
    WeatherReport,
    WindData,
)

__all__ = [
    "Coordinates",
    "MainWeatherData",
    "PrecipitationData",
    "SystemData",
    "WeatherCondition",
    "WeatherReport",
    "WindData",
]
