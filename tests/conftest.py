import copy
from unittest.mock import AsyncMock, patch

import pytest

from weather_tracker.models.weather.weather import WeatherReport

LONDON_PAYLOAD = {
    "coord": {"lon": -0.1278, "lat": 51.5074},
    "weather": [{"id": 801, "main": "Clouds", "description": "few clouds", "icon": "02d"}],
    "base": "stations",
    "main": {
        "temp": 15.5,
        "feels_like": 14.8,
        "temp_min": 12.3,
        "temp_max": 18.7,
        "pressure": 1013,
        "humidity": 65,
        "sea_level": 1013,
        "grnd_level": 1009
    },
    "visibility": 10000,
    "wind": {"speed": 3.5, "deg": 180, "gust": 5.0},
    "clouds": {"all": 20},
    "rain": {"1h": 0.25},
    "dt": 1696161600,
    "sys": {
        "type": 2,
        "id": 2075535,
        "country": "GB",
        "sunrise": 1696138800,
        "sunset": 1696182000
    },
    "timezone": 3600,
    "id": 2643743,
    "name": "London",
    "cod": 200
}


@pytest.fixture(autouse=True)
def weather_env(monkeypatch, tmp_path):
    """Run every test against a known environment, away from any local .env file."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OPENWEATHER_API_KEY", "test-weather-key")
    for name in (
        "OPENWEATHER_BASE_URL",
        "OPENWEATHER_UNITS",
        "OPENWEATHER_LANG",
        "UNSPLASH_ACCESS_KEY",
        "UNSPLASH_BASE_URL",
        "WEATHER_GATEWAY_URL",
        "API_TOKEN",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def london_payload():
    """OpenWeatherMap current weather payload for London."""
    return copy.deepcopy(LONDON_PAYLOAD)


@pytest.fixture
def london_report(london_payload):
    return WeatherReport.model_validate(london_payload)


@pytest.fixture
def mock_upstream():
    """
    Patch the HTTP client used by the weather service.

    Yields the client mock; set ``get.return_value`` or ``get.side_effect``.
    """
    with patch("weather_tracker.services.weather_service.httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value.__aenter__.return_value = mock_client
        yield mock_client
