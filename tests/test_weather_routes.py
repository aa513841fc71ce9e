"""Tests for the weather gateway HTTP endpoints."""

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from main import app

WEATHER_URL = "/api/v1/weather"


@pytest_asyncio.fixture
async def client():
    """Create an async test client for the FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


class TestWeatherRoutes:
    """Test cases for POST /api/v1/weather."""

    @pytest.mark.asyncio
    async def test_lookup_by_city(self, client, mock_upstream, london_payload):
        mock_upstream.get.return_value = httpx.Response(200, json=london_payload)

        resp = await client.post(WEATHER_URL, json={"city": "London"})

        assert resp.status_code == 200
        assert resp.json() == london_payload

    @pytest.mark.asyncio
    async def test_lookup_by_coordinates(self, client, mock_upstream, london_payload):
        mock_upstream.get.return_value = httpx.Response(200, json=london_payload)

        resp = await client.post(WEATHER_URL, json={"lat": 51.5074, "lon": -0.1278})

        assert resp.status_code == 200
        params = mock_upstream.get.call_args[1]["params"]
        assert (params["lat"], params["lon"]) == (51.5074, -0.1278)

    @pytest.mark.asyncio
    async def test_city_not_found(self, client, mock_upstream):
        mock_upstream.get.return_value = httpx.Response(404, json={"cod": "404"})

        resp = await client.post(WEATHER_URL, json={"city": "Atlantis"})

        assert resp.status_code == 404
        assert resp.json() == {"error": "City not found. Please try another search."}

    @pytest.mark.asyncio
    async def test_invalid_api_key(self, client, mock_upstream):
        mock_upstream.get.return_value = httpx.Response(401, json={"cod": 401})

        resp = await client.post(WEATHER_URL, json={"city": "London"})

        assert resp.status_code == 401
        assert resp.json() == {"error": "API Key invalid. Please check your API key."}

    @pytest.mark.asyncio
    async def test_upstream_unavailable(self, client, mock_upstream):
        mock_upstream.get.return_value = httpx.Response(503)

        resp = await client.post(WEATHER_URL, json={"city": "London"})

        assert resp.status_code == 503
        assert resp.json() == {"error": "API Error: 503 Service Unavailable"}

    @pytest.mark.asyncio
    async def test_upstream_unreachable(self, client, mock_upstream):
        mock_upstream.get.side_effect = httpx.ConnectError("Name or service not known")

        resp = await client.post(WEATHER_URL, json={"city": "London"})

        assert resp.status_code == 500
        assert resp.json() == {"error": "Name or service not known"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [{}, {"city": ""}, {"lat": 51.5}, {"lon": -0.1}, {"city": None, "lat": None, "lon": None}],
    )
    async def test_missing_location(self, client, mock_upstream, body):
        resp = await client.post(WEATHER_URL, json=body)

        assert resp.status_code == 400
        assert resp.json() == {"error": "Please provide either a city name or coordinates"}
        mock_upstream.get.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "content",
        [b"not json", b"[1, 2]", b'{"lat": "north", "lon": "west"}'],
    )
    async def test_malformed_body(self, client, mock_upstream, content):
        resp = await client.post(
            WEATHER_URL, content=content, headers={"Content-Type": "application/json"}
        )

        assert resp.status_code == 400
        assert resp.json() == {"error": "Please provide either a city name or coordinates"}
        mock_upstream.get.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{"city": "London"}, {}])
    async def test_missing_api_key(self, client, mock_upstream, weather_env, body):
        weather_env.delenv("OPENWEATHER_API_KEY")

        resp = await client.post(WEATHER_URL, json=body)

        assert resp.status_code == 500
        assert resp.json() == {
            "error": "API Key is not configured on the server. Please check environment variables."
        }
        mock_upstream.get.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("headers", [{}, {"Authorization": "Bearer nope"}])
    async def test_missing_api_key_wins_over_token_check(self, client, mock_upstream, weather_env, headers):
        """Test a misconfigured server answers 500 even when auth would fail."""
        weather_env.setenv("API_TOKEN", "secret-token")
        weather_env.delenv("OPENWEATHER_API_KEY")

        resp = await client.post(WEATHER_URL, json={"city": "London"}, headers=headers)

        assert resp.status_code == 500
        assert resp.json() == {
            "error": "API Key is not configured on the server. Please check environment variables."
        }
        mock_upstream.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_token_required_when_configured(self, client, mock_upstream, weather_env):
        weather_env.setenv("API_TOKEN", "secret-token")

        resp = await client.post(WEATHER_URL, json={"city": "London"})

        assert resp.status_code == 401
        assert "Authentication required" in resp.json()["error"]
        mock_upstream.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_wrong_token(self, client, mock_upstream, weather_env):
        weather_env.setenv("API_TOKEN", "secret-token")

        resp = await client.post(
            WEATHER_URL,
            json={"city": "London"},
            headers={"Authorization": "Bearer nope"},
        )

        assert resp.status_code == 401
        assert resp.json() == {"error": "Invalid authentication token."}

    @pytest.mark.asyncio
    async def test_valid_token(self, client, mock_upstream, weather_env, london_payload):
        weather_env.setenv("API_TOKEN", "secret-token")
        mock_upstream.get.return_value = httpx.Response(200, json=london_payload)

        resp = await client.post(
            WEATHER_URL,
            json={"city": "London"},
            headers={"Authorization": "Bearer secret-token"},
        )

        assert resp.status_code == 200
        assert resp.json()["name"] == "London"


class TestHealthRoutes:
    """Test cases for service information endpoints."""

    @pytest.mark.asyncio
    async def test_health(self, client):
        resp = await client.get("/health")

        assert resp.status_code == 200
        data = resp.json()
        assert data["api_key_configured"] is True
        assert "test-weather-key" not in resp.text

    @pytest.mark.asyncio
    async def test_health_without_key(self, client, weather_env):
        weather_env.delenv("OPENWEATHER_API_KEY")

        resp = await client.get("/health")

        assert resp.json()["api_key_configured"] is False

    @pytest.mark.asyncio
    async def test_root(self, client):
        resp = await client.get("/")

        assert resp.status_code == 200
        assert resp.json()["message"] == "Weather Tracker API"
        assert "X-Process-Time" in resp.headers
