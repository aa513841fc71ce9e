from datetime import timezone

from weather_tracker.models.view.view_state import ViewState
from weather_tracker.models.view.weather_view import ConditionsView, WeatherView
from weather_tracker.models.weather.weather import WeatherReport
from weather_tracker.utils.background import BackgroundCategory


def _loaded_state(report, **updates):
    state = ViewState().start_loading()
    state = state.succeed(state.request_seq, report, BackgroundCategory.CLOUDY)
    return state.model_copy(update=updates)


class TestConditionsView:
    """Test cases for formatting a report for display."""

    def test_from_report_celsius(self, london_report):
        view = ConditionsView.from_report(london_report, is_celsius=True, tz=timezone.utc)

        assert view.location == "London, GB"
        assert view.observed_at == "Sun, Oct 1, 2023, 12:00 PM"
        assert view.icon_url == "https://openweathermap.org/img/wn/02d@4x.png"
        assert view.description == "few clouds"
        assert view.temperature == "16°C"
        assert view.feels_like == "Feels like 15°C"
        assert view.high == "19°"
        assert view.low == "12°"
        assert view.wind_speed == "12.6 km/h"
        assert view.wind_gust == "18.0 km/h"
        assert view.wind_direction == "180° (S)"
        assert view.humidity == "65%"
        assert view.pressure == "1013 hPa"
        assert view.visibility == "10.0 km"
        assert view.precipitation == "Rain: 0.25 mm"
        assert view.sunrise == "05:40 AM"
        assert view.sunset == "05:40 PM"

    def test_from_report_fahrenheit(self, london_report):
        view = ConditionsView.from_report(london_report, is_celsius=False, tz=timezone.utc)

        assert view.temperature == "60°F"
        assert view.feels_like == "Feels like 59°F"
        assert view.high == "66°"
        assert view.low == "54°"

    def test_missing_gust(self, london_payload):
        del london_payload["wind"]["gust"]
        report = WeatherReport.model_validate(london_payload)

        view = ConditionsView.from_report(report, tz=timezone.utc)

        assert view.wind_gust == "N/A"

    def test_no_precipitation(self, london_payload):
        del london_payload["rain"]
        report = WeatherReport.model_validate(london_payload)

        assert ConditionsView.from_report(report, tz=timezone.utc).precipitation == "No precipitation"

    def test_rain_and_snow(self, london_payload):
        london_payload["snow"] = {"1h": 1.0}
        report = WeatherReport.model_validate(london_payload)

        view = ConditionsView.from_report(report, tz=timezone.utc)

        assert view.precipitation == "Rain: 0.25 mm | Snow: 1 mm"


class TestWeatherView:
    """Test cases for rendering a whole view state."""

    def test_empty_state(self):
        view = WeatherView.from_state(ViewState())

        assert view.is_empty
        assert view.conditions is None
        assert view.body_class == ""
        assert view.unit_symbol == "°C"

    def test_loaded_state(self, london_report):
        state = _loaded_state(london_report, dark_mode=True, background_image="https://img")

        view = WeatherView.from_state(state, timezone.utc)

        assert view.status == "success"
        assert view.conditions.location == "London, GB"
        assert view.body_class == "dark weather-cloudy"
        assert view.background_image == "https://img"
        assert not view.is_empty

    def test_loading_hides_conditions(self, london_report):
        state = _loaded_state(london_report).start_loading()

        view = WeatherView.from_state(state, timezone.utc)

        assert view.loading is True
        assert view.conditions is None
        assert not view.is_empty

    def test_error_state(self):
        state = ViewState().start_loading()
        state = state.fail(state.request_seq, "Please enter a city name")

        view = WeatherView.from_state(state)

        assert view.error == "Please enter a city name"
        assert view.conditions is None
        assert not view.is_empty

    def test_unit_preference(self, london_report):
        state = _loaded_state(london_report).set_units(False)

        view = WeatherView.from_state(state, timezone.utc)

        assert view.unit_symbol == "°F"
        assert view.conditions.temperature == "60°F"
