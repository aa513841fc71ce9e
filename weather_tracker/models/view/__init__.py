from weather_tracker.models.view.view_state import ViewState, ViewStatus
from weather_tracker.models.view.weather_view import ConditionsView, WeatherView

__all__ = ["ConditionsView", "ViewState", "ViewStatus", "WeatherView"]
