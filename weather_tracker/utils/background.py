from enum import Enum
from typing import Optional


class BackgroundCategory(str, Enum):
    """Decorative background families keyed off the provider's condition codes."""

    SUNNY = "sunny"
    CLOUDY = "cloudy"
    RAINY = "rainy"
    SNOWY = "snowy"
    DEFAULT = "default"

    @property
    def css_class(self) -> Optional[str]:
        if self is BackgroundCategory.DEFAULT:
            return None
        return f"weather-{self.value}"


# OpenWeatherMap condition groups: https://openweathermap.org/weather-conditions
_CONDITION_GROUPS = {
    2: BackgroundCategory.RAINY,  # thunderstorm
    3: BackgroundCategory.RAINY,  # drizzle
    5: BackgroundCategory.RAINY,
    6: BackgroundCategory.SNOWY,
}

CLEAR_SKY_CODE = 800
LAST_CLOUDS_CODE = 804


def background_for_condition(condition_id: int) -> BackgroundCategory:
    """
    Map an OpenWeatherMap condition code to a background category.

    Args:
        condition_id: Numeric ``weather[].id`` from the provider

    Returns:
        BackgroundCategory, DEFAULT for atmosphere codes (7xx) and unknown values
    """
    if condition_id == CLEAR_SKY_CODE:
        return BackgroundCategory.SUNNY
    if CLEAR_SKY_CODE < condition_id <= LAST_CLOUDS_CODE:
        return BackgroundCategory.CLOUDY
    return _CONDITION_GROUPS.get(condition_id // 100, BackgroundCategory.DEFAULT)
