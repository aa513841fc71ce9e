"""Unit conversion and formatting helpers for displaying weather reports."""

import math
from datetime import datetime, tzinfo
from typing import Optional

COMPASS_DIRECTIONS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]

MS_TO_KMH = 3.6


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going towards +infinity."""
    return math.floor(value + 0.5)


def celsius_to_fahrenheit(celsius: float) -> int:
    return round_half_up(celsius * 9 / 5 + 32)


def display_temperature(celsius: float, is_celsius: bool = True) -> int:
    """
    Convert a Celsius reading to the whole-degree value shown to the user.

    Args:
        celsius: Temperature as reported upstream (metric units)
        is_celsius: Display unit preference

    Returns:
        Rounded temperature in the preferred unit
    """
    if is_celsius:
        return round_half_up(celsius)
    return celsius_to_fahrenheit(celsius)


def unit_symbol(is_celsius: bool = True) -> str:
    return "°C" if is_celsius else "°F"


def wind_speed_kmh(meters_per_second: float) -> float:
    return meters_per_second * MS_TO_KMH


def wind_direction(degrees: float) -> str:
    """Bucket a bearing in degrees into one of 16 compass sectors."""
    index = round_half_up((degrees % 360) / 22.5) % 16
    return COMPASS_DIRECTIONS[index]


def visibility_km(meters: float) -> float:
    return meters / 1000


def format_time(unix_time: int, tz: Optional[tzinfo] = None) -> str:
    """Format an epoch timestamp as a clock time, e.g. ``07:05 AM``."""
    moment = datetime.fromtimestamp(unix_time, tz=tz)
    return moment.strftime("%I:%M %p")


def format_date_time(unix_time: int, tz: Optional[tzinfo] = None) -> str:
    """Format an epoch timestamp as e.g. ``Sun, Oct 1, 2023, 12:00 PM``."""
    moment = datetime.fromtimestamp(unix_time, tz=tz)
    return f"{moment:%a}, {moment:%b} {moment.day}, {moment.year}, {moment:%I:%M %p}"
