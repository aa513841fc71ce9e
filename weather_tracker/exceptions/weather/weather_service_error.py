from typing import Optional

from weather_tracker.exceptions.base import WeatherTrackerError


class WeatherServiceError(WeatherTrackerError):
    """
    Base exception for weather lookup errors.

    Carries the HTTP status that the gateway responds with, alongside the
    message that is shown to the end user.
    """

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
