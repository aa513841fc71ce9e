from weather_tracker.exceptions.presentation.presentation_error import PresentationError


class GeolocationError(PresentationError):
    """Exception raised when the device position cannot be determined."""

    pass
