from weather_tracker.models.errors.error_response import ErrorResponse

__all__ = ["ErrorResponse"]
