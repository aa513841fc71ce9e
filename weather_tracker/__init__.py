"""Weather lookup gateway and presentation client."""

__version__ = "1.0.0"
