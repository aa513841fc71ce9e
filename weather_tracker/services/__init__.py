from weather_tracker.services.image_search_service import ImageSearch, UnsplashImageSearch
from weather_tracker.services.weather_service import WeatherService, weather_service

__all__ = ["ImageSearch", "UnsplashImageSearch", "WeatherService", "weather_service"]
