from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """
    Application settings loaded from environment variables and .env files.

    This class handles all configuration for the weather tracker including
    provider credentials, upstream endpoints and logging parameters.
    """

    # API Keys
    openweather_api_key: Optional[str] = Field(
        default=None, description="OpenWeatherMap API key for weather lookups"
    )
    unsplash_access_key: Optional[str] = Field(
        default=None, description="Unsplash access key for background images"
    )

    # OpenWeatherMap Configuration
    openweather_base_url: str = Field(
        default="https://api.openweathermap.org/data/2.5/weather",
        description="OpenWeatherMap current weather endpoint",
    )
    openweather_units: str = Field(default="metric", description="Unit system requested upstream")
    openweather_lang: str = Field(default="en", description="Display language requested upstream")

    # Unsplash Configuration
    unsplash_base_url: str = Field(
        default="https://api.unsplash.com/search/photos",
        description="Unsplash photo search endpoint",
    )

    # Presentation client Configuration
    weather_gateway_url: str = Field(
        default="http://localhost:8000/api/v1/weather",
        description="Gateway endpoint used by the presentation client",
    )

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="FastAPI host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="FastAPI port")
    api_token: Optional[str] = Field(default=None, description="API authentication token")

    # Logging Configuration
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="text", description="Log format (json/text)")
    log_to_file: bool = Field(default=False, description="Also write logs under logs/")

    @field_validator("openweather_api_key", "unsplash_access_key", "api_token")
    def blank_as_missing(cls, v):
        """Treat empty or whitespace-only secrets as not configured."""
        if v is not None and not v.strip():
            return None
        return v

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    def validate_log_format(cls, v):
        """Validate log format."""
        if v.lower() not in ("json", "text"):
            raise ValueError(f"Invalid log format: {v}. Must be 'json' or 'text'")
        return v.lower()

    def get_log_directory(self) -> Path:
        """Get the absolute path of the log directory."""
        return Path("logs").resolve()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def load_config() -> Config:
    """
    Load a fresh configuration snapshot.

    Settings are re-read from the environment on every call, so values that
    change after startup (e.g. a credential injected later) are picked up.
    """
    return Config()


config = load_config()
