"""Application configuration using Pydantic Settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    The weather provider key is optional at startup: a missing key is reported
    per request as a configuration error instead of crashing the process.

    Example:
        >>> settings = Settings(WEATHERMAP_API_KEY="abc")
        >>> settings.DEFAULT_LOCATION
        'London'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Weather provider
    WEATHERMAP_API_KEY: str | None = Field(
        default=None,
        description="OpenWeatherMap API key, sent as the appid query credential",
    )
    OPENWEATHER_BASE_URL: str = Field(
        default="https://api.openweathermap.org/data/2.5/weather",
        description="OpenWeatherMap current-weather-by-city endpoint",
    )

    # Maps widget (consumed by clients only)
    GOOGLE_MAPS_API_KEY: str | None = Field(
        default=None,
        description="Maps widget API key; absence only degrades map rendering",
    )

    # Dashboard
    DEFAULT_LOCATION: str = Field(
        default="London",
        description="Location fetched on mount when none is given",
        min_length=1,
    )

    # Server Configuration
    PORT: int = Field(
        default=8000,
        description="Server port",
        ge=1,
        le=65535,
    )

    # Logging Configuration
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    ENVIRONMENT: str = Field(
        default="development",
        description="Environment (development, staging, production)",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and upper-case the log level.

        Example:
            >>> Settings(LOG_LEVEL="info").LOG_LEVEL
            'INFO'
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}, got {v}")
        return v_upper

    @field_validator("OPENWEATHER_BASE_URL")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL and strip the trailing slash.

        Example:
            >>> Settings(OPENWEATHER_BASE_URL="https://api.example.com/").OPENWEATHER_BASE_URL
            'https://api.example.com'
        """
        if not v.startswith(("http://", "https://")):
            raise ValueError("OPENWEATHER_BASE_URL must start with http:// or https://")
        return v.rstrip("/")

    @property
    def weather_api_configured(self) -> bool:
        """True when a non-empty provider key is present."""
        return bool(self.WEATHERMAP_API_KEY)


# Global settings instance
settings = Settings()
