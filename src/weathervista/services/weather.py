"""Weather proxy service: validation, credential check and error translation."""

from typing import Any

from loguru import logger
from opentelemetry import metrics

from ..core.config import settings
from ..core.errors import (
    ConfigurationError,
    UpstreamFailure,
    UpstreamNotFound,
    ValidationError,
)
from ..services.openweather import (
    OpenWeatherClient,
    OpenWeatherError,
    OpenWeatherNotFoundError,
)

_meter = metrics.get_meter(__name__)
_upstream_requests = _meter.create_counter(
    "weather_upstream_requests",
    unit="1",
    description="OpenWeatherMap requests by outcome",
)


class WeatherService:
    """Weather service mediating between proxy clients and OpenWeatherMap.

    Stateless: every call is a fresh provider round trip.

    Example:
        >>> async def example():
        ...     payload = await weather_service.get_current_weather("London")
        ...     return payload["name"]
    """

    async def get_current_weather(self, location: str | None) -> dict[str, Any]:
        """Get the provider's current-weather payload for a location.

        Args:
            location: The raw ``location`` query parameter

        Returns:
            Provider JSON body, unchanged

        Raises:
            ValidationError: Location missing or empty
            ConfigurationError: No provider key configured
            UpstreamNotFound: Provider does not know the location
            UpstreamFailure: Any other provider failure
        """
        if not location:
            raise ValidationError()

        api_key = settings.WEATHERMAP_API_KEY
        if not api_key:
            logger.error("WEATHERMAP_API_KEY is not set")
            raise ConfigurationError()

        try:
            async with OpenWeatherClient(api_key=api_key) as client:
                payload = await client.get_current_weather(location)

        except OpenWeatherNotFoundError as e:
            _upstream_requests.add(1, {"outcome": "not_found"})
            raise UpstreamNotFound() from e

        except OpenWeatherError as e:
            _upstream_requests.add(1, {"outcome": "failure"})
            logger.warning("Weather API error", error_type=type(e).__name__, error=str(e))
            raise UpstreamFailure() from e

        except Exception as e:
            _upstream_requests.add(1, {"outcome": "failure"})
            logger.exception("Unexpected error in weather service")
            raise UpstreamFailure() from e

        _upstream_requests.add(1, {"outcome": "success"})
        return payload


# Global service instance
weather_service = WeatherService()
