"""OpenWeatherMap current-weather client."""

from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from ..core.config import settings
from ..models.weather import WeatherRecord


class OpenWeatherError(Exception):
    """Base exception for OpenWeatherMap API errors."""

    pass


class OpenWeatherNotFoundError(OpenWeatherError):
    """Raised when the provider answers 404 for the requested city."""

    pass


class OpenWeatherUpstreamError(OpenWeatherError):
    """Raised when the provider answers any other non-2xx status."""

    def __init__(self, status_code: int, body: str = ""):
        super().__init__(f"Upstream API returned {status_code}")
        self.status_code = status_code
        self.body = body


class OpenWeatherNetworkError(OpenWeatherError):
    """Raised on transport failures (timeouts, DNS, connection refused)."""

    pass


class OpenWeatherResponseError(OpenWeatherError):
    """Raised when a 2xx body is not a usable current-weather payload."""

    pass


class OpenWeatherClient:
    """Client for the OpenWeatherMap "current weather by city name" endpoint.

    One request per call: no retries and no timeout override, so the httpx
    default transport timeout applies.

    Example:
        >>> async def example():
        ...     async with OpenWeatherClient(api_key="secret") as client:
        ...         payload = await client.get_current_weather("London")
        ...         return payload["main"]["temp"]
    """

    def __init__(self, api_key: str, base_url: str | None = None):
        """Initialize the client.

        Args:
            api_key: Provider credential, sent as the ``appid`` query parameter
            base_url: Endpoint override; defaults to ``settings.OPENWEATHER_BASE_URL``
        """
        self._client: httpx.AsyncClient | None = None
        self._api_key = api_key
        self._base_url = base_url or settings.OPENWEATHER_BASE_URL

    async def __aenter__(self):
        """Async context manager entry."""
        self._client = httpx.AsyncClient(follow_redirects=True)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._client:
            await self._client.aclose()

    async def get_current_weather(self, location: str) -> dict[str, Any]:
        """Fetch current conditions for a city name.

        The payload is validated against ``WeatherRecord`` but returned as the
        provider sent it.

        Args:
            location: Free-form city query; URL-encoded by httpx

        Returns:
            The provider's JSON body, unchanged

        Raises:
            OpenWeatherNotFoundError: Provider returned 404
            OpenWeatherUpstreamError: Provider returned another non-2xx status
            OpenWeatherNetworkError: Transport failure
            OpenWeatherResponseError: Body is not JSON or misses required fields
        """
        if not self._client:
            raise RuntimeError("Client not initialized. Use async context manager.")

        params = {"q": location, "appid": self._api_key}

        try:
            logger.debug("Fetching weather from OpenWeatherMap", url=self._base_url)
            response = await self._client.get(self._base_url, params=params)
        except httpx.HTTPError as e:
            logger.error("HTTP error occurred", error_type=type(e).__name__, error=str(e))
            raise OpenWeatherNetworkError(f"Network error: {e}") from e

        if response.status_code == 404:
            logger.info("OpenWeatherMap returned 404")
            raise OpenWeatherNotFoundError("Location not found upstream")

        if not response.is_success:
            logger.warning(
                "OpenWeatherMap returned error status",
                status_code=response.status_code,
                body=response.text[:500],
            )
            raise OpenWeatherUpstreamError(response.status_code, response.text)

        try:
            payload = response.json()
        except ValueError as e:
            logger.error("OpenWeatherMap returned non-JSON body", error=str(e))
            raise OpenWeatherResponseError("Upstream body is not JSON") from e

        try:
            WeatherRecord.model_validate(payload)
        except PydanticValidationError as e:
            logger.error(
                "OpenWeatherMap returned malformed payload",
                errors=e.error_count(),
                detail=str(e),
            )
            raise OpenWeatherResponseError("Upstream body is not a weather record") from e

        return payload
