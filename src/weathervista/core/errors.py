"""Error vocabulary returned by the weather proxy.

Every error carries the HTTP status and the user-facing message rendered as
``{"error": message}``. Upstream details never travel in the message; they
are logged where the error is raised.
"""


class WeatherProxyError(Exception):
    """Base class for errors surfaced to proxy clients."""

    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(WeatherProxyError):
    """Missing or empty client input. Never retried."""

    status_code = 400
    message = "Location parameter is required"


class ConfigurationError(WeatherProxyError):
    """Deployment misconfiguration, such as a missing provider key."""

    status_code = 500
    message = "Weather API key is not configured"


class UpstreamNotFound(WeatherProxyError):
    """The provider does not know the requested location."""

    status_code = 404
    message = "Location not found"


class UpstreamFailure(WeatherProxyError):
    """Any other provider failure: network, non-2xx, malformed body."""

    status_code = 500
    message = "Failed to fetch weather data"
