"""Client-side fetch orchestration for the weather dashboard."""

import httpx
from loguru import logger
from pydantic import BaseModel, ConfigDict

from ..core.config import settings
from ..core.errors import UpstreamFailure
from ..models.places import MapView, Place
from ..models.weather import WeatherRecord
from ..services.places import generate_places, map_views

FALLBACK_ERROR = UpstreamFailure.message


class DashboardView(BaseModel):
    """Read-only snapshot of the dashboard for presentational consumers."""

    model_config = ConfigDict(frozen=True)

    loading: bool
    error: str | None
    weather_data: WeatherRecord | None
    places: list[Place] = []
    map_views: list[MapView] = []


class WeatherDashboard:
    """Tracks the loading/error/data state of weather fetches through the proxy.

    A failed fetch sets ``error`` but keeps whatever ``weather_data`` an
    earlier fetch stored. Fetches may overlap; each one takes a sequence
    number and only the most recently issued one may change state, so a slow
    response to an older search never overwrites a newer one.

    Example:
        >>> async def example():
        ...     async with httpx.AsyncClient(base_url="http://localhost:8000") as http:
        ...         dashboard = WeatherDashboard(http)
        ...         await dashboard.mount()
        ...         await dashboard.search("Tokyo")
        ...         return dashboard.weather_data.temperature_c
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        default_location: str | None = None,
        endpoint: str = "/api/weather",
    ):
        """Initialize an idle dashboard.

        Args:
            http_client: Client whose base URL points at the weather proxy
            default_location: Location fetched by ``mount`` when none is given
            endpoint: Proxy path
        """
        self._http = http_client
        self._default_location = default_location or settings.DEFAULT_LOCATION
        self._endpoint = endpoint
        self._sequence = 0

        self.loading: bool = False
        self.error: str | None = None
        self.weather_data: WeatherRecord | None = None

    async def mount(self, location: str | None = None) -> None:
        """Initial load: the location from the navigation context, else the default."""
        await self._fetch(location if location else self._default_location)

    async def search(self, query: str) -> None:
        """Fetch a user-submitted location. Blank input does nothing."""
        location = query.strip()
        if not location:
            return
        await self._fetch(location)

    def view(self) -> DashboardView:
        """Snapshot of the current state, with places and maps for the stored record."""
        record = self.weather_data
        if record is None:
            return DashboardView(loading=self.loading, error=self.error, weather_data=None)

        lat, lng = record.coord.lat, record.coord.lon
        return DashboardView(
            loading=self.loading,
            error=self.error,
            weather_data=record,
            places=generate_places(record.name, lat, lng),
            map_views=map_views(lat, lng),
        )

    async def _fetch(self, location: str) -> None:
        self._sequence += 1
        sequence = self._sequence

        self.loading = True
        self.error = None

        try:
            record, error = await self._request(location)

            if sequence != self._sequence:
                logger.debug("Discarding stale weather response", sequence=sequence, latest=self._sequence)
                return

            if record is not None:
                self.weather_data = record
            else:
                logger.info("Weather fetch failed", error=error)
                self.error = error
        finally:
            # Cancelled or unexpected failures must not leave the latest fetch loading
            if sequence == self._sequence:
                self.loading = False

    async def _request(self, location: str) -> tuple[WeatherRecord | None, str | None]:
        """One proxy round trip: the parsed record, or the message to show."""
        try:
            response = await self._http.get(self._endpoint, params={"location": location})
            if response.is_success:
                return WeatherRecord.model_validate(response.json()), None
            return None, _error_message(response)
        except httpx.HTTPError as e:
            logger.warning("Weather proxy request failed", error=str(e))
            return None, FALLBACK_ERROR
        except ValueError as e:
            # Non-JSON body or a payload that is not a weather record
            logger.warning("Weather proxy returned an unusable body", error=str(e))
            return None, FALLBACK_ERROR


def _error_message(response: httpx.Response) -> str:
    """The proxy's ``error`` field, or the generic fallback."""
    try:
        body = response.json()
    except ValueError:
        return FALLBACK_ERROR
    if isinstance(body, dict) and isinstance(body.get("error"), str) and body["error"]:
        return body["error"]
    return FALLBACK_ERROR
