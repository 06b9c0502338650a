"""Weather record models mirroring the OpenWeatherMap current-weather payload."""

import math
from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, ConfigDict, Field

KELVIN_OFFSET = 273.15

COMPASS_POINTS = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]


def _round_half_up(value: float) -> int:
    """Round halves towards +infinity, so -13.5 becomes -13 and 0.5 becomes 1."""
    return math.floor(value + 0.5)


def kelvin_to_celsius(kelvin: float) -> int:
    """Convert a provider temperature to whole degrees Celsius.

    Example:
        >>> kelvin_to_celsius(300.0)
        27
    """
    return _round_half_up(kelvin - KELVIN_OFFSET)


def wind_direction(degrees: float) -> str:
    """Map a wind bearing to an 8-point compass label.

    Example:
        >>> wind_direction(350)
        'N'
        >>> wind_direction(135)
        'SE'
    """
    return COMPASS_POINTS[_round_half_up(degrees / 45) % 8]


def visibility_km(meters: float) -> float:
    """Visibility in kilometres, one decimal place.

    Example:
        >>> visibility_km(10000)
        10.0
    """
    return float(Decimal(meters / 1000).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


class _ProviderModel(BaseModel):
    # Provider payloads carry more fields than we read (base, dt, timezone, ...)
    model_config = ConfigDict(frozen=True, extra="allow")


class Coordinates(_ProviderModel):
    """Location coordinates."""

    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)


class MainConditions(_ProviderModel):
    """Temperature block. Temperatures are Kelvin."""

    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    humidity: int = Field(..., description="Relative humidity in %")
    pressure: int = Field(..., description="Pressure in hPa")


class Condition(_ProviderModel):
    """One weather condition descriptor."""

    id: int
    main: str
    description: str
    icon: str


class Wind(_ProviderModel):
    """Wind speed and bearing."""

    speed: float = Field(..., description="Wind speed in m/s")
    deg: int | None = Field(default=None, description="Wind direction in degrees")


class Clouds(_ProviderModel):
    """Cloud coverage."""

    all: int = Field(..., description="Cloud coverage in %")


class SystemInfo(_ProviderModel):
    """Country and sun times."""

    sunrise: int = Field(..., description="Sunrise, Unix seconds")
    sunset: int = Field(..., description="Sunset, Unix seconds")
    country: str | None = None


class WeatherRecord(_ProviderModel):
    """Immutable snapshot of one location's current conditions.

    The first element of ``weather`` is the authoritative condition.
    Unknown provider fields are kept as extras.
    """

    name: str = ""
    coord: Coordinates
    main: MainConditions
    weather: list[Condition] = Field(..., min_length=1)
    wind: Wind
    clouds: Clouds | None = None
    visibility: int | None = Field(default=None, description="Visibility in meters")
    sys: SystemInfo

    @property
    def condition(self) -> Condition:
        return self.weather[0]

    @property
    def temperature_c(self) -> int:
        return kelvin_to_celsius(self.main.temp)

    @property
    def feels_like_c(self) -> int:
        return kelvin_to_celsius(self.main.feels_like)

    @property
    def temp_min_c(self) -> int:
        return kelvin_to_celsius(self.main.temp_min)

    @property
    def temp_max_c(self) -> int:
        return kelvin_to_celsius(self.main.temp_max)


class ErrorResponse(BaseModel):
    """Uniform error body.

    Example:
        >>> ErrorResponse(error="Location not found").model_dump()
        {'error': 'Location not found'}
    """

    error: str
