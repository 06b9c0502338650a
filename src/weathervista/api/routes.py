"""API routes for weather and places endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse
from loguru import logger

from ..core.errors import ValidationError
from ..models.places import Place
from ..models.weather import ErrorResponse
from ..services.places import generate_places
from ..services.weather import weather_service

router = APIRouter(prefix="/api")


@router.get(
    "/weather",
    summary="Get current weather conditions",
    description="Proxy the OpenWeatherMap current-weather-by-city endpoint; the body is passed through unchanged",
    responses={
        200: {
            "description": "Provider current-weather payload",
            "content": {
                "application/json": {
                    "example": {
                        "name": "London",
                        "coord": {"lat": 51.51, "lon": -0.13},
                        "main": {
                            "temp": 300.0,
                            "feels_like": 299.5,
                            "temp_min": 298.0,
                            "temp_max": 301.0,
                            "humidity": 40,
                            "pressure": 1015,
                        },
                        "weather": [
                            {"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}
                        ],
                        "wind": {"speed": 3.6, "deg": 250},
                        "clouds": {"all": 0},
                        "visibility": 10000,
                        "sys": {"country": "GB", "sunrise": 1718251200, "sunset": 1718311200},
                    }
                }
            },
        },
        400: {"model": ErrorResponse, "description": "Missing or empty location"},
        404: {"model": ErrorResponse, "description": "Location not found upstream"},
        500: {"model": ErrorResponse, "description": "Missing API key or upstream failure"},
    },
)
async def get_current_weather(
    location: Annotated[
        str | None,
        Query(description="City name, optionally with country code", examples=["London"]),
    ] = None,
) -> JSONResponse:
    """Get current weather for a location.

    Example:
        >>> # GET /api/weather?location=London
        >>> # Returns: the OpenWeatherMap payload for London
    """
    logger.info("Weather request received")

    payload = await weather_service.get_current_weather(location)
    return JSONResponse(content=payload)


@router.get(
    "/places",
    response_model=list[Place],
    summary="List nearby places",
    description="Generated points of interest around a location",
    responses={400: {"model": ErrorResponse, "description": "Missing or empty location"}},
)
async def get_places(
    lat: Annotated[float, Query(ge=-90.0, le=90.0, examples=[51.51])],
    lng: Annotated[float, Query(ge=-180.0, le=180.0, examples=[-0.13])],
    location: Annotated[str | None, Query(examples=["London"])] = None,
) -> list[Place]:
    """Return the fixture places for a location.

    Example:
        >>> # GET /api/places?location=London&lat=51.51&lng=-0.13
        >>> # Returns: [{"id": "place1", "name": "London Museum of Art", ...}, ...]
    """
    if not location:
        raise ValidationError()
    return generate_places(location, lat, lng)
