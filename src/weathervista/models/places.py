"""Place and map view models for the dashboard fixtures."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

PlaceType = Literal["museum", "park", "historic_site", "shopping_mall", "restaurant"]


class Place(BaseModel):
    """A generated point of interest near a location."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: PlaceType
    description: str
    rating: float = Field(..., ge=0.0, le=5.0)
    lat: float
    lng: float
    address: str | None = None
    website: str | None = None
    phone: str | None = None
    hours: str | None = None
    price_level: int | None = Field(default=None, ge=0, le=4)


class MapView(BaseModel):
    """One map tile centred on a location at a fixed zoom."""

    model_config = ConfigDict(frozen=True)

    title: str
    zoom: int
    lat: float
    lng: float
    map_type: Literal["roadmap", "aerial"] = "roadmap"
