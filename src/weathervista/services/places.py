"""Fixture generators for nearby places and map views.

There is no places data source: names are templated from the location and
marker positions are the location's coordinates shifted by fixed deltas.
"""

from ..models.places import MapView, Place

CATEGORIES = {
    "all": "All Places",
    "museum": "Museums",
    "park": "Parks",
    "historic_site": "Historic Sites",
    "restaurant": "Restaurants",
    "shopping_mall": "Shopping",
}

PRICE_LABELS = ["Free", "$", "$$", "$$$", "$$$$"]

# (zoom, title)
MAP_ZOOM_LEVELS = [
    (14, "City View"),
    (10, "Area View"),
    (6, "Region View"),
    (4, "Country View"),
]
AERIAL_ZOOM = 14

# id, name template, type, description, rating, (dlat, dlng), extra fields
_PLACE_TABLE = [
    (
        "place1",
        "{location} Museum of Art",
        "museum",
        "A world-class museum featuring both contemporary and classical art collections.",
        4.7,
        (0.008, 0.006),
        {
            "address": "123 Museum Avenue, Downtown",
            "website": "https://example.com/museum",
            "hours": "Open 9 AM - 5 PM",
            "price_level": 2,
        },
    ),
    (
        "place2",
        "{location} Central Park",
        "park",
        "A beautiful urban park with walking trails, gardens, and recreational facilities.",
        4.8,
        (-0.006, 0.01),
        {"address": "Central District", "hours": "Open 24 hours", "price_level": 0},
    ),
    (
        "place3",
        "Historic {location} Cathedral",
        "historic_site",
        "A magnificent cathedral dating back to the 16th century with stunning architecture.",
        4.6,
        (0.004, -0.008),
        {
            "address": "45 Old Town Square",
            "hours": "Open 10 AM - 4 PM",
            "website": "https://example.com/cathedral",
        },
    ),
    (
        "place4",
        "{location} Luxury Shopping Mall",
        "shopping_mall",
        "Premium shopping experience with international brands and local boutiques.",
        4.3,
        (-0.01, -0.004),
        {"address": "789 Commerce Street", "hours": "Open 10 AM - 9 PM", "price_level": 3},
    ),
    (
        "place5",
        "{location} Science Museum",
        "museum",
        "Interactive exhibits showcasing scientific discoveries and innovations.",
        4.5,
        (0.012, 0.002),
        {
            "address": "567 Science Boulevard",
            "website": "https://example.com/science",
            "hours": "Open 9 AM - 6 PM",
            "price_level": 1,
        },
    ),
    (
        "place6",
        "{location} Waterfront",
        "park",
        "Scenic waterfront area with walking paths, cafes, and beautiful views.",
        4.9,
        (-0.003, 0.014),
        {"address": "Waterfront District", "hours": "Open 24 hours", "price_level": 0},
    ),
    (
        "place7",
        "{location} Gourmet Restaurant",
        "restaurant",
        "Fine dining establishment serving locally-sourced cuisine with international influences.",
        4.6,
        (0.002, -0.012),
        {
            "address": "321 Culinary Avenue",
            "hours": "Open 5 PM - 11 PM",
            "phone": "+1 123-456-7890",
            "price_level": 4,
        },
    ),
]


def generate_places(location: str, lat: float, lng: float) -> list[Place]:
    """Build the fixed list of places around a location.

    Example:
        >>> places = generate_places("Paris", 48.85, 2.35)
        >>> places[0].name
        'Paris Museum of Art'
        >>> len(places)
        7
    """
    return [
        Place(
            id=place_id,
            name=template.format(location=location),
            type=place_type,
            description=description,
            rating=rating,
            lat=lat + dlat,
            lng=lng + dlng,
            **extra,
        )
        for place_id, template, place_type, description, rating, (dlat, dlng), extra in _PLACE_TABLE
    ]


def filter_places(places: list[Place], category: str = "all") -> list[Place]:
    """Keep places of one category; ``"all"`` keeps everything."""
    if category == "all":
        return list(places)
    return [place for place in places if place.type == category]


def price_label(level: int | None) -> str | None:
    """Render a 0-4 price level.

    Example:
        >>> price_label(0)
        'Free'
        >>> price_label(3)
        '$$$'
    """
    if level is None:
        return None
    return PRICE_LABELS[level]


def map_views(lat: float, lng: float) -> list[MapView]:
    """Map tiles at the fixed zoom levels followed by the aerial view."""
    views = [MapView(title=title, zoom=zoom, lat=lat, lng=lng) for zoom, title in MAP_ZOOM_LEVELS]
    views.append(MapView(title="Aerial View", zoom=AERIAL_ZOOM, lat=lat, lng=lng, map_type="aerial"))
    return views
