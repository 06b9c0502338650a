"""Tests for the place and map fixture generators."""

import pytest

from weathervista.services.places import (
    CATEGORIES,
    filter_places,
    generate_places,
    map_views,
    price_label,
)


class TestGeneratePlaces:
    def test_names_templated_from_location(self):
        places = generate_places("Tokyo", 35.68, 139.69)

        assert [place.name for place in places] == [
            "Tokyo Museum of Art",
            "Tokyo Central Park",
            "Historic Tokyo Cathedral",
            "Tokyo Luxury Shopping Mall",
            "Tokyo Science Museum",
            "Tokyo Waterfront",
            "Tokyo Gourmet Restaurant",
        ]

    def test_ids_are_unique(self):
        places = generate_places("Tokyo", 35.68, 139.69)

        assert len({place.id for place in places}) == len(places)

    def test_markers_scattered_near_location(self):
        places = generate_places("Tokyo", 35.68, 139.69)

        positions = {(place.lat, place.lng) for place in places}
        assert len(positions) == len(places)
        for place in places:
            assert place.lat == pytest.approx(35.68, abs=0.02)
            assert place.lng == pytest.approx(139.69, abs=0.02)

    def test_deterministic(self):
        assert generate_places("Oslo", 59.91, 10.75) == generate_places("Oslo", 59.91, 10.75)

    def test_optional_fields(self):
        restaurant = generate_places("Tokyo", 35.68, 139.69)[6]

        assert restaurant.type == "restaurant"
        assert restaurant.phone == "+1 123-456-7890"
        assert restaurant.price_level == 4
        assert restaurant.website is None


class TestFilterPlaces:
    def test_all(self):
        places = generate_places("Rome", 41.9, 12.5)

        assert filter_places(places, "all") == places

    def test_by_category(self):
        places = generate_places("Rome", 41.9, 12.5)

        museums = filter_places(places, "museum")
        assert [place.id for place in museums] == ["place1", "place5"]
        assert filter_places(places, "zoo") == []

    def test_categories(self):
        assert list(CATEGORIES) == ["all", "museum", "park", "historic_site", "restaurant", "shopping_mall"]

    def test_every_place_type_is_a_category(self):
        places = generate_places("Rome", 41.9, 12.5)

        assert {place.type for place in places} == set(CATEGORIES) - {"all"}


class TestPriceLabel:
    def test_labels(self):
        assert [price_label(level) for level in range(5)] == ["Free", "$", "$$", "$$$", "$$$$"]
        assert price_label(None) is None


class TestMapViews:
    def test_fixed_zoom_levels(self):
        views = map_views(51.5, -0.12)

        assert [(view.title, view.zoom) for view in views] == [
            ("City View", 14),
            ("Area View", 10),
            ("Region View", 6),
            ("Country View", 4),
            ("Aerial View", 14),
        ]
        assert views[-1].map_type == "aerial"

    def test_centred_on_coordinates(self):
        for view in map_views(51.5, -0.12):
            assert (view.lat, view.lng) == (51.5, -0.12)
