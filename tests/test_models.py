"""Tests for Pydantic models and unit helpers."""

import pytest
from pydantic import ValidationError

from weathervista.models.weather import (
    ErrorResponse,
    WeatherRecord,
    kelvin_to_celsius,
    visibility_km,
    wind_direction,
)


class TestConversions:
    """Test display conversions."""

    def test_kelvin_to_celsius(self):
        assert kelvin_to_celsius(300.0) == 27
        assert kelvin_to_celsius(273.15) == 0
        assert kelvin_to_celsius(253.15) == -20

    def test_kelvin_half_degrees_round_up(self):
        assert kelvin_to_celsius(259.65) == -13
        assert kelvin_to_celsius(257.65) == -15
        assert kelvin_to_celsius(273.65) == 1

    def test_wind_direction(self):
        assert wind_direction(0) == "N"
        assert wind_direction(44) == "NE"
        assert wind_direction(90) == "E"
        assert wind_direction(180) == "S"
        assert wind_direction(250) == "W"
        assert wind_direction(315) == "NW"
        assert wind_direction(359) == "N"

    def test_wind_direction_half_sector_rounds_up(self):
        assert wind_direction(22.5) == "NE"
        assert wind_direction(337.5) == "N"

    def test_visibility_km(self):
        assert visibility_km(10000) == 10.0
        assert visibility_km(6437) == 6.4

    def test_visibility_half_rounds_up(self):
        assert visibility_km(1250) == 1.3
        assert visibility_km(3250) == 3.3


class TestWeatherRecord:
    """Test WeatherRecord validation."""

    def test_valid_payload(self, london_payload):
        record = WeatherRecord.model_validate(london_payload)

        assert record.name == "London"
        assert record.coord.lat == 51.5085
        assert record.coord.lon == -0.1257
        assert record.main.humidity == 42
        assert record.sys.country == "GB"
        assert record.wind.deg == 250
        assert record.clouds.all == 0
        assert record.visibility == 10000

    def test_first_condition_is_authoritative(self, london_payload):
        record = WeatherRecord.model_validate(london_payload)

        assert record.condition.main == "Clear"
        assert record.condition.icon == "01d"

    def test_celsius_properties(self, london_payload):
        record = WeatherRecord.model_validate(london_payload)

        assert record.temperature_c == 27
        assert record.feels_like_c == 26
        assert record.temp_min_c == 26
        assert record.temp_max_c == 28

    def test_empty_conditions_rejected(self, london_payload):
        london_payload["weather"] = []

        with pytest.raises(ValidationError):
            WeatherRecord.model_validate(london_payload)

    @pytest.mark.parametrize("block", ["coord", "main", "wind", "sys", "weather"])
    def test_required_blocks(self, london_payload, block):
        del london_payload[block]

        with pytest.raises(ValidationError):
            WeatherRecord.model_validate(london_payload)

    def test_optional_fields(self, london_payload):
        del london_payload["visibility"]
        del london_payload["clouds"]
        del london_payload["wind"]["deg"]
        del london_payload["sys"]["country"]

        record = WeatherRecord.model_validate(london_payload)

        assert record.visibility is None
        assert record.clouds is None
        assert record.wind.deg is None
        assert record.sys.country is None

    def test_record_is_immutable(self, london_payload):
        record = WeatherRecord.model_validate(london_payload)

        with pytest.raises(ValidationError):
            record.name = "Paris"

    def test_unknown_fields_kept(self, london_payload):
        record = WeatherRecord.model_validate(london_payload)

        assert record.model_dump()["timezone"] == 3600


class TestErrorResponse:
    def test_serialization(self):
        assert ErrorResponse(error="Location not found").model_dump() == {"error": "Location not found"}
