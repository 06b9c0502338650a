"""Pytest configuration and fixtures."""

import copy

import pytest
from fastapi.testclient import TestClient

from weathervista.app import app
from weathervista.core.config import settings

TEST_API_KEY = "test-key"

LONDON_PAYLOAD = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [
        {"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"},
        {"id": 701, "main": "Mist", "description": "mist", "icon": "50d"},
    ],
    "base": "stations",
    "main": {
        "temp": 300.0,
        "feels_like": 299.4,
        "temp_min": 298.71,
        "temp_max": 301.2,
        "pressure": 1015,
        "humidity": 42,
    },
    "visibility": 10000,
    "wind": {"speed": 4.12, "deg": 250},
    "clouds": {"all": 0},
    "dt": 1718290000,
    "sys": {"type": 2, "id": 2075535, "country": "GB", "sunrise": 1718250000, "sunset": 1718310000},
    "timezone": 3600,
    "id": 2643743,
    "name": "London",
    "cod": 200,
}


@pytest.fixture(autouse=True)
def api_key(monkeypatch):
    """Configure a provider key for every test; tests may unset it."""
    monkeypatch.setattr(settings, "WEATHERMAP_API_KEY", TEST_API_KEY)
    return TEST_API_KEY


@pytest.fixture
def london_payload():
    """A realistic OpenWeatherMap current-weather payload."""
    return copy.deepcopy(LONDON_PAYLOAD)


@pytest.fixture(scope="function")
def client():
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client
