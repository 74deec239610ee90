"""Shared fixtures: settings, a recording provider stub and a sample provider body."""

import copy

import pytest
from fastapi.testclient import TestClient

from weather_relay.core.settings import Settings
from weather_relay.server import create_app
from weather_relay.weather.types import ProviderResponse


LONDON = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}],
    "main": {"temp": 11.5, "feels_like": 10.2, "temp_min": 10.1, "temp_max": 12.8, "humidity": 82},
    "sys": {"country": "GB"},
    "name": "London",
    "cod": 200,
}


class StubProvider:
    """Records every call; answers with a canned response or raises."""

    def __init__(self, status_code=200, payload=None, exc=None):
        self.status_code = status_code
        self.payload = copy.deepcopy(LONDON) if payload is None else payload
        self.exc = exc
        self.calls = []

    async def current_weather(self, *, city, api_key):
        self.calls.append({"city": city, "api_key": api_key})
        if self.exc is not None:
            raise self.exc
        return ProviderResponse(status_code=self.status_code, payload=self.payload)


@pytest.fixture
def settings():
    return Settings(openweather_api_key="test-key-12345")


@pytest.fixture
def unconfigured():
    return Settings(openweather_api_key="")


@pytest.fixture
def london():
    return copy.deepcopy(LONDON)


@pytest.fixture
def provider():
    return StubProvider()


@pytest.fixture
def make_client():
    def _make(settings, provider):
        return TestClient(create_app(settings, provider=provider))
    return _make
