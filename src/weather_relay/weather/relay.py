# src/weather_relay/weather/relay.py
from __future__ import annotations
import logging
from typing import Any, Dict, Optional

from weather_relay.core.errors import (
    GENERIC_UPSTREAM_MESSAGE,
    InvalidRequest,
    MalformedUpstreamResponse,
    ServerMisconfigured,
    TransportFailure,
    UpstreamError,
)
from weather_relay.core.settings import Settings
from weather_relay.models.schemas import WeatherSummary
from weather_relay.weather.openweather import OpenWeatherClient
from weather_relay.weather.types import CurrentWeatherProvider


def to_summary(data: Dict[str, Any]) -> WeatherSummary:
    """Reduce a 2xx OpenWeather body to the client-facing shape."""
    try:
        condition = data["weather"][0]
        main = data["main"]
        return WeatherSummary(
            city=data["name"],
            country=data["sys"]["country"],
            temperature=main["temp"],
            feels_like=main["feels_like"],
            description=condition["description"],
            icon=condition["icon"],
            humidity=main["humidity"],
        )
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise MalformedUpstreamResponse() from e


def upstream_message(payload: Any) -> str:
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return GENERIC_UPSTREAM_MESSAGE


class WeatherRelay:
    """
    City lookup → one OpenWeather call → WeatherSummary.

    Steps, in order: city check (400), API key check (500), a single upstream
    call, then either error forwarding or field mapping. Every failure is raised
    as a RelayError subclass; the HTTP layer turns it into `{"error": ...}`.
    """

    def __init__(
        self,
        settings: Settings,
        provider: Optional[CurrentWeatherProvider] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.settings = settings
        self.provider = provider or OpenWeatherClient(base=settings.openweather_base)
        self.log = logger or logging.getLogger("weather_relay.relay")

    async def lookup(self, city: Optional[str]) -> WeatherSummary:
        self.log.info("📡 Received request for city: %s", city)

        if not city:
            self.log.info("Missing city parameter.")
            raise InvalidRequest()

        api_key = self.settings.openweather_api_key
        if not api_key:
            self.log.error("OPENWEATHER_API_KEY is missing during API call attempt.")
            raise ServerMisconfigured()

        self.log.info("🌐 Fetching from external API: q=%s&units=metric&appid=...", city)

        try:
            response = await self.provider.current_weather(city=city, api_key=api_key)
        except Exception as e:
            self.log.error("❌ Backend failed to fetch weather: %r", e, exc_info=True)
            raise TransportFailure() from e

        self.log.info("External API response status: %s", response.status_code)
        if not response.ok:
            message = upstream_message(response.payload)
            self.log.error("External API error: %s", message)
            raise UpstreamError(response.status_code, message)

        try:
            return to_summary(response.payload)
        except MalformedUpstreamResponse:
            self.log.error("❌ Unexpected OpenWeather body shape for city=%s", city, exc_info=True)
            raise
