# src/weather_relay/weather/openweather.py
from __future__ import annotations
import logging
import httpx

from weather_relay.core.settings import DEFAULT_OPENWEATHER_BASE
from weather_relay.core.urls import ow_url
from weather_relay.weather.types import CurrentWeatherProvider, ProviderResponse

logger = logging.getLogger(__name__)


class OpenWeatherClient(CurrentWeatherProvider):
    """
    OpenWeatherMap current weather (/data/2.5/weather), one fresh AsyncClient per call.
    No retry and no explicit timeout: httpx defaults apply. Redirects are followed.
    """
    def __init__(self, base: str = DEFAULT_OPENWEATHER_BASE, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.base = base
        self.transport = transport

    @property
    def url(self) -> str:
        return ow_url("current", base=self.base)

    async def current_weather(self, *, city: str, api_key: str) -> ProviderResponse:
        params = {"q": city, "appid": api_key, "units": "metric"}
        async with httpx.AsyncClient(transport=self.transport, follow_redirects=True) as client:
            r = await client.get(self.url, params=params)
        # body is decoded before the status is looked at; a non-JSON error page
        # surfaces as ValueError to the caller
        data = r.json()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("OpenWeather %s -> %s", redact_url(str(r.request.url)), r.status_code)
        return ProviderResponse(status_code=r.status_code, payload=data)


def redact_url(url: str) -> str:
    """Strip the appid value out of a provider URL before it is logged."""
    u = httpx.URL(url)
    if "appid" not in u.params:
        return url
    return str(u.copy_set_param("appid", "..."))
