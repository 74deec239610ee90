# src/weather_relay/weather/types.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol, Any

@dataclass(frozen=True)
class ProviderResponse:
    status_code: int
    payload: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

class CurrentWeatherProvider(Protocol):
    async def current_weather(self, *, city: str, api_key: str) -> ProviderResponse: ...
