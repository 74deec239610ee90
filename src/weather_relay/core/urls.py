# src/weather_relay/core/urls.py
from __future__ import annotations
from typing import Final

from weather_relay.core.settings import DEFAULT_OPENWEATHER_BASE

# 경로 상수 (도메인과 분리)
OPENWEATHER_PATHS: Final[dict] = {
    # 현재 날씨
    "current": "/data/2.5/weather",
}

def ow_url(path_key: str, *, base: str = DEFAULT_OPENWEATHER_BASE) -> str:
    """
    OpenWeather endpoint 빌더.
    ex) ow_url("current") -> "https://api.openweathermap.org/data/2.5/weather"
        ow_url("current", base="http://localhost:9000") -> "http://localhost:9000/data/2.5/weather"
    """
    path = OPENWEATHER_PATHS[path_key]
    return f"{base.rstrip('/')}{path}"
