# src/weather_relay/core/settings.py
from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from typing import Tuple

from dotenv import find_dotenv, load_dotenv

DEFAULT_PORT = 8080
DEFAULT_OPENWEATHER_BASE = "https://api.openweathermap.org"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _log_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        logging.getLogger("weather_relay").warning("Unknown LOG_LEVEL %r, using INFO", raw)
        return "INFO"
    return level


def _split_origins(raw: str) -> Tuple[str, ...]:
    origins = tuple(o.strip() for o in raw.split(",") if o.strip())
    return origins or ("*",)


@dataclass(frozen=True)
class Settings:
    """
    Process configuration, read once at startup and passed down explicitly.
    Handlers never touch os.environ themselves.
    """
    openweather_api_key: str = ""
    port: int = DEFAULT_PORT
    host: str = "0.0.0.0"
    openweather_base: str = DEFAULT_OPENWEATHER_BASE
    cors_origins: Tuple[str, ...] = field(default_factory=lambda: ("*",))
    log_level: str = "INFO"

    @property
    def has_api_key(self) -> bool:
        return bool(self.openweather_api_key)

    @classmethod
    def from_env(cls, *, dotenv: bool = True) -> "Settings":
        # .env 파일에서 환경 변수 로드 (local development only, real env wins)
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))

        return cls(
            openweather_api_key=os.getenv("OPENWEATHER_API_KEY", "").strip(),
            port=int(os.getenv("PORT", str(DEFAULT_PORT))),
            host=os.getenv("HOST", "0.0.0.0"),
            openweather_base=os.getenv("OPENWEATHER_BASE", DEFAULT_OPENWEATHER_BASE).rstrip("/"),
            cors_origins=_split_origins(os.getenv("CORS_ALLOW_ORIGINS", "*")),
            log_level=_log_level(os.getenv("LOG_LEVEL", "INFO")),
        )
