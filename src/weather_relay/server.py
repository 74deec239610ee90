# src/weather_relay/server.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from weather_relay.api import health, weather
from weather_relay.core.errors import RelayError
from weather_relay.core.settings import Settings
from weather_relay.weather.relay import WeatherRelay
from weather_relay.weather.types import CurrentWeatherProvider

logger = logging.getLogger("weather_relay")


def log_startup(settings: Settings) -> None:
    logger.info("Backend starting...")
    if not settings.has_api_key:
        logger.error("ERROR: OPENWEATHER_API_KEY is not set! Weather fetching will fail.")
        logger.warning("Inject OPENWEATHER_API_KEY from your deployment secret.")
        logger.warning("For local testing, create a .env file with OPENWEATHER_API_KEY=YOUR_KEY_HERE")
    else:
        logger.info("OpenWeatherMap API Key loaded (first 5 chars): %s...", settings.openweather_api_key[:5])


async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def create_app(
    settings: Optional[Settings] = None,
    provider: Optional[CurrentWeatherProvider] = None,
) -> FastAPI:
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log_startup(settings)
        yield

    app = FastAPI(title="Weather Relay API", lifespan=lifespan)
    app.state.relay = WeatherRelay(settings, provider=provider)

    # ============================================================
    # 🌐 CORS 설정 (기본값 "*", 운영에서는 CORS_ALLOW_ORIGINS 로 제한)
    # ============================================================
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RelayError, relay_error_handler)

    # ============================================================
    # 📦 라우터 등록
    # ============================================================
    app.include_router(weather.router, prefix="/api")
    app.include_router(health.router)

    return app


# ✅ 앱 인스턴스 생성 (uvicorn weather_relay.server:app)
app = create_app()
