# src/weather_relay/api/health.py
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

HEALTHY = "Backend is healthy!"


@router.get("/health", response_class=PlainTextResponse)
async def health_check() -> str:
    return HEALTHY
