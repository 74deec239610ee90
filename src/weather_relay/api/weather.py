# src/weather_relay/api/weather.py
from fastapi import APIRouter, Depends, Request

from weather_relay.models.schemas import ErrorResponse, LookupRequest, WeatherSummary
from weather_relay.weather.relay import WeatherRelay

router = APIRouter()


def get_relay(request: Request) -> WeatherRelay:
    return request.app.state.relay


@router.get(
    "/weather",
    response_model=WeatherSummary,
    response_model_by_alias=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_weather(
    query: LookupRequest = Depends(),
    relay: WeatherRelay = Depends(get_relay),
):
    """
    현재 날씨 조회
    - Query: ?city=<name>
    - Errors: `{"error": "..."}` with 400 / 500 / provider status
    """
    return await relay.lookup(query.city)
