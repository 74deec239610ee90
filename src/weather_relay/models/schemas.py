# src/weather_relay/models/schemas.py
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field

# ===== Response =====
class WeatherSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    city: str = Field(..., description="provider `name`")
    country: str = Field(..., description="provider `sys.country`")
    temperature: Union[int, float] = Field(..., description="provider `main.temp` (°C)")
    feels_like: Union[int, float] = Field(..., alias="feelsLike", description="provider `main.feels_like` (°C)")
    description: str = Field(..., description="provider `weather[0].description`")
    icon: str = Field(..., description="provider `weather[0].icon`")
    humidity: Union[int, float] = Field(..., description="provider `main.humidity` (%)")

class ErrorResponse(BaseModel):
    error: str

# ===== Query =====
class LookupRequest(BaseModel):
    city: Optional[str] = Field(None, description="City name, e.g. London")
