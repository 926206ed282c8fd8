# src/weather_widget/models/schemas.py
from typing import List, Optional, Literal, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

Temperature = Union[int, float]


def _whole_as_int(value):
    # 22.0 -> 22, so the JSON number matches the message text
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value

# ===== Response =====
class ForecastRowResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    date: str = Field(..., description="ISO date")
    temperature: Temperature = Field(..., description="daily average in the display unit")
    unit: Literal["C", "F"]

    @field_validator("temperature", mode="after")
    @classmethod
    def whole_temperature(cls, value):
        return _whole_as_int(value)

class WidgetViewResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    is_loading: bool
    error: Optional[str] = None
    notice: Optional[str] = None
    display_unit: Literal["C", "F"]
    dark_mode: bool
    show_forecast_table: bool
    location: Optional[str] = None
    temperature: Optional[Temperature] = None
    condition: Optional[str] = None
    temperature_message: Optional[str] = None
    condition_message: Optional[str] = None
    location_message: Optional[str] = None
    forecast: List[ForecastRowResponse] = []

    @field_validator("temperature", mode="after")
    @classmethod
    def whole_temperature(cls, value):
        return _whole_as_int(value)

class SharePayload(BaseModel):
    title: str
    text: str
