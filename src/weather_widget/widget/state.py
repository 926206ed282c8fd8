# src/weather_widget/widget/state.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from weather_widget.utils.units import TemperatureUnit
from weather_widget.weather.types import CurrentWeather, ForecastDay

# Fixed user-facing strings
INVALID_LOCATION = "Please enter a valid location."
CITY_NOT_FOUND = "City not found. Please try again."
GEOLOCATION_FAILED = "Unable to retrieve your location. Please enter a city manually."
SHARE_NOT_SUPPORTED = "Sharing is not supported on this device."

@dataclass
class WidgetState:
    location_query: str = ""
    current: Optional[CurrentWeather] = None
    forecast: List[ForecastDay] = field(default_factory=list)
    error: Optional[str] = None
    notice: Optional[str] = None
    is_loading: bool = False
    display_unit: TemperatureUnit = "C"
    dark_mode: bool = False
    show_forecast_table: bool = False

@dataclass(frozen=True)
class ForecastRow:
    date: str
    temperature: float
    unit: TemperatureUnit

@dataclass(frozen=True)
class WidgetView:
    """What the presentation layer draws. Derived from WidgetState, never stored."""
    is_loading: bool
    error: Optional[str]
    notice: Optional[str]
    display_unit: TemperatureUnit
    dark_mode: bool
    show_forecast_table: bool
    location: Optional[str] = None
    temperature: Optional[float] = None
    condition: Optional[str] = None
    temperature_message: Optional[str] = None
    condition_message: Optional[str] = None
    location_message: Optional[str] = None
    forecast: List[ForecastRow] = field(default_factory=list)
