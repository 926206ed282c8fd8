# src/weather_widget/weather/types.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol, List, Tuple

from weather_widget.utils.units import TemperatureUnit

@dataclass
class CurrentWeather:
    temperature_celsius: float
    condition_text: str
    location_name: str
    unit: TemperatureUnit = "C"   # display unit only; the stored value stays Celsius

@dataclass(frozen=True)
class ForecastDay:
    date: str                     # ISO date, "2026-10-19"
    avg_temperature_celsius: float

class WeatherProvider(Protocol):
    async def fetch_current(self, query: str) -> CurrentWeather: ...

    async def fetch_forecast(self, location_name: str) -> List[ForecastDay]: ...

class Geolocator(Protocol):
    async def locate(self) -> Tuple[float, float]: ...

class Sharer(Protocol):
    async def share(self, title: str, text: str) -> None: ...
