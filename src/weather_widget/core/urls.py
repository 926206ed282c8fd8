# src/weather_widget/core/urls.py
from __future__ import annotations

from weather_widget.core.settings import WEATHER_API_BASE

# Path constants, kept apart from the domain
WEATHER_API_PATHS = {
    # current conditions
    "current": "/v1/current.json",
    # daily forecast (up to 7 days on the free plan)
    "forecast": "/v1/forecast.json",
}

def weather_api_url(path_key: str, *, base: str | None = None) -> str:
    """
    WeatherAPI endpoint builder.
    ex) weather_api_url("current") -> "https://api.weatherapi.com/v1/current.json"
        weather_api_url("forecast", base="http://localhost:8080") -> "http://localhost:8080/v1/forecast.json"
    """
    root = (base or WEATHER_API_BASE).rstrip("/")
    path = WEATHER_API_PATHS[path_key]
    return f"{root}{path}"
