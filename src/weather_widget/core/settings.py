# src/weather_widget/core/settings.py
from __future__ import annotations
import os
from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()

WEATHER_API_KEY = os.getenv("WEATHER_API_KEY", "")
# Base domain, overridable for a local mock of the provider
WEATHER_API_BASE = os.getenv("WEATHER_API_BASE", "https://api.weatherapi.com")

WEATHER_API_TIMEOUT = float(os.getenv("WEATHER_API_TIMEOUT", "7.0"))
WEATHER_FORECAST_DAYS = int(os.getenv("WEATHER_FORECAST_DAYS", "7"))

WEATHER_LOG_LEVEL = os.getenv("WEATHER_LOG_LEVEL", "INFO")
