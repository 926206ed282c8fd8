# src/weather_widget/utils/messages.py
from __future__ import annotations
from datetime import datetime
from typing import Dict, Tuple

from weather_widget.utils.units import TemperatureUnit

# Upper bounds (exclusive) of the freezing / quite cold / comfortable / pleasant bands.
# Anything at or above the last bound is hot.
TEMPERATURE_BANDS: Dict[str, Tuple[float, float, float, float]] = {
    "C": (0, 10, 20, 30),
    "F": (32, 50, 68, 86),
}

TEMPERATURE_PHRASES = (
    "It's freezing at {t}°{u}! Bundle up!",
    "It's quite cold at {t}°{u}. Wear warm clothes.",
    "The temperature is {t}°{u}. Comfortable for a light jacket.",
    "It's a pleasant {t}°{u}. Enjoy the nice weather!",
    "It's hot at {t}°{u}. Stay hydrated!",
)

CONDITION_MESSAGES: Dict[str, str] = {
    "sunny": "It's a beautiful sunny day!",
    "partly cloudy": "Expect some clouds and sunshine.",
    "cloudy": "It's cloudy today.",
    "overcast": "The sky is overcast.",
    "rain": "Don't forget your umbrella! It's raining.",
    "thunderstorm": "Thunderstorms are expected today.",
    "snow": "Bundle up! It's snowing.",
    "mist": "It's misty outside.",
    "fog": "Be careful, there's fog outside.",
}

NIGHT_STARTS_AT = 18
DAY_STARTS_AT = 6


def format_temperature(value: float) -> str:
    """22.0 -> "22", 22.5 -> "22.5", -0.0 -> "0"."""
    if value == 0:
        return "0"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def temperature_message(value: float, unit: TemperatureUnit) -> str:
    bounds = TEMPERATURE_BANDS[unit]
    band = sum(1 for upper in bounds if value >= upper)
    return TEMPERATURE_PHRASES[band].format(t=format_temperature(value), u=unit)


def condition_message(text: str) -> str:
    return CONDITION_MESSAGES.get(text.strip().lower(), text)


def is_night(hour: int) -> bool:
    return hour >= NIGHT_STARTS_AT or hour < DAY_STARTS_AT


def location_message(location: str, now: datetime | None = None) -> str:
    """
    "Paris During the Day" / "Paris at Night", judged from the local hour of `now`.
    `now` defaults to the wall clock so callers can pin time in tests.
    """
    hour = (now or datetime.now()).hour
    return f"{location} {'at Night' if is_night(hour) else 'During the Day'}"


def share_text(location: str, temperature: float, unit: TemperatureUnit, condition: str) -> str:
    return (
        f"The current weather in {location} is "
        f"{format_temperature(temperature)}°{unit} with {condition}."
    )
