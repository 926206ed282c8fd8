from datetime import datetime

import pytest

from weather_widget.utils.messages import (
    condition_message,
    format_temperature,
    location_message,
    share_text,
    temperature_message,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (-5, "It's freezing at -5°C! Bundle up!"),
        (-0.5, "It's freezing at -0.5°C! Bundle up!"),
        (0, "It's quite cold at 0°C. Wear warm clothes."),
        (9.9, "It's quite cold at 9.9°C. Wear warm clothes."),
        (10, "The temperature is 10°C. Comfortable for a light jacket."),
        (19, "The temperature is 19°C. Comfortable for a light jacket."),
        (20, "It's a pleasant 20°C. Enjoy the nice weather!"),
        (22.0, "It's a pleasant 22°C. Enjoy the nice weather!"),
        (29.9, "It's a pleasant 29.9°C. Enjoy the nice weather!"),
        (30, "It's hot at 30°C. Stay hydrated!"),
    ],
)
def test_celsius_bands(value, expected):
    assert temperature_message(value, "C") == expected


@pytest.mark.parametrize(
    "value, band",
    [
        (31, "freezing"),
        (32, "quite cold"),
        (49, "quite cold"),
        (50, "Comfortable"),
        (67, "Comfortable"),
        (68, "pleasant"),
        (85, "pleasant"),
        (86, "hot"),
    ],
)
def test_fahrenheit_bands(value, band):
    msg = temperature_message(value, "F")
    assert band in msg
    assert f"{value}°F" in msg


@pytest.mark.parametrize("text", ["RAIN", "rain", "Rain"])
def test_condition_lookup_ignores_case(text):
    assert condition_message(text) == "Don't forget your umbrella! It's raining."


def test_condition_known_phrases():
    assert condition_message("Partly cloudy") == "Expect some clouds and sunshine."
    assert condition_message("Sunny") == "It's a beautiful sunny day!"
    assert condition_message("Fog") == "Be careful, there's fog outside."


def test_unknown_condition_passes_through():
    assert condition_message("Hazy") == "Hazy"
    assert condition_message("Patchy light drizzle") == "Patchy light drizzle"


@pytest.mark.parametrize(
    "hour, expected",
    [
        (17, "Paris During the Day"),
        (18, "Paris at Night"),
        (23, "Paris at Night"),
        (0, "Paris at Night"),
        (5, "Paris at Night"),
        (6, "Paris During the Day"),
        (12, "Paris During the Day"),
    ],
)
def test_location_message_day_night(hour, expected):
    assert location_message("Paris", datetime(2026, 10, 19, hour, 30)) == expected


def test_location_message_reads_clock_by_default():
    msg = location_message("Oslo")
    assert msg in ("Oslo During the Day", "Oslo at Night")


def test_share_text():
    assert share_text("Paris", 22.0, "C", "Partly cloudy") == (
        "The current weather in Paris is 22°C with Partly cloudy."
    )
    assert share_text("London", 47, "F", "Rain") == "The current weather in London is 47°F with Rain."


def test_format_temperature():
    assert format_temperature(22.0) == "22"
    assert format_temperature(22.5) == "22.5"
    assert format_temperature(-3) == "-3"


def test_format_temperature_negative_zero_and_precision():
    assert format_temperature(-0.0) == "0"
    assert temperature_message(-0.0, "C") == "It's quite cold at 0°C. Wear warm clothes."
    assert format_temperature(12.3456789) == "12.3456789"
