# src/weather_widget/utils/units.py
from __future__ import annotations
import math
from typing import Literal

TemperatureUnit = Literal["C", "F"]

UNITS: tuple[str, ...] = ("C", "F")


def convert_temperature(value: float, from_unit: TemperatureUnit, to_unit: TemperatureUnit) -> int:
    """
    Convert a temperature between Celsius and Fahrenheit.
    The result is floored, not rounded: 33.8 -> 33, -1.1 -> -2.
    """
    if from_unit not in UNITS or to_unit not in UNITS:
        raise ValueError(f"unknown temperature unit: {from_unit!r} -> {to_unit!r}")

    if from_unit == to_unit:
        return math.floor(value)
    if from_unit == "C":
        return math.floor(value * 9 / 5 + 32)
    return math.floor((value - 32) * 5 / 9)


def other_unit(unit: TemperatureUnit) -> TemperatureUnit:
    return "F" if unit == "C" else "C"
