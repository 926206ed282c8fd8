# src/weather_widget/core/errors.py
from __future__ import annotations


class WeatherWidgetError(Exception):
    """Base class for every error the widget knows how to surface."""


class ValidationError(WeatherWidgetError):
    """Location query was empty or whitespace only."""


class WeatherClientError(WeatherWidgetError):
    """Current-conditions request failed."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(WeatherClientError):
    """Provider answered with a 4xx, usually an unknown location."""


class NetworkError(WeatherClientError):
    """Transport failure, 5xx, missing credentials or an unreadable payload."""


class ForecastUnavailable(WeatherWidgetError):
    """Forecast request failed. Never reaches the user."""


class GeolocationError(WeatherWidgetError):
    """Device location was denied or is not available."""


class ShareUnavailable(WeatherWidgetError):
    """Host platform has no share capability."""
