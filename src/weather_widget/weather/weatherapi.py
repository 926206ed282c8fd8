# src/weather_widget/weather/weatherapi.py
from __future__ import annotations
import logging
import httpx
from typing import List, Dict, Any

from weather_widget.core.errors import ForecastUnavailable, NetworkError, NotFoundError
from weather_widget.core.settings import WEATHER_API_KEY, WEATHER_API_TIMEOUT, WEATHER_FORECAST_DAYS
from weather_widget.core.urls import weather_api_url
from weather_widget.weather.types import CurrentWeather, ForecastDay, WeatherProvider

logger = logging.getLogger(__name__)


def coordinates_query(lat: float, lon: float) -> str:
    """WeatherAPI accepts "lat,lon" wherever it accepts a city name."""
    return f"{lat},{lon}"


class WeatherApiClient(WeatherProvider):
    """
    WeatherAPI.com current-conditions + daily forecast client.
    Credentials and endpoint are injected; omitted values fall back to core.settings.
    """
    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        forecast_days: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = WEATHER_API_KEY if api_key is None else api_key
        self.base_url = base_url
        self.timeout = WEATHER_API_TIMEOUT if timeout is None else timeout
        self.forecast_days = forecast_days or WEATHER_FORECAST_DAYS
        self._transport = transport

    async def _get(self, path_key: str, params: Dict[str, Any]) -> Dict[str, Any]:
        url = weather_api_url(path_key, base=self.base_url)
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            r = await client.get(url, params={"key": self.api_key, **params})
            r.raise_for_status()
        return r.json()

    async def fetch_current(self, query: str) -> CurrentWeather:
        if not self.api_key:
            raise NetworkError("WEATHER_API_KEY missing")

        try:
            data = await self._get("current", {"q": query})
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("current weather for %r failed: HTTP %s", query, status)
            if 400 <= status < 500:
                raise NotFoundError(f"location not found: {query}", status_code=status) from e
            raise NetworkError(f"provider error {status}", status_code=status) from e
        except httpx.RequestError as e:
            logger.warning("current weather for %r failed: %s", query, e)
            raise NetworkError(f"request failed: {e}") from e
        except ValueError as e:
            raise NetworkError("provider returned a non-JSON body") from e

        try:
            current = CurrentWeather(
                temperature_celsius=float(data["current"]["temp_c"]),
                condition_text=str(data["current"]["condition"]["text"]),
                location_name=str(data["location"]["name"]),
                unit="C",
            )
        except (KeyError, TypeError, ValueError) as e:
            raise NetworkError(f"unexpected current.json payload: {e}") from e

        logger.info("current weather for %r -> %s, %s°C", query, current.location_name, current.temperature_celsius)
        return current

    async def _forecast(self, location_name: str) -> List[ForecastDay]:
        if not self.api_key:
            raise ForecastUnavailable("WEATHER_API_KEY missing")

        try:
            data = await self._get("forecast", {"q": location_name, "days": self.forecast_days})
            days = data["forecast"]["forecastday"]
            forecast = [
                ForecastDay(date=str(d["date"]), avg_temperature_celsius=float(d["day"]["avgtemp_c"]))
                for d in days
            ]
        except (httpx.HTTPError, KeyError, TypeError, ValueError) as e:
            raise ForecastUnavailable(str(e)) from e

        return forecast[: self.forecast_days]

    async def fetch_forecast(self, location_name: str) -> List[ForecastDay]:
        """Best effort: any failure is logged and degrades to an empty forecast."""
        try:
            forecast = await self._forecast(location_name)
        except ForecastUnavailable as e:
            logger.warning("forecast for %r unavailable: %s", location_name, e)
            return []

        logger.info("forecast for %r -> %d days", location_name, len(forecast))
        return forecast
