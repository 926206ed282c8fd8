# src/weather_widget/widget/controller.py
from __future__ import annotations
import asyncio
import logging
from datetime import datetime
from typing import Callable, Optional, Set, Tuple

from weather_widget.core.errors import (
    GeolocationError,
    ShareUnavailable,
    WeatherClientError,
    WeatherWidgetError,
)
from weather_widget.utils.messages import (
    condition_message,
    location_message,
    share_text,
    temperature_message,
)
from weather_widget.utils.units import convert_temperature, other_unit, TemperatureUnit
from weather_widget.weather.types import CurrentWeather, Geolocator, Sharer, WeatherProvider
from weather_widget.weather.weatherapi import coordinates_query
from weather_widget.widget.state import (
    CITY_NOT_FOUND,
    GEOLOCATION_FAILED,
    INVALID_LOCATION,
    SHARE_NOT_SUPPORTED,
    ForecastRow,
    WidgetState,
    WidgetView,
)

logger = logging.getLogger(__name__)

SHARE_TITLE = "Weather Update"


def display_temperature(celsius: float, unit: TemperatureUnit) -> float:
    """Celsius is shown as received; Fahrenheit goes through the (flooring) converter."""
    if unit == "C":
        return celsius
    return convert_temperature(celsius, "C", unit)


class WidgetController:
    """
    Owns one WidgetState and is the only thing that mutates it.

    Every current-conditions request gets a sequence number. A response whose
    number is no longer the latest is dropped, together with its forecast, so a
    slow early request can never overwrite a newer one.
    """

    def __init__(
        self,
        client: WeatherProvider,
        *,
        geolocator: Optional[Geolocator] = None,
        sharer: Optional[Sharer] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.client = client
        self.geolocator = geolocator
        self.sharer = sharer
        self._clock = clock or datetime.now
        self.state = WidgetState()
        self._seq = 0
        self._tasks: Set[asyncio.Task] = set()

    # ------------------------------------------------------------
    # user input
    # ------------------------------------------------------------
    def set_query(self, text: str) -> None:
        self.state.location_query = text

    async def submit(self) -> None:
        query = self.state.location_query.strip()
        if not query:
            # supersede anything in flight so it cannot replace this error
            self._next_seq()
            self._clear_weather(INVALID_LOCATION)
            return
        await self._load(query, self._next_seq())

    async def use_geolocation(self) -> None:
        seq = self._next_seq()
        try:
            if self.geolocator is None:
                raise GeolocationError("geolocation is not supported")
            lat, lon = await self.geolocator.locate()
        except GeolocationError as e:
            if seq != self._seq:
                logger.debug("dropping stale geolocation failure #%d: %s", seq, e)
                return
            logger.info("geolocation failed: %s", e)
            self.state.is_loading = False
            self.state.notice = None
            self.state.error = GEOLOCATION_FAILED
            return
        if seq != self._seq:
            logger.debug("dropping stale geolocation #%d", seq)
            return
        await self._load(coordinates_query(lat, lon), seq)

    async def mount(self) -> None:
        """Initial fetch from the device location, when the host can provide one."""
        if self.geolocator is not None:
            await self.use_geolocation()

    def toggle_unit(self) -> None:
        self.state.display_unit = other_unit(self.state.display_unit)
        if self.state.current is not None:
            self.state.current.unit = self.state.display_unit

    def toggle_dark_mode(self) -> None:
        self.state.dark_mode = not self.state.dark_mode

    def toggle_forecast_table(self) -> None:
        self.state.show_forecast_table = not self.state.show_forecast_table

    # ------------------------------------------------------------
    # share
    # ------------------------------------------------------------
    def share_payload(self) -> Optional[Tuple[str, str]]:
        current = self.state.current
        if current is None:
            return None
        temp = display_temperature(current.temperature_celsius, self.state.display_unit)
        text = share_text(current.location_name, temp, self.state.display_unit, current.condition_text)
        return SHARE_TITLE, text

    async def share(self) -> None:
        payload = self.share_payload()
        if payload is None:
            return
        try:
            if self.sharer is None:
                raise ShareUnavailable("no share capability")
            await self.sharer.share(*payload)
        except ShareUnavailable:
            self.state.notice = SHARE_NOT_SUPPORTED

    # ------------------------------------------------------------
    # network
    # ------------------------------------------------------------
    def _next_seq(self) -> int:
        self._seq += 1
        return self._seq

    async def _load(self, query: str, seq: int) -> None:
        self.state.error = None
        self.state.notice = None
        self.state.is_loading = True

        try:
            current = await self.client.fetch_current(query)
        except WeatherClientError as e:
            if seq != self._seq:
                logger.debug("dropping stale failure #%d for %r", seq, query)
                return
            logger.info("current weather for %r failed: %s", query, e)
            self._clear_weather(CITY_NOT_FOUND)
            return

        if seq != self._seq:
            logger.debug("dropping stale response #%d for %r", seq, query)
            return

        current.unit = self.state.display_unit
        self.state.current = current
        self.state.forecast = []
        self.state.is_loading = False
        self._spawn(self._load_forecast(seq, current.location_name))

    async def _load_forecast(self, seq: int, location_name: str) -> None:
        try:
            forecast = await self.client.fetch_forecast(location_name)
        except WeatherWidgetError as e:
            logger.warning("forecast for %r failed: %s", location_name, e)
            forecast = []

        if seq != self._seq:
            logger.debug("dropping stale forecast #%d for %r", seq, location_name)
            return
        self.state.forecast = list(forecast)

    def _spawn(self, coro) -> None:
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def settle(self) -> None:
        """Wait for background forecast fetches started so far."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    def _clear_weather(self, error: str) -> None:
        self.state.notice = None
        self.state.current = None
        self.state.forecast = []
        self.state.is_loading = False
        self.state.error = error

    # ------------------------------------------------------------
    # rendering
    # ------------------------------------------------------------
    def view(self) -> WidgetView:
        st = self.state
        unit = st.display_unit
        base = dict(
            is_loading=st.is_loading,
            error=st.error,
            notice=st.notice,
            display_unit=unit,
            dark_mode=st.dark_mode,
            show_forecast_table=st.show_forecast_table,
        )
        current: Optional[CurrentWeather] = st.current
        if current is None:
            return WidgetView(**base)

        temp = display_temperature(current.temperature_celsius, unit)
        return WidgetView(
            **base,
            location=current.location_name,
            temperature=temp,
            condition=current.condition_text,
            temperature_message=temperature_message(temp, unit),
            condition_message=condition_message(current.condition_text),
            location_message=location_message(current.location_name, self._clock()),
            forecast=[
                ForecastRow(date=d.date, temperature=display_temperature(d.avg_temperature_celsius, unit), unit=unit)
                for d in st.forecast
            ],
        )
