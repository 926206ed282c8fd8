# src/weather_widget/api/weather.py
from __future__ import annotations
from typing import Literal, Tuple

from fastapi import APIRouter, Depends, HTTPException, Query

from weather_widget.models.schemas import SharePayload, WidgetViewResponse
from weather_widget.weather.types import WeatherProvider
from weather_widget.weather.weatherapi import WeatherApiClient
from weather_widget.widget.controller import WidgetController
from weather_widget.widget.state import INVALID_LOCATION

router = APIRouter()


def get_weather_client() -> WeatherProvider:
    """Overridden in tests with a fake provider."""
    return WeatherApiClient()


class StaticGeolocator:
    """Coordinates already resolved by the caller (browser, device)."""

    def __init__(self, lat: float, lon: float) -> None:
        self.lat = lat
        self.lon = lon

    async def locate(self) -> Tuple[float, float]:
        return self.lat, self.lon


def _prepare(controller: WidgetController, unit: str, forecast: bool, dark: bool) -> None:
    if unit != controller.state.display_unit:
        controller.toggle_unit()
    if forecast:
        controller.toggle_forecast_table()
    if dark:
        controller.toggle_dark_mode()


def _raise_for_error(error: str | None) -> None:
    if error == INVALID_LOCATION:
        raise HTTPException(status_code=422, detail=error)
    if error:
        raise HTTPException(status_code=404, detail=error)


def _render(controller: WidgetController) -> WidgetViewResponse:
    view = controller.view()
    _raise_for_error(view.error)
    return WidgetViewResponse.model_validate(view, from_attributes=True)


@router.get("/weather", response_model=WidgetViewResponse)
async def weather_by_city(
    q: str = Query("", description="city name"),
    unit: Literal["C", "F"] = "C",
    forecast: bool = Query(False, description="show the 7-day table"),
    dark: bool = False,
    client: WeatherProvider = Depends(get_weather_client),
):
    """
    Current weather + 7-day forecast for a city, rendered as the widget shows it.
    - 422: empty query
    - 404: provider could not resolve the city
    """
    controller = WidgetController(client)
    _prepare(controller, unit, forecast, dark)
    controller.set_query(q)
    await controller.submit()
    await controller.settle()
    return _render(controller)


@router.get("/weather/coords", response_model=WidgetViewResponse)
async def weather_by_coords(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    unit: Literal["C", "F"] = "C",
    forecast: bool = False,
    dark: bool = False,
    client: WeatherProvider = Depends(get_weather_client),
):
    controller = WidgetController(client, geolocator=StaticGeolocator(lat, lon))
    _prepare(controller, unit, forecast, dark)
    await controller.mount()
    await controller.settle()
    return _render(controller)


@router.get("/weather/share", response_model=SharePayload)
async def weather_share(
    q: str = Query(""),
    unit: Literal["C", "F"] = "C",
    client: WeatherProvider = Depends(get_weather_client),
):
    """Text a client can hand to its native share sheet."""
    controller = WidgetController(client)
    _prepare(controller, unit, False, False)
    controller.set_query(q)
    await controller.submit()
    await controller.settle()
    _raise_for_error(controller.state.error)
    payload = controller.share_payload()
    if payload is None:
        raise HTTPException(status_code=404, detail="no weather to share")
    title, text = payload
    return SharePayload(title=title, text=text)
