"""OpenWeather 5-day / 3-hour forecast provider."""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import requests

from .base import InvalidResponseError, RequestConfig, WeatherProvider
from ..config import WeatherConfig
from ..entities import Coordinates


class OpenWeatherProvider(WeatherProvider):
    """Resolve city names and fetch forecasts from the OpenWeather ``forecast`` endpoint.

    The same endpoint serves both lookups: queried by ``q`` it answers with a
    forecast whose ``city.coord`` block gives the coordinates, queried by
    ``lat``/``lon`` it returns the imperial-unit forecast used for display.
    """

    name = "openweather"
    units = "imperial"

    def __init__(self, *, base_url: str, api_key: str, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key

    @classmethod
    def from_config(cls, config: WeatherConfig, session: Optional[requests.Session] = None) -> "OpenWeatherProvider":
        return cls(
            base_url=config.base_url,
            api_key=config.api_key,
            session=session,
            request_config=RequestConfig(timeout=config.timeout),
        )

    @property
    def forecast_url(self) -> str:
        return f"{self.base_url}/forecast"

    def resolve(self, city_name: str) -> Coordinates:
        """Return the coordinates of the first match for ``city_name``."""
        self._log.debug("Resolving coordinates for %s", city_name)
        response = self._request("GET", self.forecast_url, params={"q": city_name, "appid": self.api_key})
        data = self._json(response)
        city = data.get("city") if isinstance(data, Mapping) else None
        coord = city.get("coord") if isinstance(city, Mapping) else None
        if not isinstance(coord, Mapping):
            raise InvalidResponseError("missing city coordinates")
        lat, lon = coord.get("lat"), coord.get("lon")
        if lat is None or lon is None:
            raise InvalidResponseError("missing city coordinates")
        return Coordinates(lat=lat, long=lon)

    def fetch(self, coords: Coordinates) -> Dict[str, Any]:
        """Return the raw forecast payload for ``coords``."""
        params = {
            "lat": coords.lat,
            "lon": coords.long,
            "units": self.units,
            "appid": self.api_key,
        }
        response = self._request("GET", self.forecast_url, params=params)
        data = self._json(response)
        if not isinstance(data, dict):
            raise InvalidResponseError("forecast payload must be an object")
        return data


__all__ = ["OpenWeatherProvider"]
