"""Entry point bundling the history and weather services for the web layer."""
from __future__ import annotations

from typing import List, Optional

import requests

from .config import WeatherConfig
from .entities import City, WeatherRecord
from .providers.openweather import OpenWeatherProvider
from .services.history import HistoryService
from .services.weather import WeatherService
from .storage import HistoryStore


class WeatherApp:
    """The four operations the HTTP routes call into."""

    def __init__(self, history: HistoryService, weather: WeatherService) -> None:
        self.history = history
        self.weather = weather

    def list_cities(self) -> List[City]:
        return self.history.list_cities()

    def add_city(self, name: str) -> City:
        return self.history.add_city(name)

    def remove_city(self, city_id: str) -> None:
        self.history.remove_city(city_id)

    def get_weather_for_city(self, name: str) -> List[WeatherRecord]:
        return self.weather.get_weather_for_city(name)


def create_app(
    config: Optional[WeatherConfig] = None,
    *,
    session: Optional[requests.Session] = None,
) -> WeatherApp:
    config = config or WeatherConfig.from_env()
    provider = OpenWeatherProvider.from_config(config, session=session)
    return WeatherApp(
        history=HistoryService(HistoryStore(config.history_path)),
        weather=WeatherService(provider),
    )


__all__ = ["WeatherApp", "create_app"]
