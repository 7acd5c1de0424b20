"""Domain entities shared by the history store and the weather client."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class City:
    """A search-history entry."""

    id: str
    name: str

    def as_dict(self) -> Dict[str, str]:
        return {"name": self.name, "id": self.id}


@dataclass(frozen=True)
class Coordinates:
    lat: float
    long: float


@dataclass(frozen=True)
class WeatherRecord:
    """Normalized conditions for one city at one point in time.

    Units follow the upstream ``imperial`` query: temperature in Fahrenheit,
    wind speed in miles per hour, humidity in percent.  ``uv_index`` is
    always ``0`` because the forecast endpoint does not report it.
    """

    city: str
    temperature: float
    wind_speed: float
    humidity: float
    uv_index: float
    weather_icon: str
    date: str

    def as_dict(self) -> Dict[str, Any]:
        return {
            "city": self.city,
            "temperature": self.temperature,
            "windSpeed": self.wind_speed,
            "humidity": self.humidity,
            "uvIndex": self.uv_index,
            "weatherIcon": self.weather_icon,
            "date": self.date,
        }


__all__ = ["City", "Coordinates", "WeatherRecord"]
