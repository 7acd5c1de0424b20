"""Map raw OpenWeather forecast entries to :class:`WeatherRecord` objects.

Only the structure of the payload is mandatory: a forecast list with at
least one entry and a ``city`` block.  Individual fields fall back to the
values in :data:`FIELD_DEFAULTS` when they are missing or ``null``.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional

from .entities import WeatherRecord
from .providers.base import InvalidResponseError


logger = logging.getLogger(__name__)

UNKNOWN_DATE = "Unknown Date"
MIDNIGHT_SUFFIX = "00:00:00"
FORECAST_DAYS = 5

FIELD_DEFAULTS = {
    "temperature": 0,
    "wind_speed": 0,
    "humidity": 0,
    "weather_icon": "",
    "date": UNKNOWN_DATE,
}


def _block(entry: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = entry.get(key)
    return value if isinstance(value, Mapping) else {}


def _first_weather(entry: Mapping[str, Any]) -> Mapping[str, Any]:
    weather = entry.get("weather")
    if isinstance(weather, list) and weather and isinstance(weather[0], Mapping):
        return weather[0]
    return {}


def _or_default(value: Optional[Any], field: str) -> Any:
    return FIELD_DEFAULTS[field] if value is None else value


def to_weather_record(entry: Mapping[str, Any], city: str) -> WeatherRecord:
    """Convert a single forecast entry, defaulting any missing field."""
    if not isinstance(entry, Mapping):
        entry = {}
    main = _block(entry, "main")
    wind = _block(entry, "wind")
    return WeatherRecord(
        city=city,
        temperature=_or_default(main.get("temp"), "temperature"),
        wind_speed=_or_default(wind.get("speed"), "wind_speed"),
        humidity=_or_default(main.get("humidity"), "humidity"),
        uv_index=0,
        weather_icon=_or_default(_first_weather(entry).get("icon"), "weather_icon"),
        date=_or_default(entry.get("dt_txt"), "date"),
    )


def extract_current(response: Mapping[str, Any]) -> WeatherRecord:
    if not isinstance(response, Mapping):
        raise InvalidResponseError("invalid response format")
    entries = response.get("list")
    city = response.get("city")
    if not isinstance(entries, list) or not entries or entries[0] is None:
        raise InvalidResponseError("invalid response format: missing forecast list")
    if not isinstance(city, Mapping):
        raise InvalidResponseError("invalid response format: missing city block")
    logger.debug("Current weather data: %s", entries[0])
    return to_weather_record(entries[0], city.get("name"))


def is_midnight(entry: Mapping[str, Any]) -> bool:
    stamp = entry.get("dt_txt") if isinstance(entry, Mapping) else None
    return isinstance(stamp, str) and stamp.endswith(MIDNIGHT_SUFFIX)


def build_forecast_window(
    entries: Iterable[Mapping[str, Any]],
    city_name: str,
    limit: int = FORECAST_DAYS,
) -> List[WeatherRecord]:
    """Pick one entry per day from the 3-hour forecast list.

    The upstream ``dt_txt`` is matched literally, so the window is whatever
    the API labels midnight; no timezone conversion happens here.
    """
    window: List[WeatherRecord] = []
    for entry in entries:
        if len(window) >= limit:
            break
        if is_midnight(entry):
            window.append(to_weather_record(entry, city_name))
    return window


__all__ = [
    "FIELD_DEFAULTS",
    "FORECAST_DAYS",
    "MIDNIGHT_SUFFIX",
    "UNKNOWN_DATE",
    "build_forecast_window",
    "extract_current",
    "is_midnight",
    "to_weather_record",
]
