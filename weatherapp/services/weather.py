from __future__ import annotations

import enum
import logging
from typing import List, Optional

from ..entities import WeatherRecord
from ..normalization import build_forecast_window, extract_current
from ..providers.openweather import OpenWeatherProvider


class LookupStage(str, enum.Enum):
    RESOLVING_COORDS = "resolving_coords"
    FETCHING_FORECAST = "fetching_forecast"
    EXTRACTING_CURRENT = "extracting_current"
    BUILDING_FORECAST = "building_forecast"


class WeatherService:
    """Compose the coordinate lookup, forecast fetch and normalization steps."""

    def __init__(
        self,
        provider: OpenWeatherProvider,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.provider = provider
        self._log = logger or logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def get_weather_for_city(self, city: str) -> List[WeatherRecord]:
        """Return the current conditions followed by up to five daily forecasts.

        Any failure aborts the whole lookup and the original exception
        propagates; no partial list is returned.
        """
        stage = LookupStage.RESOLVING_COORDS
        try:
            self._log.debug("Lookup for %s: %s", city, stage.value)
            coordinates = self.provider.resolve(city)

            stage = LookupStage.FETCHING_FORECAST
            self._log.debug("Lookup for %s: %s", city, stage.value)
            payload = self.provider.fetch(coordinates)

            stage = LookupStage.EXTRACTING_CURRENT
            self._log.debug("Lookup for %s: %s", city, stage.value)
            current = extract_current(payload)

            stage = LookupStage.BUILDING_FORECAST
            self._log.debug("Lookup for %s: %s", city, stage.value)
            forecast = build_forecast_window(payload["list"], city)
        except Exception as exc:
            self._log.warning("Weather lookup for %s failed while %s: %s", city, stage.value, exc)
            raise

        self._log.info("Weather lookup for %s returned %d records", city, 1 + len(forecast))
        return [current, *forecast]


__all__ = ["LookupStage", "WeatherService"]
