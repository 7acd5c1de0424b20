from .history import HistoryService
from .weather import LookupStage, WeatherService

__all__ = ["HistoryService", "LookupStage", "WeatherService"]
