"""Search history and weather lookup services for the weather dashboard."""
from .app import WeatherApp, create_app
from .config import WeatherConfig
from .entities import City, Coordinates, WeatherRecord
from .providers.base import InvalidResponseError, NetworkError, ProviderError
from .storage import StorageError, StorageReadError, StorageWriteError

__all__ = [
    "City",
    "Coordinates",
    "InvalidResponseError",
    "NetworkError",
    "ProviderError",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "WeatherApp",
    "WeatherConfig",
    "WeatherRecord",
    "create_app",
]
