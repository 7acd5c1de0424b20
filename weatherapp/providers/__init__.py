from .base import InvalidResponseError, NetworkError, ProviderError, RequestConfig, WeatherProvider
from .openweather import OpenWeatherProvider

__all__ = [
    "InvalidResponseError",
    "NetworkError",
    "OpenWeatherProvider",
    "ProviderError",
    "RequestConfig",
    "WeatherProvider",
]
