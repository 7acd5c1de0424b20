"""Runtime configuration for the weather services."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_HISTORY_PATH = "searchHistory.json"


def env(name: str, default: str = "") -> str:
    """Fetch environment variables, falling back to ``default`` when unset."""

    return os.environ.get(name, default)


def _parse_timeout(value: str) -> Optional[float]:
    value = value.strip()
    if not value:
        return None
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"API_TIMEOUT must be a number of seconds, got {value!r}") from exc


@dataclass(frozen=True)
class WeatherConfig:
    """Settings read once when the services are constructed.

    ``base_url`` and ``api_key`` are passed through to the upstream API
    without validation; empty strings are allowed.  ``timeout`` of ``None``
    means outbound requests are not bounded.
    """

    base_url: str = ""
    api_key: str = ""
    history_path: str = DEFAULT_HISTORY_PATH
    timeout: Optional[float] = None

    @classmethod
    def from_env(cls, *, load_dotenv_file: bool = True) -> "WeatherConfig":
        if load_dotenv_file:
            load_dotenv(find_dotenv(usecwd=True))
        return cls(
            base_url=env("API_BASE_URL"),
            api_key=env("API_KEY"),
            history_path=env("SEARCH_HISTORY_PATH", DEFAULT_HISTORY_PATH) or DEFAULT_HISTORY_PATH,
            timeout=_parse_timeout(env("API_TIMEOUT")),
        )


__all__ = ["DEFAULT_HISTORY_PATH", "WeatherConfig", "env"]
