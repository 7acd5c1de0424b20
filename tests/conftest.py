from __future__ import annotations

import json
from datetime import datetime, timedelta
from typing import Any, Dict, List

import pytest

from requests_mock import Mocker


BASE_URL = "https://weather.test/data/2.5"
FORECAST_URL = f"{BASE_URL}/forecast"


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


def make_entry(dt_txt: str, temp: float = 50.0, humidity: int = 60, speed: float = 4.5, icon: str = "01d") -> Dict[str, Any]:
    return {
        "dt_txt": dt_txt,
        "main": {"temp": temp, "humidity": humidity},
        "wind": {"speed": speed},
        "weather": [{"icon": icon}],
    }


def make_forecast(city: str = "Paris", start: str = "2024-05-01 12:00:00", count: int = 40) -> Dict[str, Any]:
    """Build a forecast payload of ``count`` 3-hour entries."""
    first = datetime.strptime(start, "%Y-%m-%d %H:%M:%S")
    entries: List[Dict[str, Any]] = []
    for idx in range(count):
        stamp = first + timedelta(hours=3 * idx)
        entries.append(make_entry(stamp.strftime("%Y-%m-%d %H:%M:%S"), temp=50.0 + idx, humidity=40 + idx))
    return {
        "city": {"name": city, "coord": {"lat": 48.85, "lon": 2.35}},
        "list": entries,
    }


@pytest.fixture
def history_file(tmp_path):
    path = tmp_path / "searchHistory.json"
    path.write_text(json.dumps([{"name": "Austin", "id": "1"}, {"name": "Oslo", "id": "2"}], indent=2), encoding="utf-8")
    return path
