from __future__ import annotations

import pytest

from conftest import make_entry, make_forecast
from weatherapp.entities import WeatherRecord
from weatherapp.normalization import UNKNOWN_DATE, build_forecast_window, extract_current, to_weather_record
from weatherapp.providers.base import InvalidResponseError


FULL_ENTRY = make_entry("2024-01-01 00:00:00", temp=41.2, humidity=80, speed=6.1, icon="10n")


@pytest.mark.parametrize(
    "entry, field, expected",
    [
        ({**FULL_ENTRY, "main": {"humidity": 80}}, "temperature", 0),
        ({**FULL_ENTRY, "main": {"temp": None, "humidity": 80}}, "temperature", 0),
        ({**FULL_ENTRY, "main": {"temp": 41.2}}, "humidity", 0),
        ({k: v for k, v in FULL_ENTRY.items() if k != "main"}, "humidity", 0),
        ({**FULL_ENTRY, "main": None}, "temperature", 0),
        ({k: v for k, v in FULL_ENTRY.items() if k != "wind"}, "wind_speed", 0),
        ({**FULL_ENTRY, "wind": {}}, "wind_speed", 0),
        ({**FULL_ENTRY, "weather": []}, "weather_icon", ""),
        ({**FULL_ENTRY, "weather": [{}]}, "weather_icon", ""),
        ({k: v for k, v in FULL_ENTRY.items() if k != "weather"}, "weather_icon", ""),
        ({k: v for k, v in FULL_ENTRY.items() if k != "dt_txt"}, "date", UNKNOWN_DATE),
        ({}, "date", UNKNOWN_DATE),
    ],
)
def test_missing_fields_fall_back_to_defaults(entry, field, expected):
    record = to_weather_record(entry, "Paris")

    assert getattr(record, field) == expected


def test_complete_entry_maps_every_field():
    record = to_weather_record(FULL_ENTRY, "Paris")

    assert record == WeatherRecord(
        city="Paris",
        temperature=41.2,
        wind_speed=6.1,
        humidity=80,
        uv_index=0,
        weather_icon="10n",
        date="2024-01-01 00:00:00",
    )
    assert record.as_dict() == {
        "city": "Paris",
        "temperature": 41.2,
        "windSpeed": 6.1,
        "humidity": 80,
        "uvIndex": 0,
        "weatherIcon": "10n",
        "date": "2024-01-01 00:00:00",
    }


def test_extract_current_uses_first_entry_and_upstream_city_name():
    payload = make_forecast(city="Paris")

    record = extract_current(payload)

    assert record.city == "Paris"
    assert record.date == payload["list"][0]["dt_txt"]
    assert record.temperature == payload["list"][0]["main"]["temp"]


def test_extract_current_missing_temp_defaults_to_zero():
    payload = {"city": {"name": "Paris"}, "list": [{"dt_txt": "2024-01-01 00:00:00", "main": {"humidity": 70}}]}

    record = extract_current(payload)

    assert record.temperature == 0
    assert record.humidity == 70


@pytest.mark.parametrize(
    "payload",
    [
        {"city": {"name": "Paris"}, "list": []},
        {"city": {"name": "Paris"}},
        {"city": {"name": "Paris"}, "list": [None]},
        {"list": [FULL_ENTRY]},
        {"city": "Paris", "list": [FULL_ENTRY]},
        None,
    ],
)
def test_extract_current_structural_gaps_raise(payload):
    with pytest.raises(InvalidResponseError):
        extract_current(payload)


def test_window_keeps_only_midnight_entries_in_order():
    entries = [
        make_entry("2024-01-01 00:00:00", temp=1),
        make_entry("2024-01-01 03:00:00", temp=2),
        make_entry("2024-01-02 00:00:00", temp=3),
    ]

    window = build_forecast_window(entries, "Paris")

    assert [r.date for r in window] == ["2024-01-01 00:00:00", "2024-01-02 00:00:00"]
    assert [r.temperature for r in window] == [1, 3]
    assert all(r.city == "Paris" for r in window)


@pytest.mark.parametrize("days", [0, 1, 5, 6, 12])
def test_window_never_exceeds_five_records(days):
    entries = [make_entry(f"2024-01-{day + 1:02d} 00:00:00") for day in range(days)]

    window = build_forecast_window(entries, "Paris")

    assert len(window) == min(days, 5)


def test_window_skips_entries_without_timestamp():
    entries = [{"main": {"temp": 1}}, {"dt_txt": None}, make_entry("2024-01-02 00:00:00")]

    window = build_forecast_window(entries, "Paris")

    assert [r.date for r in window] == ["2024-01-02 00:00:00"]


def test_window_matches_suffix_literally():
    entries = [make_entry("2024-01-01T00:00:00Z"), make_entry("2024-01-01 12:00:00"), make_entry("00:00:00")]

    window = build_forecast_window(entries, "Paris")

    assert [r.date for r in window] == ["00:00:00"]


def test_extract_current_empty_first_entry_uses_all_defaults():
    record = extract_current({"city": {"name": "Paris"}, "list": [{}]})

    assert record == WeatherRecord(
        city="Paris",
        temperature=0,
        wind_speed=0,
        humidity=0,
        uv_index=0,
        weather_icon="",
        date=UNKNOWN_DATE,
    )
