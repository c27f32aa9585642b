from datetime import UTC, datetime
from zoneinfo import ZoneInfo

import pytest

from cityweather.utils import (
    TimeUtils,
    format_percentage,
    format_temperature,
    format_wind_speed,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0, "0%"),
        (0.5, "50%"),
        (1.0, "100%"),
        (0.2, "20%"),
        (0.07, "7%"),
    ],
)
def test_format_percentage(value: float, expected: str) -> None:
    assert format_percentage(value) == expected


@pytest.mark.parametrize(
    "temp, expected",
    [(15.2, "15.2°C"), (14.61, "14.6°C"), (-3.0, "-3.0°C"), (0, "0.0°C")],
)
def test_format_temperature(temp: float, expected: str) -> None:
    assert format_temperature(temp) == expected


def test_format_temperature_custom_unit() -> None:
    assert format_temperature(59.4, "°F") == "59.4°F"


def test_format_wind_speed() -> None:
    assert format_wind_speed(4.12) == "4.1 m/s"


def test_epoch_to_datetime_is_utc() -> None:
    assert TimeUtils.epoch_to_datetime(0) == datetime(1970, 1, 1, tzinfo=UTC)


def test_to_local_datetime_converts_zone() -> None:
    dt = TimeUtils.to_local_datetime(1714709700, ZoneInfo("Asia/Tokyo"))
    assert (dt.hour, dt.minute) == (13, 15)


def test_to_local_datetime_defaults_to_system_zone() -> None:
    dt = TimeUtils.to_local_datetime(1714709700)
    assert dt.tzinfo is not None
    assert dt == datetime(2024, 5, 3, 4, 15, tzinfo=UTC)


def test_format_timestamp() -> None:
    assert TimeUtils.format_timestamp(1714765500, "%H:%M", ZoneInfo("UTC")) == "19:45"
