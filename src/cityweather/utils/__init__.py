"""Common utility functions and helpers for the cityweather package."""

from cityweather.utils.formatting import (
    format_percentage,
    format_temperature,
    format_wind_speed,
)
from cityweather.utils.time import TimeUtils

__all__ = [
    "TimeUtils",
    "format_percentage",
    "format_temperature",
    "format_wind_speed",
]
