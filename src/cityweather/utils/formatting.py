"""Text and number formatting utilities."""

from __future__ import annotations

from cityweather.constants import TEMPERATURE_UNIT, WIND_SPEED_UNIT


def format_temperature(temp: float, unit: str = TEMPERATURE_UNIT) -> str:
    """Format temperature value with unit.

    Args:
        temp: Temperature value
        unit: Temperature unit

    Returns:
        Formatted temperature string with one decimal place
    """
    return f"{temp:.1f}{unit}"


def format_wind_speed(speed: float, unit: str = WIND_SPEED_UNIT) -> str:
    """Format wind speed with one decimal place and unit."""
    return f"{speed:.1f} {unit}"


def format_percentage(value: float) -> str:
    """Format value as percentage.

    Args:
        value: Value to format (0-1)

    Returns:
        Formatted percentage string with no decimal places
    """
    return f"{value * 100:.0f}%"
