"""Command-line client for OpenWeather current conditions and forecasts."""

__version__ = "0.1.0"
