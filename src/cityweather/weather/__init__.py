"""Weather package - holds API client, response models, and custom errors."""

from .api import WeatherAPI, fetch_model
from .errors import (
    AuthenticationError,
    ClientError,
    NetworkError,
    NotFoundError,
    ParseError,
    RateLimitError,
    ServerError,
    WeatherAPIError,
)
from .models import (
    CityInfo,
    Clouds,
    Coord,
    CurrentWeatherReport,
    ForecastEntry,
    ForecastReport,
    MainMeasurements,
    PartOfDay,
    SunInfo,
    WeatherCondition,
    Wind,
)

# Define what gets imported with: from cityweather.weather import *
__all__ = [
    "AuthenticationError",
    "CityInfo",
    "ClientError",
    "Clouds",
    "Coord",
    "CurrentWeatherReport",
    "ForecastEntry",
    "ForecastReport",
    "MainMeasurements",
    "NetworkError",
    "NotFoundError",
    "ParseError",
    "PartOfDay",
    "RateLimitError",
    "ServerError",
    "SunInfo",
    "WeatherAPI",
    "WeatherAPIError",
    "WeatherCondition",
    "Wind",
    "fetch_model",
]
