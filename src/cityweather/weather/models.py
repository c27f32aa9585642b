"""Typed models for OpenWeather 2.5 current-weather and forecast responses.

Only the fields printed or useful for debugging are modelled; the
provider sends more and those keys are ignored.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from cityweather.models.base import ProviderModel, TimeStampModel

# ─────────────────────────── primitives ──────────────────────────────────────


class Coord(ProviderModel):
    """Geographic coordinates (longitude, latitude)."""

    lon: float
    lat: float


class WeatherCondition(ProviderModel):
    """Weather condition information from OpenWeather."""

    id: int
    main: str
    description: str
    icon: str = ""


class MainMeasurements(ProviderModel):
    """Temperatures (in the requested unit system), pressure and humidity."""

    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: int
    humidity: int


class Wind(ProviderModel):
    speed: float
    deg: int = 0
    gust: float | None = None


class Clouds(ProviderModel):
    all: int = 0


class SunInfo(TimeStampModel):
    """The ``sys`` block of a current-weather response."""

    type: int = 0
    id: int = 0
    country: str = ""
    sunrise: int
    sunset: int

    @property
    def sunrise_at(self) -> datetime:
        return self.convert_timestamp(self.sunrise)

    @property
    def sunset_at(self) -> datetime:
        return self.convert_timestamp(self.sunset)


class CityInfo(ProviderModel):
    """City metadata attached to a forecast response."""

    id: int
    name: str
    coord: Coord
    country: str = ""
    population: int = 0
    timezone: int = 0
    sunrise: int = 0
    sunset: int = 0


class PartOfDay(ProviderModel):
    """The ``sys`` block of a forecast entry (``d`` = day, ``n`` = night)."""

    pod: str = ""


# ─────────────────────────── top-level responses ─────────────────────────────


class CurrentWeatherReport(TimeStampModel):
    """Current weather data parsed from the ``/weather`` endpoint."""

    coord: Coord
    weather: list[WeatherCondition] = Field(default_factory=list)
    base: str = ""
    main: MainMeasurements
    visibility: int = 0
    wind: Wind
    clouds: Clouds = Field(default_factory=Clouds)
    dt: int
    sys: SunInfo
    timezone: int = 0
    id: int = 0
    name: str
    cod: int = 200

    @property
    def observed_at(self) -> datetime:
        """Time of data calculation as a UTC datetime."""
        return self.convert_timestamp(self.dt)

    @property
    def primary_condition(self) -> WeatherCondition | None:
        """Get the primary weather condition.

        Returns:
            First weather condition in the list or None if not available
        """
        return self.weather[0] if self.weather else None


class ForecastEntry(TimeStampModel):
    """A single 3-hour forecast interval."""

    dt: int
    main: MainMeasurements
    weather: list[WeatherCondition] = Field(default_factory=list)
    clouds: Clouds = Field(default_factory=Clouds)
    wind: Wind
    visibility: int = 0
    pop: float = Field(0.0, ge=0.0, le=1.0)
    sys: PartOfDay = Field(default_factory=PartOfDay)
    dt_txt: str = ""

    @property
    def forecast_at(self) -> datetime:
        """Start of the forecast interval as a UTC datetime."""
        return self.convert_timestamp(self.dt)

    @property
    def primary_condition(self) -> WeatherCondition | None:
        """Get the primary weather condition.

        The provider occasionally sends an empty list for an interval.

        Returns:
            First weather condition in the list or None if not available
        """
        return self.weather[0] if self.weather else None


class ForecastReport(ProviderModel):
    """5-day / 3-hour forecast parsed from the ``/forecast`` endpoint."""

    cod: str
    message: float = 0.0
    cnt: int = 0
    entries: list[ForecastEntry] = Field(default_factory=list, alias="list")
    city: CityInfo
