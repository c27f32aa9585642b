from unittest.mock import MagicMock
from zoneinfo import ZoneInfo

import pytest

from cityweather.controller import WeatherReporter
from cityweather.display.render import ReportRenderer
from cityweather.settings import ConfigurationError, UserSettings
from cityweather.weather.api import WeatherAPI
from cityweather.weather.errors import NotFoundError
from cityweather.weather.models import CurrentWeatherReport, ForecastReport


@pytest.fixture
def weather_api() -> MagicMock:
    return MagicMock(spec=WeatherAPI)


@pytest.fixture
def reporter(settings: UserSettings, weather_api: MagicMock) -> WeatherReporter:
    return WeatherReporter(settings, weather_api=weather_api)


def test_report_current(
    reporter: WeatherReporter, weather_api: MagicMock, current_report: CurrentWeatherReport
) -> None:
    weather_api.fetch_current.return_value = current_report

    out = reporter.report("London")

    weather_api.fetch_current.assert_called_once_with("London")
    weather_api.fetch_forecast.assert_not_called()
    assert "Temperature: 15.2°C" in out
    assert "Conditions: Clouds (overcast clouds)" in out
    assert "Sunrise: 04:15" in out


def test_report_forecast(
    reporter: WeatherReporter, weather_api: MagicMock, forecast_report: ForecastReport
) -> None:
    weather_api.fetch_forecast.return_value = forecast_report

    out = reporter.report("London", forecast=True)

    weather_api.fetch_forecast.assert_called_once_with("London")
    weather_api.fetch_current.assert_not_called()
    assert out.count("Date: ") == 3


def test_report_strips_city(
    reporter: WeatherReporter, weather_api: MagicMock, current_report: CurrentWeatherReport
) -> None:
    weather_api.fetch_current.return_value = current_report
    reporter.report("  London ")
    weather_api.fetch_current.assert_called_once_with("London")


@pytest.mark.parametrize("city", ["", "   "])
def test_report_requires_city(
    reporter: WeatherReporter, weather_api: MagicMock, city: str
) -> None:
    with pytest.raises(ConfigurationError, match="--city"):
        reporter.report(city)

    weather_api.fetch_current.assert_not_called()


def test_report_propagates_fetch_errors(
    reporter: WeatherReporter, weather_api: MagicMock
) -> None:
    weather_api.fetch_current.side_effect = NotFoundError(404, "city not found")

    with pytest.raises(NotFoundError):
        reporter.report("Atlantis")


def test_from_environment_builds_defaults() -> None:
    reporter = WeatherReporter.from_environment(
        {"OPENWEATHER_API_KEY": "key-123"}, timeout=5
    )

    assert isinstance(reporter.weather_api, WeatherAPI)
    assert reporter.weather_api.config.api_key == "key-123"
    assert reporter.settings.timeout == 5.0
    assert isinstance(reporter.renderer, ReportRenderer)


def test_from_environment_missing_key() -> None:
    with pytest.raises(ConfigurationError):
        WeatherReporter.from_environment({})


def test_renderer_follows_settings_timezone(weather_api: MagicMock) -> None:
    reporter = WeatherReporter(
        UserSettings(api_key="k", timezone="Asia/Tokyo"), weather_api=weather_api
    )
    assert reporter.renderer.tz == ZoneInfo("Asia/Tokyo")
