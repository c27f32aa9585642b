import json
from pathlib import Path
from typing import Any

import pytest

from cityweather.settings import UserSettings
from cityweather.weather.models import CurrentWeatherReport, ForecastReport

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def current_json() -> dict[str, Any]:
    return json.loads((DATA_DIR / "current_london.json").read_text())


@pytest.fixture
def forecast_json() -> dict[str, Any]:
    return json.loads((DATA_DIR / "forecast_london.json").read_text())


@pytest.fixture
def current_report(current_json: dict[str, Any]) -> CurrentWeatherReport:
    return CurrentWeatherReport.model_validate(current_json)


@pytest.fixture
def forecast_report(forecast_json: dict[str, Any]) -> ForecastReport:
    return ForecastReport.model_validate(forecast_json)


@pytest.fixture
def settings() -> UserSettings:
    return UserSettings(api_key="fake-api-key", timezone="UTC")
