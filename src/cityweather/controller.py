# filepath: src/cityweather/controller.py
"""Core controller for the weather command-line client."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from cityweather.display.render import ReportRenderer
from cityweather.settings import ConfigurationError, UserSettings
from cityweather.weather.api import WeatherAPI

logger: Final = logging.getLogger(__name__)


def configure_logging(debug: bool = False) -> None:
    """Configure root logging for a CLI run.

    Args:
        debug: Log at DEBUG instead of WARNING
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


class WeatherReporter:
    """Orchestrates one invocation: settings, a single fetch, and rendering.

    Settings are resolved from an injected environment mapping so nothing
    here reads ``os.environ`` directly. Dependencies can be swapped for
    tests through the constructor.
    """

    def __init__(
        self,
        settings: UserSettings,
        weather_api: WeatherAPI | None = None,
        renderer: ReportRenderer | None = None,
    ) -> None:
        """Initialize the reporter.

        Args:
            settings: Resolved user settings
            weather_api: Optional custom weather API client
            renderer: Optional custom report renderer
        """
        self.settings = settings
        self.weather_api = weather_api or WeatherAPI(settings)
        self.renderer = renderer or ReportRenderer.from_settings(settings)

    @classmethod
    def from_environment(
        cls,
        env: Mapping[str, str],
        config_path: Path | None = None,
        timeout: float | None = None,
    ) -> WeatherReporter:
        """Build a reporter from an environment mapping.

        Raises:
            ConfigurationError: If the API key is missing or settings are invalid
        """
        return cls(UserSettings.load(env, config_path, timeout=timeout))

    def report(self, city: str, forecast: bool = False) -> str:
        """Fetch and render the report for ``city``.

        Args:
            city: City name passed to the provider as-is
            forecast: Render the 5-day forecast instead of current conditions

        Returns:
            The complete rendered report

        Raises:
            ConfigurationError: If ``city`` is empty
            WeatherAPIError: If the fetch fails for any reason
        """
        city = city.strip()
        if not city:
            raise ConfigurationError("Please provide a city name using the --city flag.")

        if forecast:
            logger.info("Requesting forecast for %s", city)
            return self.renderer.render_forecast(self.weather_api.fetch_forecast(city))

        logger.info("Requesting current weather for %s", city)
        return self.renderer.render_current(self.weather_api.fetch_current(city))
