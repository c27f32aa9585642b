"""Weather API client for OpenWeather."""

from __future__ import annotations

import logging
from typing import Any, Final, Mapping, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from cityweather.constants import UNITS
from cityweather.settings import UserSettings

from .errors import NetworkError, ParseError, WeatherAPIError
from .models import CurrentWeatherReport, ForecastReport

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Human‑readable explanations for common HTTP errors
HTTP_ERROR_MAP: Final = {
    400: "Bad request - check the city name or parameters",
    401: "Invalid or missing API key",
    403: "Account blocked / key revoked",
    404: "City not found",
    429: "Rate limit exceeded",
    500: "OpenWeather internal error",
    502: "Bad gateway at OpenWeather",
    503: "Service unavailable (maintenance)",
    504: "Gateway timeout",
}


def fetch_model(
    url: str,
    model: type[ModelT],
    params: Mapping[str, Any] | None = None,
    timeout: float | None = None,
    session: requests.Session | None = None,
) -> ModelT:
    """GET ``url`` and decode the JSON body into ``model``.

    Args:
        url: Endpoint URL
        model: Pydantic model the body must validate against
        params: Query parameters, URL-encoded by requests
        timeout: Request timeout in seconds (None waits indefinitely)
        session: Optional session to issue the request with

    Returns:
        Validated instance of ``model``

    Raises:
        NetworkError: When the request could not be completed
        WeatherAPIError: When the provider answers with a status other than 200
        ParseError: When the body is not valid JSON for ``model``
    """
    getter = session.get if session is not None else requests.get
    try:
        resp = getter(url, params=params, timeout=timeout)
    except requests.RequestException as exc:
        logger.warning("Weather API network error: %s", exc)
        raise NetworkError(f"Network error: {exc}", exc) from exc

    try:
        if resp.status_code != 200:
            logger.error(
                "Weather API error: %s - %s",
                resp.status_code,
                HTTP_ERROR_MAP.get(resp.status_code, "unexpected status"),
            )
            raise WeatherAPIError.from_response(resp.text, resp.status_code)

        try:
            return model.model_validate_json(resp.content)
        except ValidationError as exc:
            logger.debug("Could not decode %s from %s: %s", model.__name__, url, exc)
            raise ParseError(
                f"Failed to decode {model.__name__} response: {exc}", exc
            ) from exc
    finally:
        resp.close()


class WeatherAPI:
    """OpenWeather API client for the 2.5 current-weather and forecast endpoints.

    Builds the query for a city, delegates the request to ``fetch_model``
    and returns strongly-typed reports. Errors from the fetch are raised
    unchanged.
    """

    def __init__(self, config: UserSettings, session: requests.Session | None = None) -> None:
        """Initialize the weather API client.

        Args:
            config: Settings with API key, endpoints and timeout
            session: Optional requests session shared by both calls
        """
        self.config = config
        self.session = session

    def fetch_current(self, city: str) -> CurrentWeatherReport:
        """Retrieve current conditions for ``city``."""
        logger.debug("Fetching current weather for %s", city)
        return fetch_model(
            self.config.current_url,
            CurrentWeatherReport,
            params=self._params(city),
            timeout=self.config.timeout,
            session=self.session,
        )

    def fetch_forecast(self, city: str) -> ForecastReport:
        """Retrieve the 5-day / 3-hour forecast for ``city``."""
        logger.debug("Fetching forecast for %s", city)
        return fetch_model(
            self.config.forecast_url,
            ForecastReport,
            params=self._params(city),
            timeout=self.config.timeout,
            session=self.session,
        )

    def _params(self, city: str) -> dict[str, str]:
        return {"q": city, "appid": self.config.api_key, "units": UNITS}
