"""User-configurable settings resolved from the environment and config.yaml."""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import tzinfo
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from cityweather.constants import (
    API_KEY_ENV,
    CURRENT_WEATHER_URL,
    DEFAULT_DATE_FORMAT,
    DEFAULT_TIME_FORMAT,
    DEFAULT_TIMEOUT,
    FORECAST_URL,
)


class ConfigurationError(RuntimeError):
    """Raised when settings are missing or invalid before any request is made."""


class MissingAPIKeyError(ConfigurationError):
    """Raised when no OpenWeather API key is configured."""


def _interpolate_env(content: str, env: Mapping[str, str]) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: env.get(m.group(1), ""), content)


class UserSettings(BaseModel):
    """Settings for talking to OpenWeather and formatting its output.

    Only the API key is required; everything else has a default that
    matches the provider's public 2.5 endpoints.
    """

    api_key: str = Field(..., min_length=1, description="OpenWeather API key")
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="Request timeout (seconds)")
    current_url: str = Field(CURRENT_WEATHER_URL, description="Current weather endpoint")
    forecast_url: str = Field(FORECAST_URL, description="Forecast endpoint")

    # Time formatting
    timezone: str | None = Field(
        None, description="IANA timezone for displayed times; null uses the system zone"
    )
    time_format: str = Field(DEFAULT_TIME_FORMAT, description="Wall-clock format (e.g. 18:04)")
    date_format: str = Field(
        DEFAULT_DATE_FORMAT, description="Forecast day label format (e.g. 2024-05-03 (Fri))"
    )

    # ---- validators ----
    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str | None) -> str | None:
        if v:
            try:
                ZoneInfo(v)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                raise ValueError(f"unknown timezone {v!r}") from exc
        return v or None

    # ---- convenience methods ----
    def get_timezone(self) -> tzinfo | None:
        """Get configured timezone as ZoneInfo object.

        Returns:
            ZoneInfo for the configured timezone, or None for system local time
        """
        return ZoneInfo(self.timezone) if self.timezone else None

    @classmethod
    def load(
        cls,
        env: Mapping[str, str],
        path: Path | None = None,
        **overrides: Any,
    ) -> UserSettings:
        """Resolve settings from an environment mapping and optional YAML file.

        Args:
            env: Environment variables (see ``load_environment``)
            path: Optional YAML config file; ``${VAR}`` is expanded from ``env``
            overrides: Values that win over the file (None values are skipped)

        Returns:
            Validated UserSettings object

        Raises:
            ConfigurationError: If the file is unreadable, the API key is
                missing, or a value is invalid
        """
        data: dict[str, Any] = {}
        if path is not None:
            try:
                raw = _interpolate_env(path.read_text(), env)
                data = yaml.safe_load(raw) or {}
            except (OSError, yaml.YAMLError) as exc:
                raise ConfigurationError(f"Unable to read config YAML: {exc}") from exc
            if not isinstance(data, dict):
                raise ConfigurationError(f"Config file {path} must contain a mapping")

        if not data.get("api_key"):
            data["api_key"] = env.get(API_KEY_ENV, "")
        if not data["api_key"]:
            raise MissingAPIKeyError(
                "OpenWeatherMap API key not found. "
                f"Set the {API_KEY_ENV} environment variable in a .env file "
                "or directly in your shell."
            )

        data.update({k: v for k, v in overrides.items() if v is not None})

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise ConfigurationError(f"Invalid configuration:\n{err}") from err
