"""OpenWeather command-line client.

This module provides the command-line interface: it loads the
environment, resolves settings, fetches one report, and prints it.
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer

from cityweather.constants import API_KEY_ENV, DEFAULT_ENV_FILE
from cityweather.controller import WeatherReporter, configure_logging
from cityweather.settings import ConfigurationError, MissingAPIKeyError, load_environment
from cityweather.weather.errors import WeatherAPIError

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Current weather and 5-day forecasts from OpenWeather", add_completion=False)

CITY_OPTION = typer.Option("", "--city", help="City name (e.g. 'London', 'Nairobi')")
FORECAST_OPTION = typer.Option(
    False, "--forecast", help="Get 5-day / 3-hour forecast instead of current weather"
)
ENV_FILE_OPTION = typer.Option(
    Path(DEFAULT_ENV_FILE), "--env-file", dir_okay=False, help="dotenv file to load first"
)
CONFIG_OPTION = typer.Option(
    None, "--config", "-c", exists=True, dir_okay=False, help="Optional YAML settings file"
)
TIMEOUT_OPTION = typer.Option(None, "--timeout", min=0.1, help="Request timeout in seconds")
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")


def _fail(message: str, *hints: str) -> typer.Exit:
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
    for hint in hints:
        typer.echo(hint, err=True)
    return typer.Exit(code=1)


@app.command()
def main(
    city: str = CITY_OPTION,
    forecast: bool = FORECAST_OPTION,
    env_file: Path = ENV_FILE_OPTION,
    config: Path | None = CONFIG_OPTION,
    timeout: float | None = TIMEOUT_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Print current weather (or the forecast) for a city."""
    configure_logging(debug)
    env = load_environment(env_file)

    try:
        reporter = WeatherReporter.from_environment(env, config, timeout)
    except MissingAPIKeyError as exc:
        raise _fail(
            str(exc), f'Example .env entry: {API_KEY_ENV}="YOUR_ACTUAL_API_KEY"'
        ) from exc
    except ConfigurationError as exc:
        raise _fail(str(exc)) from exc

    try:
        output = reporter.report(city, forecast=forecast)
    except ConfigurationError as exc:
        raise _fail(str(exc), 'Usage: cityweather --city "YourCity" [--forecast]') from exc
    except WeatherAPIError as exc:
        kind = "forecast" if forecast else "current weather"
        raise _fail(f"fetching {kind} for {city}: {exc}") from exc

    typer.echo(output)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
