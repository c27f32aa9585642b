"""Text rendering components for weather reports."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, tzinfo
from typing import Any

from jinja2 import Environment, PackageLoader, StrictUndefined

from cityweather.constants import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_TIME_FORMAT,
    NO_CONDITION_DESCRIPTION,
    NO_CONDITION_MAIN,
    RULE,
)
from cityweather.settings import UserSettings
from cityweather.utils import (
    TimeUtils,
    format_percentage,
    format_temperature,
    format_wind_speed,
)
from cityweather.weather.models import (
    CurrentWeatherReport,
    ForecastEntry,
    ForecastReport,
    WeatherCondition,
)


def describe_condition(condition: WeatherCondition | None) -> tuple[str, str]:
    """Return (category, description), with placeholders when there is no condition."""
    if condition is None:
        return NO_CONDITION_MAIN, NO_CONDITION_DESCRIPTION
    return condition.main, condition.description


def group_by_day(
    entries: Iterable[ForecastEntry],
    tz: tzinfo | None = None,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> dict[str, list[ForecastEntry]]:
    """Bucket forecast entries by local calendar date.

    Args:
        entries: Forecast entries in provider order
        tz: Timezone that decides the calendar date (None = system local)
        date_format: strftime format of the bucket label

    Returns:
        Mapping of date label to entries in calendar-date order; entries
        keep their input order inside each bucket
    """
    buckets: dict[date, list[ForecastEntry]] = {}
    for entry in entries:
        day = entry.forecast_at.astimezone(tz).date()
        buckets.setdefault(day, []).append(entry)
    return {day.strftime(date_format): buckets[day] for day in sorted(buckets)}


class TemplateRenderer:
    """Handles the Jinja2 environment for the plain-text report templates.

    Templates ship inside the package under ``templates/``; autoescaping
    is off because the output goes to a terminal.
    """

    def __init__(self, env: Environment | None = None) -> None:
        self.env = env or Environment(
            loader=PackageLoader("cityweather", "templates"),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    def render(self, template_name: str, **context: Any) -> str:
        """Render ``template_name`` with the provided context.

        Args:
            template_name: Template file name inside the templates directory
            context: Template context variables

        Returns:
            Rendered text without a trailing newline
        """
        return self.env.get_template(template_name).render(**context)


class ReportRenderer:
    """Builds template contexts from decoded reports and renders them.

    All timestamps are shown in ``tz``; None means the system local
    timezone. Numbers are formatted before they reach the templates so
    the templates only lay out strings.
    """

    def __init__(
        self,
        tz: tzinfo | None = None,
        time_format: str = DEFAULT_TIME_FORMAT,
        date_format: str = DEFAULT_DATE_FORMAT,
        templates: TemplateRenderer | None = None,
    ) -> None:
        self.tz = tz
        self.time_format = time_format
        self.date_format = date_format
        self.templates = templates or TemplateRenderer()

    @classmethod
    def from_settings(cls, settings: UserSettings) -> ReportRenderer:
        """Create a renderer using the timezone and formats from settings."""
        return cls(
            tz=settings.get_timezone(),
            time_format=settings.time_format,
            date_format=settings.date_format,
        )

    # ---- current weather ----
    def build_current_context(self, report: CurrentWeatherReport) -> dict[str, Any]:
        condition, description = describe_condition(report.primary_condition)
        return {
            "name": report.name,
            "country": report.sys.country,
            "temp": format_temperature(report.main.temp),
            "feels_like": format_temperature(report.main.feels_like),
            "condition": condition,
            "description": description,
            "humidity": report.main.humidity,
            "wind": format_wind_speed(report.wind.speed),
            "pressure": report.main.pressure,
            "clouds": report.clouds.all,
            "sunrise": self._clock(report.sys.sunrise),
            "sunset": self._clock(report.sys.sunset),
            "rule": RULE,
        }

    def render_current(self, report: CurrentWeatherReport) -> str:
        """Render current conditions as multi-line text."""
        return self.templates.render("current.txt.j2", **self.build_current_context(report))

    # ---- forecast ----
    def build_forecast_context(self, report: ForecastReport) -> dict[str, Any]:
        days = [
            {"label": label, "rows": [self._forecast_row(e) for e in entries]}
            for label, entries in group_by_day(
                report.entries, self.tz, self.date_format
            ).items()
        ]
        return {
            "name": report.city.name,
            "country": report.city.country,
            "days": days,
            "rule": RULE,
        }

    def render_forecast(self, report: ForecastReport) -> str:
        """Render the forecast grouped by local calendar day."""
        return self.templates.render("forecast.txt.j2", **self.build_forecast_context(report))

    def _forecast_row(self, entry: ForecastEntry) -> dict[str, str]:
        condition, description = describe_condition(entry.primary_condition)
        return {
            "time": self._clock(entry.dt),
            "temp": format_temperature(entry.main.temp),
            "feels_like": format_temperature(entry.main.feels_like),
            "condition": condition,
            "description": description,
            "wind": format_wind_speed(entry.wind.speed),
            "precipitation": format_percentage(entry.pop),
        }

    def _clock(self, timestamp: int) -> str:
        return TimeUtils.format_timestamp(timestamp, self.time_format, self.tz)
