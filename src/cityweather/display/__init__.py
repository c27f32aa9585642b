"""Display package - renders decoded reports as terminal text."""

from cityweather.display.render import ReportRenderer, TemplateRenderer, group_by_day

__all__ = ["ReportRenderer", "TemplateRenderer", "group_by_day"]
