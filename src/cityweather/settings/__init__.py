"""Application settings management.

This package provides:
- load_environment: dotenv file merged with the process environment
- UserSettings: validated settings resolved from that environment
"""

from cityweather.settings.environment import load_environment
from cityweather.settings.user import ConfigurationError, MissingAPIKeyError, UserSettings

__all__ = ["ConfigurationError", "MissingAPIKeyError", "UserSettings", "load_environment"]
