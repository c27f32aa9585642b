# src/cityweather/utils/time.py
"""Time and date handling utilities."""

from __future__ import annotations

from datetime import UTC, datetime, tzinfo


class TimeUtils:
    """Time-related utility functions.

    Centralized utilities for working with provider timestamps:
    - UNIX epoch to timezone-aware datetime conversion
    - Conversion to the display timezone (system local by default)
    - Datetime formatting with user preferences
    """

    @staticmethod
    def epoch_to_datetime(timestamp: int) -> datetime:
        """Convert UNIX timestamp to UTC datetime with timezone information.

        Args:
            timestamp: UNIX timestamp (seconds since epoch)

        Returns:
            Timezone-aware datetime object in UTC
        """
        return datetime.fromtimestamp(timestamp, tz=UTC)

    @staticmethod
    def to_local_datetime(timestamp: int, tz: tzinfo | None = None) -> datetime:
        """Convert POSIX timestamp to a datetime in the display timezone.

        Args:
            timestamp: POSIX timestamp
            tz: Target timezone; None means the system local timezone

        Returns:
            Localized datetime object
        """
        return TimeUtils.epoch_to_datetime(timestamp).astimezone(tz)

    @staticmethod
    def format_datetime(dt: datetime, format_string: str) -> str:
        """Format datetime with specified format string.

        Args:
            dt: Datetime to format
            format_string: strftime format string

        Returns:
            Formatted datetime string
        """
        return dt.strftime(format_string)

    @staticmethod
    def format_timestamp(timestamp: int, format_string: str, tz: tzinfo | None = None) -> str:
        """Format a POSIX timestamp as wall-clock text in the display timezone."""
        return TimeUtils.to_local_datetime(timestamp, tz).strftime(format_string)
