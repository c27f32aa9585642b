"""Exception classes for weather API interactions.

This module defines a hierarchy of exception classes for handling
the failure modes of a single OpenWeather request: transport problems,
non-200 provider responses and undecodable bodies.
"""

from __future__ import annotations


class WeatherAPIError(Exception):
    """Error during an OpenWeather API request or response parsing.

    Carries the HTTP status code (0 when no response was received) and
    the raw response body text when available.
    """

    def __init__(self, code: int, message: str, body: str | None = None) -> None:
        """Initialize the exception.

        Args:
            code: HTTP status code or 0 for local failures
            message: Human-readable error message
            body: Raw response body text, if any
        """
        super().__init__(f"[{code}] {message}")
        self.code: int = code
        self.message: str = message
        self.body: str | None = body

    @classmethod
    def from_response(cls, body: str, status_code: int) -> WeatherAPIError:
        """Create an error from a non-200 API response.

        Args:
            body: Raw response body text
            status_code: HTTP status code

        Returns:
            Appropriate WeatherAPIError subclass
        """
        message = body or f"API request failed with status {status_code}"
        if 400 <= status_code < 500:
            if status_code in (401, 403):
                return AuthenticationError(status_code, message, body)
            elif status_code == 404:
                return NotFoundError(status_code, message, body)
            elif status_code == 429:
                return RateLimitError(status_code, message, body)
            return ClientError(status_code, message, body)
        elif status_code >= 500:
            return ServerError(status_code, message, body)

        return cls(status_code, message, body)


class NetworkError(WeatherAPIError):
    """Raised when a network issue prevents API communication."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        """Initialize with network error details.

        Args:
            message: Description of the network error
            original_error: The original exception that was caught
        """
        super().__init__(0, message)
        self.original_error = original_error


class AuthenticationError(WeatherAPIError):
    """Raised when API authentication fails (invalid API key)."""

    pass


class NotFoundError(WeatherAPIError):
    """Raised when the provider does not know the requested city."""

    pass


class RateLimitError(WeatherAPIError):
    """Raised when rate limits are exceeded."""

    pass


class ClientError(WeatherAPIError):
    """Raised for general 4xx client errors."""

    pass


class ServerError(WeatherAPIError):
    """Raised for 5xx server errors."""

    pass


class ParseError(WeatherAPIError):
    """Raised when an API response cannot be decoded into the expected model."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        """Initialize with parsing error details.

        Args:
            message: Description of the parsing error
            original_error: The original exception that was caught
        """
        super().__init__(0, message)
        self.original_error = original_error
