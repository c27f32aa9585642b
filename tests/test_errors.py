import pytest

from cityweather.weather.errors import (
    AuthenticationError,
    ClientError,
    NetworkError,
    NotFoundError,
    ParseError,
    RateLimitError,
    ServerError,
    WeatherAPIError,
)


def test_weather_api_error_str_keeps_code_and_body() -> None:
    err = WeatherAPIError(code=418, message="teapot", body="teapot")
    assert str(err) == "[418] teapot"
    assert err.code == 418
    assert err.body == "teapot"


@pytest.mark.parametrize(
    "code, expected_type",
    [
        (401, AuthenticationError),
        (403, AuthenticationError),
        (404, NotFoundError),
        (429, RateLimitError),
        (400, ClientError),
        (500, ServerError),
        (503, ServerError),
        (302, WeatherAPIError),
    ],
)
def test_from_response_creates_expected_error(
    code: int, expected_type: type[WeatherAPIError]
) -> None:
    body = '{"cod":"%d","message":"test error"}' % code
    err = WeatherAPIError.from_response(body, code)
    assert type(err) is expected_type
    assert err.code == code
    assert err.body == body
    assert str(code) in str(err)
    assert "test error" in str(err)


def test_from_response_empty_body_still_has_message() -> None:
    err = WeatherAPIError.from_response("", 502)
    assert str(err) == "[502] API request failed with status 502"


def test_network_error_wraps_exception() -> None:
    try:
        raise ConnectionError("BOOM")
    except ConnectionError as e:
        err = NetworkError(message="Connection error", original_error=e)
        assert isinstance(err, WeatherAPIError)
        assert str(err) == "[0] Connection error"
        assert err.original_error is e


def test_parse_error_wraps_exception() -> None:
    try:
        raise ValueError("bad parse")
    except ValueError as e:
        err = ParseError(message="Parse error", original_error=e)
        assert isinstance(err, WeatherAPIError)
        assert str(err) == "[0] Parse error"
        assert err.original_error is e
