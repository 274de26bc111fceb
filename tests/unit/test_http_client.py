"""HTTPクライアントのテスト"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from district_weather.shared.exceptions.errors import HTTPError
from district_weather.shared.http.client import HTTPClient


def make_response(status_code: int = 200, payload=None, json_error: bool = False) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    else:
        response.raise_for_status.return_value = None
    if json_error:
        response.json.side_effect = ValueError("Expecting value")
    else:
        response.json.return_value = payload
    return response


def test_get_json_passes_timeout_and_params() -> None:
    """タイムアウトとクエリパラメータを指定して送信する"""
    client = HTTPClient(timeout=3.5)

    with patch.object(client.session, "get", return_value=make_response(payload=[1])) as mock_get:
        assert client.get_json("https://example.com/geo", params={"q": "Seoul"}) == [1]

    mock_get.assert_called_once_with(
        "https://example.com/geo",
        params={"q": "Seoul"},
        headers=None,
        timeout=3.5,
    )


def test_non_success_status_raises_http_error() -> None:
    """非2xxステータスはHTTPError"""
    client = HTTPClient()

    with patch.object(client.session, "get", return_value=make_response(status_code=500)):
        with pytest.raises(HTTPError):
            client.get("https://example.com/geo")


def test_timeout_raises_http_error() -> None:
    """タイムアウトはHTTPError"""
    client = HTTPClient()

    with patch.object(client.session, "get", side_effect=requests.Timeout("read timed out")):
        with pytest.raises(HTTPError):
            client.get("https://example.com/geo")


def test_malformed_json_raises_http_error() -> None:
    """JSONでないボディはHTTPError"""
    client = HTTPClient()

    with patch.object(client.session, "get", return_value=make_response(json_error=True)):
        with pytest.raises(HTTPError):
            client.get_json("https://example.com/geo")


def test_user_agent_header() -> None:
    with HTTPClient(user_agent="district-weather-test/1.0") as client:
        assert client.session.headers["User-Agent"] == "district-weather-test/1.0"
