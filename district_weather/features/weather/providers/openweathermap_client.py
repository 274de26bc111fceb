"""OpenWeatherMap 天気API実装"""
from typing import Any, Optional

from ....shared.exceptions.errors import HTTPError, WeatherApiError
from ....shared.http.client import HTTPClient
from ....shared.logging.config import get_logger

logger = get_logger(__name__)

DEFAULT_WEATHER_URL = "https://api.openweathermap.org/data/2.5"


class OpenWeatherMapClient:
    """OpenWeatherMap 現在の天気・5日間予報APIクライアント"""

    def __init__(
        self,
        api_key: str,
        http_client: Optional[HTTPClient] = None,
        base_url: str = DEFAULT_WEATHER_URL,
        units: str = "metric",
        lang: str = "kr",
    ) -> None:
        """
        Args:
            api_key: OpenWeatherMap API キー
            http_client: HTTPクライアント
            base_url: APIのベースURL
            units: 単位系
            lang: 説明文の言語
        """
        self.api_key = api_key
        self.http_client = http_client or HTTPClient(timeout=10.0)
        self.base_url = base_url.rstrip("/")
        self.units = units
        self.lang = lang

    def _get(self, endpoint: str, params: dict[str, Any]) -> Any:
        url = f"{self.base_url}/{endpoint}"
        params = {**params, "appid": self.api_key, "units": self.units, "lang": self.lang}

        try:
            return self.http_client.get_json(url, params=params)
        except HTTPError as e:
            raise WeatherApiError(f"OpenWeatherMap {endpoint} request failed") from e

    def fetch_current(self, lat: str, lon: str) -> dict[str, Any]:
        """
        現在の天気を取得

        Raises:
            WeatherApiError: リクエスト失敗時
        """
        logger.debug(f"Fetching current weather: ({lat}, {lon})")
        return self._get("weather", {"lat": lat, "lon": lon})

    def fetch_forecast(self, lat: str, lon: str, count: int = 24) -> dict[str, Any]:
        """
        3時間ごとの予報を取得

        Args:
            lat: 緯度
            lon: 経度
            count: 取得する予報の件数

        Raises:
            WeatherApiError: リクエスト失敗時
        """
        logger.debug(f"Fetching forecast: ({lat}, {lon}) cnt={count}")
        return self._get("forecast", {"lat": lat, "lon": lon, "cnt": count})
