"""OpenWeatherMap Direct Geocoding API実装"""
from typing import Optional

from ..domain.models import GeocodingResult
from ....shared.exceptions.errors import GeocodingError, HTTPError
from ....shared.http.client import HTTPClient
from ....shared.logging.config import get_logger

logger = get_logger(__name__)

DEFAULT_GEOCODING_URL = "https://api.openweathermap.org/geo/1.0/direct"


class OpenWeatherMapGeocoder:
    """OpenWeatherMap Direct Geocoding API実装"""

    def __init__(
        self,
        api_key: str,
        http_client: Optional[HTTPClient] = None,
        base_url: str = DEFAULT_GEOCODING_URL,
    ) -> None:
        """
        Args:
            api_key: OpenWeatherMap API キー
            http_client: HTTPクライアント（省略時はリトライなしで作成）
            base_url: ダイレクトジオコーディングAPIのURL
        """
        if not api_key:
            raise GeocodingError("OpenWeatherMap API key is required")

        self.api_key = api_key
        self.http_client = http_client or HTTPClient(max_retries=0)
        self.base_url = base_url

        logger.info("OpenWeatherMapGeocoder initialized")

    def geocode(self, query: str, limit: int = 1) -> Optional[GeocodingResult]:
        """
        クエリ文字列をジオコーディング

        Args:
            query: クエリ候補（例: "서구, 대전광역시, KR"）
            limit: 取得件数の上限

        Returns:
            Optional[GeocodingResult]: 最初の結果（該当なしの場合はNone）

        Raises:
            GeocodingError: 通信失敗、非2xxステータス、レスポンス形式が不正な場合
        """
        params = {"q": query, "limit": limit, "appid": self.api_key}

        try:
            data = self.http_client.get_json(self.base_url, params=params)
        except HTTPError as e:
            raise GeocodingError(f"OpenWeatherMap geocoding request failed: {query}") from e

        if not isinstance(data, list):
            raise GeocodingError(
                f"Unexpected geocoding response type ({type(data).__name__}): {query}"
            )

        if not data:
            logger.debug(f"No geocoding results for query: {query}")
            return None

        try:
            result = GeocodingResult.from_api(data[0])
        except (KeyError, TypeError, ValueError) as e:
            raise GeocodingError(f"Invalid geocoding result for query: {query}") from e

        logger.debug(f"Geocoded: {query} -> ({result.lat}, {result.lon}) {result.name}")

        return result
