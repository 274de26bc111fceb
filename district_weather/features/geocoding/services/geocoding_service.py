"""ジオコーディングサービス"""

from typing import Optional

from ..domain.models import GeoLocation, GeocodingResult, HierarchicalPlaceName
from ..domain.romanization import DEFAULT_ROMANIZATION_TABLE, TransliterationTable
from ....shared.exceptions.errors import (
    ConfigurationError,
    GeocodingError,
    LocationNotFoundError,
    MissingQueryError,
)
from ....shared.logging.config import get_logger
from ..providers.openweathermap_geocoder import OpenWeatherMapGeocoder
from .query_variations import generate_query_variations

logger = get_logger(__name__)


class GeocodingService:
    """
    行政区域名を座標に解決するサービス

    クエリ候補を具体的なものから順に1件ずつ問い合わせ、
    最初に結果が得られた時点で終了する。
    """

    def __init__(
        self,
        geocoder: Optional[OpenWeatherMapGeocoder],
        table: TransliterationTable = DEFAULT_ROMANIZATION_TABLE,
    ) -> None:
        """
        Args:
            geocoder: ジオコーダー（APIキー未設定の場合はNone）
            table: ローマ字表記テーブル
        """
        self.geocoder = geocoder
        self.table = table

        logger.info(f"GeocodingService initialized: geocoder={'set' if geocoder else 'missing'}")

    def resolve(self, query: Optional[str]) -> GeoLocation:
        """
        行政区域名を座標に解決

        Args:
            query: "市・道-区・郡-洞" 形式の地名

        Returns:
            GeoLocation: 最初に見つかった位置

        Raises:
            MissingQueryError: クエリが空の場合（通信は行わない）
            ConfigurationError: ジオコーダーが設定されていない場合（通信は行わない）
            LocationNotFoundError: 全候補で結果が得られなかった場合
        """
        if not query:
            raise MissingQueryError("Query is required")

        if self.geocoder is None:
            raise ConfigurationError("OpenWeatherMap API key is not set")

        place_name = HierarchicalPlaceName.parse(query)
        candidates = generate_query_variations(place_name, self.table)

        logger.debug(f"Resolving '{query}' with {len(candidates)} candidates")

        for attempt, candidate in enumerate(candidates, start=1):
            result = self.try_candidate(candidate)

            if result is not None:
                location = result.to_geo_location()
                logger.info(
                    f"Resolved '{query}' on attempt {attempt}/{len(candidates)}: "
                    f"'{candidate}' -> ({location.lat}, {location.lon}) {location.name}"
                )
                return location

        logger.warning(f"No geocoding result for '{query}' after {len(candidates)} attempts")
        raise LocationNotFoundError(f"Location not found: {query}")

    def try_candidate(self, candidate: str) -> Optional[GeocodingResult]:
        """
        クエリ候補を1件だけ問い合わせる

        通信エラーは「該当なし」として扱い、例外を送出しない。

        Args:
            candidate: クエリ候補

        Returns:
            Optional[GeocodingResult]: 結果（該当なし・通信失敗の場合はNone）

        Raises:
            ConfigurationError: ジオコーダーが設定されていない場合
        """
        if self.geocoder is None:
            raise ConfigurationError("OpenWeatherMap API key is not set")

        try:
            return self.geocoder.geocode(candidate, limit=1)
        except GeocodingError as e:
            logger.warning(f"Geocoding attempt failed for '{candidate}': {e}")
            return None
