"""検索オーケストレーター"""

from typing import Optional

from ...infrastructure.config.settings import Settings
from ...infrastructure.gcp.secret_manager import SecretManagerClient
from ...shared.exceptions.errors import ConfigurationError
from ...shared.http.client import HTTPClient
from ...shared.logging.config import get_logger
from ..geocoding.providers.openweathermap_geocoder import OpenWeatherMapGeocoder
from ..geocoding.services.geocoding_service import GeocodingService
from ..weather.providers.openweathermap_client import OpenWeatherMapClient
from ..weather.services.weather_service import WeatherService

logger = get_logger(__name__)


class LookupOrchestrator:
    """
    検索オーケストレーター

    設定からAPIキーを解決し、各Featureのサービスに依存性注入を行う
    """

    def __init__(self, settings: Settings) -> None:
        """
        Args:
            settings: アプリケーション設定
        """
        self.settings = settings
        self.secret_manager: Optional[SecretManagerClient] = None

        self.api_key = self._resolve_api_key()

        self.geocoding_service = self._create_geocoding_service()
        self.weather_service = self._create_weather_service()

        logger.info("LookupOrchestrator initialized")

    def _create_secret_manager(self) -> Optional[SecretManagerClient]:
        """
        Secret Managerクライアントを作成（開発環境以外、かつプロジェクトID指定時のみ）

        作成に失敗した場合はNoneを返す。
        """
        if self.settings.is_development or not self.settings.gcp_project_id:
            return None

        try:
            return SecretManagerClient(self.settings.gcp_project_id)
        except ConfigurationError as e:
            logger.error(f"Secret Manager is unavailable: {e}")
            return None

    def _resolve_api_key(self) -> Optional[str]:
        """
        OpenWeatherMap API Keyを取得

        設定値を優先し、無ければSecret Managerから取得する。
        取得できない場合はNoneを返し、各サービスが呼び出し時にConfigurationErrorを送出する。

        Returns:
            Optional[str]: APIキー
        """
        api_key = self.settings.openweathermap_api_key

        if not api_key:
            self.secret_manager = self._create_secret_manager()

        if not api_key and self.secret_manager:
            api_key = self.secret_manager.get_secret_or_none(
                self.settings.openweathermap_api_key_secret_name
            )

        if not api_key:
            logger.error("OPENWEATHERMAP_API_KEY is not set")
            return None

        return api_key

    def _create_geocoding_service(self) -> GeocodingService:
        """
        ジオコーディングサービスを作成

        候補ごとのリトライは行わず、次の候補を試すことで代替する。
        """
        geocoder: Optional[OpenWeatherMapGeocoder] = None

        if self.api_key:
            http_client = HTTPClient(
                timeout=self.settings.geocoding_timeout,
                max_retries=0,
                user_agent=self.settings.http_user_agent,
            )
            geocoder = OpenWeatherMapGeocoder(
                api_key=self.api_key,
                http_client=http_client,
                base_url=self.settings.geocoding_base_url,
            )

        return GeocodingService(geocoder)

    def _create_weather_service(self) -> WeatherService:
        """天気サービスを作成"""
        client: Optional[OpenWeatherMapClient] = None

        if self.api_key:
            http_client = HTTPClient(
                timeout=self.settings.weather_timeout,
                max_retries=self.settings.weather_retry,
                user_agent=self.settings.http_user_agent,
            )
            client = OpenWeatherMapClient(
                api_key=self.api_key,
                http_client=http_client,
                base_url=self.settings.weather_base_url,
            )

        return WeatherService(client)
