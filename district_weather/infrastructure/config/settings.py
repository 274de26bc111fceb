"""アプリケーション設定（Pydantic Settings）"""
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """アプリケーション設定"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Project
    project_name: str = Field(
        default="district-weather",
        description="プロジェクト名",
    )
    environment: str = Field(
        default="development",
        description="環境 (development, staging, production)",
    )

    # GCP
    gcp_project_id: Optional[str] = Field(
        default=None,
        description="GCPプロジェクトID（Secret Manager / Cloud Logging用）",
    )

    # OpenWeatherMap
    openweathermap_api_key: Optional[str] = Field(
        default=None,
        description="OpenWeatherMap API Key（ローカル開発用）",
    )
    openweathermap_api_key_secret_name: str = Field(
        default="openweathermap-api-key",
        description="OpenWeatherMap API KeyのSecret Manager名",
    )

    # Geocoding
    geocoding_base_url: str = Field(
        default="https://api.openweathermap.org/geo/1.0/direct",
        description="ダイレクトジオコーディングAPIのURL",
    )
    geocoding_timeout: float = Field(
        default=5.0,
        gt=0,
        description="候補1件あたりのジオコーディングタイムアウト（秒）",
    )

    # Weather
    weather_base_url: str = Field(
        default="https://api.openweathermap.org/data/2.5",
        description="天気APIのベースURL",
    )
    weather_timeout: float = Field(
        default=10.0,
        gt=0,
        description="天気APIのタイムアウト（秒）",
    )
    weather_retry: int = Field(
        default=2,
        ge=0,
        description="天気APIのリトライ回数",
    )

    http_user_agent: str = Field(
        default="district-weather/1.0",
        description="外部API呼び出しのUser-Agent",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="ログレベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    gcp_logging_enabled: bool = Field(
        default=False,
        description="Cloud Loggingを有効にするか",
    )

    # Cloud Run
    port: int = Field(
        default=8080,
        description="HTTPサーバーのポート番号",
    )

    @property
    def is_development(self) -> bool:
        """開発環境かどうか"""
        return self.environment.lower() == "development"
