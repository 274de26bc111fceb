"""天気サービス"""

from datetime import date, datetime, timezone
from typing import Any, Optional

from ..domain.models import WeatherCurrent, WeatherData, WeatherHourly, WeatherToday
from ..providers.openweathermap_client import OpenWeatherMapClient
from ....shared.exceptions.errors import (
    ConfigurationError,
    MissingCoordinatesError,
    WeatherNotFoundError,
)
from ....shared.logging.config import get_logger

logger = get_logger(__name__)

# 時間別予報として返す件数（3時間間隔 × 8 = 24時間）
HOURLY_ENTRIES = 8
FORECAST_COUNT = 24


def format_timestamp(dt: int) -> str:
    """UNIX時刻をミリ秒付きのISO 8601（UTC, "Z"終端）に変換"""
    moment = datetime.fromtimestamp(dt, tz=timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def compute_today_min_max(
    forecast: dict[str, Any],
    current_min: float,
    current_max: float,
    today: Optional[date] = None,
) -> WeatherToday:
    """
    今日の最低・最高気温を計算

    現在の天気の最低・最高気温を起点に、予報のうち日付（dt_txt）が
    今日（UTC）のものだけで範囲を広げる。

    Args:
        forecast: 予報APIのレスポンス
        current_min: 現在の天気の最低気温
        current_max: 現在の天気の最高気温
        today: 基準日（省略時はUTCの今日）

    Returns:
        WeatherToday: 今日の最低・最高気温
    """
    today_str = (today or datetime.now(timezone.utc).date()).isoformat()

    low = current_min
    high = current_max

    for item in forecast.get("list") or []:
        item_date = str(item.get("dt_txt", "")).split(" ")[0]
        if item_date == today_str:
            low = min(low, item["main"]["temp_min"])
            high = max(high, item["main"]["temp_max"])

    return WeatherToday(min=low, max=high)


class WeatherService:
    """座標から天気情報を取得するサービス"""

    def __init__(self, client: Optional[OpenWeatherMapClient]) -> None:
        """
        Args:
            client: 天気APIクライアント（APIキー未設定の場合はNone）
        """
        self.client = client

    def get_weather(self, lat: Optional[str], lon: Optional[str]) -> WeatherData:
        """
        現在の天気・今日の最低最高気温・時間別予報を取得

        Args:
            lat: 緯度
            lon: 経度

        Returns:
            WeatherData: 天気情報

        Raises:
            MissingCoordinatesError: 緯度・経度のいずれかが未指定の場合
            ConfigurationError: APIクライアントが設定されていない場合
            WeatherApiError: API呼び出しに失敗した場合
            WeatherNotFoundError: 天気データが含まれていない場合
        """
        if not lat or not lon:
            raise MissingCoordinatesError("Both lat and lon are required")

        if self.client is None:
            raise ConfigurationError("OpenWeatherMap API key is not set")

        current = self.client.fetch_current(lat, lon)
        forecast = self.client.fetch_forecast(lat, lon, count=FORECAST_COUNT)

        main = current.get("main")
        conditions = current.get("weather") or []
        if not main or not conditions:
            logger.warning(f"No weather data for ({lat}, {lon})")
            raise WeatherNotFoundError(f"No weather data for ({lat}, {lon})")

        today = compute_today_min_max(forecast, main["temp_min"], main["temp_max"])

        hourly = [
            WeatherHourly(
                time=format_timestamp(item["dt"]),
                temp=item["main"]["temp"],
                icon=(item.get("weather") or [{}])[0].get("icon", ""),
            )
            for item in (forecast.get("list") or [])[:HOURLY_ENTRIES]
        ]

        weather = WeatherData(
            current=WeatherCurrent(
                temp=main["temp"],
                description=conditions[0].get("description", ""),
                icon=conditions[0].get("icon", ""),
            ),
            today=today,
            hourly=hourly,
        )

        logger.debug(f"Weather for ({lat}, {lon}): {weather.current.temp} {weather.current.description}")

        return weather
