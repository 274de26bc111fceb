"""天気機能のドメインモデル"""
from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class WeatherCurrent:
    """現在の天気"""

    temp: float  # 気温（℃）
    description: str  # 天気の説明（韓国語）
    icon: str  # OpenWeatherMapのアイコンコード（例: "01d"）


@dataclass
class WeatherToday:
    """今日の最低・最高気温"""

    min: float
    max: float


@dataclass
class WeatherHourly:
    """時間別予報"""

    time: str  # ISO 8601（UTC）
    temp: float
    icon: str


@dataclass
class WeatherData:
    """天気情報"""

    current: WeatherCurrent
    today: WeatherToday
    hourly: list[WeatherHourly] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """APIレスポンス用の辞書として返す"""
        return asdict(self)
