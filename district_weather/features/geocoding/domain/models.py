"""ジオコーディング機能のドメインモデル"""
from dataclasses import dataclass, field
from typing import Any, Optional

# 地名セグメントの区切り文字（例: "서울특별시-종로구-청운동"）
PLACE_NAME_SEPARATOR = "-"


@dataclass(frozen=True)
class HierarchicalPlaceName:
    """
    階層的な行政区域名

    一般的なものから順に並ぶ（市・道 → 区・郡 → 洞）。
    空のセグメントは保持しない。
    """

    segments: tuple[str, ...]

    @classmethod
    def parse(cls, raw: str) -> "HierarchicalPlaceName":
        """区切り文字で分割し、空のセグメントを除いて生成"""
        return cls(tuple(part for part in raw.split(PLACE_NAME_SEPARATOR) if part))

    @property
    def province(self) -> Optional[str]:
        """第1階層（特別市・広域市・道）"""
        return self.segments[0] if self.segments else None

    @property
    def county(self) -> Optional[str]:
        """第2階層（区・郡・市）"""
        return self.segments[1] if len(self.segments) >= 2 else None

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return PLACE_NAME_SEPARATOR.join(self.segments)


@dataclass(frozen=True)
class GeoLocation:
    """解決済みの地理的位置情報"""

    lat: float  # 緯度
    lon: float  # 経度
    name: str  # プロバイダーが返した表示名

    def to_dict(self) -> dict[str, Any]:
        """APIレスポンス用の辞書として返す"""
        return {"lat": self.lat, "lon": self.lon, "name": self.name}


@dataclass(frozen=True)
class GeocodingResult:
    """ダイレクトジオコーディングAPIの結果1件"""

    name: str
    lat: float
    lon: float
    country: Optional[str] = None
    state: Optional[str] = None
    local_names: dict[str, str] = field(default_factory=dict, hash=False)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "GeocodingResult":
        """
        APIレスポンスの要素から生成

        Raises:
            KeyError, TypeError, ValueError: 必須項目が欠けている、または型が不正な場合
        """
        return cls(
            name=str(data["name"]),
            lat=float(data["lat"]),
            lon=float(data["lon"]),
            country=data.get("country"),
            state=data.get("state"),
            local_names=dict(data.get("local_names") or {}),
        )

    def to_geo_location(self) -> GeoLocation:
        return GeoLocation(lat=self.lat, lon=self.lon, name=self.name)
