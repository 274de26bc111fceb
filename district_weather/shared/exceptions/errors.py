"""カスタム例外定義"""


class WeatherLookupError(Exception):
    """天気検索サービス基底例外"""

    pass


class HTTPError(WeatherLookupError):
    """HTTP関連のエラー"""

    pass


class ConfigurationError(WeatherLookupError):
    """設定エラー（APIキー未設定など）"""

    pass


class GeocodingError(WeatherLookupError):
    """ジオコーディングエラー（候補1件分の失敗）"""

    pass


class MissingQueryError(WeatherLookupError):
    """検索クエリが指定されていない"""

    pass


class LocationNotFoundError(WeatherLookupError):
    """全候補を試しても位置が見つからない"""

    pass


class MissingCoordinatesError(WeatherLookupError):
    """緯度・経度が指定されていない"""

    pass


class WeatherApiError(WeatherLookupError):
    """天気APIの呼び出しに失敗"""

    pass


class WeatherNotFoundError(WeatherLookupError):
    """天気データが存在しない"""

    pass
