"""ジオコーディングサービスのテスト"""

from typing import Optional, Union

import pytest

from district_weather.features.geocoding.domain.models import GeocodingResult, GeoLocation
from district_weather.features.geocoding.services.geocoding_service import GeocodingService
from district_weather.features.geocoding.services.query_variations import (
    generate_query_variations,
)
from district_weather.shared.exceptions.errors import (
    ConfigurationError,
    GeocodingError,
    LocationNotFoundError,
    MissingQueryError,
)

Response = Union[Optional[GeocodingResult], Exception]


class FakeGeocoder:
    """呼び出しを記録するジオコーダー"""

    def __init__(self, responses: list[Response], default: Response = None) -> None:
        self.responses = list(responses)
        self.default = default
        self.calls: list[tuple[str, int]] = []

    def geocode(self, query: str, limit: int = 1) -> Optional[GeocodingResult]:
        self.calls.append((query, limit))
        response = self.responses.pop(0) if self.responses else self.default
        if isinstance(response, Exception):
            raise response
        return response


DAEJEON = GeocodingResult(name="Daejeon", lat=36.3496, lon=127.3848, country="KR")
CHEONGWUN = GeocodingResult(
    name="Cheongwun-dong",
    lat=37.5915,
    lon=126.9684,
    country="KR",
    local_names={"ko": "청운동"},
)


def test_first_candidate_success() -> None:
    """最初の候補で見つかった場合はその結果をそのまま返す"""
    geocoder = FakeGeocoder([CHEONGWUN])
    service = GeocodingService(geocoder)  # type: ignore[arg-type]

    location = service.resolve("서울특별시-종로구-청운동")

    assert location == GeoLocation(lat=37.5915, lon=126.9684, name="Cheongwun-dong")
    assert geocoder.calls == [("청운동, 종로구, 서울특별시, KR", 1)]


def test_stops_at_first_success() -> None:
    """4番目の候補で成功した場合、5番目以降は問い合わせない"""
    geocoder = FakeGeocoder(
        [GeocodingError("status 500"), None, GeocodingError("timeout"), DAEJEON],
        default=CHEONGWUN,
    )
    service = GeocodingService(geocoder)  # type: ignore[arg-type]

    location = service.resolve("대전광역시-서구-가수원동")

    assert location.to_dict() == {"lat": 36.3496, "lon": 127.3848, "name": "Daejeon"}
    assert len(geocoder.calls) == 4
    assert [query for query, _ in geocoder.calls] == generate_query_variations(
        "대전광역시-서구-가수원동"
    )[:4]


def test_all_candidates_fail() -> None:
    """全候補が失敗した場合はLocationNotFoundError"""
    geocoder = FakeGeocoder([], default=GeocodingError("status 500"))
    service = GeocodingService(geocoder)  # type: ignore[arg-type]

    with pytest.raises(LocationNotFoundError):
        service.resolve("서울특별시-종로구-청운동")

    assert len(geocoder.calls) == len(generate_query_variations("서울특별시-종로구-청운동"))


def test_candidates_tried_in_order() -> None:
    """候補は生成順に1件ずつ問い合わせる"""
    geocoder = FakeGeocoder([])
    service = GeocodingService(geocoder)  # type: ignore[arg-type]

    with pytest.raises(LocationNotFoundError):
        service.resolve("대전광역시-서구-가수원동")

    assert [query for query, _ in geocoder.calls] == generate_query_variations(
        "대전광역시-서구-가수원동"
    )
    assert all(limit == 1 for _, limit in geocoder.calls)


@pytest.mark.parametrize("query", [None, ""])
def test_missing_query_makes_no_requests(query: Optional[str]) -> None:
    """クエリが空の場合は通信せずにMissingQueryError"""
    geocoder = FakeGeocoder([DAEJEON])
    service = GeocodingService(geocoder)  # type: ignore[arg-type]

    with pytest.raises(MissingQueryError):
        service.resolve(query)

    assert geocoder.calls == []


def test_missing_query_checked_before_configuration() -> None:
    """ジオコーダー未設定でも、空クエリはMissingQueryError"""
    service = GeocodingService(None)

    with pytest.raises(MissingQueryError):
        service.resolve("")


def test_missing_geocoder_raises_configuration_error() -> None:
    """ジオコーダー未設定の場合はConfigurationError"""
    service = GeocodingService(None)

    with pytest.raises(ConfigurationError):
        service.resolve("서울특별시")


def test_separator_only_query_is_not_found_without_requests() -> None:
    """候補が0件の場合は通信せずにLocationNotFoundError"""
    geocoder = FakeGeocoder([DAEJEON])
    service = GeocodingService(geocoder)  # type: ignore[arg-type]

    with pytest.raises(LocationNotFoundError):
        service.resolve("--")

    assert geocoder.calls == []


def test_unexpected_errors_propagate() -> None:
    """GeocodingError以外の例外は握りつぶさない"""
    geocoder = FakeGeocoder([RuntimeError("boom")])
    service = GeocodingService(geocoder)  # type: ignore[arg-type]

    with pytest.raises(RuntimeError):
        service.resolve("서울특별시")


def test_try_candidate_maps_geocoding_error_to_none() -> None:
    """候補1件分の通信エラーはNoneとして扱う"""
    geocoder = FakeGeocoder([GeocodingError("connection reset")])
    service = GeocodingService(geocoder)  # type: ignore[arg-type]

    assert service.try_candidate("서울특별시, KR") is None
    assert geocoder.calls == [("서울특별시, KR", 1)]


def test_try_candidate_returns_result() -> None:
    geocoder = FakeGeocoder([DAEJEON])
    service = GeocodingService(geocoder)  # type: ignore[arg-type]

    assert service.try_candidate("Daejeon, KR") == DAEJEON


def test_resolution_is_idempotent() -> None:
    """同じ入力・同じプロバイダー応答では同じ結果"""
    geocoder = FakeGeocoder([None, None, DAEJEON, None, None, DAEJEON])
    service = GeocodingService(geocoder)  # type: ignore[arg-type]

    first = service.resolve("대전광역시-서구-가수원동")
    second = service.resolve("대전광역시-서구-가수원동")

    assert first == second
    assert geocoder.calls[:3] == geocoder.calls[3:]
