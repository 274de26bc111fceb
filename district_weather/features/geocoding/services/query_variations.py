"""ジオコーディング用クエリ候補の生成"""
from typing import Union

from ..domain.models import HierarchicalPlaceName
from ..domain.romanization import DEFAULT_ROMANIZATION_TABLE, TransliterationTable

COUNTRY_CODE = "KR"
COUNTRY_NAME = "South Korea"


def _join(*parts: str) -> str:
    return ", ".join(parts)


def generate_query_variations(
    place_name: Union[str, HierarchicalPlaceName],
    table: TransliterationTable = DEFAULT_ROMANIZATION_TABLE,
) -> list[str]:
    """
    階層的な地名からジオコーディングのクエリ候補を生成

    具体的なものから一般的なものの順に並ぶ。重複は除去しない。

    "대전광역시-서구-가수원동" ->
        ["가수원동, 서구, 대전광역시, KR",
         "서구, 대전광역시, KR",
         "대전광역시, KR",
         "Daejeon, KR",
         "Daejeon, South Korea",
         "Seo-gu, Daejeon, South Korea",
         "Seo-gu, South Korea",
         "서구, South Korea"]

    Args:
        place_name: "市・道-区・郡-洞" 形式の文字列、または分割済みの地名
        table: ローマ字表記テーブル

    Returns:
        list[str]: クエリ候補（セグメントが無い場合は空リスト）
    """
    if isinstance(place_name, str):
        place_name = HierarchicalPlaceName.parse(place_name)

    segments = place_name.segments
    province = place_name.province
    if province is None:
        return []

    queries: list[str] = []

    # 全階層（洞, 区, 市, KR）
    queries.append(_join(*reversed(segments), COUNTRY_CODE))

    county = place_name.county

    # 洞を除く（区, 市, KR）
    if county is not None:
        queries.append(_join(*reversed(segments[:-1]), COUNTRY_CODE))

    queries.append(_join(province, COUNTRY_CODE))

    romanized_province = table.romanize_province(province)
    if romanized_province:
        queries.append(_join(romanized_province, COUNTRY_CODE))
        queries.append(_join(romanized_province, COUNTRY_NAME))

    if county is not None:
        romanized_county = table.romanize_county(county)

        if romanized_county:
            if romanized_province:
                queries.append(_join(romanized_county, romanized_province, COUNTRY_NAME))
            queries.append(_join(romanized_county, COUNTRY_NAME))

        # 最も一般的なフォールバック
        queries.append(_join(county, COUNTRY_NAME))

    return queries
