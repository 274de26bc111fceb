"""行政区域名のローマ字表記テーブル"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

# 第1階層（特別市・広域市・特別自治市・道・特別自治道）
PROVINCE_ROMANIZATION: Mapping[str, str] = MappingProxyType(
    {
        "서울특별시": "Seoul",
        "부산광역시": "Busan",
        "대구광역시": "Daegu",
        "인천광역시": "Incheon",
        "광주광역시": "Gwangju",
        "대전광역시": "Daejeon",
        "울산광역시": "Ulsan",
        "세종특별자치시": "Sejong",
        "경기도": "Gyeonggi-do",
        "강원특별자치도": "Gangwon-do",
        "강원도": "Gangwon-do",
        "충청북도": "Chungcheongbuk-do",
        "충청남도": "Chungcheongnam-do",
        "전북특별자치도": "Jeollabuk-do",
        "전라북도": "Jeollabuk-do",
        "전라남도": "Jeollanam-do",
        "경상북도": "Gyeongsangbuk-do",
        "경상남도": "Gyeongsangnam-do",
        "제주특별자치도": "Jeju-do",
    }
)

# 第2階層（区・郡・市）。網羅的ではない
COUNTY_ROMANIZATION: Mapping[str, str] = MappingProxyType(
    {
        # 서울특별시
        "강남구": "Gangnam-gu",
        "강동구": "Gangdong-gu",
        "강북구": "Gangbuk-gu",
        "강서구": "Gangseo-gu",
        "관악구": "Gwanak-gu",
        "광진구": "Gwangjin-gu",
        "구로구": "Guro-gu",
        "금천구": "Geumcheon-gu",
        "노원구": "Nowon-gu",
        "도봉구": "Dobong-gu",
        "동대문구": "Dongdaemun-gu",
        "동작구": "Dongjak-gu",
        "마포구": "Mapo-gu",
        "서대문구": "Seodaemun-gu",
        "서초구": "Seocho-gu",
        "성동구": "Seongdong-gu",
        "성북구": "Seongbuk-gu",
        "송파구": "Songpa-gu",
        "양천구": "Yangcheon-gu",
        "영등포구": "Yeongdeungpo-gu",
        "용산구": "Yongsan-gu",
        "은평구": "Eunpyeong-gu",
        "종로구": "Jongno-gu",
        "중구": "Jung-gu",
        "중랑구": "Jungnang-gu",
        # 広域市に共通する区
        "동구": "Dong-gu",
        "서구": "Seo-gu",
        "남구": "Nam-gu",
        "북구": "Buk-gu",
        "유성구": "Yuseong-gu",
        "대덕구": "Daedeok-gu",
        "광산구": "Gwangsan-gu",
        "수성구": "Suseong-gu",
        "달서구": "Dalseo-gu",
        "달성군": "Dalseong-gun",
        "해운대구": "Haeundae-gu",
        "부산진구": "Busanjin-gu",
        "동래구": "Dongnae-gu",
        "사하구": "Saha-gu",
        "연제구": "Yeonje-gu",
        "수영구": "Suyeong-gu",
        "사상구": "Sasang-gu",
        "금정구": "Geumjeong-gu",
        "기장군": "Gijang-gun",
        "미추홀구": "Michuhol-gu",
        "연수구": "Yeonsu-gu",
        "남동구": "Namdong-gu",
        "부평구": "Bupyeong-gu",
        "계양구": "Gyeyang-gu",
        "강화군": "Ganghwa-gun",
        "옹진군": "Ongjin-gun",
        "울주군": "Ulju-gun",
        # 경기도
        "수원시": "Suwon",
        "성남시": "Seongnam",
        "고양시": "Goyang",
        "용인시": "Yongin",
        "부천시": "Bucheon",
        "안산시": "Ansan",
        "안양시": "Anyang",
        "남양주시": "Namyangju",
        "화성시": "Hwaseong",
        "평택시": "Pyeongtaek",
        "의정부시": "Uijeongbu",
        "시흥시": "Siheung",
        "파주시": "Paju",
        "김포시": "Gimpo",
        "광명시": "Gwangmyeong",
        "광주시": "Gwangju",
        "군포시": "Gunpo",
        "하남시": "Hanam",
        "오산시": "Osan",
        "이천시": "Icheon",
        "구리시": "Guri",
        "양주시": "Yangju",
        "안성시": "Anseong",
        "포천시": "Pocheon",
        "의왕시": "Uiwang",
        "여주시": "Yeoju",
        "동두천시": "Dongducheon",
        "과천시": "Gwacheon",
        "가평군": "Gapyeong-gun",
        "양평군": "Yangpyeong-gun",
        "연천군": "Yeoncheon-gun",
        # 강원
        "춘천시": "Chuncheon",
        "원주시": "Wonju",
        "강릉시": "Gangneung",
        "동해시": "Donghae",
        "속초시": "Sokcho",
        "삼척시": "Samcheok",
        "태백시": "Taebaek",
        "평창군": "Pyeongchang-gun",
        # 충청
        "청주시": "Cheongju",
        "충주시": "Chungju",
        "제천시": "Jecheon",
        "천안시": "Cheonan",
        "아산시": "Asan",
        "공주시": "Gongju",
        "보령시": "Boryeong",
        "서산시": "Seosan",
        "논산시": "Nonsan",
        "당진시": "Dangjin",
        # 전라
        "전주시": "Jeonju",
        "군산시": "Gunsan",
        "익산시": "Iksan",
        "정읍시": "Jeongeup",
        "남원시": "Namwon",
        "목포시": "Mokpo",
        "여수시": "Yeosu",
        "순천시": "Suncheon",
        "나주시": "Naju",
        "광양시": "Gwangyang",
        # 경상
        "포항시": "Pohang",
        "경주시": "Gyeongju",
        "김천시": "Gimcheon",
        "안동시": "Andong",
        "구미시": "Gumi",
        "영주시": "Yeongju",
        "경산시": "Gyeongsan",
        "창원시": "Changwon",
        "진주시": "Jinju",
        "통영시": "Tongyeong",
        "김해시": "Gimhae",
        "양산시": "Yangsan",
        "거제시": "Geoje",
        # 제주
        "제주시": "Jeju",
        "서귀포시": "Seogwipo",
    }
)


@dataclass(frozen=True)
class TransliterationTable:
    """
    行政区域名 → ローマ字表記の読み取り専用テーブル

    キーは完全一致で参照する。存在しないキーはNoneを返し、
    そのキーに依存する候補は生成されない。
    """

    provinces: Mapping[str, str]
    counties: Mapping[str, str]

    def __post_init__(self) -> None:
        # 読み取り専用のコピーとして保持
        object.__setattr__(self, "provinces", MappingProxyType(dict(self.provinces)))
        object.__setattr__(self, "counties", MappingProxyType(dict(self.counties)))

    def romanize_province(self, name: str) -> Optional[str]:
        return self.provinces.get(name)

    def romanize_county(self, name: str) -> Optional[str]:
        return self.counties.get(name)


DEFAULT_ROMANIZATION_TABLE = TransliterationTable(
    provinces=PROVINCE_ROMANIZATION,
    counties=COUNTY_ROMANIZATION,
)
