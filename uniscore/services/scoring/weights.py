"""
대학별·학년도별 환산 가중치 표
- data/university_weights.json 을 한 번 로드해 (대학, 연도) → WeightTable 로 조회
- 없는 조합은 UnsupportedCombination
"""
import json
import os
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from uniscore.config import settings
from uniscore.config.logging_config import setup_logger

from .exceptions import InvalidWeightTable, UnsupportedCombination
from .universities import University

logger = setup_logger("weights")

# 데이터 파일 경로
DATA_DIR = os.path.join(os.path.dirname(__file__), "data")
DEFAULT_CATALOG_PATH = os.path.join(DATA_DIR, "university_weights.json")

# 싱글톤 캐시
_registry_cache: Optional["WeightTableRegistry"] = None


class ScienceRequirement(IntEnum):
    """과학탐구 반영 방식"""
    BEST_OF_TWO = 1   # 상위 1과목 x 2
    SUM_OF_TWO = 2    # 2과목 합


@dataclass(frozen=True)
class WeightTable:
    """대학·학년도 1개의 가중치 표"""
    university: University
    year: int
    korean: float
    math: float
    english: float
    science: float
    science_required: ScienceRequirement
    english_reference_rank: int
    english_rank_table: Tuple[float, ...]

    @classmethod
    def from_dict(cls, university: University, year: int, raw: Mapping[str, Any]) -> "WeightTable":
        """JSON 항목 1개를 검증하면서 WeightTable 로 변환"""
        where = f"{university.value} {year}"
        try:
            korean = float(raw["korean"])
            math = float(raw["math"])
            english = float(raw["english"])
            science = float(raw["science"])
            science_raw = int(raw["science_required"])
            reference_rank = int(raw["english_reference_rank"])
            table = tuple(float(x) for x in raw["english_table"])
        except KeyError as e:
            raise InvalidWeightTable(f"{where}: 항목 누락 {e}") from e
        except (TypeError, ValueError) as e:
            raise InvalidWeightTable(f"{where}: 숫자가 아닌 값 ({e})") from e

        if min(korean, math, english, science) < 0:
            raise InvalidWeightTable(f"{where}: 가중치는 음수일 수 없습니다")

        try:
            science_required = ScienceRequirement(science_raw)
        except ValueError:
            raise InvalidWeightTable(
                f"{where}: science_required 는 1 또는 2 여야 합니다 (입력: {science_raw})"
            ) from None

        if len(table) < 2:
            raise InvalidWeightTable(f"{where}: 영어 등급표가 비어 있습니다")
        if not 1 <= reference_rank < len(table):
            raise InvalidWeightTable(
                f"{where}: 영어 기준 등급 {reference_rank} 이(가) 등급표 범위를 벗어났습니다"
            )

        return cls(
            university=university,
            year=year,
            korean=korean,
            math=math,
            english=english,
            science=science,
            science_required=science_required,
            english_reference_rank=reference_rank,
            english_rank_table=table,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "university": self.university.value,
            "display_name": self.university.display_name,
            "year": self.year,
            "korean": self.korean,
            "math": self.math,
            "english": self.english,
            "science": self.science,
            "science_required": int(self.science_required),
            "english_reference_rank": self.english_reference_rank,
            "english_table": list(self.english_rank_table),
        }


class WeightTableRegistry:
    """(대학, 연도) → WeightTable 읽기 전용 카탈로그"""

    def __init__(self, tables: Mapping[Tuple[University, int], WeightTable]):
        self._tables: Dict[Tuple[University, int], WeightTable] = dict(tables)

    @classmethod
    def from_catalog(cls, catalog: Mapping[str, Mapping[str, Any]]) -> "WeightTableRegistry":
        """
        {"KYUNGHEE": {"2024": {...}, ...}, ...} 형태의 카탈로그에서 생성

        Raises:
            InvalidWeightTable: 대학 코드/연도/항목이 잘못된 경우
        """
        tables = {}
        for code, years in catalog.items():
            try:
                university = University(code)
            except ValueError:
                raise InvalidWeightTable(f"카탈로그에 알 수 없는 대학 코드: {code}") from None
            for year_key, raw in years.items():
                try:
                    year = int(year_key)
                except ValueError:
                    raise InvalidWeightTable(f"{code}: 연도 형식 오류 ({year_key})") from None
                tables[(university, year)] = WeightTable.from_dict(university, year, raw)
        return cls(tables)

    @classmethod
    def from_json(cls, filepath: str) -> "WeightTableRegistry":
        with open(filepath, "r", encoding="utf-8") as f:
            catalog = json.load(f)
        registry = cls.from_catalog(catalog)
        logger.info(f"가중치 카탈로그 로드 완료: {filepath} ({len(registry)}개 표)")
        return registry

    def resolve(self, university: University, year: int) -> WeightTable:
        table = self._tables.get((University(university), year))
        if table is None:
            logger.warning(f"지원하지 않는 조합: {University(university).value} {year}")
            raise UnsupportedCombination(University(university), year)
        return table

    def try_resolve(self, university: University, year: int) -> Optional[WeightTable]:
        """없는 조합이면 None (정상적인 '미지원' 결과로 취급할 때 사용)"""
        return self._tables.get((University(university), year))

    def supported_years(self, university: University) -> List[int]:
        university = University(university)
        return sorted(year for univ, year in self._tables if univ == university)

    def supported_universities(self, year: int) -> List[University]:
        """해당 연도에 표가 있는 대학 (University 선언 순서)"""
        return [u for u in University if (u, year) in self._tables]

    def supported_pairs(self) -> List[Tuple[University, int]]:
        order = list(University)
        return sorted(self._tables, key=lambda pair: (pair[1], order.index(pair[0])))

    def __contains__(self, pair) -> bool:
        return pair in self._tables

    def __len__(self) -> int:
        return len(self._tables)


def get_registry() -> WeightTableRegistry:
    """공유 레지스트리 (최초 호출 시 로드, 이후 캐시)"""
    global _registry_cache
    if _registry_cache is None:
        filepath = settings.WEIGHT_TABLE_PATH or DEFAULT_CATALOG_PATH
        _registry_cache = WeightTableRegistry.from_json(filepath)
    return _registry_cache


def resolve(university: University, year: int) -> WeightTable:
    return get_registry().resolve(university, year)
