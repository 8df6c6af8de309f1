"""
대학별 정시 환산점수 계산기

공식:
1. 국/수/탐 가중치 합(영어 제외)으로 각 과목 기여도 정규화
2. 과탐: 상위 1과목 x 2 또는 2과목 합
3. (국 + 수 + 탐) x 3 = 기본 총점
4. 영어는 등급표[학생 등급] - 등급표[기준 등급] 으로 가감
   - 영어 가중치 > 0: 가감 x 영어 가중치 / 전체 가중치 합
   - 영어 가중치 = 0: 가감 / 4
"""
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from uniscore.config.constants import BASE_TOTAL_MULTIPLIER, ENGLISH_FALLBACK_DIVISOR
from uniscore.config.logging_config import setup_logger

from .exceptions import InvalidWeightTable, RankOutOfRange
from .score_record import ScoreRecord
from .subjects import Subject
from .universities import University
from .weights import ScienceRequirement, WeightTable, WeightTableRegistry, get_registry

logger = setup_logger("scoring")


@dataclass(frozen=True)
class ScoreBreakdown:
    """환산 과정의 중간값 전체"""
    weight_sum_no_english: float
    weight_sum_total: float
    korean_contribution: float
    math_contribution: float
    science_candidate: float
    science_contribution: float
    base_total: float
    english_reference_score: float
    english_actual_score: float
    english_adjustment: float
    final_score: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def science_candidate(chemistry: float, earth_science: float, requirement: ScienceRequirement) -> float:
    """과탐 반영 점수"""
    if requirement is ScienceRequirement.BEST_OF_TWO:
        return max(chemistry, earth_science) * 2
    return chemistry + earth_science


def english_rank_score(table: Sequence[float], rank: int) -> float:
    # 0번은 사용하지 않는 자리, 등급은 1부터
    if not 1 <= rank < len(table):
        raise RankOutOfRange(rank, len(table))
    return table[rank]


def calculate_breakdown(record: ScoreRecord, weight: WeightTable) -> ScoreBreakdown:
    """
    성적표 + 가중치 표 → 환산 과정 전체

    Raises:
        MissingSubject: 과목 성적 누락
        RankOutOfRange: 영어 등급(학생/기준)이 등급표 밖
        InvalidWeightTable: 영어 제외 가중치 합 또는 전체 가중치 합이 0
    """
    record.require_complete()

    weight_sum_no_english = weight.korean + weight.math + weight.science
    weight_english = weight.english
    weight_sum_total = weight_sum_no_english + weight_english

    if weight_sum_no_english == 0:
        raise InvalidWeightTable(
            f"{weight.university.value} {weight.year}: 국어/수학/탐구 가중치 합이 0입니다"
        )
    if weight_english > 0 and weight_sum_total == 0:
        raise InvalidWeightTable(
            f"{weight.university.value} {weight.year}: 전체 가중치 합이 0입니다"
        )

    korean = record.standard_score(Subject.KOREAN) * weight.korean / weight_sum_no_english
    math = record.standard_score(Subject.MATH) * weight.math / weight_sum_no_english

    candidate = science_candidate(
        record.standard_score(Subject.CHEMISTRY),
        record.standard_score(Subject.EARTH_SCIENCE),
        weight.science_required,
    )
    science = candidate * weight.science / weight_sum_no_english

    base_total = (korean + math + science) * BASE_TOTAL_MULTIPLIER

    eng_table = weight.english_rank_table
    eng_default_score = english_rank_score(eng_table, weight.english_reference_rank)
    eng_score = english_rank_score(eng_table, record.rank(Subject.ENGLISH))

    if weight_english > 0:
        adjustment = (eng_score - eng_default_score) * weight_english / weight_sum_total
    else:
        adjustment = (eng_score - eng_default_score) / ENGLISH_FALLBACK_DIVISOR

    final_score = base_total + adjustment

    logger.debug(
        f"[{record.name}] {weight.university.value} {weight.year}: "
        f"기본 {base_total:.4f}, 영어 {adjustment:+.4f} → {final_score:.4f}"
    )

    return ScoreBreakdown(
        weight_sum_no_english=weight_sum_no_english,
        weight_sum_total=weight_sum_total,
        korean_contribution=korean,
        math_contribution=math,
        science_candidate=candidate,
        science_contribution=science,
        base_total=base_total,
        english_reference_score=eng_default_score,
        english_actual_score=eng_score,
        english_adjustment=adjustment,
        final_score=final_score,
    )


def calculate(record: ScoreRecord, weight: WeightTable) -> float:
    """환산점수 (반올림 없음)"""
    return calculate_breakdown(record, weight).final_score


def calculate_with_university(
    record: ScoreRecord,
    university: University,
    year: int,
    registry: Optional[WeightTableRegistry] = None,
) -> float:
    """(대학, 연도) 가중치 표를 찾아 환산점수 계산"""
    weight = (registry or get_registry()).resolve(university, year)
    return calculate(record, weight)


def rank_universities(
    record: ScoreRecord,
    year: int,
    registry: Optional[WeightTableRegistry] = None,
) -> List[Tuple[University, float]]:
    """
    해당 연도에 표가 있는 모든 대학으로 환산, 점수 높은 순 정렬
    표가 없는 대학은 건너뜀
    """
    registry = registry or get_registry()
    record.require_complete()

    results = []
    for university in registry.supported_universities(year):
        weight = registry.resolve(university, year)
        results.append((university, calculate(record, weight)))

    results.sort(key=lambda x: -x[1])
    logger.info(f"[{record.name}] {year}학년도 {len(results)}개 대학 환산 완료")
    return results
