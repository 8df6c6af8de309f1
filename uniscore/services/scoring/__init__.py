"""
점수 계산 시스템
성적표 + 대학별 가중치 표 → 정시 환산점수
"""

from .exceptions import (
    ScoreError,
    MissingSubject,
    UnsupportedCombination,
    UnknownUniversity,
    RankOutOfRange,
    InvalidWeightTable,
    PersistenceIOError,
)
from .subjects import Subject
from .universities import University
from .score_record import ScoreEntry, ScoreRecord
from .weights import (
    ScienceRequirement,
    WeightTable,
    WeightTableRegistry,
    get_registry,
    resolve,
)
from .calculator import (
    ScoreBreakdown,
    calculate,
    calculate_breakdown,
    calculate_with_university,
    rank_universities,
)
from .storage import save_record, load_record

__all__ = [
    # 예외
    "ScoreError",
    "MissingSubject",
    "UnsupportedCombination",
    "UnknownUniversity",
    "RankOutOfRange",
    "InvalidWeightTable",
    "PersistenceIOError",
    # 성적표
    "Subject",
    "ScoreEntry",
    "ScoreRecord",
    # 가중치 표
    "University",
    "ScienceRequirement",
    "WeightTable",
    "WeightTableRegistry",
    "get_registry",
    "resolve",
    # 계산기
    "ScoreBreakdown",
    "calculate",
    "calculate_breakdown",
    "calculate_with_university",
    "rank_universities",
    # 저장
    "save_record",
    "load_record",
]
