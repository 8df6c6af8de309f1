from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from uniscore.config.constants import DISPLAY_DECIMALS
from uniscore.config.logging_config import setup_logger
from uniscore.services.scoring import (
    MissingSubject,
    RankOutOfRange,
    InvalidWeightTable,
    ScoreRecord,
    UnknownUniversity,
    University,
    UnsupportedCombination,
    calculate_breakdown,
    get_registry,
    rank_universities,
)

logger = setup_logger("api")

calculator_bp = APIRouter()


class SubjectScore(BaseModel):
    standard_score: float = 0
    percentile: float = 0
    rank: int = 0


class CalculateRequest(BaseModel):
    university: str
    year: int
    student_name: str = ""
    scores: Dict[str, SubjectScore] = Field(description="과목 키(Korean, Math, ...) → 성적")


class RankRequest(BaseModel):
    year: int
    student_name: str = ""
    scores: Dict[str, SubjectScore]


def _build_record(student_name: str, scores: Dict[str, SubjectScore]) -> ScoreRecord:
    try:
        return ScoreRecord.from_dict(student_name, {k: v.model_dump() for k, v in scores.items()})
    except ValueError as e:
        raise HTTPException(422, f"알 수 없는 과목: {e}")


def _find_university(label: str) -> University:
    try:
        return University.from_label(label)
    except UnknownUniversity as e:
        raise HTTPException(404, str(e))


@calculator_bp.post('/calculate')
async def calculate(req: CalculateRequest):
    """환산점수 계산 API"""
    university = _find_university(req.university)
    record = _build_record(req.student_name, req.scores)

    try:
        weight = get_registry().resolve(university, req.year)
    except UnsupportedCombination as e:
        raise HTTPException(404, str(e))

    try:
        breakdown = calculate_breakdown(record, weight)
    except (MissingSubject, RankOutOfRange, InvalidWeightTable) as e:
        logger.warning(f"환산 실패 ({university.value} {req.year}): {e}")
        raise HTTPException(422, str(e))

    return {
        'university': university.value,
        'display_name': university.display_name,
        'year': req.year,
        'myScore': round(breakdown.final_score, DISPLAY_DECIMALS),
        'weights': weight.to_dict(),
        'breakdown': breakdown.to_dict(),
    }


@calculator_bp.post('/rank')
async def rank(req: RankRequest):
    """해당 연도 전체 대학 환산점수 (높은 순)"""
    record = _build_record(req.student_name, req.scores)

    try:
        results = rank_universities(record, req.year)
    except (MissingSubject, RankOutOfRange, InvalidWeightTable) as e:
        raise HTTPException(422, str(e))

    return [
        {
            'university': univ.value,
            'display_name': univ.display_name,
            'myScore': round(score, DISPLAY_DECIMALS),
        }
        for univ, score in results
    ]


@calculator_bp.get('/universities')
async def get_universities(year: Optional[int] = None) -> List[Dict[str, str]]:
    """대학 목록 조회 (year 지정 시 해당 연도 지원 대학만)"""
    registry = get_registry()
    universities = registry.supported_universities(year) if year is not None else list(University)
    return [{'university': u.value, 'display_name': u.display_name} for u in universities]


@calculator_bp.get('/universities/{code}/years')
async def get_years(code: str):
    """대학별 지원 학년도"""
    university = _find_university(code)
    return {
        'university': university.value,
        'years': get_registry().supported_years(university),
    }
