import pytest

from uniscore.services.scoring import (
    ScienceRequirement,
    ScoreRecord,
    Subject,
    University,
    WeightTable,
)


@pytest.fixture
def record():
    """예시 학생 성적 (5과목)"""
    r = ScoreRecord("홍길동")
    r.record(Subject.KOREAN, 130, 95, 2)
    r.record(Subject.MATH, 125, 90, 2)
    r.record(Subject.ENGLISH, 0, 0, 2)
    r.record(Subject.CHEMISTRY, 68, 96, 1)
    r.record(Subject.EARTH_SCIENCE, 65, 91, 2)
    return r


def make_weight(
    korean=30.0,
    math=30.0,
    english=0.0,
    science=40.0,
    science_required=ScienceRequirement.SUM_OF_TWO,
    english_reference_rank=1,
    english_rank_table=(0.0, 100.0, 97.0, 94.0),
):
    return WeightTable(
        university=University.KYUNGHEE,
        year=2024,
        korean=korean,
        math=math,
        english=english,
        science=science,
        science_required=science_required,
        english_reference_rank=english_reference_rank,
        english_rank_table=tuple(english_rank_table),
    )


@pytest.fixture
def weight():
    return make_weight()


@pytest.fixture
def weight_factory():
    return make_weight
