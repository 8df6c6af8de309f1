"""
수능 반영 과목 정의
"""
from enum import Enum


class Subject(str, Enum):
    """반영 과목 (값 = 저장 시 컬럼 키)"""

    KOREAN = "Korean"
    MATH = "Math"
    ENGLISH = "English"
    CHEMISTRY = "Chemistry"
    EARTH_SCIENCE = "EarthScience"

    @property
    def label(self) -> str:
        return SUBJECT_LABELS[self]


SUBJECT_LABELS = {
    Subject.KOREAN: "국어",
    Subject.MATH: "수학",
    Subject.ENGLISH: "영어",
    Subject.CHEMISTRY: "화학",
    Subject.EARTH_SCIENCE: "지구과학",
}
