"""
학생 1명의 과목별 성적표
- 과목당 (표준점수, 백분위, 등급) 1개
- 같은 과목을 다시 기록하면 덮어씀
- 기록되지 않은 과목 조회는 MissingSubject
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

from .exceptions import MissingSubject
from .subjects import Subject


@dataclass(frozen=True)
class ScoreEntry:
    """과목 1개의 성적"""
    standard_score: float
    percentile: float
    rank: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "standard_score": self.standard_score,
            "percentile": self.percentile,
            "rank": self.rank,
        }


class ScoreRecord:
    """학생별 성적표"""

    def __init__(self, student_name: str):
        self._name = student_name
        self._scores: Dict[Subject, ScoreEntry] = {}

    @property
    def name(self) -> str:
        return self._name

    def record(self, subject: Subject, standard_score: float, percentile: float, rank: int) -> None:
        self._scores[Subject(subject)] = ScoreEntry(
            standard_score=standard_score,
            percentile=percentile,
            rank=rank,
        )

    def get(self, subject: Subject) -> ScoreEntry:
        try:
            return self._scores[Subject(subject)]
        except KeyError:
            raise MissingSubject(subject, self._name) from None

    def standard_score(self, subject: Subject) -> float:
        return self.get(subject).standard_score

    def percentile(self, subject: Subject) -> float:
        return self.get(subject).percentile

    def rank(self, subject: Subject) -> int:
        return self.get(subject).rank

    def korean(self) -> ScoreEntry:
        return self.get(Subject.KOREAN)

    def math(self) -> ScoreEntry:
        return self.get(Subject.MATH)

    def english(self) -> ScoreEntry:
        return self.get(Subject.ENGLISH)

    def chemistry(self) -> ScoreEntry:
        return self.get(Subject.CHEMISTRY)

    def earth_science(self) -> ScoreEntry:
        return self.get(Subject.EARTH_SCIENCE)

    def subjects(self) -> List[Subject]:
        """기록된 과목 (Subject 선언 순서)"""
        return [s for s in Subject if s in self._scores]

    def is_complete(self) -> bool:
        return all(s in self._scores for s in Subject)

    def require_complete(self) -> None:
        """5과목이 모두 있는지 확인, 없으면 첫 누락 과목으로 MissingSubject"""
        for subject in Subject:
            if subject not in self._scores:
                raise MissingSubject(subject, self._name)

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {s.value: self._scores[s].to_dict() for s in self.subjects()}

    @classmethod
    def from_dict(cls, student_name: str, scores: Mapping[str, Mapping[str, Any]]) -> "ScoreRecord":
        """
        {"Korean": {"standard_score": 130, "percentile": 95, "rank": 2}, ...} 형태에서 생성
        값이 비어 있으면 0으로 기록
        """
        record = cls(student_name)
        for key, entry in scores.items():
            record.record(
                Subject(key),
                float(entry.get("standard_score") or 0),
                float(entry.get("percentile") or 0),
                int(entry.get("rank") or 0),
            )
        return record

    def __contains__(self, subject) -> bool:
        try:
            return Subject(subject) in self._scores
        except ValueError:
            return False

    def __eq__(self, other) -> bool:
        if not isinstance(other, ScoreRecord):
            return NotImplemented
        return self._name == other._name and self._scores == other._scores

    def __repr__(self) -> str:
        return f"ScoreRecord(name={self._name!r}, subjects={[s.value for s in self.subjects()]})"
