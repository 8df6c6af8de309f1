"""
점수 계산 시스템 예외 정의
"""


class ScoreError(Exception):
    """점수 계산 관련 모든 예외의 기본 클래스"""


class MissingSubject(ScoreError, KeyError):
    """기록되지 않은 과목 조회"""

    def __init__(self, subject, student_name: str = ""):
        self.subject = subject
        self.student_name = student_name
        label = getattr(subject, "value", subject)
        if hasattr(subject, "label"):
            label = f"{subject.label}({label})"
        if student_name:
            message = f"'{student_name}' 학생의 {label} 성적이 없습니다"
        else:
            message = f"{label} 성적이 없습니다"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError는 메시지를 repr로 감싸므로 원문 그대로 반환
        return self.args[0]


class UnsupportedCombination(ScoreError, LookupError):
    """(대학, 연도) 조합에 대한 가중치 표가 없음"""

    def __init__(self, university, year: int):
        self.university = university
        self.year = year
        name = getattr(university, "display_name", university)
        super().__init__(f"{name} {year}학년도 가중치 표가 없습니다")


class UnknownUniversity(ScoreError, LookupError):
    """지원하지 않는 대학 코드/이름"""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"알 수 없는 대학: {label}")


class RankOutOfRange(ScoreError, IndexError):
    """영어 등급표 범위를 벗어난 등급"""

    def __init__(self, rank: int, table_length: int):
        self.rank = rank
        self.table_length = table_length
        super().__init__(
            f"영어 등급 {rank}은(는) 등급표 범위(1~{table_length - 1})를 벗어났습니다"
        )


class InvalidWeightTable(ScoreError, ValueError):
    """계산할 수 없는 가중치 표"""


class PersistenceIOError(ScoreError, OSError):
    """성적 레코드 저장/로드 실패"""
