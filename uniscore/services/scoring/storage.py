"""
성적 레코드 저장/로드 (Parquet)
- <RECORD_DIR>/<학생 이름>/record.parquet
- 컬럼: Korean, Math, English, Chemistry, EarthScience
- 행: 표준점수, 백분위, 등급
- 영어는 등급만 환산에 쓰이므로 항상 (0, 0, 등급)으로 저장
"""
import os
from typing import Optional

import pandas as pd

from uniscore.config import settings
from uniscore.config.constants import RECORD_FILENAME, RECORD_ROWS
from uniscore.config.logging_config import setup_logger

from .exceptions import MissingSubject, PersistenceIOError
from .score_record import ScoreRecord
from .subjects import Subject

logger = setup_logger("storage")


def record_path(student_name: str, root: Optional[str] = None) -> str:
    """
    학생별 레코드 파일 경로
    이름은 RECORD_DIR 바로 아래 디렉터리 1개여야 함
    """
    if (
        not student_name.strip()
        or student_name in (".", "..")
        or "/" in student_name
        or "\\" in student_name
    ):
        raise PersistenceIOError(f"저장할 수 없는 학생 이름: {student_name!r}")
    return os.path.join(root or settings.RECORD_DIR, student_name, RECORD_FILENAME)


def record_to_dataframe(record: ScoreRecord) -> pd.DataFrame:
    """성적표 → DataFrame (5과목 모두 필요)"""
    columns = {}
    for subject in Subject:
        entry = record.get(subject)
        if subject is Subject.ENGLISH:
            columns[subject.value] = [0.0, 0.0, float(entry.rank)]
        else:
            columns[subject.value] = [
                float(entry.standard_score),
                float(entry.percentile),
                float(entry.rank),
            ]
    return pd.DataFrame(columns, index=list(RECORD_ROWS))


def record_from_dataframe(student_name: str, df: pd.DataFrame) -> ScoreRecord:
    record = ScoreRecord(student_name)
    for subject in Subject:
        if subject.value not in df.columns:
            raise MissingSubject(subject, student_name)
        try:
            standard_score, percentile, rank = (float(v) for v in df[subject.value].tolist()[:3])
            rank = int(rank)
        except (TypeError, ValueError, OverflowError) as e:
            raise PersistenceIOError(
                f"'{student_name}' 학생 레코드의 {subject.value} 컬럼 형식 오류 ({e})"
            ) from e
        if subject is Subject.ENGLISH:
            record.record(subject, 0.0, 0.0, rank)
        else:
            record.record(subject, standard_score, percentile, rank)
    return record


def save_record(record: ScoreRecord, root: Optional[str] = None) -> str:
    """
    성적표를 Parquet 으로 저장하고 파일 경로 반환

    Raises:
        MissingSubject: 5과목 중 누락이 있는 경우
        PersistenceIOError: 디렉터리 생성/파일 쓰기 실패, 학생 이름이 경로로 쓸 수 없음
    """
    df = record_to_dataframe(record)
    path = record_path(record.name, root)
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        df.to_parquet(path)
    except OSError as e:
        logger.error(f"성적 저장 실패 ({path}): {e}")
        raise PersistenceIOError(f"성적 저장 실패: {path} ({e})") from e
    logger.info(f"성적 저장 완료: {path}")
    return path


def load_record(student_name: str, root: Optional[str] = None) -> ScoreRecord:
    """
    저장된 성적표 로드 (영어는 등급만 복원)

    Raises:
        PersistenceIOError: 파일이 없거나 손상됨, 학생 이름이 경로로 쓸 수 없음
        MissingSubject: 파일에 과목 컬럼이 없는 경우
    """
    path = record_path(student_name, root)
    try:
        df = pd.read_parquet(path)
    except (OSError, ValueError) as e:
        # 손상된 파일은 pyarrow 가 ArrowInvalid(ValueError) 로 올림
        logger.error(f"성적 로드 실패 ({path}): {e}")
        raise PersistenceIOError(f"성적 로드 실패: {path} ({e})") from e
    logger.info(f"성적 로드 완료: {path}")
    return record_from_dataframe(student_name, df)
