import pytest

from uniscore.services.scoring import MissingSubject, ScoreEntry, ScoreRecord, Subject


def test_record_then_get_returns_same_triple(record):
    assert record.get(Subject.KOREAN) == ScoreEntry(130, 95, 2)
    assert record.get(Subject.MATH) == ScoreEntry(125, 90, 2)
    assert record.get(Subject.ENGLISH) == ScoreEntry(0, 0, 2)
    assert record.get(Subject.CHEMISTRY) == ScoreEntry(68, 96, 1)
    assert record.get(Subject.EARTH_SCIENCE) == ScoreEntry(65, 91, 2)


def test_english_keeps_standard_score_in_memory():
    r = ScoreRecord("kim")
    r.record(Subject.ENGLISH, 131.5, 97.2, 1)
    assert r.english() == ScoreEntry(131.5, 97.2, 1)


def test_last_write_wins(record):
    record.record(Subject.KOREAN, 140, 99, 1)
    assert record.korean() == ScoreEntry(140, 99, 1)
    assert record.standard_score(Subject.KOREAN) == 140
    assert record.percentile(Subject.KOREAN) == 99
    assert record.rank(Subject.KOREAN) == 1


def test_name_is_fixed():
    assert ScoreRecord("이순신").name == "이순신"


def test_missing_subject_names_subject_and_student():
    r = ScoreRecord("kim")
    r.record(Subject.KOREAN, 120, 80, 3)
    with pytest.raises(MissingSubject) as exc_info:
        r.get(Subject.MATH)
    assert exc_info.value.subject is Subject.MATH
    assert exc_info.value.student_name == "kim"
    assert "Math" in str(exc_info.value)


def test_missing_subject_is_a_key_error():
    with pytest.raises(KeyError):
        ScoreRecord("kim").chemistry()


def test_require_complete_reports_first_missing():
    r = ScoreRecord("kim")
    r.record(Subject.KOREAN, 120, 80, 3)
    r.record(Subject.MATH, 120, 80, 3)
    assert not r.is_complete()
    with pytest.raises(MissingSubject) as exc_info:
        r.require_complete()
    assert exc_info.value.subject is Subject.ENGLISH


def test_subjects_in_declaration_order():
    r = ScoreRecord("kim")
    r.record(Subject.EARTH_SCIENCE, 60, 70, 4)
    r.record(Subject.KOREAN, 120, 80, 3)
    assert r.subjects() == [Subject.KOREAN, Subject.EARTH_SCIENCE]


def test_from_dict_uses_persistence_keys(record):
    rebuilt = ScoreRecord.from_dict("홍길동", record.to_dict())
    assert rebuilt == record
    assert rebuilt.is_complete()


def test_from_dict_rejects_unknown_subject():
    with pytest.raises(ValueError):
        ScoreRecord.from_dict("kim", {"Physics": {"standard_score": 60, "percentile": 80, "rank": 3}})


def test_contains_accepts_member_or_key(record):
    assert Subject.KOREAN in record
    assert "EarthScience" in record
    assert "Physics" not in record
