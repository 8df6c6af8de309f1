import json

import pytest

from uniscore.services.scoring import (
    InvalidWeightTable,
    ScienceRequirement,
    UnknownUniversity,
    University,
    UnsupportedCombination,
    WeightTableRegistry,
    get_registry,
    resolve,
)

SUPPORTED = {
    2022: ["KYUNGHEE", "DONGGUK", "SEOULSCITECH", "KWANGWOON", "INHA", "ERICA",
           "SEJONG", "KOOKMIN", "AJU", "SOONGSIL", "CATHOLIC"],
    2023: ["KYUNGHEE", "DONGGUK", "SEOULSCITECH", "KWANGWOON", "INHA", "ERICA",
           "SEJONG", "KOOKMIN", "AJU", "SOONGSIL", "CATHOLIC"],
    2024: ["SOGANG", "CHUNGANG", "KYUNGHEE", "SEOUL", "DONGGUK", "SEOULSCITECH",
           "KWANGWOON", "INHA", "ERICA", "SEJONG", "KOOKMIN", "AJU", "SOONGSIL",
           "KONKUK", "CATHOLIC"],
    2025: ["SOGANG", "CHUNGANG", "KYUNGHEE", "SEOUL", "KONKUK", "DONGGUK"],
}


def _valid_entry(**overrides):
    entry = {
        "korean": 25, "math": 40, "english": 10, "science": 25,
        "science_required": 2, "english_reference_rank": 1,
        "english_table": [0, 100, 95, 90],
    }
    entry.update(overrides)
    return entry


def test_catalog_has_every_declared_pair():
    registry = get_registry()
    expected = {(University(code), year) for year, codes in SUPPORTED.items() for code in codes}
    assert set(registry.supported_pairs()) == expected
    assert len(registry) == 43


@pytest.mark.parametrize("university", list(University))
@pytest.mark.parametrize("year", [2021, 2022, 2023, 2024, 2025, 2026])
def test_resolve_is_total_over_declared_domain(university, year):
    if university.value in SUPPORTED.get(year, []):
        table = resolve(university, year)
        assert table.university is university
        assert table.year == year
        assert isinstance(table.science_required, ScienceRequirement)
        assert 1 <= table.english_reference_rank < len(table.english_rank_table)
        assert table.korean + table.math + table.science > 0
    else:
        with pytest.raises(UnsupportedCombination) as exc_info:
            resolve(university, year)
        assert exc_info.value.university is university
        assert exc_info.value.year == year


def test_resolve_is_deterministic():
    assert resolve(University.SOGANG, 2025) == resolve(University.SOGANG, 2025)


def test_try_resolve_returns_none_for_unsupported_pair():
    assert get_registry().try_resolve(University.SOGANG, 2022) is None
    assert get_registry().try_resolve(University.SOGANG, 2024) is not None


def test_supported_years_and_universities():
    registry = get_registry()
    assert registry.supported_years(University.KONKUK) == [2024, 2025]
    assert registry.supported_years(University.KYUNGHEE) == [2022, 2023, 2024, 2025]
    assert registry.supported_universities(2026) == []
    assert University.SOGANG in registry.supported_universities(2025)
    assert (University.INHA, 2023) in registry


def test_university_lookup_by_code_or_display_name():
    assert University.from_label("kyunghee") is University.KYUNGHEE
    assert University.from_label("서강대") is University.SOGANG
    assert University.ERICA.display_name == "한양대(ERICA)"
    with pytest.raises(UnknownUniversity):
        University.from_label("하버드")


def test_from_catalog_rejects_bad_science_requirement():
    with pytest.raises(InvalidWeightTable, match="science_required"):
        WeightTableRegistry.from_catalog({"AJU": {"2030": _valid_entry(science_required=3)}})


def test_from_catalog_rejects_reference_rank_outside_table():
    with pytest.raises(InvalidWeightTable):
        WeightTableRegistry.from_catalog({"AJU": {"2030": _valid_entry(english_reference_rank=4)}})


def test_from_catalog_rejects_negative_weight():
    with pytest.raises(InvalidWeightTable, match="음수"):
        WeightTableRegistry.from_catalog({"AJU": {"2030": _valid_entry(science=-25)}})


def test_from_catalog_rejects_missing_field():
    entry = _valid_entry()
    del entry["math"]
    with pytest.raises(InvalidWeightTable, match="math"):
        WeightTableRegistry.from_catalog({"AJU": {"2030": entry}})


def test_from_catalog_rejects_unknown_university():
    with pytest.raises(InvalidWeightTable):
        WeightTableRegistry.from_catalog({"HARVARD": {"2030": _valid_entry()}})


def test_from_json_loads_custom_catalog(tmp_path):
    path = tmp_path / "weights.json"
    path.write_text(json.dumps({"AJU": {"2030": _valid_entry()}}), encoding="utf-8")
    registry = WeightTableRegistry.from_json(str(path))
    table = registry.resolve(University.AJU, 2030)
    assert table.english_rank_table == (0.0, 100.0, 95.0, 90.0)
    assert table.science_required is ScienceRequirement.SUM_OF_TWO
    with pytest.raises(UnsupportedCombination):
        registry.resolve(University.AJU, 2024)
