from __future__ import annotations

import pytest

from rolescreen.core import (
    CriterionConfigError,
    UnknownCriterionTypeError,
    WeightSumError,
    build_criterion,
    build_role,
    check_weight_sum,
    validate_criterion_config,
)
from rolescreen.schemas import (
    CustomKeywordsConfig,
    EducationLevelConfig,
    ExperienceYearsConfig,
    KeywordSkillConfig,
)


def build_payload(**overrides) -> dict:
    payload = {
        "id": "skills",
        "name": "Core skills",
        "weight": 50,
        "type": "KEYWORD_SKILL",
        "config": {"requiredKeywords": ["Java", "Spring"], "matchMode": "ANY"},
    }
    payload.update(overrides)
    return payload


def test_keyword_skill_config_accepts_camel_and_snake_case():
    camel = validate_criterion_config("KEYWORD_SKILL", {"requiredKeywords": ["Go"]})
    snake = validate_criterion_config("KEYWORD_SKILL", {"required_keywords": ["Go"], "match_mode": "ALL"})

    assert isinstance(camel, KeywordSkillConfig)
    assert camel.match_mode == "ANY"
    assert snake.terms == ["Go"]
    assert snake.match_mode == "ALL"


@pytest.mark.parametrize(
    "payload",
    [
        {"requiredKeywords": []},
        {"requiredKeywords": [f"kw{i}" for i in range(51)]},
        {"requiredKeywords": ["Java", "   "]},
        {"requiredKeywords": ["Java", 5]},
        {"requiredKeywords": "Java"},
        {"requiredKeywords": ["Java"], "matchMode": "SOME"},
        {"requiredKeywords": ["Java"], "threshold": 2},
        {},
    ],
)
def test_keyword_skill_config_rejects_invalid_payloads(payload):
    with pytest.raises(CriterionConfigError) as excinfo:
        validate_criterion_config("KEYWORD_SKILL", payload)

    assert excinfo.value.errors
    assert "KEYWORD_SKILL" in str(excinfo.value)


def test_custom_keywords_config_is_validated():
    config = validate_criterion_config("CUSTOM_KEYWORDS", {"keywords": ["ISO 27001"]})

    assert isinstance(config, CustomKeywordsConfig)
    with pytest.raises(CriterionConfigError):
        validate_criterion_config("CUSTOM_KEYWORDS", {"requiredKeywords": ["ISO 27001"]})


@pytest.mark.parametrize("years", [0, 2.5, 50])
def test_experience_config_accepts_numbers_in_range(years):
    config = validate_criterion_config("EXPERIENCE_YEARS", {"requiredYears": years})

    assert isinstance(config, ExperienceYearsConfig)
    assert config.required_years == years
    assert config.target_titles == []


@pytest.mark.parametrize(
    "payload",
    [
        {"requiredYears": -1},
        {"requiredYears": 51},
        {"requiredYears": "5"},
        {"requiredYears": 3, "targetTitles": "Engineer"},
        {"targetTitles": ["Engineer"]},
    ],
)
def test_experience_config_rejects_invalid_payloads(payload):
    with pytest.raises(CriterionConfigError):
        validate_criterion_config("EXPERIENCE_YEARS", payload)


def test_education_config_restricts_levels():
    config = validate_criterion_config("EDUCATION_LEVEL", {"minimumLevel": "BACHELOR"})

    assert isinstance(config, EducationLevelConfig)
    for level in ("DOCTOR", "UNKNOWN", "bachelor"):
        with pytest.raises(CriterionConfigError):
            validate_criterion_config("EDUCATION_LEVEL", {"minimumLevel": level})


def test_config_must_be_an_object():
    with pytest.raises(CriterionConfigError) as excinfo:
        validate_criterion_config("EDUCATION_LEVEL", ["BACHELOR"])

    assert excinfo.value.errors == ["config must be an object"]


def test_unknown_criterion_type_is_rejected():
    with pytest.raises(UnknownCriterionTypeError):
        validate_criterion_config("SALARY_RANGE", {})
    with pytest.raises(UnknownCriterionTypeError):
        build_criterion(build_payload(type="SALARY_RANGE"))


def test_build_criterion_returns_typed_record():
    criterion = build_criterion(build_payload(description="Backend stack"))

    assert criterion.id == "skills"
    assert criterion.display_name == "Core skills"
    assert isinstance(criterion.config, KeywordSkillConfig)
    assert criterion.config.terms == ["Java", "Spring"]


@pytest.mark.parametrize(
    "overrides",
    [
        {"weight": 101},
        {"weight": -1},
        {"weight": "50"},
        {"weight": 12.5},
        {"name": "n" * 81},
        {"description": "d" * 501},
        {"id": ""},
        {"config": {"requiredYears": 3}},
    ],
)
def test_build_criterion_rejects_invalid_records(overrides):
    with pytest.raises(CriterionConfigError):
        build_criterion(build_payload(**overrides))


def test_build_role_enforces_limits_and_unique_ids():
    criteria = [build_payload(id=f"c{i}", weight=5) for i in range(16)]
    with pytest.raises(CriterionConfigError):
        build_role({"role_id": "R-1", "criteria": criteria})

    with pytest.raises(CriterionConfigError) as excinfo:
        build_role({"role_id": "R-1", "criteria": [build_payload(), build_payload()]})
    assert "duplicate" in str(excinfo.value)

    role = build_role({"role_id": "R-1", "title": "Backend", "criteria": criteria[:15]})
    assert len(role.criteria) == 15
    assert role.weight_sum == 75


def test_check_weight_sum():
    role = build_role(
        {
            "role_id": "R-2",
            "criteria": [
                build_payload(id="a", weight=60),
                build_payload(id="b", weight=40),
            ],
        }
    )
    check_weight_sum(role.criteria)

    with pytest.raises(WeightSumError) as excinfo:
        check_weight_sum(role.criteria[:1])
    assert excinfo.value.weight_sum == 60
    assert excinfo.value.expected == 100
