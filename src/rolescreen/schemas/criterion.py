"""Typed criterion records and their per-type configuration schemas."""

from __future__ import annotations

from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

MatchMode = Literal["ANY", "ALL"]
RequiredEducationLevel = Literal["HS", "ASSOCIATE", "BACHELOR", "MASTER", "PHD"]

MAX_KEYWORDS = 50
MAX_CRITERIA_PER_ROLE = 15


class CriterionType(str, Enum):
    KEYWORD_SKILL = "KEYWORD_SKILL"
    CUSTOM_KEYWORDS = "CUSTOM_KEYWORDS"
    EXPERIENCE_YEARS = "EXPERIENCE_YEARS"
    EDUCATION_LEVEL = "EDUCATION_LEVEL"


class EducationLevel(str, Enum):
    """Education levels in ascending order; UNKNOWN when nothing was detected."""

    UNKNOWN = "UNKNOWN"
    HS = "HS"
    ASSOCIATE = "ASSOCIATE"
    BACHELOR = "BACHELOR"
    MASTER = "MASTER"
    PHD = "PHD"


EDUCATION_LEVEL_VALUES: dict[str, float] = {
    EducationLevel.UNKNOWN.value: 0.0,
    EducationLevel.HS.value: 0.25,
    EducationLevel.ASSOCIATE.value: 0.45,
    EducationLevel.BACHELOR.value: 0.65,
    EducationLevel.MASTER.value: 0.85,
    EducationLevel.PHD.value: 1.0,
}


_CONFIG_MODEL_CONFIG = ConfigDict(
    extra="forbid",
    strict=True,
    frozen=True,
    populate_by_name=True,
)


def _check_keywords(values: list[str]) -> list[str]:
    for index, keyword in enumerate(values):
        if not keyword.strip():
            raise ValueError(f"keyword at position {index} is blank")
    return values


class KeywordSkillConfig(BaseModel):
    """Skill keywords a résumé is expected to mention."""

    required_keywords: list[str] = Field(
        alias="requiredKeywords", min_length=1, max_length=MAX_KEYWORDS
    )
    match_mode: MatchMode = Field(default="ANY", alias="matchMode")

    model_config = _CONFIG_MODEL_CONFIG

    @field_validator("required_keywords")
    @classmethod
    def _non_blank(cls, value: list[str]) -> list[str]:
        return _check_keywords(value)

    @property
    def terms(self) -> list[str]:
        return list(self.required_keywords)


class CustomKeywordsConfig(BaseModel):
    """Free-form keyword list defined by the role owner."""

    keywords: list[str] = Field(min_length=1, max_length=MAX_KEYWORDS)
    match_mode: MatchMode = Field(default="ANY", alias="matchMode")

    model_config = _CONFIG_MODEL_CONFIG

    @field_validator("keywords")
    @classmethod
    def _non_blank(cls, value: list[str]) -> list[str]:
        return _check_keywords(value)

    @property
    def terms(self) -> list[str]:
        return list(self.keywords)


class ExperienceYearsConfig(BaseModel):
    """Minimum years of experience; target titles are informational only."""

    required_years: float = Field(alias="requiredYears", ge=0, le=50)
    target_titles: list[str] = Field(default_factory=list, alias="targetTitles")

    model_config = _CONFIG_MODEL_CONFIG


class EducationLevelConfig(BaseModel):
    minimum_level: RequiredEducationLevel = Field(alias="minimumLevel")

    model_config = _CONFIG_MODEL_CONFIG


CriterionConfig = Union[
    KeywordSkillConfig,
    CustomKeywordsConfig,
    ExperienceYearsConfig,
    EducationLevelConfig,
]

CONFIG_SCHEMAS: dict[CriterionType, type[BaseModel]] = {
    CriterionType.KEYWORD_SKILL: KeywordSkillConfig,
    CriterionType.CUSTOM_KEYWORDS: CustomKeywordsConfig,
    CriterionType.EXPERIENCE_YEARS: ExperienceYearsConfig,
    CriterionType.EDUCATION_LEVEL: EducationLevelConfig,
}


class Criterion(BaseModel):
    """Weighted, typed rule a résumé is scored against."""

    id: str = Field(min_length=1)
    name: str = Field(default="", max_length=80)
    description: str | None = Field(default=None, max_length=500)
    weight: int = Field(ge=0, le=100, strict=True)
    type: CriterionType
    config: CriterionConfig

    model_config = ConfigDict(extra="forbid", frozen=True)

    @model_validator(mode="after")
    def _config_matches_type(self) -> "Criterion":
        expected = CONFIG_SCHEMAS[self.type]
        if not isinstance(self.config, expected):
            raise ValueError(
                f"config of type {type(self.config).__name__} does not match criterion type {self.type.value}"
            )
        return self

    @property
    def display_name(self) -> str:
        return self.name or self.id


class Role(BaseModel):
    """A role and the criteria its résumés are screened against."""

    role_id: str = Field(min_length=1)
    title: str = ""
    criteria: list[Criterion] = Field(default_factory=list, max_length=MAX_CRITERIA_PER_ROLE)

    model_config = ConfigDict(extra="forbid")

    @field_validator("criteria")
    @classmethod
    def _unique_ids(cls, value: list[Criterion]) -> list[Criterion]:
        seen: set[str] = set()
        for criterion in value:
            if criterion.id in seen:
                raise ValueError(f"duplicate criterion id {criterion.id!r}")
            seen.add(criterion.id)
        return value

    @property
    def weight_sum(self) -> int:
        return sum(criterion.weight for criterion in self.criteria)
