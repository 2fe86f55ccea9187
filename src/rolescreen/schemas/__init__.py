"""Pydantic schema definitions shared by the engine and its callers."""

from __future__ import annotations

from .breakdown import CriterionScoreResult, ScoreBreakdown
from .criterion import (
    CONFIG_SCHEMAS,
    EDUCATION_LEVEL_VALUES,
    MAX_CRITERIA_PER_ROLE,
    Criterion,
    CriterionConfig,
    CriterionType,
    CustomKeywordsConfig,
    EducationLevel,
    EducationLevelConfig,
    ExperienceYearsConfig,
    KeywordSkillConfig,
    Role,
)
from .resume import ResumeDocument
from .signal import Confidence, Signal, SignalType

__all__ = [
    "CONFIG_SCHEMAS",
    "EDUCATION_LEVEL_VALUES",
    "MAX_CRITERIA_PER_ROLE",
    "Confidence",
    "Criterion",
    "CriterionConfig",
    "CriterionScoreResult",
    "CriterionType",
    "CustomKeywordsConfig",
    "EducationLevel",
    "EducationLevelConfig",
    "ExperienceYearsConfig",
    "KeywordSkillConfig",
    "ResumeDocument",
    "Role",
    "ScoreBreakdown",
    "Signal",
    "SignalType",
]
