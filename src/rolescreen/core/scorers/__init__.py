"""Criterion scorer implementations, one per criterion family."""

from .education import EducationLevelScorer
from .experience import ExperienceScorerConfig, ExperienceYearsScorer
from .keyword import KeywordCoverageScorer, KeywordScorerConfig

__all__ = [
    "EducationLevelScorer",
    "ExperienceScorerConfig",
    "ExperienceYearsScorer",
    "KeywordCoverageScorer",
    "KeywordScorerConfig",
]
