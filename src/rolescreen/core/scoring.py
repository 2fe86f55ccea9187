"""Dispatch of criteria to their type-specific scorers."""

from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from ..schemas import Criterion, CriterionScoreResult, CriterionType, ResumeDocument
from .context import ScoringContext
from .errors import UnknownCriterionTypeError
from .scorers import EducationLevelScorer, ExperienceYearsScorer, KeywordCoverageScorer


@runtime_checkable
class Scorer(Protocol):
    """Scorer contract for one or more criterion types."""

    criterion_types: tuple[CriterionType, ...]

    def score(self, criterion: Criterion, context: ScoringContext) -> CriterionScoreResult:
        """Return a score in ``[0, 1]`` with evidence for ``criterion``."""


def default_scorers() -> list[Scorer]:
    return [KeywordCoverageScorer(), ExperienceYearsScorer(), EducationLevelScorer()]


class CriterionScorer:
    """Route each criterion to the scorer registered for its type."""

    def __init__(self, scorers: Iterable[Scorer] | None = None) -> None:
        self._registry: dict[CriterionType, Scorer] = {}
        for scorer in scorers if scorers is not None else default_scorers():
            for criterion_type in scorer.criterion_types:
                self._registry[criterion_type] = scorer

    @property
    def supported_types(self) -> list[CriterionType]:
        return [t for t in CriterionType if t in self._registry]

    def score(
        self,
        criterion: Criterion,
        resume: ResumeDocument | ScoringContext,
    ) -> CriterionScoreResult:
        """Score one criterion; unknown types fail loudly instead of being skipped."""
        context = resume if isinstance(resume, ScoringContext) else ScoringContext(resume)
        scorer = self._registry.get(criterion.type)
        if scorer is None:
            raise UnknownCriterionTypeError(criterion.type)
        return scorer.score(criterion, context)

    def score_all(
        self,
        criteria: Iterable[Criterion],
        resume: ResumeDocument | ScoringContext,
    ) -> list[CriterionScoreResult]:
        context = resume if isinstance(resume, ScoringContext) else ScoringContext(resume)
        return [self.score(criterion, context) for criterion in criteria]
