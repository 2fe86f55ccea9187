"""Years-of-experience scoring from extracted signals."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ...schemas import Criterion, CriterionScoreResult, CriterionType, SignalType
from ...schemas.criterion import ExperienceYearsConfig
from ..context import ScoringContext
from ..signals import NO_DATE_RANGES
from .base import build_result

NO_EXPERIENCE_REQUIRED = "No minimum experience required"


@dataclass
class ExperienceScorerConfig:
    """Configuration for experience scoring."""

    max_evidence: int = 3


class ExperienceYearsScorer:
    """Compare estimated years of experience with the required minimum."""

    criterion_types = (CriterionType.EXPERIENCE_YEARS,)

    def __init__(self, *, config: ExperienceScorerConfig | None = None) -> None:
        self._config = config or ExperienceScorerConfig()

    def score(self, criterion: Criterion, context: ScoringContext) -> CriterionScoreResult:
        config = criterion.config
        if not isinstance(config, ExperienceYearsConfig):
            raise TypeError(f"{type(self).__name__} cannot score {criterion.type.value}")

        required = float(config.required_years)
        if required == 0:
            return build_result(criterion, 1.0, [NO_EXPERIENCE_REQUIRED])

        candidate_years = self.candidate_years(context)
        score = min(candidate_years / required, 1.0)

        evidence = [
            signal.evidence_snippet
            for signal in context.signals_of(SignalType.DATE_RANGE)[: self._config.max_evidence]
            if signal.evidence_snippet
        ]
        if not evidence:
            evidence.append(NO_DATE_RANGES)
        return build_result(criterion, score, evidence)

    @staticmethod
    def candidate_years(context: ScoringContext) -> float:
        """Years from the experience estimate signal; 0 when absent or unreadable."""
        signal = context.signal(SignalType.EXPERIENCE_YEARS_ESTIMATE)
        if signal is None:
            return 0.0
        try:
            years = float(signal.value)
        except ValueError:
            return 0.0
        if not math.isfinite(years) or years < 0:
            return 0.0
        return years
