"""Education level scoring with partial credit below the bar."""

from __future__ import annotations

from ...schemas import (
    EDUCATION_LEVEL_VALUES,
    Criterion,
    CriterionScoreResult,
    CriterionType,
    EducationLevel,
    SignalType,
)
from ...schemas.criterion import EducationLevelConfig
from ..context import ScoringContext
from ..signals import NO_EDUCATION
from .base import build_result


class EducationLevelScorer:
    """Map required and detected levels onto the ordinal scale and compare."""

    criterion_types = (CriterionType.EDUCATION_LEVEL,)

    def score(self, criterion: Criterion, context: ScoringContext) -> CriterionScoreResult:
        config = criterion.config
        if not isinstance(config, EducationLevelConfig):
            raise TypeError(f"{type(self).__name__} cannot score {criterion.type.value}")

        required_value = EDUCATION_LEVEL_VALUES[config.minimum_level]
        signal = context.signal(SignalType.EDUCATION_LEVEL_ESTIMATE)
        candidate_level = signal.value if signal is not None else EducationLevel.UNKNOWN.value
        candidate_value = EDUCATION_LEVEL_VALUES.get(candidate_level, 0.0)

        if candidate_value >= required_value:
            score = 1.0
        else:
            score = candidate_value / required_value

        evidence: list[str] = []
        if signal is not None and signal.evidence_snippet:
            evidence.append(signal.evidence_snippet)
        else:
            evidence.append(NO_EDUCATION)
        return build_result(criterion, score, evidence)
