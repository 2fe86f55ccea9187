"""Helpers shared by criterion scorers."""

from __future__ import annotations

from typing import Iterable

from ...schemas import Criterion, CriterionScoreResult


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return min(max(value, low), high)


def build_result(criterion: Criterion, score: float, evidence: Iterable[str]) -> CriterionScoreResult:
    return CriterionScoreResult(
        criterion_id=criterion.id,
        criterion_name=criterion.display_name,
        criterion_type=criterion.type,
        score=clamp(score),
        weight=criterion.weight,
        evidence=list(evidence),
    )
