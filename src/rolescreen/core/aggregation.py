"""Weighted aggregation of criterion scores into a breakdown."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence, TypeVar

import structlog

from ..schemas import Criterion, CriterionScoreResult, ResumeDocument, ScoreBreakdown
from .scoring import CriterionScorer
from .validation import check_weight_sum

T = TypeVar("T")


@dataclass
class AggregatorConfig:
    """Policy knobs for evaluation runs."""

    enforce_weight_sum: bool = False


def round_half_up(value: float, digits: int = 1) -> float:
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def summarize(breakdown_pct: float, criteria_count: int) -> str:
    return f"Scored {breakdown_pct}% based on {criteria_count} criteria"


class ScoreAggregator:
    """Run the criterion scorer over a role's criteria and weight the results."""

    def __init__(
        self,
        *,
        scorer: CriterionScorer | None = None,
        config: AggregatorConfig | None = None,
    ) -> None:
        self._scorer = scorer or CriterionScorer()
        self._config = config or AggregatorConfig()
        self._logger = structlog.get_logger(__name__)

    def aggregate(self, results: Sequence[CriterionScoreResult]) -> ScoreBreakdown:
        """Sum ``score * weight / 100`` and clamp the total to ``[0, 1]``."""
        weighted = sum(result.score * (result.weight / 100.0) for result in results)
        total = min(max(weighted, 0.0), 1.0)
        total_pct = round_half_up(total * 100.0, 1)
        return ScoreBreakdown(
            criterion_scores=list(results),
            total_score=total,
            total_score_pct=total_pct,
            summary=summarize(total_pct, len(results)),
        )

    def evaluate(
        self,
        criteria: Sequence[Criterion],
        resume: ResumeDocument,
        *,
        enforce_weight_sum: bool | None = None,
    ) -> ScoreBreakdown:
        """Score ``resume`` against ``criteria``.

        When ``enforce_weight_sum`` is true (or unset and enabled in the
        configuration) the weights must add up to 100 before anything is
        scored. No criteria yields a zero total rather than an error.
        """
        enforce = self._config.enforce_weight_sum if enforce_weight_sum is None else enforce_weight_sum
        if enforce and criteria:
            check_weight_sum(criteria)

        results = self._scorer.score_all(criteria, resume)
        breakdown = self.aggregate(results)

        self._logger.info(
            "evaluation.completed",
            resume_id=resume.resume_id,
            criteria_count=len(results),
            total_score=breakdown.total_score,
            total_score_pct=breakdown.total_score_pct,
        )
        return breakdown


def rank_breakdowns(entries: Iterable[tuple[T, ScoreBreakdown]]) -> list[tuple[T, ScoreBreakdown]]:
    """Order by ``total_score`` descending; ties keep their input order."""
    return sorted(entries, key=lambda item: item[1].total_score, reverse=True)
