"""Natural-language comparison of two scored résumés."""

from __future__ import annotations

from dataclasses import dataclass

from ..schemas import ScoreBreakdown
from .errors import BreakdownMismatchError

EQUAL_SCORES = "Both resumes scored equally."
MINIMAL_DIFFERENCES = "minimal differences across criteria."


@dataclass
class ExplainerConfig:
    """Configuration for comparison explanations."""

    top_n: int = 2
    significance_threshold: float = 0.001


@dataclass(frozen=True, slots=True)
class CriterionDelta:
    name: str
    left_score: float
    right_score: float
    delta: float
    weight: int

    def render(self) -> str:
        return (
            f"{self.name} (A: {self.left_score:.2f}, B: {self.right_score:.2f}, "
            f"delta: {self.delta:.2f})"
        )


class ComparisonExplainer:
    """Explain why one breakdown outscored another over the same criteria."""

    def __init__(self, *, config: ExplainerConfig | None = None) -> None:
        self._config = config or ExplainerConfig()

    def deltas(self, left: ScoreBreakdown, right: ScoreBreakdown) -> list[CriterionDelta]:
        """Per-criterion ``left - right`` deltas, largest magnitude first."""
        if len(left.criterion_scores) != len(right.criterion_scores):
            raise BreakdownMismatchError(
                "Breakdowns cover a different number of criteria: "
                f"{len(left.criterion_scores)} vs {len(right.criterion_scores)}"
            )

        deltas: list[CriterionDelta] = []
        for position, (lhs, rhs) in enumerate(zip(left.criterion_scores, right.criterion_scores)):
            if lhs.criterion_id != rhs.criterion_id:
                raise BreakdownMismatchError(
                    f"Criterion mismatch at position {position}: "
                    f"{lhs.criterion_id!r} vs {rhs.criterion_id!r}"
                )
            deltas.append(
                CriterionDelta(
                    name=lhs.criterion_name or lhs.criterion_id,
                    left_score=lhs.score,
                    right_score=rhs.score,
                    delta=lhs.score - rhs.score,
                    weight=lhs.weight,
                )
            )

        return sorted(deltas, key=lambda item: abs(item.delta), reverse=True)

    def explain(self, left: ScoreBreakdown, right: ScoreBreakdown) -> str:
        deltas = self.deltas(left, right)

        if left.total_score > right.total_score:
            lead = "Resume A scored higher due to: "
        elif right.total_score > left.total_score:
            lead = "Resume B scored higher due to: "
        else:
            return EQUAL_SCORES

        reasons = [
            item.render()
            for item in deltas[: self._config.top_n]
            if abs(item.delta) > self._config.significance_threshold
        ]
        if not reasons:
            return lead + MINIMAL_DIFFERENCES
        return lead + "; ".join(reasons)
