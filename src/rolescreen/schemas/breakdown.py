"""Scoring results for one (role, résumé) pair."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .criterion import CriterionType


class CriterionScoreResult(BaseModel):
    """Score of a single criterion with the evidence behind it."""

    criterion_id: str
    criterion_name: str = ""
    criterion_type: CriterionType
    score: float = Field(ge=0.0, le=1.0)
    weight: int
    evidence: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def weighted_score(self) -> float:
        return self.score * (self.weight / 100.0)


class ScoreBreakdown(BaseModel):
    """Per-criterion and aggregate result of one evaluation."""

    criterion_scores: list[CriterionScoreResult] = Field(default_factory=list)
    total_score: float = Field(default=0.0, ge=0.0, le=1.0)
    total_score_pct: float = Field(default=0.0, ge=0.0, le=100.0)
    summary: str = ""

    model_config = ConfigDict(extra="forbid", frozen=True)
