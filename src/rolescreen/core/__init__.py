"""Core screening engine components."""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .aggregation import AggregatorConfig, ScoreAggregator, rank_breakdowns
from .context import ScoringContext
from .errors import (
    BreakdownMismatchError,
    CriterionConfigError,
    UnknownCriterionTypeError,
    WeightSumError,
)
from .explanation import ComparisonExplainer, ExplainerConfig
from .scoring import CriterionScorer, Scorer
from .signals import ExtractorConfig, SignalExtractor
from .text import normalize
from .validation import build_criterion, build_role, check_weight_sum, validate_criterion_config


__all__ = [
    "AggregatorConfig",
    "BreakdownMismatchError",
    "ComparisonExplainer",
    "CriterionConfigError",
    "CriterionScorer",
    "ExplainerConfig",
    "ExtractorConfig",
    "ScoreAggregator",
    "Scorer",
    "ScoringContext",
    "SignalExtractor",
    "UnknownCriterionTypeError",
    "WeightSumError",
    "build_criterion",
    "build_role",
    "check_weight_sum",
    "normalize",
    "rank_breakdowns",
    "validate_criterion_config",
]
