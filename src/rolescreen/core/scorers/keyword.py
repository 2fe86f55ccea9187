"""Keyword coverage scoring for skill and custom keyword criteria."""

from __future__ import annotations

from dataclasses import dataclass

from ...schemas import Criterion, CriterionScoreResult, CriterionType
from ...schemas.criterion import CustomKeywordsConfig, KeywordSkillConfig
from ..context import ScoringContext
from ..extractors import KeywordMatcher
from ..text import SNIPPET_CONTEXT
from .base import build_result


@dataclass
class KeywordScorerConfig:
    """Configuration for keyword coverage scoring."""

    max_evidence: int = 3
    snippet_context: int = SNIPPET_CONTEXT


class KeywordCoverageScorer:
    """Score the fraction of configured keywords present in the résumé.

    ``matchMode`` ``ALL`` and ``ANY`` both yield fractional coverage.
    """

    criterion_types = (CriterionType.KEYWORD_SKILL, CriterionType.CUSTOM_KEYWORDS)

    def __init__(self, *, config: KeywordScorerConfig | None = None) -> None:
        self._config = config or KeywordScorerConfig()
        self._matcher = KeywordMatcher(snippet_context=self._config.snippet_context)

    def score(self, criterion: Criterion, context: ScoringContext) -> CriterionScoreResult:
        config = criterion.config
        if not isinstance(config, (KeywordSkillConfig, CustomKeywordsConfig)):
            raise TypeError(f"{type(self).__name__} cannot score {criterion.type.value}")

        keywords = config.terms
        hits = self._matcher.match(
            context.text, keywords, normalized_text=context.normalized_text
        )
        score = len(hits) / len(keywords) if keywords else 0.0

        evidence = [
            f"Matched keyword '{hit.keyword}': {hit.snippet}"
            for hit in hits[: self._config.max_evidence]
        ]
        return build_result(criterion, score, evidence)
