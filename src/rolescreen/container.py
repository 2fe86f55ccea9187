"""Dependency injection container for the screening engine."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import (
    AggregatorConfig,
    ComparisonExplainer,
    CriterionScorer,
    ExplainerConfig,
    ExtractorConfig,
    ScoreAggregator,
    SignalExtractor,
)
from .core.scorers import (
    EducationLevelScorer,
    ExperienceScorerConfig,
    ExperienceYearsScorer,
    KeywordCoverageScorer,
    KeywordScorerConfig,
)
from .pipeline import ScreeningPipeline


class ScreeningContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    signal_extractor = providers.Singleton(SignalExtractor)

    keyword_scorer = providers.Singleton(KeywordCoverageScorer)
    experience_scorer = providers.Singleton(ExperienceYearsScorer)
    education_scorer = providers.Singleton(EducationLevelScorer)

    scorers = providers.List(
        keyword_scorer,
        experience_scorer,
        education_scorer,
    )

    criterion_scorer = providers.Singleton(CriterionScorer, scorers=scorers)

    score_aggregator = providers.Singleton(
        ScoreAggregator,
        scorer=criterion_scorer,
    )

    explainer = providers.Singleton(ComparisonExplainer)

    pipeline = providers.Factory(
        ScreeningPipeline,
        extractor=signal_extractor,
        aggregator=score_aggregator,
        explainer=explainer,
    )


def create_container(*, settings: dict | None = None) -> ScreeningContainer:
    """Instantiate container with optional overrides."""

    container = ScreeningContainer()

    if not settings:
        return container

    extractor_settings = settings.get("extractor") or {}
    if extractor_settings:
        container.signal_extractor.override(
            providers.Singleton(SignalExtractor, config=ExtractorConfig(**extractor_settings))
        )

    scorer_settings = settings.get("scorers") or {}
    snippet_context = extractor_settings.get("snippet_context")

    keyword_settings = dict(scorer_settings.get("keyword") or {})
    if snippet_context is not None:
        keyword_settings.setdefault("snippet_context", snippet_context)
    if keyword_settings:
        container.keyword_scorer.override(
            providers.Singleton(KeywordCoverageScorer, config=KeywordScorerConfig(**keyword_settings))
        )

    if "experience" in scorer_settings:
        container.experience_scorer.override(
            providers.Singleton(
                ExperienceYearsScorer,
                config=ExperienceScorerConfig(**scorer_settings["experience"]),
            )
        )

    aggregator_settings = settings.get("aggregator") or {}
    if aggregator_settings:
        container.score_aggregator.override(
            providers.Singleton(
                ScoreAggregator,
                scorer=container.criterion_scorer,
                config=AggregatorConfig(**aggregator_settings),
            )
        )

    explainer_settings = settings.get("explainer") or {}
    if explainer_settings:
        container.explainer.override(
            providers.Singleton(ComparisonExplainer, config=ExplainerConfig(**explainer_settings))
        )

    return container
