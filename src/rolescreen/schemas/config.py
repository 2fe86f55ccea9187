"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ExtractorSettings(BaseModel):
    snippet_context: int | None = Field(default=None, ge=0)

    model_config = ConfigDict(extra="forbid")


class KeywordScorerSettings(BaseModel):
    max_evidence: int | None = Field(default=None, ge=1)
    snippet_context: int | None = Field(default=None, ge=0)

    model_config = ConfigDict(extra="forbid")


class ExperienceScorerSettings(BaseModel):
    max_evidence: int | None = Field(default=None, ge=1)

    model_config = ConfigDict(extra="forbid")


class ScorerSettings(BaseModel):
    keyword: KeywordScorerSettings = Field(default_factory=KeywordScorerSettings)
    experience: ExperienceScorerSettings = Field(default_factory=ExperienceScorerSettings)

    model_config = ConfigDict(extra="forbid")


class AggregatorSettings(BaseModel):
    enforce_weight_sum: bool | None = None

    model_config = ConfigDict(extra="forbid")


class ExplainerSettings(BaseModel):
    top_n: int | None = Field(default=None, ge=1)
    significance_threshold: float | None = Field(default=None, ge=0.0)

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    extractor: ExtractorSettings = Field(default_factory=ExtractorSettings)
    scorers: ScorerSettings = Field(default_factory=ScorerSettings)
    aggregator: AggregatorSettings = Field(default_factory=AggregatorSettings)
    explainer: ExplainerSettings = Field(default_factory=ExplainerSettings)

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        """Flatten into the override mapping consumed by ``create_container``."""
        settings: dict[str, Any] = {}
        for section in ("extractor", "aggregator", "explainer"):
            values = getattr(self, section).model_dump(exclude_none=True)
            if values:
                settings[section] = values
        scorer_settings = {
            name: values
            for name, values in self.scorers.model_dump(exclude_none=True).items()
            if values
        }
        if scorer_settings:
            settings["scorers"] = scorer_settings
        return settings


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ValueError("Config must be a mapping")
    return AppConfig.model_validate(raw)
