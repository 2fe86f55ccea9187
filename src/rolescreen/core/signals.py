"""Ingestion-time signal extraction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

import pendulum
import structlog

from ..schemas import Confidence, EducationLevel, Signal, SignalType
from .extractors import (
    DateRangeParser,
    EducationDetector,
    KeywordMatcher,
    merge_ranges,
    total_months,
)
from .extractors.dates import parse_reference_date, to_date
from .text import SNIPPET_CONTEXT

NO_DATE_RANGES = "No date ranges detected in resume"
NO_EDUCATION = "No education token detected"


@dataclass
class ExtractorConfig:
    """Configuration for signal extraction."""

    snippet_context: int = SNIPPET_CONTEXT


class SignalExtractor:
    """Turn résumé text into experience, education and keyword signals.

    Runs once per résumé; callers persist the returned signals and hand them
    back at scoring time.
    """

    def __init__(
        self,
        *,
        config: ExtractorConfig | None = None,
        now_provider: Callable[[], Any] | None = None,
    ) -> None:
        self._config = config or ExtractorConfig()
        self._now_provider = now_provider or pendulum.now
        self._logger = structlog.get_logger(__name__)
        self._dates = DateRangeParser(
            snippet_context=self._config.snippet_context, logger=self._logger
        )
        self._education = EducationDetector(snippet_context=self._config.snippet_context)
        self._keywords = KeywordMatcher(snippet_context=self._config.snippet_context)

    def extract(self, text: str | None, *, as_of: Any | None = None) -> list[Signal]:
        """Return experience signals followed by the education signal."""
        text = text or ""
        reference = self._resolve_as_of(as_of)
        signals = self.extract_experience(text, as_of=reference)
        signals.append(self.extract_education(text))

        self._logger.debug(
            "signals.extracted",
            as_of=reference.isoformat(),
            signal_count=len(signals),
            date_ranges=sum(1 for s in signals if s.type == SignalType.DATE_RANGE),
        )
        return signals

    def extract_experience(self, text: str, *, as_of: Any | None = None) -> list[Signal]:
        reference = self._resolve_as_of(as_of)
        merged = merge_ranges(self._dates.find_ranges(text, reference))

        if not merged:
            return [
                Signal(
                    type=SignalType.EXPERIENCE_YEARS_ESTIMATE,
                    value="0",
                    evidence_snippet=NO_DATE_RANGES,
                    confidence=Confidence.LOW,
                )
            ]

        years = total_months(merged) / 12.0
        signals = [
            Signal(
                type=SignalType.EXPERIENCE_YEARS_ESTIMATE,
                value=str(years),
                evidence_snippet=merged[0].snippet,
                confidence=Confidence.MEDIUM,
            )
        ]
        signals.extend(
            Signal(
                type=SignalType.DATE_RANGE,
                value=item.describe(),
                evidence_snippet=item.snippet,
                confidence=Confidence.HIGH,
            )
            for item in merged
        )
        return signals

    def extract_education(self, text: str) -> Signal:
        match = self._education.detect(text)
        if match is None:
            return Signal(
                type=SignalType.EDUCATION_LEVEL_ESTIMATE,
                value=EducationLevel.UNKNOWN.value,
                evidence_snippet=NO_EDUCATION,
                confidence=Confidence.LOW,
            )
        return Signal(
            type=SignalType.EDUCATION_LEVEL_ESTIMATE,
            value=match.level.value,
            evidence_snippet=match.snippet,
            confidence=Confidence.HIGH,
        )

    def extract_keyword_matches(
        self,
        text: str,
        keywords: Sequence[str],
        *,
        normalized_text: str | None = None,
    ) -> list[Signal]:
        hits = self._keywords.match(text, keywords, normalized_text=normalized_text)
        return [
            Signal(
                type=SignalType.KEYWORD_MATCH,
                value=hit.keyword,
                evidence_snippet=hit.snippet,
                confidence=Confidence.HIGH,
            )
            for hit in hits
        ]

    def _resolve_as_of(self, as_of: Any | None) -> pendulum.Date:
        if as_of is None:
            return to_date(self._now_provider())
        if isinstance(as_of, str):
            return parse_reference_date(as_of)
        return to_date(as_of)
