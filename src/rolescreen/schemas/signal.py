"""Extracted résumé evidence records."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class SignalType(str, Enum):
    DATE_RANGE = "DATE_RANGE"
    EXPERIENCE_YEARS_ESTIMATE = "EXPERIENCE_YEARS_ESTIMATE"
    EDUCATION_LEVEL_ESTIMATE = "EDUCATION_LEVEL_ESTIMATE"
    KEYWORD_MATCH = "KEYWORD_MATCH"


class Confidence(str, Enum):
    """How directly the text supports the inferred value."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class Signal(BaseModel):
    """A single piece of evidence extracted from one résumé.

    Signals are immutable; when the source text changes the whole set is
    regenerated.
    """

    type: SignalType
    value: str
    evidence_snippet: str | None = None
    confidence: Confidence

    model_config = ConfigDict(extra="forbid", frozen=True)


def first_signal(signals: list[Signal] | None, signal_type: SignalType) -> Signal | None:
    """Return the first signal of ``signal_type`` or ``None``."""
    for signal in signals or []:
        if signal.type == signal_type:
            return signal
    return None


def signals_of(signals: list[Signal] | None, signal_type: SignalType) -> list[Signal]:
    return [signal for signal in signals or [] if signal.type == signal_type]
