"""Per-résumé state shared by the criterion scorers."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property

from ..schemas import ResumeDocument, Signal, SignalType
from ..schemas.signal import first_signal, signals_of
from .text import normalize


@dataclass
class ScoringContext:
    """Read-only view of one résumé during an evaluation run."""

    resume: ResumeDocument

    @property
    def text(self) -> str:
        return self.resume.text

    @cached_property
    def normalized_text(self) -> str:
        return normalize(self.resume.text)

    @property
    def signals(self) -> list[Signal]:
        return list(self.resume.signals or [])

    def signal(self, signal_type: SignalType) -> Signal | None:
        return first_signal(self.resume.signals, signal_type)

    def signals_of(self, signal_type: SignalType) -> list[Signal]:
        return signals_of(self.resume.signals, signal_type)
