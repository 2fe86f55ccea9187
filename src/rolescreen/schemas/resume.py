"""Résumé documents handed to the engine by the ingestion layer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .signal import Signal


class ResumeDocument(BaseModel):
    """Plain résumé text plus any signals already extracted from it.

    ``signals`` is ``None`` until extraction has run for this text.
    """

    resume_id: str = Field(min_length=1)
    text: str = ""
    signals: list[Signal] | None = None

    model_config = ConfigDict(extra="forbid")

    def with_signals(self, signals: list[Signal]) -> "ResumeDocument":
        return self.model_copy(update={"signals": list(signals)})
