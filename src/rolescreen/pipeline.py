"""Batch screening pipeline assembly and execution."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pendulum
from pydantic import ValidationError

from . import __version__
from .core import ComparisonExplainer, ScoreAggregator, SignalExtractor, rank_breakdowns
from .core.validation import build_role
from .logging import get_logger
from .schemas import ResumeDocument, Role, ScoreBreakdown, Signal


class ResumeLoadError(ValueError):
    """Raised when résumé loading encounters invalid records."""

    def __init__(self, errors: list[str], partial: list[ResumeDocument]):
        super().__init__("Resume loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Resume loading failed: {self.errors}"


class ResumeLoader:
    """Load résumé documents from JSON lines."""

    def load(self, path: Path) -> list[ResumeDocument]:
        resumes: list[ResumeDocument] = []
        errors: list[str] = []
        seen: set[str] = set()
        with path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    record = json.loads(raw)
                except json.JSONDecodeError as exc:
                    errors.append(f"line {idx}: invalid JSON ({exc})")
                    continue
                if not isinstance(record, dict):
                    errors.append(f"line {idx}: expected an object")
                    continue
                try:
                    resume = ResumeDocument.model_validate(record)
                except ValidationError as exc:
                    errors.append(f"line {idx}: {exc}")
                    continue
                if resume.resume_id in seen:
                    errors.append(f"line {idx}: duplicate resume_id '{resume.resume_id}'")
                    continue
                seen.add(resume.resume_id)
                resumes.append(resume)
        if errors:
            raise ResumeLoadError(errors, resumes)
        return resumes


class RoleLoader:
    """Load a role document with its criteria."""

    def load(self, path: Path) -> Role:
        with path.open("r", encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Invalid role JSON: {exc}") from exc
        return build_role(data)


class OutputWriter:
    """Persist screening outcomes."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, ensure_ascii=False))
            handle.write("\n")


@dataclass(slots=True)
class ScreeningResult:
    """One evaluated résumé for a role."""

    resume_id: str
    role_id: str
    rank: int
    breakdown: ScoreBreakdown
    signals: list[Signal] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "resume_id": self.resume_id,
            "role_id": self.role_id,
            "rank": self.rank,
            "breakdown": self.breakdown.model_dump(mode="json"),
            "signals": [signal.model_dump(mode="json") for signal in self.signals],
        }


class ScreeningPipeline:
    """End-to-end screening orchestrator."""

    def __init__(
        self,
        *,
        extractor: SignalExtractor,
        aggregator: ScoreAggregator,
        explainer: ComparisonExplainer | None = None,
        resume_loader: ResumeLoader | None = None,
        role_loader: RoleLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._extractor = extractor
        self._aggregator = aggregator
        self._explainer = explainer or ComparisonExplainer()
        self._resumes = resume_loader or ResumeLoader()
        self._roles = role_loader or RoleLoader()
        self._writer = writer or OutputWriter()
        self._logger = get_logger(__name__, component="pipeline")

    def prepare(self, resume: ResumeDocument, *, as_of: Any | None = None) -> ResumeDocument:
        """Attach extracted signals unless the document already carries them."""
        if resume.signals is not None:
            return resume
        return resume.with_signals(self._extractor.extract(resume.text, as_of=as_of))

    def evaluate_role(
        self,
        role: Role,
        resumes: list[ResumeDocument],
        *,
        as_of: Any | None = None,
        enforce_weight_sum: bool | None = None,
    ) -> list[ScreeningResult]:
        """Evaluate every résumé once and rank by total score."""
        scored: list[tuple[ResumeDocument, ScoreBreakdown]] = []
        for resume in resumes:
            prepared = self.prepare(resume, as_of=as_of)
            breakdown = self._aggregator.evaluate(
                role.criteria,
                prepared,
                enforce_weight_sum=enforce_weight_sum,
            )
            scored.append((prepared, breakdown))

        return [
            ScreeningResult(
                resume_id=resume.resume_id,
                role_id=role.role_id,
                rank=position,
                breakdown=breakdown,
                signals=list(resume.signals or []),
            )
            for position, (resume, breakdown) in enumerate(rank_breakdowns(scored), start=1)
        ]

    def run(
        self,
        *,
        resumes_path: Path,
        role_path: Path,
        output_path: Path,
        as_of: str | None = None,
        enforce_weight_sum: bool | None = None,
        audit_logger: AuditLogger | None = None,
    ) -> list[dict]:
        role = self._roles.load(role_path)
        load_errors: list[str] = []
        try:
            resumes = self._resumes.load(resumes_path)
        except ResumeLoadError as exc:
            resumes = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("resumes.partial_load", errors=exc.errors)

        results = self.evaluate_role(
            role,
            resumes,
            as_of=as_of,
            enforce_weight_sum=enforce_weight_sum,
        )

        serialized_results: list[dict] = []
        for result in results:
            serialized_results.append(result.to_dict())

            if audit_logger:
                audit_logger.append(
                    {
                        "role_id": role.role_id,
                        "resume_id": result.resume_id,
                        "rank": result.rank,
                        "total_score": result.breakdown.total_score,
                        "total_score_pct": result.breakdown.total_score_pct,
                        "criterion_scores": [
                            {"criterion_id": item.criterion_id, "score": item.score}
                            for item in result.breakdown.criterion_scores
                        ],
                    }
                )

            self._logger.info(
                "screening.result",
                role_id=role.role_id,
                resume_id=result.resume_id,
                rank=result.rank,
                total_score_pct=result.breakdown.total_score_pct,
            )

        metadata = {
            "role_id": role.role_id,
            "role_title": role.title,
            "criteria_count": len(role.criteria),
            "weight_sum": role.weight_sum,
            "resume_count": len(resumes),
            "as_of": as_of,
            "errors": load_errors,
            "timestamp": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        }
        self._writer.write(output_path, {"metadata": metadata, "results": serialized_results})
        return serialized_results

    def compare(self, results_path: Path, left_id: str, right_id: str) -> str:
        """Explain the difference between two résumés of a previous run."""
        breakdowns = load_breakdowns(results_path)
        missing = [rid for rid in (left_id, right_id) if rid not in breakdowns]
        if missing:
            raise KeyError(f"Unknown resume id(s) in results: {', '.join(missing)}")
        return self._explainer.explain(breakdowns[left_id], breakdowns[right_id])


def load_breakdowns(path: Path) -> dict[str, ScoreBreakdown]:
    """Read the breakdowns written by ``ScreeningPipeline.run`` keyed by résumé id."""
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid results JSON: {exc}") from exc
    entries = data.get("results", []) if isinstance(data, dict) else data
    return {
        entry["resume_id"]: ScoreBreakdown.model_validate(entry["breakdown"])
        for entry in entries
    }
