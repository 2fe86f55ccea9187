"""Typer CLI entrypoint for the screening engine."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .container import create_container
from .core import CriterionConfigError, WeightSumError
from .core.errors import BreakdownMismatchError
from .core.extractors.dates import parse_reference_date
from .logging import configure_logging
from .pipeline import AuditLogger
from .schemas.config import load_config

app = typer.Typer(help="Score résumés against weighted role criteria.")


def _load_settings(config: Optional[Path]) -> dict[str, Any]:
    if not config:
        return {}
    with config.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle)
    try:
        return load_config(loaded).to_settings()
    except (ValueError, ValidationError) as exc:
        raise typer.BadParameter(str(exc), param_hint="config") from exc


def _check_as_of(as_of: Optional[str]) -> Optional[str]:
    if as_of is None:
        return None
    try:
        parse_reference_date(as_of)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="as_of") from exc
    return as_of


@app.command()
def extract(
    resume: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Plain-text résumé path."),
    resume_id: Optional[str] = typer.Option(None, help="Identifier recorded with the signals."),
    as_of: Optional[str] = typer.Option(None, help="Reference date (YYYY-MM or ISO) for 'Present'."),
    output: Optional[Path] = typer.Option(None, dir_okay=False, help="Write signals JSON here instead of stdout."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("WARNING", help="Log level for structured logging."),
    log_json: bool = typer.Option(True, "--log-json/--log-console", help="Render logs as JSON lines or console text."),
) -> None:
    """Extract experience and education signals from one résumé."""
    settings = _load_settings(config)
    as_of = _check_as_of(as_of)
    configure_logging(log_level, json_output=log_json)

    container = create_container(settings=settings)
    text = resume.read_text(encoding="utf-8")
    signals = container.signal_extractor().extract(text, as_of=as_of)

    payload = {
        "resume_id": resume_id or resume.stem,
        "signals": [signal.model_dump(mode="json") for signal in signals],
    }
    rendered = json.dumps(payload, ensure_ascii=False, indent=2)
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(rendered, encoding="utf-8")
        typer.echo(f"Extracted {len(signals)} signals. Saved to {output}.")
    else:
        typer.echo(rendered)


@app.command()
def run(
    resumes: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Résumés JSONL path."),
    role: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Role JSON path with criteria."),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    as_of: Optional[str] = typer.Option(None, help="Reference date (YYYY-MM or ISO) for 'Present'."),
    enforce_weights: Optional[bool] = typer.Option(
        None,
        "--enforce-weights/--no-enforce-weights",
        help="Require criteria weights to sum to 100.",
    ),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    log_json: bool = typer.Option(True, "--log-json/--log-console", help="Render logs as JSON lines or console text."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
) -> None:
    """Extract, score and rank every résumé against a role."""
    settings = _load_settings(config)
    as_of = _check_as_of(as_of)
    configure_logging(log_level, json_output=log_json)

    container = create_container(settings=settings)
    pipeline = container.pipeline()
    audit_logger = AuditLogger(audit_log) if audit_log else None

    try:
        results = pipeline.run(
            resumes_path=resumes,
            role_path=role,
            output_path=output,
            as_of=as_of,
            enforce_weight_sum=enforce_weights,
            audit_logger=audit_logger,
        )
    except (CriterionConfigError, WeightSumError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    typer.echo(f"Processed {len(results)} resumes. Results saved to {output}.")


@app.command()
def compare(
    results: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Results JSON from 'run'."),
    left: str = typer.Option(..., help="Résumé id reported as A."),
    right: str = typer.Option(..., help="Résumé id reported as B."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
) -> None:
    """Explain why one résumé outscored another."""
    settings = _load_settings(config)
    pipeline = create_container(settings=settings).pipeline()
    try:
        explanation = pipeline.compare(results, left, right)
    except (KeyError, BreakdownMismatchError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    typer.echo(explanation)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
