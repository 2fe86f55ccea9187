"""Structural validation of criterion and role payloads.

Runs when criteria are created or updated, before anything is persisted.
It never looks at résumé content.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from pydantic import BaseModel, ValidationError

from ..schemas import CONFIG_SCHEMAS, Criterion, CriterionConfig, CriterionType, Role
from .errors import CriterionConfigError, UnknownCriterionTypeError, WeightSumError

REQUIRED_WEIGHT_SUM = 100


def resolve_criterion_type(value: Any) -> CriterionType:
    if isinstance(value, CriterionType):
        return value
    try:
        return CriterionType(value)
    except ValueError as exc:
        raise UnknownCriterionTypeError(value) from exc


def validate_criterion_config(criterion_type: Any, payload: Any) -> CriterionConfig:
    """Validate ``payload`` against the closed schema of ``criterion_type``.

    Returns the typed config; raises ``CriterionConfigError`` listing every
    problem found. Values are never coerced between types.
    """
    resolved = resolve_criterion_type(criterion_type)
    schema: type[BaseModel] = CONFIG_SCHEMAS[resolved]
    if isinstance(payload, schema):
        return payload  # type: ignore[return-value]
    if not isinstance(payload, Mapping):
        raise CriterionConfigError(
            f"Invalid config for criterion type {resolved.value}",
            ["config must be an object"],
        )
    try:
        return schema.model_validate(dict(payload))  # type: ignore[return-value]
    except ValidationError as exc:
        raise CriterionConfigError(
            f"Invalid config for criterion type {resolved.value}",
            _format_errors(exc),
        ) from exc


def build_criterion(payload: Mapping[str, Any] | Criterion) -> Criterion:
    """Validate a full criterion record ``{id, name, weight, type, config}``."""
    if isinstance(payload, Criterion):
        return payload
    if not isinstance(payload, Mapping):
        raise CriterionConfigError("Invalid criterion", ["criterion must be an object"])

    data = dict(payload)
    if "type" not in data:
        raise CriterionConfigError("Invalid criterion", ["type: field required"])
    criterion_type = resolve_criterion_type(data["type"])
    data["type"] = criterion_type
    data["config"] = validate_criterion_config(criterion_type, data.get("config"))

    try:
        return Criterion.model_validate(data)
    except ValidationError as exc:
        label = data.get("id") or "<unnamed>"
        raise CriterionConfigError(f"Invalid criterion {label}", _format_errors(exc)) from exc


def build_role(payload: Mapping[str, Any]) -> Role:
    """Validate a role document and each of its criteria."""
    if not isinstance(payload, Mapping):
        raise CriterionConfigError("Invalid role", ["role must be an object"])
    data = dict(payload)
    raw_criteria = data.get("criteria") or []
    if not isinstance(raw_criteria, list):
        raise CriterionConfigError("Invalid role", ["criteria must be an array"])
    data["criteria"] = [build_criterion(item) for item in raw_criteria]
    try:
        return Role.model_validate(data)
    except ValidationError as exc:
        raise CriterionConfigError("Invalid role", _format_errors(exc)) from exc


def check_weight_sum(criteria: Iterable[Criterion], expected: int = REQUIRED_WEIGHT_SUM) -> None:
    """Raise ``WeightSumError`` unless the weights add up to ``expected``."""
    total = sum(criterion.weight for criterion in criteria)
    if total != expected:
        raise WeightSumError(total, expected)


def _format_errors(exc: ValidationError) -> list[str]:
    messages: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return messages
