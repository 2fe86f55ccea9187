"""Exceptions raised by the screening engine."""

from __future__ import annotations


class CriterionConfigError(ValueError):
    """Raised when a criterion or role payload fails structural validation."""

    def __init__(self, message: str, errors: list[str] | None = None):
        self.message = message
        self.errors = list(errors or [])
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if not self.errors:
            return self.message
        details = "; ".join(self.errors)
        return f"{self.message}: {details}"


class UnknownCriterionTypeError(ValueError):
    """Raised when a criterion type has no schema or scorer registered."""

    def __init__(self, criterion_type: object):
        self.criterion_type = criterion_type
        super().__init__(f"Unknown criterion type: {criterion_type!r}")


class WeightSumError(ValueError):
    """Raised when weights must sum to 100 and do not."""

    def __init__(self, weight_sum: int, expected: int = 100):
        self.weight_sum = weight_sum
        self.expected = expected
        super().__init__(f"Criteria weights sum to {weight_sum}, expected {expected}")


class BreakdownMismatchError(ValueError):
    """Raised when two breakdowns do not cover the same ordered criteria."""
