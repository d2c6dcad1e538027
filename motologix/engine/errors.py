from __future__ import annotations

from .models import ValidationIssue, ValidationResult


class EngineError(Exception):
    """Base class for failures raised by the scoring engine."""


class RecordValidationError(EngineError):
    """A vehicle record (or a whole batch) cannot be scored.

    Carries the aggregated, field-tagged validation result so callers can
    report every problem at once.
    """

    def __init__(self, result: ValidationResult, name: str | None = None) -> None:
        self.result = result
        self.name = name
        messages = "; ".join(e.message for e in result.errors)
        prefix = f"{name}: " if name else ""
        super().__init__(f"{prefix}{messages}" if messages else f"{prefix}validation failed")


class ScoringPreconditionError(EngineError):
    """An engine invariant was violated, e.g. a factor score outside [1, 10].

    This signals a defect in the engine rather than bad input.
    """

    def __init__(self, issues: list[ValidationIssue]) -> None:
        self.issues = issues
        super().__init__("; ".join(i.message for i in issues))
