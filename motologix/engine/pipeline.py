"""
Validate -> (on error) fill -> validate, then score, rank and compare.

Both recovery outcomes are plain result values: a ``PreparedRecord`` that
says whether it was filled, or a ``RecordValidationError`` that carries
every problem found on the first pass.
"""
from __future__ import annotations

import logging

from .comparison import compare_vehicles
from .config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .defaults import fill_missing_data
from .errors import RecordValidationError, ScoringPreconditionError
from .factors import DEFAULT_WEIGHTS
from .models import (
    ComparisonReport,
    PillionMode,
    PreparedRecord,
    RejectedRecord,
    ValidationIssue,
    ValidationResult,
    VehicleRecord,
    WeightVector,
)
from .ranking import score_and_rank
from .validator import validate_comparison, validate_vehicle, validate_weights
from .weights import normalize_weights

logger = logging.getLogger(__name__)


def _prefixed(name: str, issues: list[ValidationIssue]) -> list[ValidationIssue]:
    return [i.model_copy(update={"message": f"{name}: {i.message}"}) for i in issues]


def prepare_record(record: VehicleRecord) -> PreparedRecord:
    # Only the defaulter may mark fields as filled
    if record.filled_fields:
        record = record.model_copy(update={"filled_fields": ()})

    validation = validate_vehicle(record)
    if validation.is_valid:
        return PreparedRecord(vehicle=record, validation=validation)

    filled = fill_missing_data(record)
    if not validate_vehicle(filled).is_valid:
        raise RecordValidationError(validation, record.display_name)

    logger.info(
        "Recovered %s by filling %s", record.display_name, ", ".join(filled.filled_fields)
    )
    return PreparedRecord(vehicle=filled, validation=validation, filled=True)


def resolve_weights(weights: WeightVector | None) -> tuple[WeightVector, list[ValidationIssue]]:
    """Normalized weights to use for a run, plus warnings to report."""
    if weights is None:
        return normalize_weights(DEFAULT_WEIGHTS), []

    result = validate_weights(weights)
    if not result.is_valid:
        logger.warning(
            "Invalid weights (%s), falling back to defaults",
            "; ".join(e.message for e in result.errors),
        )
        reset = ValidationIssue(
            code="WEIGHTS_RESET",
            message="Weights were invalid and have been replaced by the defaults: "
            + "; ".join(e.message for e in result.errors),
        )
        return normalize_weights(DEFAULT_WEIGHTS), [reset]

    return normalize_weights(weights), list(result.warnings)


def run_comparison(
    records: list[VehicleRecord],
    weights: WeightVector | None = None,
    pillion_mode: PillionMode | None = None,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> ComparisonReport:
    """Score and rank a batch of raw records.

    Records that cannot be recovered are listed under ``rejected``; the
    rest are ranked. Raises ``RecordValidationError`` only when nothing is
    left to rank.
    """
    mode = pillion_mode or config.default_pillion_mode
    resolved, warnings = resolve_weights(weights)

    prepared: list[VehicleRecord] = []
    rejected: list[RejectedRecord] = []
    for record in records:
        try:
            item = prepare_record(record)
        except RecordValidationError as exc:
            logger.warning("Rejected %s: %s", record.display_name, exc)
            rejected.append(RejectedRecord(
                name=record.display_name,
                search_query=record.search_query,
                errors=exc.result.errors,
            ))
            continue

        name = item.vehicle.display_name
        warnings.extend(_prefixed(name, item.validation.warnings))
        if item.filled:
            warnings.append(ValidationIssue(
                code="AUTO_FILLED",
                message=f"{name}: Some data was auto-filled due to missing values",
            ))
        prepared.append(item.vehicle)

    if not prepared:
        errors = [ValidationIssue(
            code="NO_VEHICLES",
            message="At least one motorcycle is required for comparison",
        )]
        for r in rejected:
            errors.extend(_prefixed(r.name, r.errors))
        raise RecordValidationError(ValidationResult(errors=errors))

    ranked = score_and_rank(prepared, resolved, mode)

    batch = validate_comparison(ranked, config)
    if not batch.is_valid:
        # Bounds and ranking are engine invariants
        logger.error("Comparison failed its own checks: %s", batch.errors)
        raise ScoringPreconditionError(batch.errors)
    warnings.extend(batch.warnings)

    key_differences = compare_vehicles(ranked[0], ranked[1], config) if len(ranked) >= 2 else []

    return ComparisonReport(
        vehicles=ranked,
        weights=resolved,
        pillion_mode=mode,
        warnings=warnings,
        rejected=rejected,
        key_differences=key_differences,
    )
