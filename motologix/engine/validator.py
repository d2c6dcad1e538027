"""
Sanity checks for vehicle records, weight vectors and scored results.

Every check returns a ``ValidationResult`` instead of raising, so callers
can decide whether to recover (fill defaults, fall back to default
weights) or reject with the full list of problems.
"""
from __future__ import annotations

from .config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .models import (
    Confidence,
    FactorScoreSet,
    ScoredVehicle,
    ValidationIssue,
    ValidationResult,
    VehicleRecord,
    WeightVector,
)


def _issue(code: str, message: str, field: str | None = None) -> ValidationIssue:
    return ValidationIssue(code=code, message=message, field=field)


def _missing(value: float | None) -> bool:
    return not value or value <= 0


# ---------------------------------------------------------------------------
# Vehicle records
# ---------------------------------------------------------------------------


def validate_vehicle(record: VehicleRecord) -> ValidationResult:
    """Check a (possibly partial) record for completeness and plausibility."""
    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []

    if not record.brand:
        errors.append(_issue("MISSING_BRAND", "Brand is required", "brand"))
    if not record.model:
        errors.append(_issue("MISSING_MODEL", "Model is required", "model"))

    # Core specs
    if _missing(record.engine_cc):
        errors.append(_issue("INVALID_ENGINE", "Valid engine displacement (cc) is required", "engine_cc"))
    elif record.engine_cc > 2000:
        warnings.append(_issue("LARGE_ENGINE", "Engine displacement seems unusually large", "engine_cc"))

    if _missing(record.power):
        errors.append(_issue("INVALID_POWER", "Valid power (bhp) is required", "power"))
    elif record.power > 200:
        warnings.append(_issue("HIGH_POWER", "Power output seems unusually high", "power"))

    if _missing(record.torque):
        warnings.append(_issue("MISSING_TORQUE", "Torque data is missing", "torque"))

    if _missing(record.kerb_weight):
        errors.append(_issue("INVALID_WEIGHT", "Valid kerb weight is required", "kerb_weight"))
    elif record.kerb_weight < 80 or record.kerb_weight > 400:
        warnings.append(_issue("UNUSUAL_WEIGHT", "Kerb weight seems unusual", "kerb_weight"))

    # Dimensions
    if _missing(record.seat_height):
        warnings.append(_issue("MISSING_SEAT_HEIGHT", "Seat height is missing", "seat_height"))
    elif record.seat_height < 600 or record.seat_height > 1000:
        warnings.append(_issue("UNUSUAL_SEAT_HEIGHT", "Seat height seems unusual", "seat_height"))

    if _missing(record.wheelbase):
        warnings.append(_issue("MISSING_WHEELBASE", "Wheelbase is missing", "wheelbase"))
    if _missing(record.ground_clearance):
        warnings.append(_issue("MISSING_GROUND_CLEARANCE", "Ground clearance is missing", "ground_clearance"))

    # Braking
    if not record.front_brake:
        errors.append(_issue("MISSING_FRONT_BRAKE", "Front brake type is required", "front_brake"))
    if not record.rear_brake:
        errors.append(_issue("MISSING_REAR_BRAKE", "Rear brake type is required", "rear_brake"))
    if not record.abs_type:
        warnings.append(_issue("MISSING_ABS", "ABS type is not specified", "abs_type"))

    if _missing(record.front_tyre_width):
        warnings.append(_issue("MISSING_FRONT_TYRE", "Front tyre width is missing", "front_tyre_width"))
    if _missing(record.rear_tyre_width):
        warnings.append(_issue("MISSING_REAR_TYRE", "Rear tyre width is missing", "rear_tyre_width"))

    # Suspension and ergonomics
    if not record.front_suspension:
        warnings.append(_issue("MISSING_FRONT_SUSPENSION", "Front suspension type is missing", "front_suspension"))
    if not record.rear_suspension:
        warnings.append(_issue("MISSING_REAR_SUSPENSION", "Rear suspension type is missing", "rear_suspension"))
    if not record.handlebar_type:
        warnings.append(_issue("MISSING_HANDLEBAR", "Handlebar type is not specified", "handlebar_type"))

    return ValidationResult(errors=errors, warnings=warnings)


def has_minimum_data(record: VehicleRecord) -> bool:
    """Fast pre-check: can this record be scored without filling?"""
    return bool(
        record.brand
        and record.model
        and record.engine_cc
        and record.power
        and record.kerb_weight
        and record.front_brake
        and record.rear_brake
    )


# ---------------------------------------------------------------------------
# Weights
# ---------------------------------------------------------------------------


def validate_weights(weights: WeightVector) -> ValidationResult:
    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []

    total = weights.total()
    drift = abs(total - 1.0)
    if drift > 0.05:
        errors.append(_issue("INVALID_WEIGHT_SUM", f"Weights should sum to 1.0, got {total:.3f}"))
    elif drift > 0.01:
        warnings.append(_issue("WEIGHT_SUM_INEXACT", f"Weights sum to {total:.3f}, will be normalized"))

    for factor, value in weights.as_dict().items():
        if value < 0:
            errors.append(_issue(
                "NEGATIVE_WEIGHT",
                f"Weight for {factor.value} cannot be negative",
                factor.value,
            ))
        if value > 0.5:
            warnings.append(_issue(
                "HIGH_WEIGHT",
                f"Weight for {factor.value} is unusually high ({value * 100:.0f}%)",
                factor.value,
            ))

    zero_weights = [f for f, v in weights.as_dict().items() if v == 0]
    if len(zero_weights) > 3:
        warnings.append(_issue(
            "MANY_ZERO_WEIGHTS",
            f"{len(zero_weights)} factors have zero weight, consider using defaults",
        ))

    return ValidationResult(errors=errors, warnings=warnings)


# ---------------------------------------------------------------------------
# Scores
# ---------------------------------------------------------------------------


def validate_factor_scores(scores: FactorScoreSet) -> ValidationResult:
    errors = [
        _issue(
            "SCORE_OUT_OF_BOUNDS",
            f"Score for {factor.value} must be between 1 and 10, got {value}",
            factor.value,
        )
        for factor, value in scores.as_dict().items()
        if value < 1 or value > 10
    ]
    return ValidationResult(errors=errors)


def validate_scored_vehicle(
    scored: ScoredVehicle,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> ValidationResult:
    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []

    if scored.final_score < 0 or scored.final_score > 100:
        errors.append(_issue(
            "FINAL_SCORE_OUT_OF_BOUNDS",
            f"Final score must be between 0 and 100, got {scored.final_score}",
        ))

    errors.extend(validate_factor_scores(scored.factor_scores).errors)

    low = [f for f, c in scored.confidences.items() if c == Confidence.low]
    if len(low) >= config.low_confidence_limit:
        warnings.append(_issue("LOW_CONFIDENCE", f"{len(low)} factors have low confidence"))

    return ValidationResult(errors=errors, warnings=warnings)


def validate_comparison(
    batch: list[ScoredVehicle],
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> ValidationResult:
    """Check a ranked batch as a whole: bounds, spread and ranking."""
    if not batch:
        return ValidationResult(errors=[
            _issue("NO_VEHICLES", "At least one motorcycle is required for comparison"),
        ])

    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []

    for scored in batch:
        name = scored.vehicle.display_name
        result = validate_scored_vehicle(scored, config)
        errors.extend(
            e.model_copy(update={"message": f"{name}: {e.message}"}) for e in result.errors
        )
        warnings.extend(
            w.model_copy(update={"message": f"{name}: {w.message}"}) for w in result.warnings
        )

    if len(batch) >= 2:
        scores = [s.final_score for s in batch]
        spread = max(scores) - min(scores)
        if spread < config.narrow_range_points:
            warnings.append(_issue(
                "NARROW_SCORE_RANGE",
                f"All bikes scored within {spread} points - consider adjusting weights for differentiation",
            ))

    if not any(s.rank == 1 for s in batch):
        errors.append(_issue("INVALID_RANKING", "No bike has rank 1"))

    return ValidationResult(errors=errors, warnings=warnings)
