"""
Weighted aggregation of factor scores.

    final score = sum(factor score x weight) / sum(weight) x 10

Completely deterministic: the same record, weights and pillion mode always
produce the same result.
"""
from __future__ import annotations

import math

from .errors import RecordValidationError, ScoringPreconditionError
from .factors import FACTOR_LABELS
from .models import (
    BreakdownEntry,
    Factor,
    FactorScoreSet,
    PillionMode,
    ScoredVehicle,
    ValidationIssue,
    VehicleRecord,
    WeightVector,
)
from .normalizer import factor_confidences, normalize_vehicle
from .validator import validate_factor_scores, validate_vehicle
from .weights import normalize_weights, valid_weights_or_default


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def calculate_final_score(scores: FactorScoreSet, weights: WeightVector) -> int:
    """Return the weighted 0-100 score for one set of factor scores.

    Dividing by the supplied weight total means a partial or unnormalized
    vector still yields a score on the same scale.
    """
    bounds = validate_factor_scores(scores)
    if not bounds.is_valid:
        raise ScoringPreconditionError(bounds.errors)

    weighted_sum = 0.0
    total_weight = 0.0
    for factor in Factor:
        weighted_sum += scores[factor] * weights[factor]
        total_weight += weights[factor]

    normalized = weighted_sum / total_weight if total_weight > 0 else 0.0
    final = _round_half_up(normalized * 10)

    if final < 0 or final > 100:
        raise ScoringPreconditionError([
            ValidationIssue(
                code="FINAL_SCORE_OUT_OF_BOUNDS",
                message=f"Final score must be between 0 and 100, got {final}",
            )
        ])
    return final


def score_vehicle(
    record: VehicleRecord,
    weights: WeightVector,
    pillion_mode: PillionMode = PillionMode.primary,
) -> ScoredVehicle:
    """Score a single record. The rank is left unset for the ranker.

    Raises ``RecordValidationError`` for a record with validation errors.
    Weights with errors (negative entries, a sum far from 1) are replaced
    by the defaults.
    """
    validation = validate_vehicle(record)
    if not validation.is_valid:
        raise RecordValidationError(validation, record.display_name)

    factor_scores = normalize_vehicle(record, pillion_mode)
    final_score = calculate_final_score(
        factor_scores, normalize_weights(valid_weights_or_default(weights))
    )

    return ScoredVehicle(
        vehicle=record,
        factor_scores=factor_scores,
        final_score=final_score,
        confidences=factor_confidences(record),
        filled_data=bool(record.filled_fields),
    )


def score_breakdown(scored: ScoredVehicle, weights: WeightVector) -> list[BreakdownEntry]:
    """Per-factor contribution to the final score, largest first."""
    normalized = normalize_weights(valid_weights_or_default(weights))
    entries: list[BreakdownEntry] = []
    for factor in Factor:
        score = scored.factor_scores[factor]
        weight = normalized[factor]
        entries.append(BreakdownEntry(
            factor=factor,
            label=FACTOR_LABELS[factor],
            score=score,
            weight=weight,
            weighted_score=_round_half_up(score * weight * 100) / 10,
            confidence=scored.confidences[factor],
        ))
    return sorted(entries, key=lambda e: e.weighted_score, reverse=True)
