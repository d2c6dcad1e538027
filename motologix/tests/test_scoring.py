from __future__ import annotations

import pytest

from motologix.engine.errors import RecordValidationError, ScoringPreconditionError
from motologix.engine.factors import DEFAULT_WEIGHTS
from motologix.engine.models import Factor, FactorScoreSet, PillionMode, VehicleRecord, WeightVector
from motologix.engine.scoring import calculate_final_score, score_breakdown, score_vehicle
from motologix.engine.weights import normalize_weights


def _flat(value: float) -> FactorScoreSet:
    return FactorScoreSet(**{factor.value: value for factor in Factor})


class TestCalculateFinalScore:
    def test_all_fives_score_fifty(self):
        assert calculate_final_score(_flat(5), DEFAULT_WEIGHTS) == 50

    def test_extremes(self):
        assert calculate_final_score(_flat(10), DEFAULT_WEIGHTS) == 100
        assert calculate_final_score(_flat(1), DEFAULT_WEIGHTS) == 10

    def test_partial_weights_use_their_own_total(self):
        scores = _flat(5).model_copy(update={"braking_safety_confidence": 9.0})
        weights = WeightVector(braking_safety_confidence=0.3, rider_comfort=0.1)
        # (9 x 0.3 + 5 x 0.1) / 0.4 = 8
        assert calculate_final_score(scores, weights) == 80

    def test_zero_weights_score_zero(self):
        assert calculate_final_score(_flat(7), WeightVector()) == 0

    def test_halves_round_up(self):
        scores = _flat(5).model_copy(update={"braking_safety_confidence": 6.0})
        weights = WeightVector(braking_safety_confidence=0.25, rider_comfort=0.75)
        # 52.5
        assert calculate_final_score(scores, weights) == 53

    def test_out_of_range_factor_score_raises(self):
        bad = _flat(5).model_copy(update={"fun_engagement": 11.0})
        with pytest.raises(ScoringPreconditionError) as excinfo:
            calculate_final_score(bad, DEFAULT_WEIGHTS)
        assert excinfo.value.issues[0].code == "SCORE_OUT_OF_BOUNDS"


class TestScoreVehicle:
    def test_duke(self, duke):
        scored = score_vehicle(duke, DEFAULT_WEIGHTS)
        assert scored.final_score == 73
        assert scored.rank is None
        assert not scored.filled_data
        assert scored.vehicle == duke

    def test_shine(self, shine):
        assert score_vehicle(shine, DEFAULT_WEIGHTS).final_score == 54

    def test_deterministic(self, duke):
        assert score_vehicle(duke, DEFAULT_WEIGHTS) == score_vehicle(duke, DEFAULT_WEIGHTS)

    def test_slightly_off_weights_are_normalized(self, duke):
        raw = DEFAULT_WEIGHTS.model_copy(update={"heat_management": 0.07})
        assert score_vehicle(duke, raw).final_score == score_vehicle(duke, normalize_weights(raw)).final_score

    def test_invalid_weights_fall_back_to_defaults(self, duke):
        doubled = WeightVector(**{f.value: DEFAULT_WEIGHTS[f] * 2 for f in Factor})
        assert score_vehicle(duke, doubled).final_score == 73
        negative = WeightVector(braking_safety_confidence=2, rider_comfort=-1)
        assert score_vehicle(duke, negative).final_score == 73

    def test_pillion_mode_is_passed_through(self, duke):
        scored = score_vehicle(duke, DEFAULT_WEIGHTS, PillionMode.secondary)
        assert scored.factor_scores.primary_pillion_comfort == 8.5

    def test_filled_record_is_flagged(self, duke_with):
        scored = score_vehicle(duke_with(filled_fields=("torque",)), DEFAULT_WEIGHTS)
        assert scored.filled_data

    def test_record_without_minimum_data_raises(self):
        record = VehicleRecord(brand="Bajaj", model="Pulsar 150", engine_cc=149)
        with pytest.raises(RecordValidationError) as excinfo:
            score_vehicle(record, DEFAULT_WEIGHTS)
        codes = [e.code for e in excinfo.value.result.errors]
        assert "INVALID_POWER" in codes
        assert excinfo.value.name == "Bajaj Pulsar 150"

    def test_record_with_validation_errors_raises(self, duke_with):
        with pytest.raises(RecordValidationError) as excinfo:
            score_vehicle(duke_with(power=-5), DEFAULT_WEIGHTS)
        assert [e.code for e in excinfo.value.result.errors] == ["INVALID_POWER"]
        assert excinfo.value.name == "KTM 390 Duke"


class TestScoreBreakdown:
    def test_largest_contribution_first(self, duke):
        breakdown = score_breakdown(score_vehicle(duke, DEFAULT_WEIGHTS), DEFAULT_WEIGHTS)
        assert len(breakdown) == 10
        top = breakdown[0]
        assert top.factor == Factor.braking_safety_confidence
        assert top.weighted_score == 15.0
        assert top.label == "Braking & Safety"
        scores = [entry.weighted_score for entry in breakdown]
        assert scores == sorted(scores, reverse=True)

    def test_carries_confidence(self, duke):
        breakdown = score_breakdown(score_vehicle(duke, DEFAULT_WEIGHTS), DEFAULT_WEIGHTS)
        heat = next(e for e in breakdown if e.factor == Factor.heat_management)
        assert heat.confidence == "low"
        assert heat.weighted_score == 2.5

    def test_negative_weights_fall_back_to_defaults(self, duke):
        scored = score_vehicle(duke, DEFAULT_WEIGHTS)
        breakdown = score_breakdown(scored, WeightVector(heat_management=-0.5, fun_engagement=1.5))
        assert breakdown == score_breakdown(scored, DEFAULT_WEIGHTS)
