from __future__ import annotations

import logging

import pytest

from motologix.engine.config import EngineConfig
from motologix.engine.errors import RecordValidationError
from motologix.engine.factors import DEFAULT_WEIGHTS
from motologix.engine.models import Factor, PillionMode, WeightVector
from motologix.engine.pipeline import prepare_record, resolve_weights, run_comparison


def _codes(issues) -> list[str]:
    return [i.code for i in issues]


class TestPrepareRecord:
    def test_valid_record_passes_through(self, duke):
        prepared = prepare_record(duke)
        assert prepared.vehicle == duke
        assert not prepared.filled

    def test_recoverable_record_is_filled(self, duke_with):
        prepared = prepare_record(duke_with(power=None))
        assert prepared.filled
        assert prepared.vehicle.power == 10
        assert prepared.vehicle.filled_fields == ("power",)
        # First-pass problems are kept for reporting
        assert _codes(prepared.validation.errors) == ["INVALID_POWER"]

    def test_caller_supplied_filled_fields_are_ignored(self, duke_with):
        prepared = prepare_record(duke_with(filled_fields=("wheelbase", "seat_height")))
        assert prepared.vehicle.filled_fields == ()
        assert not prepared.filled

    def test_unrecoverable_record_raises(self, duke_with):
        with pytest.raises(RecordValidationError) as excinfo:
            prepare_record(duke_with(power=-5))
        assert excinfo.value.name == "KTM 390 Duke"
        assert _codes(excinfo.value.result.errors) == ["INVALID_POWER"]


class TestResolveWeights:
    def test_none_means_defaults(self):
        weights, warnings = resolve_weights(None)
        assert weights == DEFAULT_WEIGHTS
        assert warnings == []

    def test_invalid_weights_are_reset(self, caplog):
        with caplog.at_level(logging.WARNING):
            weights, warnings = resolve_weights(WeightVector(braking_safety_confidence=0.5))
        assert weights == DEFAULT_WEIGHTS
        assert _codes(warnings) == ["WEIGHTS_RESET"]
        assert "falling back to defaults" in caplog.text

    def test_valid_weights_are_normalized(self):
        others = 0.12 / 9
        raw = WeightVector(**{
            f.value: 0.9 if f == Factor.braking_safety_confidence else others for f in Factor
        })
        weights, warnings = resolve_weights(raw)
        assert abs(weights.total() - 1.0) < 1e-9
        assert _codes(warnings) == ["WEIGHT_SUM_INEXACT", "HIGH_WEIGHT"]


class TestRunComparison:
    def test_complete_records(self, duke, shine):
        report = run_comparison([shine, duke])
        assert [(v.vehicle.model, v.final_score, v.rank) for v in report.vehicles] == [
            ("390 Duke", 73, 1),
            ("Shine", 54, 2),
        ]
        assert report.pillion_mode == PillionMode.primary
        assert report.weights == DEFAULT_WEIGHTS
        assert _codes(report.warnings) == ["LOW_CONFIDENCE"]
        assert report.warnings[0].message.startswith("Honda Shine: ")
        assert report.rejected == []
        assert report.key_differences[0].factor == Factor.braking_safety_confidence
        assert report.generated_at is None

    def test_single_record_has_no_key_differences(self, duke):
        report = run_comparison([duke])
        assert report.vehicles[0].rank == 1
        assert report.key_differences == []

    def test_auto_filled_record_is_reported(self, duke_with, shine):
        report = run_comparison([duke_with(kerb_weight=None), shine])
        filled = next(v for v in report.vehicles if v.vehicle.brand == "KTM")
        assert filled.filled_data
        assert filled.vehicle.kerb_weight == 140
        assert "AUTO_FILLED" in _codes(report.warnings)
        auto = next(w for w in report.warnings if w.code == "AUTO_FILLED")
        assert auto.message.startswith("KTM 390 Duke: ")

    def test_record_warnings_are_prefixed(self, duke_with):
        report = run_comparison([duke_with(torque=None)])
        assert _codes(report.warnings) == ["MISSING_TORQUE"]
        assert report.warnings[0].message.startswith("KTM 390 Duke: ")

    def test_unrecoverable_record_is_rejected(self, duke_with, shine, caplog):
        with caplog.at_level(logging.WARNING):
            report = run_comparison([duke_with(power=-5), shine])
        assert [v.vehicle.model for v in report.vehicles] == ["Shine"]
        assert len(report.rejected) == 1
        rejected = report.rejected[0]
        assert rejected.name == "KTM 390 Duke"
        assert rejected.search_query == "ktm duke 390"
        assert _codes(rejected.errors) == ["INVALID_POWER"]
        assert "Rejected KTM 390 Duke" in caplog.text

    def test_nothing_left_to_rank(self, duke_with):
        with pytest.raises(RecordValidationError) as excinfo:
            run_comparison([duke_with(power=-5)])
        errors = excinfo.value.result.errors
        assert errors[0].code == "NO_VEHICLES"
        assert errors[1].message.startswith("KTM 390 Duke: ")

    def test_empty_input(self):
        with pytest.raises(RecordValidationError) as excinfo:
            run_comparison([])
        assert _codes(excinfo.value.result.errors) == ["NO_VEHICLES"]

    def test_invalid_weights_fall_back(self, duke, shine):
        report = run_comparison([duke, shine], weights=WeightVector(rider_comfort=0.3))
        assert report.weights == DEFAULT_WEIGHTS
        assert _codes(report.warnings) == ["WEIGHTS_RESET", "LOW_CONFIDENCE"]
        assert report.vehicles[0].final_score == 73

    def test_pillion_mode_argument(self, duke):
        report = run_comparison([duke], pillion_mode=PillionMode.secondary)
        assert report.pillion_mode == PillionMode.secondary
        assert report.vehicles[0].factor_scores.primary_pillion_comfort == 8.5

    def test_pillion_mode_from_config(self, duke):
        report = run_comparison([duke], config=EngineConfig(default_pillion_mode=PillionMode.secondary))
        assert report.pillion_mode == PillionMode.secondary

    def test_forged_filled_fields_do_not_lower_confidence(self, duke, duke_with):
        report = run_comparison([duke_with(filled_fields=("wheelbase",))])
        scored = report.vehicles[0]
        assert not scored.filled_data
        assert scored.confidences == run_comparison([duke]).vehicles[0].confidences

    def test_close_scores_warn(self, duke, duke_with):
        report = run_comparison([duke, duke_with(model="390 Duke ABS")])
        assert [v.rank for v in report.vehicles] == [1, 1]
        assert _codes(report.warnings) == ["NARROW_SCORE_RANGE"]


def test_default_pillion_mode_is_typed():
    assert isinstance(EngineConfig().default_pillion_mode, PillionMode)
