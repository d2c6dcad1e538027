from __future__ import annotations

import pytest

from motologix.engine.models import VehicleRecord

# A complete 390cc naked bike and a complete 125cc commuter. Their factor
# scores are worked out by hand in test_normalizer.py.
DUKE_SPEC = {
    "brand": "KTM",
    "model": "390 Duke",
    "engine_cc": 399,
    "power": 46,
    "torque": 39,
    "kerb_weight": 168,
    "seat_height": 820,
    "wheelbase": 1357,
    "ground_clearance": 183,
    "fuel_capacity": 15,
    "front_brake": "disc",
    "rear_brake": "disc",
    "abs_type": "dual-channel",
    "front_tyre_width": 110,
    "rear_tyre_width": 150,
    "front_suspension": "USD fork",
    "rear_suspension": "monoshock",
    "rear_suspension_travel": 150,
    "handlebar_type": "standard",
    "ex_showroom_price": 310000,
    "confidence": "high",
    "search_query": "ktm duke 390",
}

SHINE_SPEC = {
    "brand": "Honda",
    "model": "Shine",
    "engine_cc": 124,
    "power": 10.6,
    "torque": 11,
    "kerb_weight": 114,
    "seat_height": 791,
    "wheelbase": 1285,
    "ground_clearance": 162,
    "fuel_capacity": 10.5,
    "front_brake": "drum",
    "rear_brake": "drum",
    "abs_type": "none",
    "front_tyre_width": 80,
    "rear_tyre_width": 100,
    "front_suspension": "telescopic",
    "rear_suspension": "twin",
    "handlebar_type": "standard",
    "ex_showroom_price": 80000,
    "confidence": "medium",
    "search_query": "honda shine",
}


def make_bike(base: dict, **overrides) -> VehicleRecord:
    spec = {**base, **overrides}
    return VehicleRecord(**{k: v for k, v in spec.items() if v is not None})


@pytest.fixture
def duke() -> VehicleRecord:
    return make_bike(DUKE_SPEC)


@pytest.fixture
def shine() -> VehicleRecord:
    return make_bike(SHINE_SPEC)


@pytest.fixture
def duke_with():
    """Build a Duke variant; pass ``field=None`` to drop a field."""

    def _build(**overrides) -> VehicleRecord:
        return make_bike(DUKE_SPEC, **overrides)

    return _build
