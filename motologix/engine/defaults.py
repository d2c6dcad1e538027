from __future__ import annotations

import hashlib
import json
from typing import Any

from .models import AbsType, BrakeType, Confidence, RearSuspension, VehicleRecord

# Conservative stand-ins for a typical 150cc commuter. Optional fields
# (variant, year, travel, handlebar, price, review, heat rating) have no
# fallback and pass through untouched.
FALLBACK_VALUES: dict[str, Any] = {
    "brand": "Unknown",
    "model": "Unknown",
    "engine_cc": 150,
    "power": 10,
    "torque": 10,
    "kerb_weight": 140,
    "seat_height": 780,
    "wheelbase": 1350,
    "ground_clearance": 160,
    "fuel_capacity": 12,
    "front_brake": BrakeType.disc,
    "rear_brake": BrakeType.drum,
    "abs_type": AbsType.none,
    "front_tyre_width": 100,
    "rear_tyre_width": 130,
    "front_suspension": "telescopic",
    "rear_suspension": RearSuspension.twin,
}


def vehicle_id(record: VehicleRecord) -> str:
    """Stable identifier derived from the record's identity fields."""
    identity = {
        "brand": record.brand,
        "model": record.model,
        "variant": record.variant,
        "year": record.year,
    }
    normalized = json.dumps(identity, sort_keys=True, default=str)
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


def fill_missing_data(record: VehicleRecord) -> VehicleRecord:
    """Return a fully-populated copy of *record*.

    Every falsy required field is replaced by its fallback value and its
    name appended to ``filled_fields``. The confidence label is only ever
    set to ``low`` when absent, never raised.
    """
    updates: dict[str, Any] = {}
    filled: list[str] = list(record.filled_fields)

    for name, fallback in FALLBACK_VALUES.items():
        if not getattr(record, name):
            updates[name] = fallback
            if name not in filled:
                filled.append(name)

    if record.confidence is None:
        updates["confidence"] = Confidence.low

    filled_record = record.model_copy(update={**updates, "filled_fields": tuple(filled)})
    if not filled_record.id:
        filled_record = filled_record.model_copy(update={"id": vehicle_id(filled_record)})
    return filled_record
