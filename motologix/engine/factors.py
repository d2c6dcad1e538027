from __future__ import annotations

from pydantic import BaseModel

from .models import Factor, FactorCategory, WeightVector


class FactorMeta(BaseModel):
    key: Factor
    label: str
    description: str
    category: FactorCategory
    default_weight: float


FACTOR_METADATA: list[FactorMeta] = [
    FactorMeta(
        key=Factor.daily_traffic_ease,
        label="Daily Traffic Ease",
        description="How easy the bike is to manoeuvre in heavy traffic",
        category=FactorCategory.practicality,
        default_weight=0.12,
    ),
    FactorMeta(
        key=Factor.braking_safety_confidence,
        label="Braking & Safety",
        description="Confidence in braking hardware and safety features",
        category=FactorCategory.safety,
        default_weight=0.15,
    ),
    FactorMeta(
        key=Factor.primary_pillion_comfort,
        label="Pillion Comfort",
        description="Comfort and stability for a pillion rider",
        category=FactorCategory.comfort,
        default_weight=0.15,
    ),
    FactorMeta(
        key=Factor.highway_stability,
        label="Highway Stability",
        description="Stability and overtaking confidence at highway speeds",
        category=FactorCategory.safety,
        default_weight=0.10,
    ),
    FactorMeta(
        key=Factor.rider_comfort,
        label="Rider Comfort",
        description="Long-ride comfort for the rider",
        category=FactorCategory.comfort,
        default_weight=0.10,
    ),
    FactorMeta(
        key=Factor.suspension_compliance,
        label="Suspension Quality",
        description="How well the suspension absorbs broken roads",
        category=FactorCategory.comfort,
        default_weight=0.10,
    ),
    FactorMeta(
        key=Factor.fun_engagement,
        label="Fun & Engagement",
        description="How enjoyable and engaging the bike is to ride",
        category=FactorCategory.enjoyment,
        default_weight=0.08,
    ),
    FactorMeta(
        key=Factor.heat_management,
        label="Heat Management",
        description="How well the engine heat is kept away from the rider in traffic",
        category=FactorCategory.practicality,
        default_weight=0.05,
    ),
    FactorMeta(
        key=Factor.ownership_practicality,
        label="Ownership Practicality",
        description="Service network, parts availability and running costs",
        category=FactorCategory.practicality,
        default_weight=0.08,
    ),
    FactorMeta(
        key=Factor.long_term_suitability,
        label="Long-Term Suitability",
        description="Suitability for nine or more years of ownership",
        category=FactorCategory.practicality,
        default_weight=0.07,
    ),
]

FACTOR_LABELS: dict[Factor, str] = {meta.key: meta.label for meta in FACTOR_METADATA}

DEFAULT_WEIGHTS = WeightVector(
    **{meta.key.value: meta.default_weight for meta in FACTOR_METADATA}
)

# Record fields each factor reads. A factor computed over a defaulted
# field loses one confidence step.
FACTOR_INPUTS: dict[Factor, frozenset[str]] = {
    Factor.daily_traffic_ease: frozenset(
        {"kerb_weight", "seat_height", "power", "engine_cc"}
    ),
    Factor.braking_safety_confidence: frozenset(
        {"front_brake", "rear_brake", "abs_type", "front_tyre_width", "rear_tyre_width"}
    ),
    Factor.primary_pillion_comfort: frozenset(
        {"rear_suspension", "rear_suspension_travel", "kerb_weight", "wheelbase", "seat_height", "abs_type"}
    ),
    Factor.highway_stability: frozenset(
        {"wheelbase", "kerb_weight", "power", "rear_tyre_width"}
    ),
    Factor.rider_comfort: frozenset(
        {"handlebar_type", "seat_height", "fuel_capacity", "rear_suspension", "ground_clearance"}
    ),
    Factor.suspension_compliance: frozenset(
        {"rear_suspension", "rear_suspension_travel", "front_suspension", "ground_clearance"}
    ),
    Factor.fun_engagement: frozenset(
        {"power", "kerb_weight", "engine_cc", "handlebar_type"}
    ),
    Factor.heat_management: frozenset(
        {"heat_management_rating", "engine_cc", "power"}
    ),
    Factor.ownership_practicality: frozenset({"brand", "ex_showroom_price"}),
    Factor.long_term_suitability: frozenset(
        {"engine_cc", "power", "brand", "abs_type", "fuel_capacity", "ground_clearance", "kerb_weight"}
    ),
}
