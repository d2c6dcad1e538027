from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Factor(str, Enum):
    daily_traffic_ease = "daily_traffic_ease"
    braking_safety_confidence = "braking_safety_confidence"
    primary_pillion_comfort = "primary_pillion_comfort"
    highway_stability = "highway_stability"
    rider_comfort = "rider_comfort"
    suspension_compliance = "suspension_compliance"
    fun_engagement = "fun_engagement"
    heat_management = "heat_management"
    ownership_practicality = "ownership_practicality"
    long_term_suitability = "long_term_suitability"


class FactorCategory(str, Enum):
    safety = "safety"
    comfort = "comfort"
    practicality = "practicality"
    enjoyment = "enjoyment"


class Confidence(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"


class PillionMode(str, Enum):
    primary = "primary"
    secondary = "secondary"
    none = "none"


class BrakeType(str, Enum):
    disc = "disc"
    drum = "drum"


class AbsType(str, Enum):
    none = "none"
    single_channel = "single-channel"
    dual_channel = "dual-channel"


class RearSuspension(str, Enum):
    monoshock = "monoshock"
    twin = "twin"
    other = "other"


class HandlebarType(str, Enum):
    clip_on = "clip-on"
    standard = "standard"
    raised = "raised"


class Winner(str, Enum):
    a = "a"
    b = "b"
    tie = "tie"


# ── Vehicle records ──────────────────────────────────────────────────────


class VehicleRecord(BaseModel):
    """Raw technical specification of one motorcycle, possibly partial.

    Records are frozen once discovered; the defaulter returns a new copy
    and lists the substituted fields in ``filled_fields``.
    """

    model_config = ConfigDict(frozen=True)

    id: str | None = None

    brand: str | None = None
    model: str | None = None
    variant: str | None = None
    year: int | None = None

    engine_cc: float | None = Field(default=None, description="Displacement in cc")
    power: float | None = Field(default=None, description="Peak power in bhp")
    torque: float | None = Field(default=None, description="Peak torque in Nm")
    kerb_weight: float | None = Field(default=None, description="Kerb weight in kg")

    seat_height: float | None = Field(default=None, description="mm")
    wheelbase: float | None = Field(default=None, description="mm")
    ground_clearance: float | None = Field(default=None, description="mm")
    fuel_capacity: float | None = Field(default=None, description="litres")

    front_brake: BrakeType | None = None
    rear_brake: BrakeType | None = None
    abs_type: AbsType | None = None
    front_tyre_width: float | None = Field(default=None, description="mm")
    rear_tyre_width: float | None = Field(default=None, description="mm")

    front_suspension: str | None = None
    rear_suspension: RearSuspension | None = None
    rear_suspension_travel: float | None = Field(default=None, description="mm")

    handlebar_type: HandlebarType | None = None

    ex_showroom_price: float | None = Field(default=None, description="Ex-showroom INR")

    review_summary: str | None = None
    heat_management_rating: float | None = Field(
        default=None, description="Externally supplied 1-10 heat rating"
    )

    confidence: Confidence | None = None
    search_query: str = ""
    filled_fields: tuple[str, ...] = ()

    @property
    def display_name(self) -> str:
        return f"{self.brand or 'Unknown'} {self.model or 'Unknown'}"


# ── Scores and weights ───────────────────────────────────────────────────


class FactorScoreSet(BaseModel):
    daily_traffic_ease: float
    braking_safety_confidence: float
    primary_pillion_comfort: float
    highway_stability: float
    rider_comfort: float
    suspension_compliance: float
    fun_engagement: float
    heat_management: float
    ownership_practicality: float
    long_term_suitability: float

    def __getitem__(self, factor: Factor) -> float:
        return getattr(self, factor.value)

    def as_dict(self) -> dict[Factor, float]:
        return {factor: self[factor] for factor in Factor}


class WeightVector(BaseModel):
    """One weight per factor. Unspecified factors weigh nothing."""

    model_config = ConfigDict(extra="forbid")

    daily_traffic_ease: float = 0.0
    braking_safety_confidence: float = 0.0
    primary_pillion_comfort: float = 0.0
    highway_stability: float = 0.0
    rider_comfort: float = 0.0
    suspension_compliance: float = 0.0
    fun_engagement: float = 0.0
    heat_management: float = 0.0
    ownership_practicality: float = 0.0
    long_term_suitability: float = 0.0

    def __getitem__(self, factor: Factor) -> float:
        return getattr(self, factor.value)

    def as_dict(self) -> dict[Factor, float]:
        return {factor: self[factor] for factor in Factor}

    def total(self) -> float:
        return sum(self[factor] for factor in Factor)


class ScoredVehicle(BaseModel):
    vehicle: VehicleRecord
    factor_scores: FactorScoreSet
    final_score: int
    rank: int | None = None
    confidences: dict[Factor, Confidence]
    filled_data: bool = False


# ── Validation ───────────────────────────────────────────────────────────


class ValidationIssue(BaseModel):
    code: str
    message: str
    field: str | None = None


class ValidationResult(BaseModel):
    errors: list[ValidationIssue] = Field(default_factory=list)
    warnings: list[ValidationIssue] = Field(default_factory=list)

    @computed_field
    @property
    def is_valid(self) -> bool:
        return not self.errors


# ── Explanation inputs ───────────────────────────────────────────────────


class FactorComparison(BaseModel):
    factor: Factor
    label: str
    score_a: float
    score_b: float
    difference: float
    winner: Winner


class BreakdownEntry(BaseModel):
    factor: Factor
    label: str
    score: float
    weight: float
    weighted_score: float
    confidence: Confidence


# ── Pipeline results ─────────────────────────────────────────────────────


class PreparedRecord(BaseModel):
    vehicle: VehicleRecord
    validation: ValidationResult
    filled: bool = False


class RejectedRecord(BaseModel):
    name: str
    search_query: str = ""
    errors: list[ValidationIssue]


class ComparisonReport(BaseModel):
    vehicles: list[ScoredVehicle]
    weights: WeightVector
    pillion_mode: PillionMode
    warnings: list[ValidationIssue] = Field(default_factory=list)
    rejected: list[RejectedRecord] = Field(default_factory=list)
    key_differences: list[FactorComparison] = Field(default_factory=list)
    generated_at: str | None = None


class CompareRequest(BaseModel):
    vehicles: list[VehicleRecord] = Field(..., min_length=1)
    weights: WeightVector | None = None
    pillion_mode: PillionMode | None = None
