"""
Normalization rules: raw motorcycle specifications -> 1-10 factor scores.

Every factor starts from a fixed baseline and applies a short, ordered list
of threshold adjustments. There is no interpolation, so each score can be
audited by hand. Scores are rounded to the nearest 0.5 (halves round up)
and clamped to [1, 10].

Optional inputs that are absent simply skip their adjustment block; their
absence is reflected in the confidence labels instead.
"""
from __future__ import annotations

import math

from .factors import FACTOR_INPUTS
from .models import (
    AbsType,
    BrakeType,
    Confidence,
    Factor,
    FactorScoreSet,
    HandlebarType,
    PillionMode,
    RearSuspension,
    VehicleRecord,
)

# Service-network reputation buckets, matched by substring on the brand.
WIDE_SERVICE_BRANDS = ("hero", "honda", "tvs", "bajaj")
GOOD_SERVICE_BRANDS = ("royal enfield", "suzuki")
MODERATE_SERVICE_BRANDS = ("yamaha", "ktm")
LIMITED_SERVICE_BRANDS = ("kawasaki", "benelli", "triumph")

DURABLE_BRANDS = ("honda", "royal enfield")
RELIABLE_BRANDS = ("hero", "tvs")


def round_half(value: float) -> float:
    """Round to the nearest 0.5, halves rounding up."""
    return math.floor(value * 2 + 0.5) / 2


def _clamp(value: float, low: float = 1.0, high: float = 10.0) -> float:
    return min(high, max(low, value))


def _finish(score: float) -> float:
    return _clamp(round_half(score))


def _power_to_weight(record: VehicleRecord) -> float:
    """bhp per 100 kg."""
    return (record.power / record.kerb_weight) * 100


def _brand_matches(record: VehicleRecord, names: tuple[str, ...]) -> bool:
    brand = (record.brand or "").lower()
    return any(name in brand for name in names)


# ---------------------------------------------------------------------------
# Factor scores
# ---------------------------------------------------------------------------


def score_daily_traffic_ease(record: VehicleRecord) -> float:
    """Lighter, lower and moderately powered bikes are easier in traffic."""
    score = 5.0

    weight = record.kerb_weight
    if weight < 140:
        score += 2
    elif weight < 160:
        score += 1.5
    elif weight < 175:
        score += 0.5
    elif weight > 200:
        score -= 1.5
    elif weight > 185:
        score -= 0.5

    # Flat-footing at stops
    seat = record.seat_height
    if seat is not None:
        if seat < 770:
            score += 1
        elif seat < 790:
            score += 0.5
        elif seat > 830:
            score -= 1
        elif seat > 810:
            score -= 0.5

    pwr = _power_to_weight(record)
    if 6 <= pwr <= 10:
        score += 1
    elif pwr > 12:
        score -= 0.5

    if record.engine_cc < 250:
        score += 0.5
    elif record.engine_cc > 500:
        score -= 0.5

    return _finish(score)


def score_braking_safety_confidence(record: VehicleRecord) -> float:
    """Brake hardware, ABS and tyre width.

    The baseline of 3 describes drum brakes without ABS; disc brakes and
    ABS lift the score from there.
    """
    score = 3.0

    if record.front_brake == BrakeType.disc:
        score += 2
    if record.rear_brake == BrakeType.disc:
        score += 1

    if record.abs_type == AbsType.dual_channel:
        score += 3
    elif record.abs_type == AbsType.single_channel:
        score += 1.5

    rear = record.rear_tyre_width
    if rear is not None:
        if rear >= 150:
            score += 0.5
        elif rear >= 140:
            score += 0.25

    front = record.front_tyre_width
    if front is not None:
        if front >= 120:
            score += 0.5
        elif front >= 110:
            score += 0.25

    return _finish(score)


def score_primary_pillion_comfort(
    record: VehicleRecord,
    pillion_mode: PillionMode = PillionMode.primary,
) -> float:
    """Rear suspension, mass, wheelbase and seat height.

    In ``secondary`` mode (an occasional, often older passenger) stability
    and ABS count for more.
    """
    score = 5.0

    if record.rear_suspension == RearSuspension.monoshock:
        score += 1

    travel = record.rear_suspension_travel
    if travel and travel >= 130:
        score += 1
    elif travel and travel >= 110:
        score += 0.5

    weight = record.kerb_weight
    if weight >= 180:
        score += 1
    elif weight >= 165:
        score += 0.5
    elif weight < 140:
        score -= 0.5

    wheelbase = record.wheelbase
    if wheelbase is not None:
        if wheelbase >= 1420:
            score += 1
        elif wheelbase >= 1380:
            score += 0.5
        elif wheelbase < 1320:
            score -= 0.5

    seat = record.seat_height
    if seat is not None:
        if seat < 790:
            score += 0.5
        elif seat > 830:
            score -= 0.5

    if pillion_mode == PillionMode.secondary:
        if weight >= 175:
            score += 0.5
        if record.rear_suspension == RearSuspension.monoshock:
            score += 0.5
        if record.abs_type == AbsType.dual_channel:
            score += 0.5

    return _finish(score)


def score_highway_stability(record: VehicleRecord) -> float:
    score = 5.0

    wheelbase = record.wheelbase
    if wheelbase is not None:
        if wheelbase >= 1430:
            score += 1.5
        elif wheelbase >= 1400:
            score += 1
        elif wheelbase >= 1370:
            score += 0.5
        elif wheelbase < 1320:
            score -= 1

    weight = record.kerb_weight
    if weight >= 180:
        score += 1
    elif weight >= 165:
        score += 0.5
    elif weight < 145:
        score -= 0.5

    # Overtaking headroom
    power = record.power
    if power >= 35:
        score += 1
    elif power >= 25:
        score += 0.5
    elif power < 18:
        score -= 0.5

    rear = record.rear_tyre_width
    if rear is not None:
        if rear >= 150:
            score += 0.5
        elif rear >= 140:
            score += 0.25

    return _finish(score)


def score_rider_comfort(record: VehicleRecord) -> float:
    """Long-ride comfort: posture, seat, range, rear shock, clearance."""
    score = 5.0

    if record.handlebar_type == HandlebarType.raised:
        score += 1
    elif record.handlebar_type == HandlebarType.standard:
        score += 0.5
    elif record.handlebar_type == HandlebarType.clip_on:
        score -= 1

    seat = record.seat_height
    if seat is not None:
        if 780 <= seat <= 820:
            score += 0.5
        elif seat > 840:
            score -= 0.5

    fuel = record.fuel_capacity
    if fuel is not None:
        if fuel >= 15:
            score += 1
        elif fuel >= 12:
            score += 0.5
        elif fuel < 10:
            score -= 0.5

    if record.rear_suspension == RearSuspension.monoshock:
        score += 0.5

    clearance = record.ground_clearance
    if clearance is not None:
        if clearance >= 180:
            score += 0.5
        elif clearance >= 160:
            score += 0.25
        elif clearance < 140:
            score -= 0.5

    return _finish(score)


def score_suspension_compliance(record: VehicleRecord) -> float:
    score = 5.0

    if record.rear_suspension == RearSuspension.monoshock:
        score += 1.5
    elif record.rear_suspension == RearSuspension.twin:
        score += 0.5

    travel = record.rear_suspension_travel
    if travel and travel >= 140:
        score += 1
    elif travel and travel >= 120:
        score += 0.5
    elif travel and travel < 100:
        score -= 0.5

    front = (record.front_suspension or "").lower()
    if "usd" in front:
        score += 1
    elif "telescopic" in front:
        score += 0.25

    clearance = record.ground_clearance
    if clearance is not None:
        if clearance >= 200:
            score += 1
        elif clearance >= 175:
            score += 0.5
        elif clearance >= 160:
            score += 0.25
        elif clearance < 140:
            score -= 1

    return _finish(score)


def score_fun_engagement(record: VehicleRecord) -> float:
    score = 5.0

    pwr = _power_to_weight(record)
    if pwr >= 12:
        score += 2
    elif pwr >= 10:
        score += 1.5
    elif pwr >= 8:
        score += 1
    elif pwr >= 6:
        score += 0.5
    elif pwr < 5:
        score -= 0.5

    if record.engine_cc >= 400:
        score += 1
    elif record.engine_cc >= 300:
        score += 0.5
    elif record.engine_cc < 200:
        score -= 0.5

    if record.kerb_weight < 160:
        score += 0.5
    elif record.kerb_weight > 200:
        score -= 0.5

    if record.handlebar_type == HandlebarType.clip_on:
        score += 0.5

    return _finish(score)


def score_heat_management(record: VehicleRecord) -> float:
    """Use an externally supplied rating when it is in range, else estimate.

    The estimate starts at 6 and penalises large, powerful engines.
    """
    rating = record.heat_management_rating
    if rating and 1 <= rating <= 10:
        return round_half(rating)

    score = 6.0

    if record.engine_cc >= 400:
        score -= 1
    elif record.engine_cc >= 300:
        score -= 0.5
    elif record.engine_cc < 200:
        score += 0.5

    if record.power >= 40:
        score -= 0.5
    elif record.power < 20:
        score += 0.5

    return _finish(score)


def score_ownership_practicality(record: VehicleRecord) -> float:
    """Service-network reputation plus a parts-cost band from the price."""
    score = 5.0

    if _brand_matches(record, WIDE_SERVICE_BRANDS):
        score += 1.5
    elif _brand_matches(record, GOOD_SERVICE_BRANDS):
        score += 1
    elif _brand_matches(record, MODERATE_SERVICE_BRANDS):
        score += 0.5
    elif _brand_matches(record, LIMITED_SERVICE_BRANDS):
        score -= 0.5

    price = record.ex_showroom_price
    if price:
        if price < 150000:
            score += 0.5
        elif price > 300000:
            score -= 0.5

    return _finish(score)


def score_long_term_suitability(record: VehicleRecord) -> float:
    """Nine-plus years of ownership: engine size, brand, ABS, versatility."""
    score = 5.0

    cc = record.engine_cc
    if 250 <= cc <= 500:
        score += 1
    elif 200 <= cc <= 600:
        score += 0.5
    elif cc < 150:
        score -= 0.5
    elif cc > 700:
        score -= 0.5

    if 20 <= record.power <= 45:
        score += 0.5

    if _brand_matches(record, DURABLE_BRANDS):
        score += 1
    elif _brand_matches(record, RELIABLE_BRANDS):
        score += 0.5

    if record.abs_type == AbsType.dual_channel:
        score += 0.5

    if record.fuel_capacity is not None and record.fuel_capacity >= 14:
        score += 0.5

    if (
        record.ground_clearance is not None
        and record.ground_clearance >= 170
        and record.kerb_weight <= 185
    ):
        score += 0.5

    return _finish(score)


# ---------------------------------------------------------------------------
# Whole-record normalization
# ---------------------------------------------------------------------------


def normalize_vehicle(
    record: VehicleRecord,
    pillion_mode: PillionMode = PillionMode.primary,
) -> FactorScoreSet:
    return FactorScoreSet(
        daily_traffic_ease=score_daily_traffic_ease(record),
        braking_safety_confidence=score_braking_safety_confidence(record),
        primary_pillion_comfort=score_primary_pillion_comfort(record, pillion_mode),
        highway_stability=score_highway_stability(record),
        rider_comfort=score_rider_comfort(record),
        suspension_compliance=score_suspension_compliance(record),
        fun_engagement=score_fun_engagement(record),
        heat_management=score_heat_management(record),
        ownership_practicality=score_ownership_practicality(record),
        long_term_suitability=score_long_term_suitability(record),
    )


_CONFIDENCE_ORDER = [Confidence.high, Confidence.medium, Confidence.low]


def downgrade(confidence: Confidence) -> Confidence:
    """One step down: high -> medium -> low, low stays low."""
    index = _CONFIDENCE_ORDER.index(confidence)
    return _CONFIDENCE_ORDER[min(index + 1, len(_CONFIDENCE_ORDER) - 1)]


def _cap(confidence: Confidence, ceiling: Confidence) -> Confidence:
    return max(confidence, ceiling, key=_CONFIDENCE_ORDER.index)


def factor_confidences(record: VehicleRecord) -> dict[Factor, Confidence]:
    """How far each factor score can be trusted, given the record's data."""
    base = record.confidence or Confidence.low

    confidences = {factor: base for factor in Factor}
    if not record.heat_management_rating:
        confidences[Factor.heat_management] = Confidence.low
    # Predictive by nature
    confidences[Factor.ownership_practicality] = _cap(base, Confidence.medium)
    confidences[Factor.long_term_suitability] = _cap(base, Confidence.medium)

    if not record.rear_suspension_travel:
        for factor in (Factor.suspension_compliance, Factor.primary_pillion_comfort):
            confidences[factor] = downgrade(confidences[factor])

    if not record.handlebar_type:
        for factor in (Factor.rider_comfort, Factor.fun_engagement):
            confidences[factor] = downgrade(confidences[factor])

    if record.filled_fields:
        filled = set(record.filled_fields)
        for factor, inputs in FACTOR_INPUTS.items():
            if inputs & filled:
                confidences[factor] = downgrade(confidences[factor])

    return confidences
