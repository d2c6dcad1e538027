from __future__ import annotations

import pandas as pd

from .models import PillionMode, ScoredVehicle, VehicleRecord, WeightVector
from .scoring import score_vehicle


def assign_ranks(scored: list[ScoredVehicle]) -> list[ScoredVehicle]:
    """Sort by final score and assign competition ranks.

    Equal scores share a rank and the next lower score takes its 1-based
    position: [90, 85, 85, 80] -> [1, 2, 2, 4]. Equal scores keep their
    input order.
    """
    if not scored:
        return []

    frame = pd.DataFrame({"final_score": [s.final_score for s in scored]})
    frame["rank"] = frame["final_score"].rank(method="min", ascending=False).astype(int)
    frame = frame.sort_values("final_score", ascending=False, kind="stable")

    return [
        scored[idx].model_copy(update={"rank": int(row["rank"])})
        for idx, row in frame.iterrows()
    ]


def score_and_rank(
    records: list[VehicleRecord],
    weights: WeightVector,
    pillion_mode: PillionMode = PillionMode.primary,
) -> list[ScoredVehicle]:
    """Score every record and return them best first, ranks assigned."""
    scored = [score_vehicle(record, weights, pillion_mode) for record in records]
    return assign_ranks(scored)
