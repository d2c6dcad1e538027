from __future__ import annotations

from .config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .factors import FACTOR_LABELS
from .models import Factor, FactorComparison, ScoredVehicle, Winner


def compare_vehicles(
    a: ScoredVehicle,
    b: ScoredVehicle,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> list[FactorComparison]:
    """Factor-by-factor differences between two scored vehicles.

    Differences within ``config.tie_margin`` are ties. The result is ordered
    by absolute difference, biggest differentiator first.
    """
    comparisons: list[FactorComparison] = []
    for factor in Factor:
        score_a = a.factor_scores[factor]
        score_b = b.factor_scores[factor]
        diff = score_a - score_b

        if diff > config.tie_margin:
            winner = Winner.a
        elif diff < -config.tie_margin:
            winner = Winner.b
        else:
            winner = Winner.tie

        comparisons.append(FactorComparison(
            factor=factor,
            label=FACTOR_LABELS[factor],
            score_a=score_a,
            score_b=score_b,
            difference=abs(diff),
            winner=winner,
        ))

    return sorted(comparisons, key=lambda c: c.difference, reverse=True)
