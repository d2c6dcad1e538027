from __future__ import annotations

from .factors import DEFAULT_WEIGHTS
from .models import Factor, WeightVector
from .validator import validate_weights

# Sums this close to 1.0 are treated as already normalized.
_NORMALIZED_TOLERANCE = 1e-12


def normalize_weights(weights: WeightVector) -> WeightVector:
    """Scale *weights* so they sum to 1.0.

    A vector summing to zero is replaced by the default vector. A vector
    that already sums to 1.0 is returned unchanged, which keeps
    normalization idempotent.
    """
    total = weights.total()
    if total == 0:
        return DEFAULT_WEIGHTS.model_copy()
    if abs(total - 1.0) <= _NORMALIZED_TOLERANCE:
        return weights.model_copy()
    return WeightVector(**{factor.value: weights[factor] / total for factor in Factor})


def weights_sum_to_one(weights: WeightVector) -> bool:
    """Quick check allowing for small floating point drift."""
    return abs(weights.total() - 1.0) < 0.01


def valid_weights_or_default(weights: WeightVector) -> WeightVector:
    return weights if validate_weights(weights).is_valid else DEFAULT_WEIGHTS.model_copy()
