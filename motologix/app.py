from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, HTTPException

from .engine.config import DEFAULT_ENGINE_CONFIG
from .engine.errors import RecordValidationError, ScoringPreconditionError
from .engine.factors import DEFAULT_WEIGHTS, FACTOR_METADATA
from .engine.models import (
    CompareRequest,
    ComparisonReport,
    ValidationResult,
    VehicleRecord,
    WeightVector,
)
from .engine.pipeline import run_comparison
from .engine.validator import validate_vehicle, validate_weights
from .engine.weights import normalize_weights

logger = logging.getLogger(__name__)

app = FastAPI(title="Motologix Scoring API", version="1.0.0")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/factors")
def factors() -> dict:
    return {
        "factors": [meta.model_dump(mode="json") for meta in FACTOR_METADATA],
        "default_weights": DEFAULT_WEIGHTS.model_dump(mode="json"),
    }


# ── Engine endpoints ─────────────────────────────────────────────────────


@app.post("/validate", response_model=ValidationResult)
def validate(body: VehicleRecord) -> ValidationResult:
    return validate_vehicle(body)


@app.post("/weights/normalize")
def weights_normalize(body: WeightVector) -> dict:
    return {
        "weights": normalize_weights(body).model_dump(),
        "validation": validate_weights(body).model_dump(),
    }


@app.post("/compare", response_model=ComparisonReport)
def compare(body: CompareRequest) -> ComparisonReport:
    if len(body.vehicles) > DEFAULT_ENGINE_CONFIG.max_vehicles:
        raise HTTPException(
            status_code=400,
            detail=f"Maximum {DEFAULT_ENGINE_CONFIG.max_vehicles} bikes can be compared at once",
        )

    try:
        report = run_comparison(body.vehicles, body.weights, body.pillion_mode)
    except RecordValidationError as exc:
        logger.warning("Comparison rejected: %s", exc)
        raise HTTPException(
            status_code=422,
            detail=[e.model_dump() for e in exc.result.errors],
        ) from exc
    except ScoringPreconditionError as exc:
        logger.error("Scoring invariant violated: %s", exc)
        raise HTTPException(
            status_code=500,
            detail=[i.model_dump() for i in exc.issues],
        ) from exc

    report.generated_at = datetime.now(timezone.utc).isoformat()
    return report
