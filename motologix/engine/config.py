from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .models import PillionMode

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class EngineConfig:
    default_pillion_mode: PillionMode = PillionMode(os.getenv("MOTOLOGIX_PILLION_MODE", "primary"))
    max_vehicles: int = int(os.getenv("MOTOLOGIX_MAX_VEHICLES", "5"))
    tie_margin: float = 0.25
    narrow_range_points: int = 5
    low_confidence_limit: int = 3


DEFAULT_ENGINE_CONFIG = EngineConfig()
