"""
Deterministic motorcycle scoring engine.

Responsibilities:
- Validate raw vehicle records and fill missing fields with conservative defaults.
- Normalize raw specifications into ten 1-10 factor scores.
- Normalize user weights and aggregate factor scores into a 0-100 final score.
- Rank scored vehicles and compare any pair factor by factor.
"""
