"""
Motologix: transparent, deterministic motorcycle ranking.

Responsibilities:
- Turn raw motorcycle specifications into auditable 1-10 factor scores.
- Aggregate them under user weights into a 0-100 recommendation score.
- Expose the engine over a small HTTP API.
"""
