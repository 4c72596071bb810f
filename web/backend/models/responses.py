#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class DimensionScoresResponse(BaseModel):
    """The five EBI dimensions."""
    scope_of_impact: int = Field(ge=1, le=10)
    direction_of_tension: int = Field(ge=1, le=10)
    longevity: int = Field(ge=1, le=10)
    cost_paid: int = Field(ge=1, le=10)
    bridge_function: int = Field(ge=1, le=10)


class ScoreResponse(BaseModel):
    """A scored subject."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "subject": "Jesus",
                "subject_type": "person",
                "mode": "anchored",
                "anchor": "Jesus (50/50 reference point)",
                "scores": {
                    "scope_of_impact": 10,
                    "direction_of_tension": 10,
                    "longevity": 10,
                    "cost_paid": 10,
                    "bridge_function": 10
                },
                "total_score": 50,
                "band": "Foundational / Exemplary (45–50)",
                "one_liner": "Anchored Mode: Jesus is the EBI reference point (10/10 across all measures).",
                "discussion_prompts": [
                    "If Jesus is the 10/10 anchor, what changes in how you score everyone else?"
                ],
                "rationale": [
                    "Permanent anchor: Jesus is the EBI reference point and is not scored."
                ],
                "engine": "anchor",
                "timestamp": "2026-02-01T12:00:00+00:00"
            }
        }
    )

    subject: str
    subject_type: str
    mode: str
    anchor: Optional[str]
    scores: DimensionScoresResponse
    total_score: int = Field(ge=5, le=50)
    band: str
    one_liner: str
    discussion_prompts: List[str] = Field(default_factory=list, max_length=6)
    rationale: List[str] = Field(default_factory=list)
    engine: str
    timestamp: str


class HealthResponse(BaseModel):
    ok: bool = True
    status: str = "healthy"
    service: str = "ebi-web"
