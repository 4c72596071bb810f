#!/usr/bin/env python3
"""
Scoring endpoints - score a person, event or idea on the EBI.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Response

from ebi.scorer import ScoringService
from ..dependencies import get_scoring_service
from ..models.requests import ScoreRequestBody
from ..models.responses import ScoreResponse, HealthResponse

router = APIRouter(prefix="/api", tags=["scoring"])


@router.post("/ebi", response_model=ScoreResponse)
def score_subject(
    body: Optional[ScoreRequestBody] = None,
    service: ScoringService = Depends(get_scoring_service)
):
    """
    Score a subject on the five EBI dimensions.

    - subject: required, non-empty after trimming (400 "Missing subject" otherwise)
    - subjectType: person, event or idea (default person)
    - notes: optional context; "#explorer" switches to Explorer Mode

    The response's engine field tells which path produced the scores:
    anchor, ai, or deterministic_fallback.
    """
    body = body or ScoreRequestBody()
    report = service.score(body.to_score_request())
    return report.to_dict()


@router.options("/ebi", status_code=204, include_in_schema=False)
def score_subject_options():
    """Bare OPTIONS (no CORS preflight headers) answers 204 with no body."""
    return Response(status_code=204)


@router.get("/health", response_model=HealthResponse)
def health_check():
    """Health check endpoint."""
    return HealthResponse()
