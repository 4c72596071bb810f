#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from functools import lru_cache

from ebi.scorer import ScoringService
from .config import get_config


@lru_cache()
def get_scoring_service() -> ScoringService:
    """
    FastAPI dependency returning the process-wide scoring service.

    The service holds only read-only state (anchor and rubric tables, the
    LLM client), so one instance is shared by all requests.

    Usage:
        @router.post("/endpoint")
        def my_endpoint(service: ScoringService = Depends(get_scoring_service)):
            ...
    """
    return ScoringService.from_config(get_config())
