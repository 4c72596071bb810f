#!/usr/bin/env python3
"""
Scoring Module - anchors, rubric and orchestration.

Public API:
- ScoringService: Main scoring orchestrator
- ScoreRequest / ScoreReport / DimensionScores: value objects

Submodules:

- models.py: Data structures and enumerations
- modes.py: Anchored vs explorer mode selection
- anchors.py: Permanent anchor table and resolver
- rubric.py: Deterministic keyword rubric
- sanitizer.py: Canonicalization of untrusted LLM payloads
- strategies.py: RemoteScorer / LocalRubricScorer
- bands.py: Named total-score bands
- service.py: ScoringService orchestrator
"""

from ebi.scorer.models import ScoreRequest, ScoreReport, DimensionScores
from ebi.scorer.service import ScoringService

__all__ = ['ScoringService', 'ScoreRequest', 'ScoreReport', 'DimensionScores']
