#!/usr/bin/env python3
"""
Result Sanitizer - turn an untrusted LLM payload into a canonical ScoreReport.

Never raises. Every dimension is coerced to a number (anything unusable
becomes 1), rounded half away from zero and clamped to [1, 10]. The total is
always recomputed; a total supplied by the model is ignored.
"""

from typing import Any, Dict, List, Optional
import logging
import math

from ebi.scorer.models import (
    DimensionScores,
    ScoreReport,
    ScoreRequest,
    DIMENSIONS,
    SUBJECT_TYPES,
    SCORE_MIN,
    ENGINE_AI,
    MODE_ANCHORED,
)
from ebi.utils import clamp_score

logger = logging.getLogger(__name__)

MAX_DISCUSSION_PROMPTS = 6
MAX_RATIONALE_ENTRIES = 8


def _coerce_score(value: Any) -> int:
    # bool is an int subclass; true/false are not scores
    if isinstance(value, bool):
        return SCORE_MIN
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return SCORE_MIN
    if not math.isfinite(number):
        return SCORE_MIN
    return clamp_score(number)


def sanitize_scores(raw_scores: Any) -> DimensionScores:
    if not isinstance(raw_scores, dict):
        raw_scores = {}
    return DimensionScores(**{name: _coerce_score(raw_scores.get(name)) for name in DIMENSIONS})


def _string_list(value: Any, limit: int) -> List[str]:
    """Keep non-blank strings from a list/tuple, trimmed, at most `limit`."""
    if not isinstance(value, (list, tuple)):
        return []
    items = [item.strip() for item in value if isinstance(item, str) and item.strip()]
    return items[:limit]


def _rationale_entries(payload: Dict[str, Any], limit: int) -> List[str]:
    if "rationale" in payload:
        return _string_list(payload.get("rationale"), limit)

    # Older prompt versions asked for {"rationales": {dimension: text}}
    per_dimension = payload.get("rationales")
    if isinstance(per_dimension, dict):
        entries = [
            f"{name}: {text.strip()}"
            for name, text in per_dimension.items()
            if isinstance(text, str) and text.strip()
        ]
        return entries[:limit]
    return []


def default_one_liner(subject: str, mode: str) -> str:
    frame = "Anchored" if mode == MODE_ANCHORED else "Explorer"
    return f"{subject} scored in {frame} Mode."


def sanitize_payload(
    payload: Any,
    request: ScoreRequest,
    mode: str,
    anchor: Optional[str] = None,
    max_prompts: int = MAX_DISCUSSION_PROMPTS,
    max_rationale: int = MAX_RATIONALE_ENTRIES
) -> ScoreReport:
    """
    Build a ScoreReport from an arbitrary payload.

    Args:
        payload: Parsed JSON from the scoring service (any shape)
        request: The incoming request; supplies subject and fallback type
        mode: Interpretive frame chosen for the request
        anchor: Anchor label to report for the frame, if any
        max_prompts: Cap on discussion prompts
        max_rationale: Cap on rationale entries

    Returns:
        A canonical ScoreReport tagged engine="ai".
    """
    if not isinstance(payload, dict):
        logger.warning(f"Scoring payload is {type(payload).__name__}, not an object; using defaults")
        payload = {}

    subject_type = payload.get("subject_type")
    if subject_type not in SUBJECT_TYPES:
        subject_type = request.subject_type

    one_liner = payload.get("one_liner")
    if not isinstance(one_liner, str) or not one_liner.strip():
        one_liner = default_one_liner(request.subject, mode)

    return ScoreReport(
        subject=request.subject,
        subject_type=subject_type,
        mode=mode,
        anchor=anchor,
        scores=sanitize_scores(payload.get("scores")),
        one_liner=one_liner.strip(),
        discussion_prompts=_string_list(payload.get("discussion_prompts"), max_prompts),
        rationale=_rationale_entries(payload, max_rationale),
        engine=ENGINE_AI,
    )
