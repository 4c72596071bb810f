#!/usr/bin/env python3
"""
Deterministic Rubric - keyword-driven scoring used whenever the LLM is
unavailable or fails.

Scoring is a pure function of (subject_type, mode, normalized text):

1. Start from a per-type baseline (BASELINES).
2. Fire every adjustment in RUBRIC whose keywords appear in the
   normalized subject + notes. Rules are independent; each fires at most
   once and adds one rationale entry.
3. Round half away from zero and clamp each dimension to [1, 10].

Keywords match whole words. A trailing "*" marks a word-prefix stem, so
"persecut*" matches "persecuted" and "persecution" but "war" does not
match "warm".
"""

from typing import Dict, List, Tuple, Pattern
import logging
import re

from ebi.scorer.models import (
    DimensionScores,
    RubricAdjustment,
    ScoreReport,
    ScoreRequest,
    DIMENSIONS,
    MODE_ANCHORED,
    ENGINE_FALLBACK,
)
from ebi.scorer.anchors import ANCHOR_REFERENCE_LABEL
from ebi.utils import normalize_text, clamp_score

logger = logging.getLogger(__name__)

# Mid-scale start for every dimension. Events carry one point less cost_paid:
# the cost of an event is spread over many carriers.
BASELINES: Dict[str, Dict[str, int]] = {
    "person": {
        "scope_of_impact": 6,
        "direction_of_tension": 6,
        "longevity": 6,
        "cost_paid": 6,
        "bridge_function": 6,
    },
    "event": {
        "scope_of_impact": 6,
        "direction_of_tension": 6,
        "longevity": 6,
        "cost_paid": 5,
        "bridge_function": 6,
    },
    "idea": {
        "scope_of_impact": 6,
        "direction_of_tension": 6,
        "longevity": 6,
        "cost_paid": 6,
        "bridge_function": 6,
    },
}


def _rule(dimension: str, delta: int, explanation: str, *keywords: str) -> RubricAdjustment:
    return RubricAdjustment(
        dimension=dimension,
        delta=delta,
        keywords=frozenset(keywords),
        explanation=explanation,
    )


RUBRIC: Tuple[RubricAdjustment, ...] = (
    # scope_of_impact
    _rule("scope_of_impact", 2, "civilizational or world-shaping reach",
          "global", "world", "worldwide", "civilization*", "civilisation*", "empire*",
          "epoch*", "humanity", "nations", "continent*", "universal", "reformation",
          "printing press", "revolution*"),
    _rule("scope_of_impact", -1, "mainly local or regional reach",
          "local", "locally", "regional", "village*", "town", "parish*", "provincial",
          "county", "neighborhood*", "neighbourhood*", "hometown"),
    # direction_of_tension (harm outweighs the matching raise)
    _rule("direction_of_tension", 2, "moves toward love, truth, freedom or conscience",
          "love", "loved", "truth", "truthful", "freedom", "liberty", "conscience",
          "compassion*", "mercy", "forgiv*", "dignity", "justice", "peace*"),
    _rule("direction_of_tension", -3, "moves toward control, coercion or harm",
          "control", "controlling", "coerc*", "tyrann*", "tyrant*", "oppress*",
          "genocide", "massacre*", "harm", "harmed", "violence", "violent",
          "propaganda", "slavery", "enslav*", "terror*", "dictator*"),
    _rule("direction_of_tension", 1, "carries renewal or reform",
          "renewal", "renew*", "reform*", "revival", "restoration", "awakening"),
    # longevity
    _rule("longevity", 2, "doctrinal, textual or institutional endurance",
          "doctrine*", "doctrinal", "scripture*", "bible", "canon", "creed*",
          "institution*", "tradition*", "enduring", "endured", "centuries",
          "millennia", "legacy", "theses"),
    _rule("longevity", -2, "short-lived or trend-driven",
          "fad*", "trend*", "trending", "fleeting", "shortlived", "short lived",
          "ephemeral", "viral", "momentary"),
    # cost_paid (borne by the carrier, not inflicted on others)
    _rule("cost_paid", 3, "suffering, sacrifice or persecution borne by the carrier",
          "persecut*", "martyr*", "suffer*", "sacrific*", "imprison*", "prison",
          "exile*", "executed", "execution", "tortur*", "crucified",
          "excommunicat*", "hunted"),
    _rule("cost_paid", 1, "voluntary loss",
          "renounc*", "vow*", "poverty", "gave up", "forsook", "celiba*",
          "surrender*"),
    _rule("cost_paid", -1, "held power, wealth or status",
          "power", "powerful", "wealth*", "rich", "riches", "status", "fame",
          "famous", "privilege*", "throne", "crown", "luxury"),
    # bridge_function
    _rule("bridge_function", 2, "reconciles, teaches or preserves",
          "reconcil*", "teach*", "taught", "preserv*", "translat*", "educat*",
          "heal*", "mediat*", "unite*", "unity", "bridge*", "school*"),
    _rule("bridge_function", -2, "divides, splits or wages war",
          "division", "divisive", "divid*", "schism*", "war", "wars", "warfare",
          "crusade*", "sectarian", "split", "polariz*", "polaris*"),
)


def _compile(keywords) -> Pattern:
    parts = []
    for kw in sorted(keywords):
        if kw.endswith("*"):
            parts.append(re.escape(kw[:-1]) + r"\w*")
        else:
            parts.append(re.escape(kw))
    return re.compile(r"\b(?:" + "|".join(parts) + r")\b")


# Compiled once at import; shared read-only across requests
_PATTERNS: Tuple[Tuple[RubricAdjustment, Pattern], ...] = tuple(
    (adjustment, _compile(adjustment.keywords)) for adjustment in RUBRIC
)

ANCHORED_PROMPTS: Tuple[str, ...] = (
    "Relative to Jesus as the 10/10 anchor, what should change in these scores?",
    "Where do you see alignment with love, truth, and freedom?",
    "What is the cost paid (not inflicted)?",
    "What does this person/event help people cross?",
    "What would a thoughtful critic argue, and how would you respond charitably?",
)

EXPLORER_PROMPTS: Tuple[str, ...] = (
    "What evidence supports this score?",
    "Which measure feels too high or too low, and why?",
    "What would someone who disagrees say?",
    "Does this move us toward love or toward control?",
)


def format_rationale(adjustment: RubricAdjustment, matched: List[str]) -> str:
    return (
        f"{adjustment.dimension} {adjustment.delta:+d}: {adjustment.explanation} "
        f"(matched: {', '.join(matched)})"
    )


def evaluate_rubric(
    subject_type: str,
    normalized_text: str
) -> Tuple[DimensionScores, List[str]]:
    """
    Score normalized text against the rubric.

    Args:
        subject_type: person/event/idea; unknown types use the person baseline
        normalized_text: Output of normalize_text(subject + notes)

    Returns:
        Tuple of (clamped DimensionScores, rationale entries in rubric order)
    """
    raw = dict(BASELINES.get(subject_type, BASELINES["person"]))
    rationale = []

    for adjustment, pattern in _PATTERNS:
        matched = sorted({m.group(0) for m in pattern.finditer(normalized_text)})
        if not matched:
            continue
        raw[adjustment.dimension] += adjustment.delta
        rationale.append(format_rationale(adjustment, matched))

    scores = DimensionScores(**{name: clamp_score(raw[name]) for name in DIMENSIONS})

    if not rationale:
        rationale.append("No rubric signals found; baseline scores kept.")

    return scores, rationale


def score_with_rubric(request: ScoreRequest, mode: str) -> ScoreReport:
    """Build a full report from the deterministic rubric."""
    text = normalize_text(f"{request.subject} {request.notes}")
    scores, rationale = evaluate_rubric(request.subject_type, text)

    if mode == MODE_ANCHORED:
        one_liner = (
            f"{request.subject} scored in Anchored Mode "
            f"(measured in light of the Jesus anchor; deterministic rubric)."
        )
        prompts = list(ANCHORED_PROMPTS)
        anchor = ANCHOR_REFERENCE_LABEL
    else:
        one_liner = f"{request.subject} scored in Explorer Mode (unanchored; discussion-first rubric)."
        prompts = list(EXPLORER_PROMPTS)
        anchor = None

    logger.debug(f"Rubric scored '{request.subject}': {scores.to_dict()} (total {scores.total})")

    return ScoreReport(
        subject=request.subject,
        subject_type=request.subject_type,
        mode=mode,
        anchor=anchor,
        scores=scores,
        one_liner=one_liner,
        discussion_prompts=prompts,
        rationale=rationale,
        engine=ENGINE_FALLBACK,
    )
