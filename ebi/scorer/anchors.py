#!/usr/bin/env python3
"""
Permanent Anchors - subjects fixed at 10/10 that bypass scoring.

Jesus is the reference point, not a contestant. The Crucifixion and the
Resurrection are anchored as events for the same reason. Matching is exact
membership of the normalized subject in the alias set of the rule with the
same subject type; there is no fuzzy, substring or cross-type matching.
"""

from typing import List, Optional, Tuple
import logging

from ebi.scorer.models import (
    AnchorRule,
    DimensionScores,
    ScoreReport,
    MODE_ANCHORED,
    ENGINE_ANCHOR,
)

logger = logging.getLogger(__name__)

ANCHOR_REFERENCE_LABEL = "Jesus (reference point)"

PERSON_ANCHOR = AnchorRule(
    subject_type="person",
    aliases=frozenset({
        "jesus",
        "jesus christ",
        "christ",
        "the christ",
        "jesus of nazareth",
        "yeshua",
        "yeshua hamashiach",
        "lord jesus",
        "our lord jesus christ",
    }),
    label="Jesus (50/50 reference point)",
    rationale="Permanent anchor: Jesus is the EBI reference point and is not scored.",
    one_liner="Anchored Mode: Jesus is the EBI reference point (10/10 across all measures).",
)

EVENT_ANCHORS: Tuple[AnchorRule, ...] = (
    AnchorRule(
        subject_type="event",
        aliases=frozenset({
            "the crucifixion",
            "crucifixion",
            "crucifixion of jesus",
            "the crucifixion of jesus",
            "the crucifixion of christ",
        }),
        label="The Crucifixion (50/50 reference event)",
        rationale="Permanent anchor event: the Crucifixion is part of the reference point and is not scored.",
        one_liner="Anchored Mode: the Crucifixion is an EBI reference event (10/10 across all measures).",
    ),
    AnchorRule(
        subject_type="event",
        aliases=frozenset({
            "the resurrection",
            "resurrection",
            "resurrection of jesus",
            "the resurrection of jesus",
            "the resurrection of christ",
        }),
        label="The Resurrection (50/50 reference event)",
        rationale="Permanent anchor event: the Resurrection is part of the reference point and is not scored.",
        one_liner="Anchored Mode: the Resurrection is an EBI reference event (10/10 across all measures).",
    ),
)

ANCHOR_RULES: Tuple[AnchorRule, ...] = (PERSON_ANCHOR,) + EVENT_ANCHORS

ANCHOR_PROMPTS: Tuple[str, ...] = (
    "If Jesus is the 10/10 anchor, what changes in how you score everyone else?",
    "Which measure do you personally overweight (scope, cost, longevity, etc.)?",
    "What evidence supports your score adjustments?",
)


def resolve_anchor(
    normalized_subject: str,
    subject_type: str,
    mode: str,
    rules: Tuple[AnchorRule, ...] = ANCHOR_RULES
) -> Optional[AnchorRule]:
    """
    Find the anchor rule for a subject, if any.

    Args:
        normalized_subject: Subject already passed through normalize_text
        subject_type: Declared type of the subject (person/event/idea)
        mode: Interpretive frame; anchors only apply in anchored mode
        rules: Anchor table to search

    Returns:
        The matching AnchorRule, or None when scoring should proceed.
    """
    if mode != MODE_ANCHORED or not normalized_subject:
        return None

    for rule in rules:
        if rule.subject_type == subject_type and normalized_subject in rule.aliases:
            logger.info(f"Subject '{normalized_subject}' matched anchor: {rule.label}")
            return rule
    return None


def build_anchor_report(subject: str, rule: AnchorRule) -> ScoreReport:
    """Assemble the fixed 50/50 report for an anchored subject."""
    prompts: List[str] = list(ANCHOR_PROMPTS)
    return ScoreReport(
        subject=subject,
        subject_type=rule.subject_type,
        mode=MODE_ANCHORED,
        anchor=rule.label,
        scores=DimensionScores(**rule.scores.to_dict()),
        one_liner=rule.one_liner,
        discussion_prompts=prompts,
        rationale=[rule.rationale],
        engine=ENGINE_ANCHOR,
    )
