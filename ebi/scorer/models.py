#!/usr/bin/env python3
"""
Scoring Models - Data structures for score requests and reports.
"""

from typing import List, Dict, Any, Optional, FrozenSet
from dataclasses import dataclass, field, asdict

DIMENSIONS = (
    "scope_of_impact",
    "direction_of_tension",
    "longevity",
    "cost_paid",
    "bridge_function",
)

SUBJECT_TYPES = ("person", "event", "idea")
DEFAULT_SUBJECT_TYPE = "person"

MODE_ANCHORED = "anchored"
MODE_EXPLORER = "explorer"

ENGINE_ANCHOR = "anchor"
ENGINE_AI = "ai"
ENGINE_FALLBACK = "deterministic_fallback"

SCORE_MIN = 1
SCORE_MAX = 10


@dataclass(frozen=True)
class ScoreRequest:
    """A single scoring request as received from the caller."""
    subject: str
    subject_type: str = DEFAULT_SUBJECT_TYPE
    notes: str = ""

    @classmethod
    def from_raw(
        cls,
        subject: Optional[Any],
        subject_type: Optional[Any] = None,
        notes: Optional[Any] = None
    ) -> 'ScoreRequest':
        """Build a request from loosely typed input, trimming every field.

        Unknown subject types fall back to the default ("person").
        """
        stype = str(subject_type or DEFAULT_SUBJECT_TYPE).strip().lower()
        if stype not in SUBJECT_TYPES:
            stype = DEFAULT_SUBJECT_TYPE
        return cls(
            subject=str(subject or "").strip(),
            subject_type=stype,
            notes=str(notes or "").strip(),
        )


@dataclass(frozen=True)
class DimensionScores:
    """The five EBI dimensions, each an integer in [1, 10]."""
    scope_of_impact: int
    direction_of_tension: int
    longevity: int
    cost_paid: int
    bridge_function: int

    @classmethod
    def uniform(cls, value: int) -> 'DimensionScores':
        return cls(**{name: value for name in DIMENSIONS})

    @property
    def total(self) -> int:
        return sum(getattr(self, name) for name in DIMENSIONS)

    def to_dict(self) -> Dict[str, int]:
        return {name: getattr(self, name) for name in DIMENSIONS}


@dataclass(frozen=True)
class AnchorRule:
    """A permanently fixed subject that is never scored."""
    subject_type: str
    aliases: FrozenSet[str]
    label: str
    rationale: str
    one_liner: str
    scores: DimensionScores = field(default_factory=lambda: DimensionScores.uniform(SCORE_MAX))


@dataclass(frozen=True)
class RubricAdjustment:
    """A keyword-triggered change to one dimension."""
    dimension: str
    delta: int
    keywords: FrozenSet[str]
    explanation: str


@dataclass
class ScoreReport:
    """Canonical scoring result returned to callers."""
    subject: str
    subject_type: str
    mode: str
    anchor: Optional[str]
    scores: DimensionScores
    one_liner: str
    discussion_prompts: List[str] = field(default_factory=list)
    rationale: List[str] = field(default_factory=list)
    engine: str = ENGINE_FALLBACK
    band: str = ""
    timestamp: Optional[str] = None

    @property
    def total_score(self) -> int:
        return self.scores.total

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['scores'] = self.scores.to_dict()
        data['total_score'] = self.total_score
        return data
