#!/usr/bin/env python3
"""
Scorer Strategies - interchangeable ways of scoring an unanchored subject.

- RemoteScorer: asks an LLMProvider, then sanitizes the payload
- LocalRubricScorer: deterministic rubric, always available

ScoringService walks its strategies in order and uses the first available
one that succeeds.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ebi.llm.interfaces import LLMProvider
from ebi.scorer.models import ScoreReport, ScoreRequest, MODE_ANCHORED
from ebi.scorer.anchors import ANCHOR_REFERENCE_LABEL
from ebi.scorer.rubric import score_with_rubric
from ebi.scorer.sanitizer import (
    sanitize_payload,
    MAX_DISCUSSION_PROMPTS,
    MAX_RATIONALE_ENTRIES,
)


class SubjectScorer(ABC):
    """Interface for anything that can score an unanchored subject."""

    name: str = "scorer"

    @property
    def is_available(self) -> bool:
        return True

    @abstractmethod
    def score(self, request: ScoreRequest, mode: str) -> ScoreReport:
        """
        Score the request in the given mode.

        Raises:
            ScoringAdapterError: If a remote dependency fails.
        """
        pass


class RemoteScorer(SubjectScorer):
    """Scores through an external LLM; available only when a provider is configured."""

    name = "remote"

    def __init__(
        self,
        provider: Optional[LLMProvider],
        max_prompts: int = MAX_DISCUSSION_PROMPTS,
        max_rationale: int = MAX_RATIONALE_ENTRIES
    ):
        self.provider = provider
        self.max_prompts = min(max_prompts, MAX_DISCUSSION_PROMPTS)
        self.max_rationale = min(max_rationale, MAX_RATIONALE_ENTRIES)

    @property
    def is_available(self) -> bool:
        return self.provider is not None

    def score(self, request: ScoreRequest, mode: str) -> ScoreReport:
        payload = self.provider.score_subject(request.subject, request.subject_type, request.notes)
        anchor = ANCHOR_REFERENCE_LABEL if mode == MODE_ANCHORED else None
        return sanitize_payload(
            payload,
            request,
            mode,
            anchor=anchor,
            max_prompts=self.max_prompts,
            max_rationale=self.max_rationale,
        )


class LocalRubricScorer(SubjectScorer):
    """Deterministic keyword rubric. Never fails, never leaves the process."""

    name = "rubric"

    def score(self, request: ScoreRequest, mode: str) -> ScoreReport:
        return score_with_rubric(request, mode)
