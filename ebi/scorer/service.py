#!/usr/bin/env python3
"""
Scoring Service - orchestrates a single score request.

Flow:
1. Validate (subject must be non-empty after trimming)
2. Normalize the subject and select the mode
3. Anchor check: anchored subjects short-circuit with a fixed 50/50 report
4. Try each available strategy in order (LLM first, rubric last); a failing
   strategy is logged and skipped, never surfaced
5. Attach band and timestamp
"""

from datetime import datetime, timezone
from typing import List, Optional, Sequence
import logging

from ebi.config_loader import AppConfig
from ebi.exceptions import InvalidScoreRequestError, ScoringAdapterError, ScoringServiceError
from ebi.llm.interfaces import LLMProvider
from ebi.scorer.anchors import resolve_anchor, build_anchor_report
from ebi.scorer.bands import score_band
from ebi.scorer.models import ScoreReport, ScoreRequest
from ebi.scorer.modes import select_mode, DEFAULT_EXPLORER_TOKEN
from ebi.scorer.strategies import SubjectScorer, RemoteScorer, LocalRubricScorer
from ebi.utils import normalize_text

logger = logging.getLogger(__name__)

MISSING_SUBJECT = "Missing subject"


class ScoringService:
    """
    Resolve a ScoreRequest into exactly one ScoreReport.

    The last strategy is expected to be LocalRubricScorer, which cannot fail;
    it is appended automatically when missing so there is always a floor.
    """

    def __init__(
        self,
        strategies: Optional[Sequence[SubjectScorer]] = None,
        explorer_token: str = DEFAULT_EXPLORER_TOKEN
    ):
        chain: List[SubjectScorer] = list(strategies or [])
        if not chain or not isinstance(chain[-1], LocalRubricScorer):
            chain.append(LocalRubricScorer())
        self.strategies = chain
        self.explorer_token = explorer_token

    @classmethod
    def from_config(cls, config: AppConfig, provider: Optional[LLMProvider] = None) -> 'ScoringService':
        """Build the service; an OpenAI provider is created only when an API key is set."""
        if provider is None and config.llm.api_key:
            from ebi.llm.openai_service import OpenAIService
            provider = OpenAIService(
                api_key=config.llm.api_key,
                base_url=config.llm.base_url,
                model_config=config.llm.model_dump(include={'model', 'temperature', 'timeout_seconds'}),
            )

        if provider is None:
            logger.info("No LLM API key configured; scoring uses the deterministic rubric only")

        remote = RemoteScorer(
            provider,
            max_prompts=config.scoring.max_discussion_prompts,
            max_rationale=config.scoring.max_rationale_entries,
        )
        return cls([remote, LocalRubricScorer()], explorer_token=config.scoring.explorer_token)

    def score(self, request: ScoreRequest) -> ScoreReport:
        """
        Score a request.

        Raises:
            InvalidScoreRequestError: If the subject is empty.
            ScoringServiceError: If the pipeline fails unexpectedly.
        """
        if not request.subject or not request.subject.strip():
            raise InvalidScoreRequestError(MISSING_SUBJECT)

        try:
            report = self._resolve(request)
        except Exception as e:
            logger.exception(f"Scoring failed for subject '{request.subject}'")
            raise ScoringServiceError("Server error", detail=str(e) or e.__class__.__name__) from e

        report.band = score_band(report.total_score)
        report.timestamp = datetime.now(timezone.utc).isoformat()
        return report

    def _resolve(self, request: ScoreRequest) -> ScoreReport:
        normalized = normalize_text(request.subject)
        mode = select_mode(request.notes, self.explorer_token)

        rule = resolve_anchor(normalized, request.subject_type, mode)
        if rule is not None:
            logger.info(f"Outcome anchor_match: '{request.subject}' -> {rule.label}")
            return build_anchor_report(request.subject, rule)

        for strategy in self.strategies[:-1]:
            if not strategy.is_available:
                continue
            try:
                report = strategy.score(request, mode)
            except ScoringAdapterError as e:
                logger.warning(f"Scorer '{strategy.name}' failed, falling back: {e}")
                continue
            except Exception:
                logger.exception(f"Scorer '{strategy.name}' raised unexpectedly, falling back")
                continue
            logger.info(f"Outcome ai_success: '{request.subject}' scored by '{strategy.name}' ({mode})")
            return report

        report = self.strategies[-1].score(request, mode)
        logger.info(f"Outcome ai_fallback: '{request.subject}' scored by rubric ({mode})")
        return report
