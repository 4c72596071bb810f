#!/usr/bin/env python3
"""
Unit tests for LLM payload sanitization.

Tests verify:
- Scores are coerced, rounded and clamped into [1, 10]
- The total is recomputed, never trusted
- Lists are filtered and truncated
- Malformed payloads never raise
"""
import pytest

from ebi.scorer.models import ScoreRequest, DIMENSIONS, MODE_ANCHORED, MODE_EXPLORER, ENGINE_AI
from ebi.scorer.sanitizer import sanitize_payload, sanitize_scores, default_one_liner


@pytest.fixture
def request_ctx():
    return ScoreRequest("Martin Luther", "person", "")


class TestSanitizeScores:

    def test_coerces_rounds_and_clamps(self):
        scores = sanitize_scores({
            "scope_of_impact": "7",
            "direction_of_tension": 12,
            "longevity": -3,
            "cost_paid": "abc",
            "bridge_function": 4.5,
        })

        assert scores.to_dict() == {
            "scope_of_impact": 7,
            "direction_of_tension": 10,
            "longevity": 1,
            "cost_paid": 1,
            "bridge_function": 5,
        }
        assert scores.total == 24

    def test_zero_is_raised_to_floor(self):
        scores = sanitize_scores({name: 0 for name in DIMENSIONS})
        assert scores.total == 5

    @pytest.mark.parametrize("value", [None, True, False, [], {}, "nan", float("inf"), "1e999", 10 ** 400])
    def test_unusable_values_become_one(self, value):
        scores = sanitize_scores({"scope_of_impact": value})
        assert scores.scope_of_impact == 1

    @pytest.mark.parametrize("raw", [None, "9", 9, [9, 9, 9, 9, 9]])
    def test_non_mapping_scores(self, raw):
        assert sanitize_scores(raw).total == 5


class TestSanitizePayload:

    def test_total_is_recomputed(self, request_ctx):
        report = sanitize_payload(
            {"scores": {name: 8 for name in DIMENSIONS}, "total_score": 99},
            request_ctx,
            MODE_ANCHORED,
        )
        assert report.total_score == 40
        assert report.to_dict()["total_score"] == 40
        assert report.engine == ENGINE_AI

    def test_lists_are_truncated(self, request_ctx):
        report = sanitize_payload(
            {
                "discussion_prompts": [f"prompt {i}" for i in range(10)],
                "rationale": [f"reason {i}" for i in range(12)],
            },
            request_ctx,
            MODE_ANCHORED,
        )
        assert report.discussion_prompts == [f"prompt {i}" for i in range(6)]
        assert report.rationale == [f"reason {i}" for i in range(8)]

    def test_non_list_fields_become_empty(self, request_ctx):
        report = sanitize_payload(
            {"discussion_prompts": "ask questions", "rationale": 42},
            request_ctx,
            MODE_ANCHORED,
        )
        assert report.discussion_prompts == []
        assert report.rationale == []

    def test_non_string_and_blank_entries_dropped(self, request_ctx):
        report = sanitize_payload(
            {"discussion_prompts": ["  Why?  ", "", None, 3, {"q": 1}, "How?"]},
            request_ctx,
            MODE_ANCHORED,
        )
        assert report.discussion_prompts == ["Why?", "How?"]

    def test_rationales_mapping_is_flattened(self, request_ctx):
        report = sanitize_payload(
            {"rationales": {"longevity": "Still read today.", "cost_paid": "  "}},
            request_ctx,
            MODE_ANCHORED,
        )
        assert report.rationale == ["longevity: Still read today."]

    def test_missing_one_liner_gets_default(self, request_ctx):
        report = sanitize_payload({"one_liner": "   "}, request_ctx, MODE_EXPLORER)
        assert report.one_liner == default_one_liner("Martin Luther", MODE_EXPLORER)
        assert "Explorer Mode" in report.one_liner

    def test_subject_type_validated(self, request_ctx):
        assert sanitize_payload({"subject_type": "alien"}, request_ctx, MODE_ANCHORED).subject_type == "person"
        assert sanitize_payload({"subject_type": "event"}, request_ctx, MODE_ANCHORED).subject_type == "event"

    def test_subject_and_frame_come_from_request(self, request_ctx):
        report = sanitize_payload(
            {"subject": "Someone Else", "mode": "explorer", "anchor": "Me"},
            request_ctx,
            MODE_ANCHORED,
            anchor="Jesus (reference point)",
        )
        assert report.subject == "Martin Luther"
        assert report.mode == MODE_ANCHORED
        assert report.anchor == "Jesus (reference point)"

    @pytest.mark.parametrize("payload", [None, [], "text", 42, {"scores": "high"}])
    def test_never_raises(self, payload, request_ctx):
        report = sanitize_payload(payload, request_ctx, MODE_ANCHORED)
        assert report.total_score == 5
        assert report.discussion_prompts == []

    def test_idempotent_on_canonical_report(self, request_ctx):
        first = sanitize_payload(
            {"scores": {"scope_of_impact": 9.5, "longevity": "3", "cost_paid": 7}},
            request_ctx,
            MODE_ANCHORED,
        )
        second = sanitize_payload(first.to_dict(), request_ctx, MODE_ANCHORED)

        assert second.scores == first.scores
        assert second.total_score == first.total_score
