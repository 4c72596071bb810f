"""
Unit tests for the OpenAI scoring service.

Tests verify:
- score_subject sends the rubric system prompt and a JSON object response format
- The client is built with a timeout and without retries
- Every failure mode surfaces as ScoringAdapterError
"""
import pytest
from unittest.mock import MagicMock
import json

import httpx
import openai

from ebi.exceptions import ScoringAdapterError
from ebi.llm.openai_service import OpenAIService
from ebi.llm.system_prompts import EBI_SCORING_SYSTEM_PROMPT, build_scoring_user_message


def _response_with(content):
    mock_message = MagicMock()
    mock_message.content = content
    mock_choice = MagicMock()
    mock_choice.message = mock_message
    mock_response = MagicMock()
    mock_response.choices = [mock_choice]
    return mock_response


class TestClientConstruction:

    def test_client_has_timeout_and_no_retries(self):
        svc = OpenAIService(api_key="test", model_config={"timeout_seconds": 12})

        assert svc.client.max_retries == 0
        assert svc.client.timeout == 12
        assert svc.model == "gpt-4.1-mini"


class TestScoreSubject:

    @pytest.fixture
    def service(self):
        """Create service with mocked client."""
        svc = OpenAIService(api_key="test", model_config={"model": "gpt-test"})
        svc.client = MagicMock()
        svc.client.chat.completions.create.return_value = _response_with(
            json.dumps({"scores": {"longevity": 8}, "one_liner": "ok"})
        )
        return svc

    def test_returns_parsed_object(self, service):
        data = service.score_subject("Martin Luther", "person", "")
        assert data == {"scores": {"longevity": 8}, "one_liner": "ok"}

    def test_sends_system_prompt_and_user_message(self, service):
        service.score_subject("Martin Luther", "person", "reformation")

        call_kwargs = service.client.chat.completions.create.call_args[1]
        messages = call_kwargs['messages']

        assert call_kwargs['model'] == "gpt-test"
        assert call_kwargs['response_format'] == {"type": "json_object"}
        assert messages[0] == {"role": "system", "content": EBI_SCORING_SYSTEM_PROMPT}
        assert messages[1]['role'] == "user"
        assert "Subject: Martin Luther" in messages[1]['content']
        assert "Notes: reformation" in messages[1]['content']

    def test_single_call_per_invocation(self, service):
        service.score_subject("X", "idea", "")
        assert service.client.chat.completions.create.call_count == 1

    @pytest.mark.parametrize("content", [None, "", "   ", "not json", "[1, 2]", "\"text\""])
    def test_bad_content_raises_adapter_error(self, service, content):
        service.client.chat.completions.create.return_value = _response_with(content)

        with pytest.raises(ScoringAdapterError):
            service.score_subject("X", "person", "")

    def test_no_choices_raises_adapter_error(self, service):
        response = MagicMock()
        response.choices = []
        service.client.chat.completions.create.return_value = response

        with pytest.raises(ScoringAdapterError):
            service.score_subject("X", "person", "")

    @pytest.mark.parametrize("error_cls", [openai.APIConnectionError, openai.APITimeoutError])
    def test_transport_errors_raise_adapter_error(self, service, error_cls):
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        service.client.chat.completions.create.side_effect = error_cls(request=request)

        with pytest.raises(ScoringAdapterError):
            service.score_subject("X", "person", "")

        assert service.client.chat.completions.create.call_count == 1

    def test_status_error_raises_adapter_error(self, service):
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        response = httpx.Response(401, request=request, json={"error": {"message": "bad key"}})
        service.client.chat.completions.create.side_effect = openai.AuthenticationError(
            "bad key", response=response, body=None
        )

        with pytest.raises(ScoringAdapterError, match="OpenAI request failed"):
            service.score_subject("X", "person", "")


class TestPrompts:

    def test_system_prompt_carries_anchor_carve_out(self):
        assert "Jesus" in EBI_SCORING_SYSTEM_PROMPT
        for name in ("scope_of_impact", "direction_of_tension", "longevity", "cost_paid", "bridge_function"):
            assert name in EBI_SCORING_SYSTEM_PROMPT

    def test_user_message_marks_missing_notes(self):
        assert "Notes: (none)" in build_scoring_user_message("X", "event", "")
