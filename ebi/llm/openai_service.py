"""
OpenAI Service - LLM scoring using the OpenAI chat completions API.

One outbound call per score request. The client is built with a finite
timeout and max_retries=0: a failed call is never retried here, the caller
falls back to the deterministic rubric instead.
"""
from typing import Dict, Any, Optional
import json
import logging

import openai
from openai import OpenAI

from ebi.exceptions import ScoringAdapterError
from ebi.llm.interfaces import LLMProvider
from ebi.llm.system_prompts import EBI_SCORING_SYSTEM_PROMPT, build_scoring_user_message

logger = logging.getLogger(__name__)


class OpenAIService(LLMProvider):
    """
    OpenAI LLM Service.

    Requests a JSON object (json_object response format) and returns it
    parsed but otherwise untouched.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model_config: Optional[Dict[str, Any]] = None
    ):
        self.model_config = model_config or {}
        self.model = self.model_config.get('model', 'gpt-4.1-mini')
        self.temperature = self.model_config.get('temperature', 0.2)
        self.timeout_seconds = self.model_config.get('timeout_seconds', 30.0)

        client_kwargs = {
            'timeout': self.timeout_seconds,
            'max_retries': 0,
        }
        if api_key:
            client_kwargs['api_key'] = api_key
        if base_url:
            client_kwargs['base_url'] = base_url

        self.client = OpenAI(**client_kwargs)

    def score_subject(self, subject: str, subject_type: str, notes: str) -> Dict[str, Any]:
        """Score a subject; raises ScoringAdapterError on any failure."""
        messages = [
            {"role": "system", "content": EBI_SCORING_SYSTEM_PROMPT},
            {"role": "user", "content": build_scoring_user_message(subject, subject_type, notes)},
        ]

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=self.temperature,
                response_format={"type": "json_object"},
            )
        except openai.APIError as e:
            # APIStatusError, APIConnectionError and APITimeoutError all land here
            raise ScoringAdapterError(f"OpenAI request failed: {e}") from e

        try:
            content = response.choices[0].message.content
        except (IndexError, AttributeError) as e:
            raise ScoringAdapterError(f"OpenAI response has no message content: {e}") from e

        if not content or not content.strip():
            raise ScoringAdapterError("OpenAI response content is empty")

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse scoring response: {e}")
            raise ScoringAdapterError("Model did not return valid JSON") from e

        if not isinstance(data, dict):
            raise ScoringAdapterError(f"Model returned JSON {type(data).__name__}, expected an object")

        logger.info(f"SCORING RESPONSE ({self.model}): keys={sorted(data.keys())}")
        return data
