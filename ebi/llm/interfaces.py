"""
LLM Provider Interface - Abstract base for AI scoring providers.

This module defines the interface for LLM services (OpenAI, Ollama, etc.).
"""
from abc import ABC, abstractmethod
from typing import Dict, Any


class LLMProvider(ABC):
    """
    Abstract Interface for AI Service Providers (OpenAI, Ollama, etc.).
    """

    @abstractmethod
    def score_subject(self, subject: str, subject_type: str, notes: str) -> Dict[str, Any]:
        """
        Ask the model to score a subject on the five EBI dimensions.

        Returns the parsed JSON object exactly as the model produced it;
        callers must sanitize it before use.

        Raises:
            ScoringAdapterError: On any transport, status or parse failure.
        """
        pass
