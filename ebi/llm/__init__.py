"""LLM Module - LLM services and interfaces."""
from ebi.llm.interfaces import LLMProvider
from ebi.llm.openai_service import OpenAIService

__all__ = ['LLMProvider', 'OpenAIService']
