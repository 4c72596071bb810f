"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest

from ebi.config_loader import AppConfig
from ebi.scorer import ScoringService
from tests.mocks.llm_mocks import MockLLMProvider


@pytest.fixture
def app_config():
    """Default configuration with no LLM key."""
    return AppConfig()


@pytest.fixture
def rubric_service(app_config):
    """Scoring service with the deterministic rubric only."""
    return ScoringService.from_config(app_config)


@pytest.fixture
def mock_provider():
    return MockLLMProvider()


@pytest.fixture
def ai_service(app_config, mock_provider):
    """Scoring service backed by the mock LLM provider."""
    return ScoringService.from_config(app_config, provider=mock_provider)
