import yaml
import os
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field


class LlmConfig(BaseModel):
    """External scoring service settings.

    Scoring through the LLM is attempted only when api_key is set.
    """
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    model: str = "gpt-4.1-mini"
    temperature: float = 0.2
    timeout_seconds: float = 30.0  # bounds the single outbound call; no retries


class ScoringConfig(BaseModel):
    # Marker in the notes that switches the request into explorer mode
    explorer_token: str = "#explorer"
    max_discussion_prompts: int = Field(default=6, ge=0, le=6)
    max_rationale_entries: int = Field(default=8, ge=0, le=8)


class WebConfig(BaseModel):
    """Web server configuration."""
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)


class AppConfig(BaseModel):
    llm: LlmConfig = Field(default_factory=LlmConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    web: WebConfig = Field(default_factory=WebConfig)


def _load_yaml(config_path: str) -> Dict[str, Any]:
    # If not found at relative path (e.g. running from another dir), try the project root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", os.path.basename(config_path))
        if not os.path.exists(config_path):
            return {}

    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides to the raw config dict."""
    llm = data.get('llm') or {}
    if os.environ.get("OPENAI_API_KEY"):
        llm['api_key'] = os.environ["OPENAI_API_KEY"]
    if os.environ.get("OPENAI_MODEL"):
        llm['model'] = os.environ["OPENAI_MODEL"]
    if os.environ.get("OPENAI_BASE_URL"):
        llm['base_url'] = os.environ["OPENAI_BASE_URL"]
    data['llm'] = llm

    if os.environ.get("EBI_EXPLORER_TOKEN"):
        scoring = data.get('scoring') or {}
        scoring['explorer_token'] = os.environ["EBI_EXPLORER_TOKEN"]
        data['scoring'] = scoring

    web = data.get('web') or {}
    if 'WEB_HOST' in os.environ:
        web['host'] = os.environ['WEB_HOST']
    # PORT is what most hosting platforms inject; WEB_PORT wins when both are set
    port = os.environ.get('WEB_PORT') or os.environ.get('PORT')
    if port:
        web['port'] = int(port)
    data['web'] = web

    return data


def load_config(config_path: str = "config.yaml") -> AppConfig:
    """
    Load configuration from YAML and apply environment overrides.

    A missing file is not an error: every setting has a default, so the
    service can run from environment variables alone.
    """
    data = _load_yaml(config_path)
    data = _apply_env_overrides(data)
    return AppConfig(**data)
