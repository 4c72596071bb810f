"""Explorer Bridge Index - scoring core.

Packages:
- ebi.scorer: anchors, modes, deterministic rubric, sanitizer and the
  ScoringService orchestrator
- ebi.llm: LLM provider interface and the OpenAI implementation
"""
