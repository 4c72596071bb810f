"""
Exceptions raised by the scoring core.

The web layer maps these onto HTTP responses (see web/backend/exceptions.py).
"""


class EBIError(Exception):
    """Base exception for scoring errors."""
    pass


class InvalidScoreRequestError(EBIError):
    """Raised when a score request is missing its subject."""
    pass


class ScoringAdapterError(EBIError):
    """Raised when the external scoring service fails or returns junk.

    Always recovered by the orchestrator; never reaches the HTTP caller.
    """
    pass


class ScoringServiceError(EBIError):
    """Raised when the pipeline fails unexpectedly."""

    def __init__(self, message: str, detail: str = ""):
        super().__init__(message)
        self.detail = detail
