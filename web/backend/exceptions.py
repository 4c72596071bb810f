#!/usr/bin/env python3
"""
Error handlers for the web application.

Response bodies follow the EBI API contract: {"error": ...} plus a
"detail" field for server errors and malformed bodies.
"""

import logging
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ebi.exceptions import EBIError, InvalidScoreRequestError, ScoringServiceError

logger = logging.getLogger(__name__)


async def scoring_exception_handler(
    request: Request,
    exc: EBIError
) -> JSONResponse:
    """
    Handle scoring core exceptions.

    Args:
        request: The FastAPI request.
        exc: The scoring exception.

    Returns:
        JSONResponse with error details.
    """
    if isinstance(exc, InvalidScoreRequestError):
        return JSONResponse(status_code=400, content={"error": str(exc)})

    logger.error(f"Scoring error in {request.url.path}: {exc}")
    detail = exc.detail if isinstance(exc, ScoringServiceError) else str(exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Server error", "detail": detail}
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Malformed JSON or wrongly typed fields are client errors, not 422s."""
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "detail": str(exc.errors())}
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handle HTTP exceptions (404, 405, ...) with a consistent format.
    """
    headers = getattr(exc, "headers", None) or {}
    error = exc.detail
    if exc.status_code == 405 and headers.get("Allow"):
        error = f"Use {headers['Allow']}"
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": error},
        headers=headers or None
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content={"error": "Server error", "detail": str(exc) or exc.__class__.__name__}
    )
