#!/usr/bin/env python3
"""
Explorer Bridge Index - FastAPI Application

Serves the scoring API and the discussion dashboard.

Usage:
    python main.py serve

Then open:
    - http://localhost:3000 - Dashboard (default port, configurable in config.yaml)
    - http://localhost:3000/docs - API Documentation (Swagger UI)
    - http://localhost:3000/redoc - Alternative API Documentation
"""

import sys
import logging
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from ebi.exceptions import EBIError
from .config import get_config, get_project_root
from .exceptions import (
    scoring_exception_handler,
    validation_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import scoring_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Load configuration
config = get_config()

# Create FastAPI app
app = FastAPI(
    title="Explorer Bridge Index API",
    description="Scores people, events and ideas on the five EBI dimensions for guided discussion",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Basic CORS (any origin may POST JSON)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# Register exception handlers
app.add_exception_handler(EBIError, scoring_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(scoring_router)

# Mount static files if they exist
static_dir = get_project_root() / 'web' / 'static'
if static_dir.exists():
    app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")


@app.get("/", response_class=HTMLResponse)
def read_root():
    """
    Serve the dashboard HTML page.
    """
    html_path = get_project_root() / 'web' / 'templates' / 'index.html'

    if not html_path.exists():
        return HTMLResponse(
            content="<h1>Dashboard not found</h1><p>Please ensure web/templates/index.html exists</p>",
            status_code=404
        )

    with open(html_path, 'r', encoding='utf-8') as f:
        return HTMLResponse(content=f.read())


def main():
    """Run the web server."""
    import uvicorn

    logger.info(f"Starting EBI Web Server on {config.web.host}:{config.web.port}")
    logger.info(f"Dashboard: http://{config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
