#!/usr/bin/env python3
"""
ASO Copilot API - FastAPI Application

Scores App Store screenshot copy and returns A/B/C copy variants.

Usage:
    python -m web.backend.app

Then open:
    - http://127.0.0.1:8787/health - Health check (default port, configurable in config.yaml)
    - http://127.0.0.1:8787/docs - API Documentation (Swagger UI)
    - http://127.0.0.1:8787/redoc - Alternative API Documentation
"""

import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import get_config
from .exceptions import (
    ServiceException,
    service_exception_handler,
    request_validation_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .models.responses import HealthResponse
from .routers import generate_router

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="ASO Copilot API",
    description="Score App Store screenshot copy and generate variants",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Register exception handlers
app.add_exception_handler(ServiceException, service_exception_handler)
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(generate_router)


@app.get("/health", response_model=HealthResponse)
def health_check():
    """Health check endpoint."""
    return HealthResponse(ok=True, service="api")


def main():
    """Run the web server."""
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    config = get_config()

    logger.info(f"Starting ASO Copilot API on {config.web.host}:{config.web.port}")
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
