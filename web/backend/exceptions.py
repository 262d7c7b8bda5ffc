#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.

Every error response uses the envelope {"ok": false, "error": ...}.
"""

import logging
from typing import Any, Dict, List

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    status_code = 500

    def __init__(self, error: Any):
        super().__init__(str(error))
        self.error = error


class InvalidRequestException(ServiceException):
    """Raised when a request body is not JSON or fails schema validation."""
    status_code = 400


def flatten_validation_errors(errors: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Group pydantic errors by top-level field.

    Errors located at the body root go to formErrors, everything else to
    fieldErrors[<first location segment>].

    Returns:
        {"formErrors": [...], "fieldErrors": {field: [messages]}}
    """
    form_errors: List[str] = []
    field_errors: Dict[str, List[str]] = {}

    for error in errors:
        loc = [part for part in error.get('loc', ()) if part != 'body']
        message = error.get('msg', 'Invalid value')
        if loc:
            field_errors.setdefault(str(loc[0]), []).append(message)
        else:
            form_errors.append(message)

    return {"formErrors": form_errors, "fieldErrors": field_errors}


def invalid_request_from_validation(exc: ValidationError) -> InvalidRequestException:
    return InvalidRequestException(flatten_validation_errors(exc.errors()))


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    if exc.status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"Rejected request to {request.url.path}: {exc.__class__.__name__}")

    return JSONResponse(
        status_code=exc.status_code,
        content={"ok": False, "error": exc.error}
    )


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI request validation errors with the flattened error shape."""
    return JSONResponse(
        status_code=400,
        content={"ok": False, "error": flatten_validation_errors(list(exc.errors()))}
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handle HTTP exceptions (including unknown routes) with consistent format.

    Args:
        request: The FastAPI request.
        exc: The HTTP exception.

    Returns:
        JSONResponse with error details.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={"ok": False, "error": exc.detail}
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Args:
        request: The FastAPI request.
        exc: The exception.

    Returns:
        JSONResponse with error details.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content={"ok": False, "error": "Internal server error"}
    )
