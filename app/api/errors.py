# app/api/errors.py
"""
Centralized error handlers.

Every failed request gets the same JSON body (see ErrorOut):
message, status code, reason, uri and timestamp.
Internal failures never expose stack traces or row contents.
"""

import logging
from datetime import datetime
from email.utils import format_datetime
from http import HTTPStatus
from typing import Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.errors import JeepMappingError, JeepNotFoundError
from app.models.errors import ErrorOut

logger = logging.getLogger(__name__)


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Unknown"


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        parts.append(f"{location}: {err.get('msg')}")
    return "; ".join(parts) or "Invalid request"


def error_response(
    request: Request, status_code: int, message: str, headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    """Build the uniform error payload for the current request."""
    status_code = int(status_code)
    body = ErrorOut(
        message=message,
        status_code=status_code,
        reason=_reason_phrase(status_code),
        uri=request.url.path,
        # RFC 1123, e.g. "Sat, 17 Oct 2026 11:44:00 +0000"
        timestamp=format_datetime(datetime.now().astimezone()),
    )
    return JSONResponse(
        status_code=status_code, content=body.model_dump(by_alias=True), headers=headers
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the error handlers on the FastAPI application."""

    @app.exception_handler(RequestValidationError)
    async def handle_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _validation_message(exc)
        logger.warning("Invalid request to %s: %s", request.url.path, message)
        return error_response(request, HTTPStatus.BAD_REQUEST, message)

    @app.exception_handler(JeepNotFoundError)
    async def handle_not_found(request: Request, exc: JeepNotFoundError) -> JSONResponse:
        logger.warning(exc.message)
        return error_response(request, HTTPStatus.NOT_FOUND, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        logger.warning("HTTP %s on %s: %s", exc.status_code, request.url.path, exc.detail)
        return error_response(request, exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(JeepMappingError)
    async def handle_mapping(request: Request, exc: JeepMappingError) -> JSONResponse:
        logger.error(exc.message)
        return error_response(request, HTTPStatus.INTERNAL_SERVER_ERROR, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return error_response(request, HTTPStatus.INTERNAL_SERVER_ERROR, "Internal server error")
