"""Maps domain error kinds to HTTP responses. The only place a kind becomes a status code."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ...core.config import Settings
from ...domain.errors import DomainError, ErrorKind

logger = logging.getLogger(__name__)

_STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_TITLE_BY_KIND = {
    ErrorKind.VALIDATION: "Validation Error",
    ErrorKind.NOT_FOUND: "Not Found",
    ErrorKind.UNAUTHORIZED: "Unauthorized",
    ErrorKind.CONFLICT: "Conflict",
    ErrorKind.INTERNAL: "Internal Server Error",
}

_HIDDEN_MESSAGE = "An error occurred"


def _error_response(
    kind: ErrorKind, message: str, headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    return JSONResponse(
        status_code=_STATUS_BY_KIND[kind],
        content={"error": _TITLE_BY_KIND[kind], "message": message},
        headers=headers,
    )


def _describe_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(
            str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")
        )
        text = error.get("msg", "Invalid value")
        messages.append(f"{location}: {text}" if location else text)
    return "; ".join(messages) or "Invalid request"


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
        if exc.kind is ErrorKind.INTERNAL:
            logger.error("Internal error on %s %s: %s", request.method, request.url.path, exc.message)
            message = _HIDDEN_MESSAGE if settings.is_production else exc.message
            return _error_response(exc.kind, message)
        headers = {"WWW-Authenticate": "Bearer"} if exc.kind is ErrorKind.UNAUTHORIZED else None
        return _error_response(exc.kind, exc.message, headers)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error_response(ErrorKind.VALIDATION, _describe_validation_errors(exc))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        message = _HIDDEN_MESSAGE if settings.is_production else str(exc) or exc.__class__.__name__
        return _error_response(ErrorKind.INTERNAL, message)
