"""Gestion standardisée des erreurs API avec enveloppes d'erreur.

Ce module fournit une gestion centralisée des erreurs avec des enveloppes standardisées, des codes
d'erreur cohérents et l'identifiant de requête pour le tracing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

log = structlog.get_logger(__name__)


@dataclass
class ErrorEnvelope:
    """Standard error envelope for API responses."""

    code: str
    message: str
    trace_id: str | None = None
    details: dict[str, Any] | None = None


class ErrorCodes:
    """Standard error codes for the API."""

    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Business logic errors
    TOO_MANY_CANDIDATES = "TOO_MANY_CANDIDATES"


_STATUS_CODES = {
    400: ErrorCodes.BAD_REQUEST,
    404: ErrorCodes.NOT_FOUND,
    405: ErrorCodes.METHOD_NOT_ALLOWED,
    422: ErrorCodes.VALIDATION_ERROR,
    500: ErrorCodes.INTERNAL_ERROR,
}


class APIError(HTTPException):
    """Custom API error with standard envelope."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        trace_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize an API error with standardized envelope."""
        super().__init__(status_code=status_code, detail=message)
        self.code = code
        self.message = message
        self.trace_id = trace_id
        self.details = details


def create_error_response(
    status_code: int,
    code: str,
    message: str,
    trace_id: str | None = None,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    envelope = ErrorEnvelope(code=code, message=message, trace_id=trace_id, details=details)
    return JSONResponse(
        status_code=status_code,
        content={
            "code": envelope.code,
            "message": envelope.message,
            "trace_id": envelope.trace_id,
            **({"details": envelope.details} if envelope.details else {}),
        },
    )


def extract_trace_id(request: Request) -> str | None:
    """Récupère l'identifiant de requête (en-tête ou état posé par le middleware)."""
    trace_id = request.headers.get("X-Request-ID")
    if trace_id:
        return trace_id
    return getattr(request.state, "request_id", None)


def handle_api_error(request: Request, exc: APIError) -> JSONResponse:
    """Handle APIError exceptions with standard envelope."""
    trace_id = extract_trace_id(request) or exc.trace_id
    log.warning(
        "api_error",
        code=exc.code,
        error_message=exc.message,
        status_code=exc.status_code,
        trace_id=trace_id,
    )
    return create_error_response(
        status_code=exc.status_code,
        code=exc.code,
        message=exc.message,
        trace_id=trace_id,
        details=exc.details,
    )


def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions (FastAPI or Starlette) with standard envelope."""
    if isinstance(exc, APIError):
        return handle_api_error(request, exc)
    trace_id = extract_trace_id(request)
    code = _STATUS_CODES.get(exc.status_code, "HTTP_ERROR")
    log.warning(
        "http_exception",
        code=code,
        error_message=str(exc.detail),
        status_code=exc.status_code,
        trace_id=trace_id,
    )
    return create_error_response(
        status_code=exc.status_code, code=code, message=str(exc.detail), trace_id=trace_id
    )


def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Convertit les erreurs de validation Pydantic en enveloppe 422."""
    trace_id = extract_trace_id(request)
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")} for err in exc.errors()
    ]
    log.info("validation_error", trace_id=trace_id, errors=len(errors))
    return create_error_response(
        status_code=422,
        code=ErrorCodes.VALIDATION_ERROR,
        message="Request validation failed",
        trace_id=trace_id,
        details={"errors": errors},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Branche les gestionnaires d'erreurs standard sur l'application."""
    app.add_exception_handler(APIError, handle_api_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)


def too_many_candidates(count: int, maximum: int) -> APIError:
    """400 quand un lot de classement dépasse la taille autorisée."""
    return APIError(
        400,
        ErrorCodes.TOO_MANY_CANDIDATES,
        f"At most {maximum} candidates can be ranked per request",
        details={"count": count, "max": maximum},
    )
