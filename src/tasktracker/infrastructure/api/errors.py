"""Translation of errors into HTTP responses.

This is the only place a domain error becomes a status code.  Every
failure leaves the API as ``{"error": {"message", "details"?, "timestamp"}}``.
Unrecognised exceptions become a bare 500; their text is logged, never
returned.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tasktracker.config.logging import get_logger
from tasktracker.domain.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)

logger = get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"

_STATUS_BY_ERROR: dict[type[DomainException], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_409_CONFLICT,
    EntityNotFoundError: status.HTTP_404_NOT_FOUND,
}


def status_for(exc: DomainException) -> int:
    for error_type, code in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(message: str, details: Any = None) -> dict[str, Any]:
    error: dict[str, Any] = {"message": message}
    if details is not None:
        error["details"] = jsonable_encoder(details)
    error["timestamp"] = datetime.now(timezone.utc).isoformat()
    return {"error": error}


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    code = status_for(exc)
    if code >= 500:
        # A DomainException subclass with no mapping is a programming error.
        return await unhandled_exception_handler(request, exc)
    logger.warning(
        "request_rejected",
        method=request.method,
        path=request.url.path,
        status_code=code,
        error=exc.message,
    )
    return JSONResponse(status_code=code, content=error_body(exc.message, exc.details))


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    logger.warning(
        "request_rejected",
        method=request.method,
        path=request.url.path,
        status_code=status.HTTP_400_BAD_REQUEST,
        error="Validation failed",
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Validation failed", details),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "request_failed",
        method=request.method,
        path=request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(INTERNAL_ERROR_MESSAGE),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
