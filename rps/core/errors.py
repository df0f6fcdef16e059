"""
Error taxonomy for the API.

Every failure a handler reports is one of these. They are rendered as
JSON ``{"message": ..., **extra}`` by the handlers registered in
``register_exception_handlers``.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None, **extra: Any):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.extra = extra

    def to_dict(self) -> dict:
        return {"message": self.message, **self.extra}


class ValidationError(AppError):
    """Missing or malformed input."""
    status_code = 400


class ConflictError(AppError):
    """Duplicate registration or duplicate result."""
    status_code = 400


class NotFoundError(AppError):
    status_code = 404


class InternalError(AppError):
    """Unexpected store or connectivity failure. Carries the raw error text."""
    status_code = 500

    def __init__(self, error: Any, message: str = "Internal server error"):
        super().__init__(message, error=str(error))


def _field(err: dict) -> str:
    loc = err.get("loc") or ()
    return ".".join(str(part) for part in loc[1:]) or ".".join(str(part) for part in loc)


def _describe(errors: list) -> str:
    missing = [
        _field(err)
        for err in errors
        if err.get("type") == "missing"
    ]
    if missing:
        return f"Missing required fields: {', '.join(missing)}"
    return "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error renderers to the app."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.extra.get("error"))
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("%s %s raised an unhandled error", request.method, request.url.path)
        return JSONResponse(status_code=500, content=InternalError(exc).to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        return JSONResponse(
            status_code=400,
            content={
                "message": _describe(errors),
                "errors": [
                    {"field": _field(err), "detail": err["msg"]}
                    for err in errors
                ],
            },
        )
