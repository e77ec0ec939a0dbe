"""
Error kinds and their translation into HTTP responses.

Service and validation code raise subclasses of ``UsersApiError``; the
handlers registered by ``setup_error_handling`` turn them (and the
framework's own exceptions) into the standard error envelope so that
every response, successful or not, has the same shape.  Unexpected
exceptions are caught by ``ErrorInterceptor`` inside the interceptor
chain and answered with ``internal_error_response``, so they still pass
back out through the CORS interceptor.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..schemas.envelope import error

logger = logging.getLogger(__name__)


class UsersApiError(Exception):
    """Base class for errors that map to a client‑facing response."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DecodeError(UsersApiError):
    """Malformed path id or request body."""


class ValidationError(UsersApiError):
    """Decoded payload is missing a required field."""


class NotFoundError(UsersApiError):
    """No record with the requested id."""

    status_code = status.HTTP_404_NOT_FOUND


async def users_api_error_handler(request: Request, exc: UsersApiError) -> JSONResponse:
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=error(exc.message))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unknown routes and unsupported methods."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


def internal_error_response(request: Request) -> JSONResponse:
    """Log the exception being handled and return the generic 500 envelope."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error("Internal server error"),
    )


def setup_error_handling(app: FastAPI) -> None:
    """Register all exception handlers on ``app``."""
    app.add_exception_handler(UsersApiError, users_api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
